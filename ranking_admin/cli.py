"""
Management Commands

flask create-admin   provision an admin account
flask hash-password  print a password hash for manual provisioning
flask seed-rankings  load sample rankings into an empty table
"""

import click
from flask.cli import with_appcontext
from werkzeug.security import check_password_hash

from ranking_admin.extensions import db
from ranking_admin.models import Ranking, User
from ranking_admin.services.auth import hash_password, register_admin


SAMPLE_RANKINGS = [
    {'account_name': '@tokyo_foodie_yuki', 'profile_url': 'https://instagram.com/tokyo_foodie_yuki',
     'followers': 125000, 'area': '東京都渋谷区', 'store_name': 'カフェ・ド・パリ'},
    {'account_name': '@osaka_gourmet_ken', 'profile_url': 'https://instagram.com/osaka_gourmet_ken',
     'followers': 98500, 'area': '大阪府大阪市', 'store_name': 'たこ焼き本舗'},
    {'account_name': '@kyoto_sweets_mami', 'profile_url': 'https://instagram.com/kyoto_sweets_mami',
     'followers': 87200, 'area': '京都府京都市', 'store_name': '和菓子処 花月'},
]


def register_commands(app):
    app.cli.add_command(create_admin_command)
    app.cli.add_command(hash_password_command)
    app.cli.add_command(seed_rankings_command)


@click.command('create-admin')
@with_appcontext
@click.option('--email', prompt=True)
@click.option('--name', prompt=True)
@click.option('--role', default='admin', show_default=True)
@click.password_option()
def create_admin_command(email, name, role, password):
    """Create an admin user, or re-activate and reset an existing one."""
    user = User.query.filter_by(email=email.strip().lower()).first()
    if user is None:
        user = register_admin(email, password, name, role)
        click.echo(f'New admin user created: {user.email}')
        return

    user.password_hash = hash_password(password)
    user.name = name
    user.role = role
    user.is_active = True
    db.session.commit()
    click.echo(f'Existing user updated: {user.email}')


@click.command('hash-password')
@with_appcontext
@click.argument('password')
def hash_password_command(password):
    password_hash = hash_password(password)
    click.echo(f'Hash: {password_hash}')
    click.echo(f'Verification: {check_password_hash(password_hash, password)}')


@click.command('seed-rankings')
@with_appcontext
def seed_rankings_command():
    """Insert sample rankings when the table is empty."""
    if Ranking.query.first() is not None:
        click.echo('Rankings already present, nothing to do')
        return

    for row in SAMPLE_RANKINGS:
        db.session.add(Ranking(**row))
    db.session.commit()
    click.echo(f'Created {len(SAMPLE_RANKINGS)} sample rankings')
