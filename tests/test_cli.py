from werkzeug.security import check_password_hash

from ranking_admin.cli import SAMPLE_RANKINGS
from ranking_admin.extensions import db
from ranking_admin.models import Ranking, User


def test_create_admin_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=[
        'create-admin', '--email', 'Owner@Example.com', '--name', 'Owner', '--password', 'pw-123456',
    ])
    assert result.exit_code == 0
    assert 'New admin user created' in result.output

    with app.app_context():
        user = User.query.filter_by(email='owner@example.com').one()
        assert user.role == 'admin'
        assert check_password_hash(user.password_hash, 'pw-123456')


def test_create_admin_reactivates_existing_user(app, admin_user):
    with app.app_context():
        user = db.session.get(User, admin_user)
        user.is_active = False
        db.session.commit()

    runner = app.test_cli_runner()
    result = runner.invoke(args=[
        'create-admin', '--email', 'admin@example.com', '--name', 'Back Again', '--password', 'pw-654321',
    ])
    assert 'Existing user updated' in result.output

    with app.app_context():
        user = db.session.get(User, admin_user)
        assert user.is_active
        assert user.name == 'Back Again'


def test_seed_rankings_only_fills_empty_table(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-rankings'])
    assert f'Created {len(SAMPLE_RANKINGS)} sample rankings' in result.output

    result = runner.invoke(args=['seed-rankings'])
    assert 'already present' in result.output

    with app.app_context():
        assert Ranking.query.count() == len(SAMPLE_RANKINGS)


def test_hash_password_command(app):
    result = app.test_cli_runner().invoke(args=['hash-password', 'secret'])
    assert 'Hash: pbkdf2:sha256' in result.output
    assert 'Verification: True' in result.output
