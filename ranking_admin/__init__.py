"""
Ranking MK2 - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError
from ranking_admin.extensions import db, login_manager
from ranking_admin.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('ranking_admin').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from ranking_admin.admin import admin_bp
    from ranking_admin.public import public_bp

    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(public_bp)

    from ranking_admin.cli import register_commands
    register_commands(app)

    # Only active users survive the per-request reload
    @login_manager.user_loader
    def load_user(user_id):
        from ranking_admin.services.credentials import find_active_by_id
        try:
            return find_active_by_id(user_id)
        except SQLAlchemyError as e:
            logger.exception('Could not reload session user %s: %s', user_id, e)
            return None

    @app.template_filter('followers')
    def followers_filter(count):
        from ranking_admin.services.presenter import format_followers
        return format_followers(count)

    @app.template_filter('thousands')
    def thousands_filter(count):
        return f'{count:,}'

    # Create database tables
    with app.app_context():
        if ':memory:' not in app.config['SQLALCHEMY_DATABASE_URI']:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app
