"""
Flask Extensions

The admin session is a signed Flask session cookie. Flask-Login reloads the
user behind it on every request so deactivation takes effect immediately.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for admin sessions
login_manager = LoginManager()
