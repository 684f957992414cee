"""
Credential Store

Lookups and writes against the users table. Only active users are ever
returned to the authentication layer.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from ranking_admin.extensions import db
from ranking_admin.models import User

logger = logging.getLogger(__name__)


def normalize_email(email):
    return (email or '').strip().lower()


def find_active_by_email(email):
    email = normalize_email(email)
    if not email:
        return None
    return User.query.filter_by(email=email, is_active=True).first()


def find_active_by_id(user_id):
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return User.query.filter_by(id=user_id, is_active=True).first()


def create_user(email, password_hash, name, role='admin'):
    user = User(email=normalize_email(email), password_hash=password_hash, name=name, role=role)
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    logger.info('Created user %s with role %s', user.email, user.role)
    return user


def update_password_hash(user_id, password_hash):
    user = db.session.get(User, user_id)
    if user is None:
        return False
    user.password_hash = password_hash
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return True
