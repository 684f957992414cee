"""
Admin Authentication

Login, logout and the per-request session guard. Every check re-resolves
the user from the database so a deactivated account loses access on its
next request, not when the cookie expires.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask_login import current_user, login_user, logout_user
from werkzeug.security import check_password_hash, generate_password_hash

from ranking_admin.services import credentials
from ranking_admin.services.session import SessionView, clear_session, read_session, write_session

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'メールアドレスまたはパスワードが正しくありません'
AUTH_FAILED = '認証処理中にエラーが発生しました'
PASSWORD_METHOD = 'pbkdf2:sha256'


@dataclass
class AuthResult:
    success: bool
    user: Optional[SessionView] = None
    error: Optional[str] = None


def hash_password(password):
    return generate_password_hash(password, method=PASSWORD_METHOD)


def authenticate(email, password):
    """Verify credentials and open an admin session.
    
    Unknown email and wrong password produce the same message. Unexpected
    errors are logged and reported with a generic message.
    """
    try:
        user = credentials.find_active_by_email(email)
        if user is None or not check_password_hash(user.password_hash, password or ''):
            logger.info('Rejected admin login for %s', credentials.normalize_email(email))
            return AuthResult(success=False, error=INVALID_CREDENTIALS)
        
        clear_session()
        write_session(user)
        login_user(user)
        logger.info('Admin %s signed in', user.email)
        return AuthResult(success=True, user=SessionView.from_user(user))
    except Exception as e:
        logger.exception('Authentication error: %s', e)
        return AuthResult(success=False, error=AUTH_FAILED)


def logout():
    logout_user()
    clear_session()


def get_admin_session():
    """Return a fresh view of the signed-in admin, or None.
    
    Fields come from the user row loaded for this request, never from the
    cookie, so renamed or re-roled users are shown as they are now.
    """
    payload = read_session()
    if payload is None:
        return None
    
    try:
        if not current_user.is_authenticated:
            return None
        if current_user.id != payload.user_id:
            logger.warning('Session payload user %s does not match loaded user %s',
                           payload.user_id, current_user.id)
            return None
        return SessionView.from_user(current_user)
    except Exception as e:
        logger.exception('Session validation error: %s', e)
        return None


def is_authenticated():
    return get_admin_session() is not None


def register_admin(email, password, name, role='admin'):
    return credentials.create_user(email, hash_password(password), name, role)


def change_password(user_id, current_password, new_password):
    """Replace a user's password after checking the current one.
    
    Returns an AuthResult; ``error`` is set when the user is missing or
    the current password does not match.
    """
    try:
        user = credentials.find_active_by_id(user_id)
        if user is None:
            return AuthResult(success=False, error='ユーザーが見つかりません')
        if not check_password_hash(user.password_hash, current_password or ''):
            return AuthResult(success=False, error='現在のパスワードが正しくありません')
        
        credentials.update_password_hash(user.id, hash_password(new_password))
        logger.info('Password changed for %s', user.email)
        return AuthResult(success=True, user=SessionView.from_user(user))
    except Exception as e:
        logger.exception('Change password error: %s', e)
        return AuthResult(success=False, error='パスワード変更に失敗しました')
