"""
Admin Decorator
"""

from functools import wraps
from flask import redirect, url_for, g
from ranking_admin.services.auth import get_admin_session


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.
    
    - The session payload must decode and name the user Flask-Login loaded
    - The user is re-read from the database on every request and must be active
    - Anything else redirects to the login page
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        admin = get_admin_session()
        if admin is None:
            return redirect(url_for('admin.login'))
        g.admin = admin
        return f(*args, **kwargs)
    return wrapper
