"""
Admin Blueprint

Login page plus the ranking management screens under /admin.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from ranking_admin.admin import routes  # noqa: E402, F401
