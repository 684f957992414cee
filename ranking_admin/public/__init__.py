"""
Public Blueprint

The ranking list everyone can see, its CSV export and a JSON feed.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from ranking_admin.public import routes  # noqa: E402, F401
