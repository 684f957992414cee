"""
Models Package

Exports all models for easy importing.
"""

from ranking_admin.models.user import User
from ranking_admin.models.ranking import Ranking

__all__ = ['User', 'Ranking']
