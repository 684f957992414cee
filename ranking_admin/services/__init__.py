"""
Services Package

Exports all services for easy importing.
"""

from ranking_admin.services.rankings import (
    RankingNotFound, RankingStoreError, create_ranking, delete_ranking,
    get_ranking, get_rankings, update_ranking,
)
from ranking_admin.services.validation import RankingDraft, ValidationResult, validate
from ranking_admin.services.presenter import (
    RankingCache, filter_rankings, format_followers, paginate, rank_icon, to_csv,
)

__all__ = [
    'RankingNotFound',
    'RankingStoreError',
    'create_ranking',
    'delete_ranking',
    'get_ranking',
    'get_rankings',
    'update_ranking',
    'RankingDraft',
    'ValidationResult',
    'validate',
    'RankingCache',
    'filter_rankings',
    'format_followers',
    'paginate',
    'rank_icon',
    'to_csv',
]
