"""
Ranking Store

CRUD over the rankings table. Database errors are rolled back, logged and
re-raised as RankingStoreError so views can show a generic message.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from ranking_admin.extensions import db
from ranking_admin.models import Ranking

logger = logging.getLogger(__name__)


class RankingStoreError(Exception):
    """The ranking store could not complete an operation."""


class RankingNotFound(RankingStoreError):
    """No ranking exists with the requested id."""

    def __init__(self, ranking_id):
        super().__init__(f'Ranking {ranking_id} not found')
        self.ranking_id = ranking_id


def get_rankings():
    """Return every ranking, most followers first.
    
    Ties keep insertion order (id ascending) so ranks are stable.
    """
    try:
        return Ranking.query.order_by(Ranking.followers.desc(), Ranking.id.asc()).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to get rankings: %s', e)
        raise RankingStoreError('Failed to get rankings') from e


def get_ranking(ranking_id):
    try:
        ranking = db.session.get(Ranking, ranking_id)
    except SQLAlchemyError as e:
        logger.exception('Failed to get ranking %s: %s', ranking_id, e)
        raise RankingStoreError('Failed to get ranking') from e
    
    if ranking is None:
        raise RankingNotFound(ranking_id)
    return ranking


def create_ranking(draft):
    """Insert a ranking built from a validated RankingDraft."""
    ranking = Ranking(**draft.as_columns())
    try:
        db.session.add(ranking)
        db.session.commit()
    except (SQLAlchemyError, OverflowError) as e:
        db.session.rollback()
        logger.exception('Failed to create ranking %s: %s', draft.account_name, e)
        raise RankingStoreError('Failed to create ranking') from e
    
    logger.info('Created ranking %s (%s)', ranking.id, ranking.account_name)
    return ranking


def update_ranking(ranking_id, draft):
    ranking = get_ranking(ranking_id)
    for column, value in draft.as_columns().items():
        setattr(ranking, column, value)
    
    try:
        db.session.commit()
    except (SQLAlchemyError, OverflowError) as e:
        db.session.rollback()
        logger.exception('Failed to update ranking %s: %s', ranking_id, e)
        raise RankingStoreError('Failed to update ranking') from e
    
    logger.info('Updated ranking %s (%s)', ranking.id, ranking.account_name)
    return ranking


def delete_ranking(ranking_id):
    ranking = get_ranking(ranking_id)
    try:
        db.session.delete(ranking)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to delete ranking %s: %s', ranking_id, e)
        raise RankingStoreError('Failed to delete ranking') from e
    
    logger.info('Deleted ranking %s', ranking_id)
