import pytest

from ranking_admin.services import (
    RankingDraft, RankingNotFound, create_ranking, delete_ranking, get_ranking,
    get_rankings, update_ranking,
)


def test_create_then_delete(app_ctx):
    ranking = create_ranking(RankingDraft(account_name='@a', followers=100))

    rankings = get_rankings()
    assert len(rankings) == 1
    assert rankings[0].id is not None
    assert rankings[0].id == ranking.id
    assert rankings[0].followers == 100

    delete_ranking(ranking.id)
    assert get_rankings() == []


def test_rankings_sorted_by_followers_with_stable_ties(app_ctx):
    low = create_ranking(RankingDraft(account_name='@low', followers=10))
    tie_first = create_ranking(RankingDraft(account_name='@tie1', followers=500))
    high = create_ranking(RankingDraft(account_name='@high', followers=9000))
    tie_second = create_ranking(RankingDraft(account_name='@tie2', followers=500))

    assert [r.id for r in get_rankings()] == [high.id, tie_first.id, tie_second.id, low.id]


def test_update_replaces_fields(app_ctx):
    ranking = create_ranking(RankingDraft(account_name='@before', followers=1, area='Osaka'))
    update_ranking(ranking.id, RankingDraft(account_name='@after', followers=2000, store_name='Shop'))

    updated = get_ranking(ranking.id)
    assert updated.account_name == '@after'
    assert updated.followers == 2000
    assert updated.area is None
    assert updated.store_name == 'Shop'


def test_missing_ranking_raises_not_found(app_ctx):
    with pytest.raises(RankingNotFound):
        get_ranking(404)
    with pytest.raises(RankingNotFound):
        update_ranking(404, RankingDraft(account_name='@x', followers=1))
    with pytest.raises(RankingNotFound):
        delete_ranking(404)
