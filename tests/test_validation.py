from werkzeug.datastructures import MultiDict

from ranking_admin.services.validation import RankingDraft, validate


def test_blank_account_name_fails():
    result = validate(RankingDraft(account_name='', followers=5))
    assert not result.valid
    assert 'account_name' in result.errors
    assert 'followers' not in result.errors


def test_account_name_must_start_with_at():
    result = validate(RankingDraft(account_name='user', followers=0))
    assert set(result.errors) == {'account_name', 'followers'}


def test_valid_draft_passes():
    result = validate(RankingDraft(account_name='@ok', followers=10))
    assert result.valid
    assert result.errors == {}


def test_urls_must_start_with_http():
    result = validate(RankingDraft(account_name='@ok', followers=10,
                                   profile_url='instagram.com/ok', image_url='ftp://img'))
    assert set(result.errors) == {'profile_url', 'image_url'}

    result = validate(RankingDraft(account_name='@ok', followers=10,
                                   profile_url='https://instagram.com/ok', image_url='http://img.example/a.jpg'))
    assert result.valid


def test_draft_from_form_coerces_input():
    form = MultiDict({
        'account_name': '  @shop  ',
        'followers': '1200',
        'profile_url': '',
        'image_url': '   ',
        'area': ' 渋谷 ',
    })
    draft = RankingDraft.from_form(form)
    assert draft.account_name == '@shop'
    assert draft.followers == 1200
    assert draft.profile_url is None
    assert draft.image_url is None
    assert draft.area == '渋谷'
    assert draft.store_name is None


def test_draft_from_form_unparseable_followers_is_zero():
    draft = RankingDraft.from_form(MultiDict({'account_name': '@a', 'followers': 'lots'}))
    assert draft.followers == 0
    assert 'followers' in validate(draft).errors


def test_followers_above_column_limit_fails():
    result = validate(RankingDraft(account_name='@big', followers=2 ** 63))
    assert set(result.errors) == {'followers'}

    assert validate(RankingDraft(account_name='@big', followers=2 ** 63 - 1)).valid


def test_draft_from_form_flattens_line_breaks():
    form = MultiDict({
        'account_name': '@nl',
        'followers': '5',
        'area': 'a\nb',
        'store_name': 'Shop\r\nAnnex\tWest',
    })
    draft = RankingDraft.from_form(form)
    assert draft.area == 'a b'
    assert draft.store_name == 'Shop  Annex West'
