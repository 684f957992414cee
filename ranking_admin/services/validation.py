"""
Ranking Form Validation

Raw form input is coerced once into a RankingDraft; validate() then checks
the draft without touching the database.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


ACCOUNT_NAME_REQUIRED = 'アカウント名は必須です'
ACCOUNT_NAME_PREFIX = 'アカウント名は@から始まる必要があります'
FOLLOWERS_POSITIVE = 'フォロワー数は1以上である必要があります'
FOLLOWERS_TOO_LARGE = 'フォロワー数が大きすぎます'
PROFILE_URL_INVALID = '有効なURLを入力してください'
IMAGE_URL_INVALID = '有効な画像URLを入力してください'

# Largest value the followers INTEGER column can hold
MAX_FOLLOWERS = 2 ** 63 - 1

_LINE_BREAKS = str.maketrans({'\r': ' ', '\n': ' ', '\t': ' '})


def _clean(value) -> str:
    if value is None:
        return ''
    # Line breaks become spaces so a value always stays on one CSV row
    return str(value).translate(_LINE_BREAKS).strip()


def _optional(value) -> Optional[str]:
    cleaned = _clean(value)
    return cleaned or None


def _parse_followers(value) -> int:
    try:
        return int(_clean(value))
    except ValueError:
        return 0


@dataclass
class RankingDraft:
    """Typed candidate for a ranking record, before persistence."""
    account_name: str = ''
    followers: int = 0
    profile_url: Optional[str] = None
    image_url: Optional[str] = None
    area: Optional[str] = None
    store_name: Optional[str] = None

    @classmethod
    def from_form(cls, form) -> 'RankingDraft':
        return cls(
            account_name=_clean(form.get('account_name')),
            followers=_parse_followers(form.get('followers')),
            profile_url=_optional(form.get('profile_url')),
            image_url=_optional(form.get('image_url')),
            area=_optional(form.get('area')),
            store_name=_optional(form.get('store_name')),
        )

    @classmethod
    def from_ranking(cls, ranking) -> 'RankingDraft':
        return cls(
            account_name=ranking.account_name,
            followers=ranking.followers,
            profile_url=ranking.profile_url,
            image_url=ranking.image_url,
            area=ranking.area,
            store_name=ranking.store_name,
        )

    def as_columns(self) -> Dict[str, object]:
        return {
            'account_name': self.account_name,
            'followers': self.followers,
            'profile_url': self.profile_url,
            'image_url': self.image_url,
            'area': self.area,
            'store_name': self.store_name,
        }


@dataclass
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def validate(draft: RankingDraft) -> ValidationResult:
    """Check a draft before it is sent to the ranking store.
    
    Returns a ValidationResult whose ``errors`` maps field names to a
    message. A field missing from ``errors`` is valid.
    """
    errors = {}
    
    account_name = (draft.account_name or '').strip()
    if not account_name:
        errors['account_name'] = ACCOUNT_NAME_REQUIRED
    elif not account_name.startswith('@'):
        errors['account_name'] = ACCOUNT_NAME_PREFIX
    
    if not isinstance(draft.followers, int) or draft.followers <= 0:
        errors['followers'] = FOLLOWERS_POSITIVE
    elif draft.followers > MAX_FOLLOWERS:
        errors['followers'] = FOLLOWERS_TOO_LARGE
    
    if draft.profile_url and not draft.profile_url.startswith('http'):
        errors['profile_url'] = PROFILE_URL_INVALID
    
    if draft.image_url and not draft.image_url.startswith('http'):
        errors['image_url'] = IMAGE_URL_INVALID
    
    return ValidationResult(errors=errors)
