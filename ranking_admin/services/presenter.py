"""
Ranking List Presenter

Search, pagination, rank badges, follower formatting and CSV export for the
ranking lists. Records arrive from the ranking store already sorted by
followers (descending); nothing here reorders them.
"""

import csv
import io
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ranking_admin.services.rankings import get_rankings

PAGE_SIZE = 10

CSV_HEADER = ['順位', 'アカウント名', 'フォロワー数', 'エリア', '店舗名', 'プロフィールURL']

RANK_ICONS = {
    1: ('first', 'bi-trophy-fill text-warning'),
    2: ('second', 'bi-award-fill text-secondary'),
    3: ('third', 'bi-award text-danger'),
}


@dataclass(frozen=True)
class RankIcon:
    kind: str
    css_class: str
    label: str


@dataclass(frozen=True)
class RankedRecord:
    rank: int
    record: object

    @property
    def icon(self) -> RankIcon:
        return rank_icon(self.rank)


@dataclass(frozen=True)
class Page:
    items: List[RankedRecord]
    number: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def start(self) -> int:
        """1-based position of the first item on this page, 0 when empty."""
        if not self.items:
            return 0
        return self.items[0].rank

    @property
    def end(self) -> int:
        if not self.items:
            return 0
        return self.items[-1].rank

    @property
    def has_prev(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def page_numbers(self) -> range:
        return range(1, self.total_pages + 1)


def _matches(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def filter_rankings(records: Sequence, query: Optional[str]) -> list:
    """Keep records whose account name, area or store name contains query.

    Matching is case-insensitive and uses the query as typed, so only an
    empty query keeps everything. The input order is preserved.
    """
    needle = (query or '').lower()
    if not needle:
        return list(records)
    return [
        r for r in records
        if _matches(r.account_name, needle)
        or _matches(r.area, needle)
        or _matches(r.store_name, needle)
    ]


def paginate(records: Sequence, page=1, page_size=PAGE_SIZE) -> Page:
    """Slice one page out of a filtered sequence.

    Page numbers are 1-indexed and clamped to the available range. Ranks
    are positions in the whole sequence, so the first record of page 2 is
    rank ``page_size + 1``.
    """
    if page_size < 1:
        raise ValueError('page_size must be positive')

    total = len(records)
    total_pages = max(1, math.ceil(total / page_size))
    try:
        number = int(page)
    except (TypeError, ValueError):
        number = 1
    number = min(max(number, 1), total_pages)

    offset = (number - 1) * page_size
    items = [
        RankedRecord(rank=offset + i + 1, record=r)
        for i, r in enumerate(records[offset:offset + page_size])
    ]
    return Page(items=items, number=number, page_size=page_size, total=total)


def rank_icon(rank: int) -> RankIcon:
    kind, css_class = RANK_ICONS.get(rank, ('number', 'text-muted'))
    return RankIcon(kind=kind, css_class=css_class, label=f'#{rank}')


def format_followers(count: int) -> str:
    if count >= 10000:
        return f'{count / 10000:.1f}万'
    if count >= 1000:
        return f'{count / 1000:.1f}K'
    return str(count)


def to_csv(records: Sequence) -> str:
    """Serialise the filtered records, header first, one row per record.

    Every field is quoted and rows are separated by ``\\n`` with no trailing
    newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(CSV_HEADER)
    for rank, r in enumerate(records, start=1):
        writer.writerow([
            rank,
            r.account_name,
            r.followers,
            r.area or '',
            r.store_name or '',
            r.profile_url or '',
        ])
    return buffer.getvalue().rstrip('\n')


class RankingCache:
    """In-memory copy of the ranking list owned by one view.

    ``refresh()`` reloads from the store; ``view()`` filters and paginates
    the cached records without touching the database again.
    """

    def __init__(self, loader=get_rankings, page_size=PAGE_SIZE):
        self._loader = loader
        self.page_size = page_size
        self.records = []
        self.loaded = False

    def refresh(self):
        self.records = list(self._loader())
        self.loaded = True
        return self.records

    def filtered(self, query=None):
        return filter_rankings(self.records, query)

    def view(self, query=None, page=1):
        return paginate(self.filtered(query), page, self.page_size)
