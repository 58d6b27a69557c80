"""Read-side ranking queries: leaderboard, rank lookup and pagination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..core import DEFAULT_PAGE_SIZE, LEADERBOARD_SIZE
from ..models import UserScore
from .store import ScoreStore
from .users import user_to_dict
from .validation import coerce_positive_int


@dataclass(frozen=True)
class RankedEntry:
    """A row annotated with its 1-based global position."""

    user: UserScore
    position: int

    def to_dict(self) -> Dict[str, Any]:
        return {**user_to_dict(self.user), "position": self.position}


@dataclass(frozen=True)
class RankLookup:
    user: UserScore
    position: int
    total_users: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": user_to_dict(self.user),
            "position": self.position,
            "totalUsers": self.total_users,
        }


@dataclass(frozen=True)
class Pagination:
    current_page: int
    page_size: int
    total_users: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_users // self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalUsers": self.total_users,
            "pageSize": self.page_size,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }


@dataclass(frozen=True)
class RankingPage:
    entries: List[RankedEntry]
    pagination: Pagination

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "pagination": self.pagination.to_dict(),
        }


class RankQuery:
    """Answers ordering questions from the current store contents.

    Nothing is cached between calls: every query applies the store's
    ordering policy to the rows as they are now.
    """

    def __init__(
        self,
        store: ScoreStore,
        *,
        leaderboard_size: int = LEADERBOARD_SIZE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.store = store
        self.leaderboard_size = leaderboard_size
        self.default_page_size = default_page_size

    def top_k(self, k: Any = None) -> List[RankedEntry]:
        """Return the first ``k`` rows of the ordering."""

        limit = coerce_positive_int(k, self.leaderboard_size)
        total = self.store.count()
        if total == 0:
            return []
        rows, _ = self.store.list_page(0, min(limit, total))
        return [RankedEntry(user=row, position=index + 1) for index, row in enumerate(rows)]

    def rank_of(self, user_id: str) -> RankLookup:
        """Locate one user; raises ``NotFound`` for unknown ids."""

        row = self.store.get(user_id)
        above = self.store.count_ranked_above(row)
        total = self.store.count()
        return RankLookup(user=row, position=above + 1, total_users=total)

    def page(self, page_number: Any = None, page_size: Any = None) -> RankingPage:
        """Return one page of the ordering with its pagination metadata.

        Pages past the end are empty rather than an error.
        """

        current = coerce_positive_int(page_number, 1)
        size = coerce_positive_int(page_size, self.default_page_size)
        offset = (current - 1) * size
        total = self.store.count()
        rows = []
        # Offsets and limits beyond the population may not fit a SQL integer.
        if offset < total:
            rows, total = self.store.list_page(offset, min(size, total - offset))
        entries = [
            RankedEntry(user=row, position=offset + index + 1)
            for index, row in enumerate(rows)
        ]
        return RankingPage(
            entries=entries,
            pagination=Pagination(current_page=current, page_size=size, total_users=total),
        )


__all__ = [
    "Pagination",
    "RankLookup",
    "RankQuery",
    "RankedEntry",
    "RankingPage",
]
