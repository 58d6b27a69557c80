"""Shared ordering rule for every ranking read."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from ..core import as_utc
from ..models import UserScore


@dataclass(frozen=True)
class OrderingPolicy:
    """Strict total order over score rows.

    Higher scores rank first. Ties go to the earlier ``created_at`` and
    then to the smaller ``id``, so every row has exactly one position.
    The SQL clauses and the Python key below must describe the same order.
    """

    def order_by(self) -> Tuple[ColumnElement, ...]:
        return (
            UserScore.score.desc(),
            UserScore.created_at.asc(),
            UserScore.id.asc(),
        )

    def sort_key(self, row: UserScore) -> Tuple[int, datetime, str]:
        return (-row.score, as_utc(row.created_at), row.id)

    def precedes(self, first: UserScore, second: UserScore) -> bool:
        """Return ``True`` when ``first`` ranks strictly above ``second``."""

        return self.sort_key(first) < self.sort_key(second)

    def ranks_above(self, row: UserScore) -> ColumnElement:
        """SQL predicate matching every row that ranks strictly above ``row``."""

        created_at = as_utc(row.created_at)
        return or_(
            UserScore.score > row.score,
            and_(
                UserScore.score == row.score,
                UserScore.created_at < created_at,
            ),
            and_(
                UserScore.score == row.score,
                UserScore.created_at == created_at,
                UserScore.id < row.id,
            ),
        )


ORDERING = OrderingPolicy()


__all__ = ["ORDERING", "OrderingPolicy"]
