"""Score mutations; the only writer of score rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import UserScore
from .ranking import RankQuery
from .store import ScoreStore
from .users import user_to_dict
from .validation import require_non_negative_int, require_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    user: UserScore
    new_rank: int
    total_users: int
    points_added: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "user": user_to_dict(self.user),
            "newRank": self.new_rank,
            "totalUsers": self.total_users,
        }
        if self.points_added is not None:
            payload["pointsAdded"] = self.points_added
        return payload


class ScoreMutator:
    """Applies absolute and relative score changes, then reports the new rank.

    Input is validated before the store is touched. The rank is read after
    the write in a separate query, so under concurrent traffic it may
    already reflect other users' later writes.
    """

    def __init__(self, store: ScoreStore, ranking: RankQuery) -> None:
        self.store = store
        self.ranking = ranking

    def set_score(self, user_id: str, new_score: Any) -> MutationResult:
        score = require_non_negative_int(new_score, "score")
        row = self.store.set_score(user_id, score)
        lookup = self.ranking.rank_of(user_id)
        logger.info(
            "Set score for %s to %d (rank %d/%d)",
            user_id,
            row.score,
            lookup.position,
            lookup.total_users,
        )
        return MutationResult(
            user=row, new_rank=lookup.position, total_users=lookup.total_users
        )

    def add_points(self, user_id: str, delta: Any) -> MutationResult:
        points = require_positive_int(delta, "points")
        row = self.store.increment_score(user_id, points)
        lookup = self.ranking.rank_of(user_id)
        logger.info(
            "Added %d points to %s, score now %d (rank %d/%d)",
            points,
            user_id,
            row.score,
            lookup.position,
            lookup.total_users,
        )
        return MutationResult(
            user=row,
            new_rank=lookup.position,
            total_users=lookup.total_users,
            points_added=points,
        )


__all__ = ["MutationResult", "ScoreMutator"]
