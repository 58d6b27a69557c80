"""Service layer: storage, ordering, ranking reads and score mutations."""

from .ordering import ORDERING, OrderingPolicy
from .store import ScoreStore
from .users import user_to_dict
from .ranking import Pagination, RankedEntry, RankingPage, RankLookup, RankQuery
from .mutations import MutationResult, ScoreMutator

__all__ = [
    "ORDERING",
    "MutationResult",
    "OrderingPolicy",
    "Pagination",
    "RankLookup",
    "RankQuery",
    "RankedEntry",
    "RankingPage",
    "ScoreMutator",
    "ScoreStore",
    "user_to_dict",
]
