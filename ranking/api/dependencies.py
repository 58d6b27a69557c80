"""FastAPI dependency providers."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from ..services import RankQuery, ScoreMutator, ScoreStore


def get_store(request: Request) -> ScoreStore:
    """Return the store handle opened by the application lifespan."""

    return request.app.state.store


def get_rank_query(store: ScoreStore = Depends(get_store)) -> RankQuery:
    return RankQuery(store)


def get_score_mutator(
    store: ScoreStore = Depends(get_store),
    ranking: RankQuery = Depends(get_rank_query),
) -> ScoreMutator:
    return ScoreMutator(store, ranking)


def get_current_user_id(request: Request) -> str:
    """Caller identity placed in the signed session by the auth service."""

    uid = request.session.get("uid")
    if not uid:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return str(uid)


__all__ = [
    "get_current_user_id",
    "get_rank_query",
    "get_score_mutator",
    "get_store",
]
