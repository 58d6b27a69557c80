"""Ranking and score endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from ...services import RankQuery, ScoreMutator
from ..dependencies import get_current_user_id, get_rank_query, get_score_mutator

router = APIRouter(prefix="/api/ranking", tags=["ranking"])


def _ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


@router.get("/leaderboard")
def get_leaderboard(
    limit: Optional[str] = None,
    ranking: RankQuery = Depends(get_rank_query),
    user_id: str = Depends(get_current_user_id),
):
    """Top of the ranking, 10 entries unless ``limit`` says otherwise."""

    return _ok([entry.to_dict() for entry in ranking.top_k(limit)])


@router.get("/my-position")
def get_my_position(
    ranking: RankQuery = Depends(get_rank_query),
    user_id: str = Depends(get_current_user_id),
):
    """Rank of the authenticated caller."""

    return _ok(ranking.rank_of(user_id).to_dict())


@router.get("/users/{target_id}")
def get_user_position(
    target_id: str,
    ranking: RankQuery = Depends(get_rank_query),
    user_id: str = Depends(get_current_user_id),
):
    """Rank of any user by id."""

    return _ok(ranking.rank_of(target_id).to_dict())


@router.put("/update-score")
def update_score(
    body: Dict[str, Any] = Body(...),
    mutator: ScoreMutator = Depends(get_score_mutator),
    user_id: str = Depends(get_current_user_id),
):
    """Overwrite the caller's score."""

    return _ok(mutator.set_score(user_id, body.get("score")).to_dict())


@router.post("/add-points")
def add_points(
    body: Dict[str, Any] = Body(...),
    mutator: ScoreMutator = Depends(get_score_mutator),
    user_id: str = Depends(get_current_user_id),
):
    """Increment the caller's score."""

    return _ok(mutator.add_points(user_id, body.get("points")).to_dict())


@router.get("/full-ranking")
def get_full_ranking(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    ranking: RankQuery = Depends(get_rank_query),
    user_id: str = Depends(get_current_user_id),
):
    """One page of the complete ranking."""

    return _ok(ranking.page(page, limit).to_dict())


__all__ = ["router"]
