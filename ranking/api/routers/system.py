"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core import DEFAULT_PAGE_SIZE, LEADERBOARD_SIZE
from ...services import ScoreStore
from ..dependencies import get_store

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple liveness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz(store: ScoreStore = Depends(get_store)) -> JSONResponse:
    """Readiness endpoint; fails when the store cannot be reached."""

    store.ping()
    return JSONResponse({"ok": True})


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose ranking limits to the frontend."""

    return {
        "leaderboard_size": LEADERBOARD_SIZE,
        "default_page_size": DEFAULT_PAGE_SIZE,
    }


__all__ = ["router"]
