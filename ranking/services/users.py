"""Helpers for score rows."""

from __future__ import annotations

from typing import Any, Dict

from ..core import isoformat_utc
from ..models import UserScore


def user_to_dict(row: UserScore) -> Dict[str, Any]:
    """Serialise a score row to the public user projection."""

    return {
        "id": row.id,
        "displayName": row.display_name,
        "score": row.score,
        "createdAt": isoformat_utc(row.created_at),
        "updatedAt": isoformat_utc(row.updated_at),
    }


__all__ = ["user_to_dict"]
