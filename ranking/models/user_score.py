"""Database model for per-user scores."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class UserScore(SQLModel, table=True):
    """Single ranked score owned by one user identity."""

    __tablename__ = "user_score"
    __table_args__ = (CheckConstraint("score >= 0", name="ck_user_score_non_negative"),)

    id: str = ORMField(primary_key=True, max_length=64)
    display_name: str = ORMField(max_length=80)
    score: int = ORMField(default=0, ge=0, index=True)
    created_at: datetime = ORMField(default_factory=utcnow, index=True)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["UserScore"]
