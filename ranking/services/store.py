"""Persistent score storage backed by SQLModel."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from sqlalchemy import text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, func, select

from ..core import (
    NotFound,
    StorageError,
    as_utc,
    create_db_engine,
    ensure_sqlite_directory,
    utcnow,
)
from ..models import UserScore
from .ordering import ORDERING, OrderingPolicy

logger = logging.getLogger(__name__)


class ScoreStore:
    """Owns the engine and every read and write of ``UserScore`` rows.

    The handle is opened once at process start and closed at shutdown.
    Each call runs in its own session; returned rows are detached but fully
    loaded.
    """

    def __init__(self, engine: Engine, policy: OrderingPolicy = ORDERING) -> None:
        self.engine = engine
        self.policy = policy

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "ScoreStore":
        return cls(create_db_engine(url), **kwargs)

    # Lifecycle --------------------------------------------------------------
    def open(self, reset: bool = False) -> None:
        ensure_sqlite_directory(self.engine)
        tables = [UserScore.__table__]
        try:
            if reset:
                logger.warning("Dropping score tables on %s", self.engine.url)
                SQLModel.metadata.drop_all(self.engine, tables=tables)
            SQLModel.metadata.create_all(self.engine, tables=tables)
        except SQLAlchemyError as exc:
            logger.exception("Unable to initialise score store")
            raise StorageError("Score store is unavailable") from exc

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                yield session
        except IntegrityError as exc:
            logger.warning("Score store rejected a write: %s", exc.orig)
            raise StorageError("Score store rejected the write") from exc
        except SQLAlchemyError as exc:
            logger.exception("Score store operation failed")
            raise StorageError("Score store is unavailable") from exc

    # Writes -----------------------------------------------------------------
    def create(
        self,
        user_id: str,
        display_name: str,
        created_at: Optional[datetime] = None,
    ) -> UserScore:
        """Provision the zero-score row for a newly registered identity."""

        now = as_utc(created_at) if created_at else utcnow()
        row = UserScore(
            id=user_id,
            display_name=display_name,
            score=0,
            created_at=now,
            updated_at=now,
        )
        with self._session() as session:
            session.add(row)
            session.commit()
        return row

    def set_score(self, user_id: str, new_score: int) -> UserScore:
        """Overwrite the score; concurrent overwrites resolve last-write-wins."""

        with self._session() as session:
            row = session.get(UserScore, user_id)
            if row is None:
                raise NotFound(f"User {user_id} not found")
            row.score = new_score
            row.updated_at = utcnow()
            session.add(row)
            session.commit()
        return row

    def increment_score(self, user_id: str, delta: int) -> UserScore:
        """Add ``delta`` in a single UPDATE so concurrent increments all land."""

        with self._session() as session:
            result = session.execute(
                update(UserScore)
                .where(UserScore.id == user_id)
                .values(score=UserScore.score + delta, updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                session.rollback()
                raise NotFound(f"User {user_id} not found")
            # Read back inside the write transaction so the row reflects this
            # increment and not a later one.
            row = session.get(UserScore, user_id)
            session.commit()
        return row

    # Reads ------------------------------------------------------------------
    def get(self, user_id: str) -> UserScore:
        with self._session() as session:
            row = session.get(UserScore, user_id)
        if row is None:
            raise NotFound(f"User {user_id} not found")
        return row

    def count(self) -> int:
        with self._session() as session:
            return session.exec(select(func.count()).select_from(UserScore)).one()

    def count_ranked_above(self, row: UserScore) -> int:
        """Number of rows that rank strictly above ``row``."""

        with self._session() as session:
            return session.exec(
                select(func.count())
                .select_from(UserScore)
                .where(self.policy.ranks_above(row))
            ).one()

    def list_all(self) -> List[UserScore]:
        with self._session() as session:
            return list(
                session.exec(select(UserScore).order_by(*self.policy.order_by())).all()
            )

    def list_page(self, offset: int, limit: int) -> Tuple[List[UserScore], int]:
        """Return one ordered slice and the total population size."""

        with self._session() as session:
            rows = session.exec(
                select(UserScore)
                .order_by(*self.policy.order_by())
                .offset(offset)
                .limit(limit)
            ).all()
            total = session.exec(select(func.count()).select_from(UserScore)).one()
        return list(rows), total

    def ping(self) -> bool:
        with self._session() as session:
            session.execute(text("SELECT 1"))
        return True


__all__ = ["ScoreStore"]
