"""Database engine construction."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine


def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    """Build an engine for ``url``; SQLite connections may cross threads."""

    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


def ensure_sqlite_directory(engine: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database."""

    url = engine.url
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    Path(database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


__all__ = ["create_db_engine", "ensure_sqlite_directory"]
