"""Shared fixtures for the ranking test suite."""

from __future__ import annotations

import itertools
import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from ranking.api.dependencies import get_current_user_id
from ranking.app import create_app
from ranking.services import RankQuery, ScoreMutator, ScoreStore

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    score_store = ScoreStore.from_url(f"sqlite:///{tmp_path / 'ranking.db'}")
    score_store.open()
    yield score_store
    score_store.close()


@pytest.fixture
def ranking(store):
    return RankQuery(store)


@pytest.fixture
def mutator(store, ranking):
    return ScoreMutator(store, ranking)


@pytest.fixture
def make_user(store):
    """Create users one second apart so creation order is unambiguous."""

    counter = itertools.count()

    def _make(score=0, user_id=None, display_name=None, created_at=None):
        index = next(counter)
        uid = user_id or f"user-{index:03d}"
        row = store.create(
            uid,
            display_name or f"Player {index}",
            created_at=created_at or BASE_TIME + timedelta(seconds=index),
        )
        if score:
            row = store.set_score(uid, score)
        return row

    return _make


@pytest.fixture
def caller():
    return {"id": None}


@pytest.fixture
def client(store, caller):
    app = create_app(store)
    app.dependency_overrides[get_current_user_id] = lambda: caller["id"]
    with TestClient(app) as test_client:
        yield test_client
