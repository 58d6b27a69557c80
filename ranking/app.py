"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .api import register_error_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    SECRET_KEY,
    configure_logging,
)
from .services import ScoreStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[ScoreStore] = None) -> FastAPI:
    """Build the API around ``store``, or a store for ``DATABASE_URL``."""

    configure_logging(LOG_LEVEL)
    score_store = store or ScoreStore.from_url(DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        score_store.open(reset=DB_RESET)
        logger.info("Score store opened on %s", score_store.engine.url)
        try:
            yield
        finally:
            score_store.close()
            logger.info("Score store closed")

    app = FastAPI(title="Ranking API", version="0.1.0", lifespan=lifespan)
    app.state.store = score_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SECRET_KEY,
        session_cookie="sid",
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
        domain=COOKIE_DOMAIN,
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ranking.app:app", host="127.0.0.1", port=3000, reload=True)
