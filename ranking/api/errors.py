"""Translate failures into the JSON failure envelope."""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core import RankingError, ValidationError

logger = logging.getLogger(__name__)


async def ranking_error_handler(request: Request, exc: RankingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg") if errors else "Invalid request"
    wrapped = ValidationError(f"Invalid request: {detail}")
    return JSONResponse(wrapped.to_dict(), status_code=wrapped.status_code)


def _status_kind(status_code: int) -> str:
    """Map a status to a snake_case kind, e.g. 401 -> ``unauthorized``."""

    try:
        return HTTPStatus(status_code).phrase.lower().replace(" ", "_")
    except ValueError:
        return "http_error"


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        {
            "success": False,
            "message": str(exc.detail),
            "kind": _status_kind(exc.status_code),
        },
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RankingError, ranking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


__all__ = ["register_error_handlers"]
