"""Input validation and query-parameter coercion."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core import ValidationError

logger = logging.getLogger(__name__)

MAX_SCORE_INPUT = 2_000_000_000


def _as_integer(value: Any) -> Optional[int]:
    """Return ``value`` as an int when it is an integral JSON number."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def require_non_negative_int(value: Any, field: str = "score") -> int:
    number = _as_integer(value)
    if number is None or number < 0:
        logger.debug("Rejected %s=%r", field, value)
        raise ValidationError(f"{field} must be a non-negative integer")
    if number > MAX_SCORE_INPUT:
        raise ValidationError(f"{field} must not exceed {MAX_SCORE_INPUT}")
    return number


def require_positive_int(value: Any, field: str = "points") -> int:
    number = _as_integer(value)
    if number is None or number <= 0:
        logger.debug("Rejected %s=%r", field, value)
        raise ValidationError(f"{field} must be a positive integer")
    if number > MAX_SCORE_INPUT:
        raise ValidationError(f"{field} must not exceed {MAX_SCORE_INPUT}")
    return number


def coerce_positive_int(value: Any, default: int) -> int:
    """Lenient parse for query parameters.

    Missing or unparseable values fall back to ``default``; numeric strings
    are truncated toward zero; values below 1 become 1.
    """

    if value is None or isinstance(value, bool):
        number = default
    elif isinstance(value, int):
        number = value
    else:
        try:
            number = int(value)
        except (TypeError, ValueError):
            try:
                number = int(float(value))
            except (TypeError, ValueError, OverflowError):
                number = default
    return max(number, 1)


__all__ = [
    "MAX_SCORE_INPUT",
    "coerce_positive_int",
    "require_non_negative_int",
    "require_positive_int",
]
