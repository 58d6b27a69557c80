"""Error kinds raised by the ranking core."""

from __future__ import annotations

from typing import Any, Dict


class RankingError(Exception):
    """Base class for failures surfaced to callers as a failure envelope."""

    kind = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message, "kind": self.kind}


class ValidationError(RankingError):
    """Malformed or out-of-range input."""

    kind = "validation_error"
    status_code = 400


class NotFound(RankingError):
    """The referenced user has no score row."""

    kind = "not_found"
    status_code = 404


class StorageError(RankingError):
    """The store is unreachable or rejected a write."""

    kind = "storage_error"
    status_code = 500


__all__ = ["NotFound", "RankingError", "StorageError", "ValidationError"]
