"""Database model exports."""

from .user_score import UserScore

__all__ = ["UserScore"]
