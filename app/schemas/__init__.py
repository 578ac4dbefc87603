"""Pydantic schemas for API request/response validation."""

from app.schemas.commits import CommitPage
from app.schemas.webhook import (
    PushAuthor,
    PushCommit,
    PushEvent,
    PushOwner,
    PushRepository,
)

__all__ = [
    "CommitPage",
    "PushAuthor",
    "PushCommit",
    "PushEvent",
    "PushOwner",
    "PushRepository",
]
