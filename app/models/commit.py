"""Commit model: one row per pushed commit, keyed by SHA."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Index, Text
from sqlmodel import Field, SQLModel

from app.models.base import TimestampMixin, timestamptz_field


class CommitType(str, Enum):
    """Coarse category derived from a commit message's first line."""

    FEAT = "feat"
    FIX = "fix"
    REFACTOR = "refactor"
    CHORE = "chore"
    DOCS = "docs"
    STYLE = "style"
    TEST = "test"
    PERF = "perf"
    BUILD = "build"
    CI = "ci"
    MERGE = "merge"
    REVERT = "revert"
    OTHER = "other"


class CommitBase(SQLModel):
    """Fields written on every upsert."""

    # Git places no practical length limit on ref names, so free-text columns are unbounded
    repository: str = Field(sa_type=Text, description="GitHub repo full name (owner/repo)")
    branch: str = Field(sa_type=Text)
    author: str = Field(sa_type=Text)
    message_short: str = Field(description="First line of the commit message")
    message_full: str = Field(description="Complete commit message, used for search")
    commit_url: str = Field(max_length=1000)
    pull_request_url: str | None = Field(default=None, max_length=1000)
    commit_type: str = Field(default=CommitType.OTHER.value, max_length=20)
    files_changed_count: int = Field(default=0, ge=0)
    insertions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    is_merge_commit: bool = Field(default=False)
    committed_at: datetime = timestamptz_field(description="Author timestamp, stored in UTC")


class Commit(CommitBase, TimestampMixin, table=True):
    """
    A commit received through a push webhook.

    The SHA is the natural key. Reprocessing a SHA overwrites every field
    in CommitBase; rows are never partially merged.
    """

    __tablename__ = "commits"
    __table_args__ = (
        Index("ix_commits_committed_at", "committed_at"),
        Index("ix_commits_repository", "repository"),
        Index("ix_commits_branch", "branch"),
        Index("ix_commits_author", "author"),
    )

    sha: str = Field(primary_key=True, max_length=64, description="Full git SHA")


class CommitRead(CommitBase):
    """Schema for returning a commit from the reporting API."""

    sha: str
