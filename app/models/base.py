from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, text
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


def timestamptz_field(**kwargs: Any) -> Any:
    """Non-null TIMESTAMP WITH TIME ZONE column."""
    return Field(nullable=False, sa_type=DateTime(timezone=True), **kwargs)  # type: ignore[call-overload]


class TimestampMixin(SQLModel):
    """Row bookkeeping, separate from any domain timestamp the row carries."""

    created_at: datetime = timestamptz_field(
        default_factory=utc_now,
        sa_column_kwargs={"server_default": text("now()")},
    )
    updated_at: datetime = timestamptz_field(
        default_factory=utc_now,
        sa_column_kwargs={"server_default": text("now()")},
    )
