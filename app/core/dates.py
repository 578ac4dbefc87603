"""UTC date helpers shared by ingestion and reporting."""

from datetime import UTC, datetime


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def start_of_month_utc(now: datetime | None = None) -> datetime:
    """Midnight UTC on the first day of the month containing `now` (default: current time)."""
    current = to_utc(now) if now is not None else datetime.now(UTC)
    return current.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
