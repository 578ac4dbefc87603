"""Analytics overview endpoint."""

from dataclasses import asdict
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from app.api.deps import DbSession, Window
from app.domain import commit_ops
from app.services.analytics import summarize

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/overview")
async def get_overview(db: DbSession, window: Window) -> dict[str, Any]:
    """Aggregate statistics for commits in the window.

    Streak and heatmap are anchored on the current UTC day.
    """
    commits = await commit_ops.list_in_window(db, window.start, window.end)
    summary = summarize(commits, datetime.now(UTC))

    return {
        "from": window.start.isoformat(),
        "to": window.end.isoformat() if window.end else None,
        **asdict(summary),
    }
