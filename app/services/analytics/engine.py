"""
Aggregation engine for the analytics overview.

`summarize` is a pure function over an already time-filtered list of
commits. All bucketing uses the UTC calendar of `committed_at`.
"""

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from app.core.dates import to_utc
from app.services.analytics.types import (
    CodeChurn,
    CommitLike,
    DailyCount,
    HeatmapCell,
    HourlyActivity,
    MonthlyCount,
    OverviewSummary,
    RepositoryShare,
)

HEATMAP_DAYS = 120
NOT_AVAILABLE = "N/A"


def most_active(counts: dict[str, int]) -> str:
    """Key with the highest count.

    Ties go to the key first encountered in input order (dicts keep
    insertion order, and keys are inserted on first sighting).
    """
    if not counts:
        return NOT_AVAILABLE
    best = max(counts.values())
    return next(key for key, count in counts.items() if count == best)


def compute_streak(active_days: set[str], reference_day: date) -> int:
    """Consecutive active days ending at the reference day.

    Zero when the reference day itself has no commits.
    """
    streak = 0
    cursor = reference_day
    while cursor.isoformat() in active_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def build_heatmap(daily: dict[str, int], reference_day: date) -> list[HeatmapCell]:
    """Fixed window of HEATMAP_DAYS days ending at the reference day, oldest first."""
    cells = []
    for age in range(HEATMAP_DAYS - 1, -1, -1):
        day = (reference_day - timedelta(days=age)).isoformat()
        cells.append(HeatmapCell(date=day, commits=daily.get(day, 0), age=age))
    return cells


def summarize(commits: Sequence[CommitLike], reference_now: datetime) -> OverviewSummary:
    """Compute the overview for a list of commits.

    Args:
        commits: Commits in the reporting window, in any order
        reference_now: "Now" for streak and heatmap purposes

    Returns:
        OverviewSummary; an empty list yields zero counts, "N/A" leaders
        and an all-zero heatmap
    """
    repo_counts: dict[str, int] = {}
    branch_counts: dict[str, int] = {}
    daily: dict[str, int] = {}
    monthly: dict[str, int] = {}
    hourly: dict[int, int] = {}
    churn = CodeChurn()

    for commit in commits:
        committed_at = to_utc(commit.committed_at)
        day = committed_at.strftime("%Y-%m-%d")
        month = committed_at.strftime("%Y-%m")

        repo_counts[commit.repository] = repo_counts.get(commit.repository, 0) + 1
        branch_counts[commit.branch] = branch_counts.get(commit.branch, 0) + 1
        daily[day] = daily.get(day, 0) + 1
        monthly[month] = monthly.get(month, 0) + 1
        hourly[committed_at.hour] = hourly.get(committed_at.hour, 0) + 1
        churn.insertions += commit.insertions
        churn.deletions += commit.deletions

    reference_day = to_utc(reference_now).date()

    return OverviewSummary(
        total_commits=len(commits),
        most_active_repository=most_active(repo_counts),
        most_active_branch=most_active(branch_counts),
        commit_streak_days=compute_streak(set(daily), reference_day),
        code_churn=churn,
        commits_by_day=[DailyCount(day=d, commits=daily[d]) for d in sorted(daily)],
        commits_by_month=[MonthlyCount(month=m, commits=monthly[m]) for m in sorted(monthly)],
        repository_distribution=[
            RepositoryShare(name=name, value=count) for name, count in repo_counts.items()
        ],
        activity_histogram=[
            HourlyActivity(hour=h, label=f"{h}:00", commits=hourly[h]) for h in sorted(hourly)
        ],
        contribution_heatmap=build_heatmap(daily, reference_day),
    )
