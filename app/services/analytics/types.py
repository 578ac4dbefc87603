"""Type definitions for the analytics overview."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


class CommitLike(Protocol):
    """The commit fields aggregation reads."""

    repository: str
    branch: str
    insertions: int
    deletions: int
    committed_at: datetime


@dataclass
class CodeChurn:
    insertions: int = 0
    deletions: int = 0


@dataclass
class DailyCount:
    day: str  # YYYY-MM-DD
    commits: int


@dataclass
class MonthlyCount:
    month: str  # YYYY-MM
    commits: int


@dataclass
class RepositoryShare:
    name: str
    value: int


@dataclass
class HourlyActivity:
    hour: int  # 0-23, UTC
    label: str  # "H:00"
    commits: int


@dataclass
class HeatmapCell:
    date: str  # YYYY-MM-DD
    commits: int
    age: int  # whole days before the reference day


@dataclass
class OverviewSummary:
    """Derived analytics for a window of commits."""

    total_commits: int
    most_active_repository: str
    most_active_branch: str
    commit_streak_days: int
    code_churn: CodeChurn
    commits_by_day: list[DailyCount] = field(default_factory=list)
    commits_by_month: list[MonthlyCount] = field(default_factory=list)
    repository_distribution: list[RepositoryShare] = field(default_factory=list)
    activity_histogram: list[HourlyActivity] = field(default_factory=list)
    contribution_heatmap: list[HeatmapCell] = field(default_factory=list)
