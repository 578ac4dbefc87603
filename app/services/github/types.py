"""Data types for GitHub API responses."""

from dataclasses import dataclass


@dataclass
class CommitDetail:
    """Change statistics for a single commit."""

    files_changed: int
    additions: int
    deletions: int


@dataclass
class PullRequestRef:
    """A pull request associated with a commit."""

    number: int | None
    url: str | None  # html_url, the link shown to humans
