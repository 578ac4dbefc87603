"""Commit message classification."""

import re

from app.models.commit import CommitType

CONVENTIONAL_PREFIX = re.compile(
    r"^(feat|fix|refactor|chore|docs|style|test|perf|build|ci)(\(.+\))?:",
    re.IGNORECASE,
)

MERGE_PREFIX = "Merge "


def first_line(message: str) -> str:
    """Return the first line of a commit message (empty string for an empty message)."""
    return message.split("\n", 1)[0]


def is_merge_commit(message: str) -> bool:
    """Exact, case-sensitive prefix check used for the merge flag."""
    return message.startswith(MERGE_PREFIX)


def classify(message: str) -> CommitType:
    """Derive a commit type from the message's first line.

    Conventional prefixes win (scope ignored, any case), then any mention
    of "merge", then "revert". Everything else is "other".

    Examples:
        "feat(api): add endpoint" -> feat
        "FIX: typo" -> fix
        "Merge branch 'main' into dev" -> merge
        "Revert \"feat: x\"" -> revert
    """
    head = first_line(message).strip()

    match = CONVENTIONAL_PREFIX.match(head)
    if match:
        return CommitType(match.group(1).lower())

    lowered = head.lower()
    if "merge" in lowered:
        return CommitType.MERGE
    if "revert" in lowered:
        return CommitType.REVERT
    return CommitType.OTHER
