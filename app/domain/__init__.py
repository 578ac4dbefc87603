from app.domain.commit_operations import CommitFilters, commit_ops

__all__ = [
    "CommitFilters",
    "commit_ops",
]
