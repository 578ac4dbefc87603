from app.models.commit import Commit, CommitBase, CommitRead, CommitType

__all__ = [
    "Commit",
    "CommitBase",
    "CommitRead",
    "CommitType",
]
