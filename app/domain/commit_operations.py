"""Domain operations for pushed commits."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.commit import Commit, CommitBase

# Every field an upsert must overwrite (everything except the key and bookkeeping)
UPSERT_FIELDS: tuple[str, ...] = tuple(CommitBase.model_fields)

# Fields the reporting API offers distinct-value lists for
FACET_FIELDS = ("repository", "branch", "commit_type")

# SHA breaks timestamp ties so pages and leader tie-breaks are stable across requests
NEWEST_FIRST = (Commit.committed_at.desc(), Commit.sha.desc())  # type: ignore[attr-defined]


@dataclass
class CommitFilters:
    """
    Explicit set of reporting predicates, combined by conjunction.

    A None value means the predicate is absent. `include_merge=False`
    excludes merge commits; True applies no merge predicate.
    """

    start: datetime
    end: datetime | None = None
    repository: str | None = None
    branch: str | None = None
    commit_type: str | None = None
    search: str | None = None
    include_merge: bool = True


def filter_clauses(filters: CommitFilters, exclude: str | None = None) -> list[Any]:
    """
    Build SQL clauses for the given filters.

    Args:
        filters: The predicates to apply
        exclude: A facet field whose own predicate should be dropped
            (used to list the values still available for that field)
    """
    clauses: list[Any] = [Commit.committed_at >= filters.start]  # type: ignore[operator]
    if filters.end is not None:
        clauses.append(Commit.committed_at <= filters.end)  # type: ignore[operator]
    if filters.repository and exclude != "repository":
        clauses.append(Commit.repository == filters.repository)
    if filters.branch and exclude != "branch":
        clauses.append(Commit.branch == filters.branch)
    if filters.commit_type and exclude != "commit_type":
        clauses.append(Commit.commit_type == filters.commit_type)
    if not filters.include_merge:
        clauses.append(Commit.is_merge_commit.is_(False))  # type: ignore[attr-defined]
    if filters.search:
        clauses.append(
            Commit.message_full.icontains(filters.search, autoescape=True)  # type: ignore[attr-defined]
        )
    return clauses


class CommitOperations:
    """
    Operations for the commits table.

    Note: This doesn't extend a user-scoped base because commits are
    keyed by SHA and written only by webhook ingestion.
    """

    def __init__(self) -> None:
        self.model = Commit

    async def upsert(self, db: AsyncSession, values: dict[str, Any]) -> None:
        """
        Create the commit, or overwrite every field if the SHA already exists.

        The statement is a single INSERT ... ON CONFLICT DO UPDATE, so a
        concurrent reader sees either the old row or the new one.

        Args:
            db: Database session
            values: Mapping with "sha" plus every field in UPSERT_FIELDS
        """
        now = datetime.now(UTC)
        stmt = insert(self.model).values(**values, created_at=now, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=["sha"],
            set_={
                **{field: stmt.excluded[field] for field in UPSERT_FIELDS},
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await db.execute(stmt)
        await db.flush()

    async def list_in_window(
        self,
        db: AsyncSession,
        start: datetime,
        end: datetime | None = None,
    ) -> list[Commit]:
        """Get every commit committed within [start, end], newest first."""
        statement = (
            select(Commit)
            .where(*filter_clauses(CommitFilters(start=start, end=end)))
            .order_by(*NEWEST_FIRST)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def count_filtered(self, db: AsyncSession, filters: CommitFilters) -> int:
        """Count commits matching all filters."""
        statement = select(func.count()).select_from(Commit).where(*filter_clauses(filters))
        result = await db.execute(statement)
        return int(result.scalar_one())

    async def list_filtered(
        self,
        db: AsyncSession,
        filters: CommitFilters,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Commit]:
        """Get one page of commits matching all filters, newest first."""
        statement = (
            select(Commit)
            .where(*filter_clauses(filters))
            .order_by(*NEWEST_FIRST)
            .offset(skip)
            .limit(limit)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def distinct_values(
        self,
        db: AsyncSession,
        field: str,
        filters: CommitFilters,
    ) -> list[str]:
        """
        List the distinct values of a facet field within the current window.

        The field's own filter is ignored so the caller can offer
        alternatives to the currently selected value.
        """
        if field not in FACET_FIELDS:
            raise ValueError(f"Unsupported facet field: {field}")

        column = getattr(Commit, field)
        statement = (
            select(column)
            .where(*filter_clauses(filters, exclude=field))
            .distinct()
            .order_by(column)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


commit_ops = CommitOperations()
