"""Commit reporting API endpoints."""

from fastapi import APIRouter, Query

from app.api.deps import DbSession, Window
from app.domain import CommitFilters, commit_ops
from app.models.commit import CommitRead, CommitType
from app.schemas.commits import CommitPage

router = APIRouter(prefix="/commits", tags=["commits"])


@router.get("", response_model=CommitPage)
async def list_commits(
    db: DbSession,
    window: Window,
    repository: str | None = Query(None, description="Exact repository full name"),
    branch: str | None = Query(None, description="Exact branch name"),
    commit_type: CommitType | None = Query(None),
    search: str | None = Query(None, description="Case-insensitive match in the commit message"),
    include_merge: bool = Query(True, description="Set false to exclude merge commits"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
) -> CommitPage:
    """List commits in the window, newest first, with facet values for filtering."""
    filters = CommitFilters(
        start=window.start,
        end=window.end,
        repository=repository or None,
        branch=branch or None,
        commit_type=commit_type.value if commit_type else None,
        search=search or None,
        include_merge=include_merge,
    )

    total = await commit_ops.count_filtered(db, filters)
    commits = await commit_ops.list_filtered(
        db, filters, skip=(page - 1) * page_size, limit=page_size
    )
    repositories = await commit_ops.distinct_values(db, "repository", filters)
    branches = await commit_ops.distinct_values(db, "branch", filters)
    commit_types = await commit_ops.distinct_values(db, "commit_type", filters)

    return CommitPage(
        total=total,
        page=page,
        page_size=page_size,
        from_=window.start,
        to=window.end,
        commits=[CommitRead.model_validate(c) for c in commits],
        repositories=repositories,
        branches=branches,
        commit_types=commit_types,
    )
