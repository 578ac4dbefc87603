"""Response schemas for the commit reporting API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.commit import CommitRead


class CommitPage(BaseModel):
    """One page of filtered commits plus the facet values for the window."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    page_size: int
    from_: datetime = Field(alias="from")
    to: datetime | None = None
    commits: list[CommitRead]
    repositories: list[str] = Field(default_factory=list)
    branches: list[str] = Field(default_factory=list)
    commit_types: list[str] = Field(default_factory=list)
