"""Schemas for inbound GitHub push webhooks.

Only the fields ingestion uses are declared; everything else in the payload
is ignored.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PushAuthor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    username: str | None = None


class PushOwner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    name: str | None = None


class PushRepository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str
    name: str
    owner: PushOwner = Field(default_factory=PushOwner)


class PushCommit(BaseModel):
    """One commit entry of a push event."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Commit SHA")
    message: str = ""
    timestamp: datetime
    url: str
    author: PushAuthor | None = None
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class PushEvent(BaseModel):
    """A push event: one or more commits added to a ref."""

    model_config = ConfigDict(extra="ignore")

    ref: str
    repository: PushRepository
    commits: list[PushCommit] = Field(default_factory=list)

    @property
    def owner_login(self) -> str:
        owner = self.repository.owner
        return owner.login or owner.name or ""
