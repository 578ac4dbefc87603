"""
Webhook ingestion pipeline.

Turns a verified push event into commit rows: each commit is enriched,
classified and upserted by SHA, in the order GitHub delivered them.

Every field is recomputed from the delivery on each run, so redelivering an
event (or racing two deliveries of the same SHA) converges to the same rows.
All upserts share the caller's session; the request-scoped transaction in
`get_db` makes an event apply entirely or not at all.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dates import to_utc
from app.domain.commit_operations import commit_ops
from app.schemas.webhook import PushCommit, PushEvent
from app.services.commit_classifier import classify, first_line, is_merge_commit
from app.services.stats_enricher import CommitEnrichment, StatsEnricher, fallback_file_set

logger = logging.getLogger(__name__)

PUSH_EVENT = "push"
BRANCH_REF_PREFIX = "refs/heads/"
UNKNOWN_AUTHOR = "unknown"


class CommitStore(Protocol):
    """Keyed record store the pipeline writes to."""

    async def upsert(self, db: AsyncSession, values: dict[str, Any]) -> None: ...


@dataclass
class IngestionResult:
    """Outcome of processing one webhook delivery."""

    processed: int
    ignored: bool = False


def branch_from_ref(ref: str) -> str:
    """Strip the branch-ref prefix: "refs/heads/feature/x" -> "feature/x"."""
    if ref.startswith(BRANCH_REF_PREFIX):
        return ref[len(BRANCH_REF_PREFIX) :]
    return ref


def build_commit_values(
    commit: PushCommit,
    repository: str,
    branch: str,
    enrichment: CommitEnrichment,
) -> dict[str, Any]:
    """Compute the complete row for a pushed commit."""
    author_name = commit.author.name if commit.author else None
    return {
        "sha": commit.id,
        "repository": repository,
        "branch": branch,
        "author": author_name or UNKNOWN_AUTHOR,
        "message_short": first_line(commit.message),
        "message_full": commit.message,
        "commit_url": commit.url,
        "pull_request_url": enrichment.pull_request_url,
        "commit_type": classify(commit.message).value,
        "files_changed_count": enrichment.files_changed_count,
        "insertions": enrichment.insertions,
        "deletions": enrichment.deletions,
        "is_merge_commit": is_merge_commit(commit.message),
        "committed_at": to_utc(commit.timestamp),
    }


class IngestionPipeline:
    """Processes push events into commit records."""

    def __init__(self, enricher: StatsEnricher, store: CommitStore = commit_ops):
        self.enricher = enricher
        self.store = store

    async def ingest(
        self,
        db: AsyncSession,
        event_type: str | None,
        event: PushEvent | None,
    ) -> IngestionResult:
        """
        Process one webhook delivery.

        Args:
            db: Database session (the caller owns the transaction)
            event_type: Value of the X-GitHub-Event header
            event: Parsed push payload; may be None for ignored event types

        Returns:
            IngestionResult with the number of commits upserted. Event types
            other than "push" are acknowledged with nothing processed.
        """
        if event_type != PUSH_EVENT or event is None:
            logger.debug(f"Ignoring webhook event type: {event_type}")
            return IngestionResult(processed=0, ignored=True)

        repository = event.repository.full_name
        branch = branch_from_ref(event.ref)
        owner = event.owner_login
        repo = event.repository.name

        for commit in event.commits:
            enrichment = await self.enricher.enrich(
                owner,
                repo,
                commit.id,
                fallback_file_set(commit.added, commit.removed, commit.modified),
            )
            values = build_commit_values(commit, repository, branch, enrichment)
            await self.store.upsert(db, values)

        logger.info(f"Ingested {len(event.commits)} commit(s) for {repository}@{branch}")
        return IngestionResult(processed=len(event.commits))
