"""
Best-effort enrichment of pushed commits with GitHub statistics.

Push payloads carry file lists but no line counts or PR links. When a token
is configured we ask GitHub for both; when it isn't, or GitHub fails, the
commit is still ingested with zero line counts and a file count derived from
the push payload.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import httpx

from app.services.github import GitHubAPIError, GitHubReadOperations
from app.services.github.types import CommitDetail

logger = logging.getLogger(__name__)


@dataclass
class CommitEnrichment:
    """Stats and links attached to a commit at ingestion time."""

    files_changed_count: int = 0
    insertions: int = 0
    deletions: int = 0
    pull_request_url: str | None = None


def fallback_file_set(
    added: Iterable[str] | None,
    removed: Iterable[str] | None,
    modified: Iterable[str] | None,
) -> set[str]:
    """Union of the file paths listed on a push commit."""
    return {*(added or ()), *(removed or ()), *(modified or ())}


class StatsEnricher:
    """
    Looks up commit detail and associated pull requests on GitHub.

    Both lookups are non-fatal: errors are logged and replaced with
    fallback values. Nothing is retried.
    """

    def __init__(self, token: str | None, timeout: float = 5.0):
        self.token = token or None
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.token is not None

    async def enrich(
        self,
        owner: str,
        repo: str,
        sha: str,
        fallback_files: Iterable[str],
    ) -> CommitEnrichment:
        """
        Build the enrichment for one commit.

        Args:
            owner: Repository owner login
            repo: Repository short name
            sha: Commit SHA
            fallback_files: Paths added/removed/modified in the push payload

        Returns:
            CommitEnrichment; files_changed_count falls back to the number of
            distinct fallback paths whenever GitHub gives no file count
        """
        fallback_count = len(set(fallback_files))

        if not self.enabled:
            return CommitEnrichment(files_changed_count=fallback_count)

        github = GitHubReadOperations(self.token, timeout=self.timeout)  # type: ignore[arg-type]
        detail = await self._fetch_detail(github, owner, repo, sha)
        pull_request_url = await self._fetch_pull_request_url(github, owner, repo, sha)

        if detail is None:
            return CommitEnrichment(
                files_changed_count=fallback_count,
                pull_request_url=pull_request_url,
            )

        return CommitEnrichment(
            files_changed_count=detail.files_changed or fallback_count,
            insertions=detail.additions,
            deletions=detail.deletions,
            pull_request_url=pull_request_url,
        )

    async def _fetch_detail(
        self,
        github: GitHubReadOperations,
        owner: str,
        repo: str,
        sha: str,
    ) -> CommitDetail | None:
        try:
            return await github.get_commit_detail(owner, repo, sha)
        except GitHubAPIError as e:
            if e.is_rate_limited:
                logger.warning(f"Rate limited; skipping stats for {owner}/{repo}@{sha[:7]}")
            else:
                logger.warning(f"Commit detail unavailable for {owner}/{repo}@{sha[:7]}: {e}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Commit detail lookup failed for {owner}/{repo}@{sha[:7]}: {e}")
        return None

    async def _fetch_pull_request_url(
        self,
        github: GitHubReadOperations,
        owner: str,
        repo: str,
        sha: str,
    ) -> str | None:
        try:
            pulls = await github.get_commit_pull_requests(owner, repo, sha)
        except GitHubAPIError as e:
            logger.warning(f"Pull requests unavailable for {owner}/{repo}@{sha[:7]}: {e}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Pull request lookup failed for {owner}/{repo}@{sha[:7]}: {e}")
            return None

        return pulls[0].url if pulls else None
