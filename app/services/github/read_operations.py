"""
GitHub API lookups used to enrich pushed commits.

- Commit detail: changed files and line totals
- Pull requests associated with a commit
"""

import logging
from typing import Any

import httpx

from app.services.github.cache import cached_commit_lookup, commit_detail_cache
from app.services.github.helpers import handle_error_response
from app.services.github.http_client import get_github_client
from app.services.github.types import CommitDetail, PullRequestRef

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only commit lookups against the GitHub REST API.

    Methods raise GitHubAPIError for error responses and let httpx transport
    errors propagate; callers decide whether a failure is fatal.
    """

    BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"

    def __init__(self, token: str, timeout: float = 5.0):
        self.token = token
        self.timeout = timeout
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

    async def _get(self, path: str, resource: str) -> httpx.Response:
        response = await get_github_client().get(
            f"{self.BASE_URL}{path}",
            headers=self._headers,
            timeout=self.timeout,
        )
        handle_error_response(response, resource)
        return response

    @cached_commit_lookup(commit_detail_cache)
    async def get_commit_detail(self, owner: str, repo: str, sha: str) -> CommitDetail:
        """
        Fetch change statistics for a single commit.

        Returns:
            CommitDetail with the number of changed files and line totals
            (missing fields count as zero)
        """
        response = await self._get(
            f"/repos/{owner}/{repo}/commits/{sha}", f"{owner}/{repo}@{sha[:7]}"
        )
        data: dict[str, Any] = response.json()
        stats = data.get("stats") or {}

        return CommitDetail(
            files_changed=len(data.get("files") or []),
            additions=int(stats.get("additions") or 0),
            deletions=int(stats.get("deletions") or 0),
        )

    async def get_commit_pull_requests(
        self,
        owner: str,
        repo: str,
        sha: str,
    ) -> list[PullRequestRef]:
        """Fetch pull requests containing a commit, in the order GitHub lists them."""
        response = await self._get(
            f"/repos/{owner}/{repo}/commits/{sha}/pulls", f"{owner}/{repo}@{sha[:7]}"
        )
        pulls: list[dict[str, Any]] = response.json() or []
        logger.debug(f"{len(pulls)} pull request(s) contain {owner}/{repo}@{sha[:7]}")

        return [
            PullRequestRef(
                number=p.get("number"),
                url=p.get("html_url"),
            )
            for p in pulls
        ]
