"""
Response handling for GitHub enrichment calls.

Rate limit headers are parsed so a throttled token is reported as such
instead of as a generic 403.
"""

import logging
from dataclasses import dataclass

import httpx

from app.services.github.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)

# Status -> message for errors that need no extra inspection
_STATUS_MESSAGES = {
    401: "Invalid or expired GitHub token",
    404: "Commit or repository not found: {resource}",
    # Returned for SHAs GitHub cannot resolve in the repository
    422: "GitHub could not resolve {resource}",
}


@dataclass
class RateLimitInfo:
    """Rate limit headers from a GitHub API response."""

    remaining: str | None
    reset: str | None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RateLimitInfo":
        return cls(
            remaining=response.headers.get("X-RateLimit-Remaining"),
            reset=response.headers.get("X-RateLimit-Reset"),
        )

    @property
    def reset_timestamp(self) -> int | None:
        return int(self.reset) if self.reset else None

    @property
    def is_exhausted(self) -> bool:
        return self.remaining is not None and int(self.remaining) == 0


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise for any non-200 response from the GitHub API.

    Args:
        response: The HTTP response from GitHub API
        resource: Human-readable resource name for error context
            (e.g. "owner/repo@sha")

    Raises:
        GitHubAPIError: For every status other than 200; a 403 with an
            exhausted rate limit carries the reset timestamp
    """
    status = response.status_code
    if status == 200:
        return

    if status in _STATUS_MESSAGES:
        raise GitHubAPIError(_STATUS_MESSAGES[status].format(resource=resource), status)

    if status == 403:
        rate_info = RateLimitInfo.from_response(response)
        if rate_info.is_exhausted:
            logger.warning(f"GitHub rate limit exhausted while fetching {resource}")
            raise GitHubAPIError(
                "GitHub API rate limit exceeded",
                403,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        raise GitHubAPIError("GitHub API forbidden", 403)

    raise GitHubAPIError(f"GitHub API error: {status}", status)
