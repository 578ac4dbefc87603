"""
GitHub API access for commit enrichment.

Usage: `from app.services.github import GitHubReadOperations, GitHubAPIError`

- read_operations.py: commit detail and pull request lookups
- cache.py: TTL cache for commit detail
- http_client.py: pooled client shared across webhook deliveries
- helpers.py: error responses and rate limit headers
"""

from app.services.github.cache import clear_all_caches as clear_github_caches
from app.services.github.cache import get_cache_stats as get_github_cache_stats
from app.services.github.exceptions import GitHubAPIError
from app.services.github.http_client import close_github_client
from app.services.github.read_operations import GitHubReadOperations
from app.services.github.types import CommitDetail, PullRequestRef

__all__ = [
    "GitHubReadOperations",
    "GitHubAPIError",
    "CommitDetail",
    "PullRequestRef",
    # Lifecycle and cache management
    "close_github_client",
    "clear_github_caches",
    "get_github_cache_stats",
]
