"""
TTL cache for commit detail lookups.

A SHA's file count and line totals never change, so a successful lookup is
kept for a day: redelivered push events, and the same commit pushed to
several branches, cost no extra API calls. Pull request associations can
change and are never cached.

Only results are stored. A call that raises leaves the cache untouched and
the next delivery asks GitHub again.
"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, Concatenate, ParamSpec, TypeVar

from cachetools import TTLCache  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

CommitKey = tuple[str, str, str]

commit_detail_cache: TTLCache[CommitKey, Any] = TTLCache(maxsize=2000, ttl=86400)  # 24 hours


def commit_key(owner: str, repo: str, sha: str) -> CommitKey:
    """Cache key for a commit; GitHub owner and repo names are case-insensitive."""
    return (owner.lower(), repo.lower(), sha.lower())


def cached_commit_lookup(
    cache: TTLCache[CommitKey, Any],
) -> Callable[
    [Callable[Concatenate[Any, str, str, str, P], Awaitable[T]]],
    Callable[Concatenate[Any, str, str, str, P], Awaitable[T]],
]:
    """
    Decorator for async methods shaped `(self, owner, repo, sha, ...)`.

    The key ignores `self`, so a lookup made with one token serves every
    later caller.

    Usage:
        @cached_commit_lookup(commit_detail_cache)
        async def get_commit_detail(self, owner: str, repo: str, sha: str) -> CommitDetail:
            ...
    """

    def decorator(
        func: Callable[Concatenate[Any, str, str, str, P], Awaitable[T]],
    ) -> Callable[Concatenate[Any, str, str, str, P], Awaitable[T]]:
        @wraps(func)
        async def wrapper(self: Any, owner: str, repo: str, sha: str, *args: P.args, **kwargs: P.kwargs) -> T:
            key = commit_key(owner, repo, sha)
            if key in cache:
                logger.debug(f"Cache HIT: {func.__name__} {owner}/{repo}@{sha[:7]}")
                cached: T = cache[key]
                return cached

            result = await func(self, owner, repo, sha, *args, **kwargs)
            cache[key] = result
            return result

        return wrapper

    return decorator


def clear_all_caches() -> None:
    """Clear all GitHub caches. Useful for testing."""
    commit_detail_cache.clear()


def get_cache_stats() -> dict[str, dict[str, int]]:
    """Current cache sizes, for monitoring."""
    return {
        "commit_detail": {
            "size": len(commit_detail_cache),
            "maxsize": commit_detail_cache.maxsize,
        },
    }
