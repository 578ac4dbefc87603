"""
Pooled HTTP client for GitHub enrichment lookups.

Webhook deliveries arrive in bursts, one or two API calls per commit, so
connections are kept alive and shared across requests. Auth headers are
passed per request; the client itself carries no credentials.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

# GitHub rejects API requests without a User-Agent
USER_AGENT = "pulse-webhook-ingest"

_client: httpx.AsyncClient | None = None


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        # Upper bound only; each lookup passes its own (shorter) timeout
        timeout=httpx.Timeout(10.0, connect=5.0),
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        headers={"User-Agent": USER_AGENT},
        http2=True,
    )


def get_github_client() -> httpx.AsyncClient:
    """Return the shared client, creating it on first use or after close."""
    global _client
    if _client is None or _client.is_closed:
        _client = _build_client()
        logger.debug("Opened GitHub HTTP client")
    return _client


async def close_github_client() -> None:
    """Close the shared client (app shutdown). Safe to call when none is open."""
    global _client
    if _client is None:
        return
    if not _client.is_closed:
        await _client.aclose()
        logger.debug("Closed GitHub HTTP client")
    _client = None
