"""Unit tests for the shared GitHub HTTP client singleton."""

from __future__ import annotations

import pytest

from app.services.github.http_client import USER_AGENT, close_github_client, get_github_client


class TestGitHubHttpClient:
    @pytest.mark.asyncio
    async def test_singleton_reused_until_closed(self):
        await close_github_client()

        first = get_github_client()
        second = get_github_client()
        assert first is second
        assert first.headers["User-Agent"] == USER_AGENT

        await close_github_client()
        assert first.is_closed

        third = get_github_client()
        assert third is not first
        await close_github_client()

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        await close_github_client()
        await close_github_client()
