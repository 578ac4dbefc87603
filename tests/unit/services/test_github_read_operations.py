"""Unit tests for GitHub read operations used by enrichment.

Tests GitHubReadOperations with mocked HTTP responses to verify:
- Request construction (URLs, headers)
- Response parsing
- Error handling (401, 403 rate limit, 404, 422)
- Caching of commit detail
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.services.github.cache import clear_all_caches, get_cache_stats
from app.services.github.exceptions import GitHubAPIError
from app.services.github.helpers import RateLimitInfo, handle_error_response
from app.services.github.read_operations import GitHubReadOperations

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

TOKEN = "ghp_test_token_12345"
SHA = "0123456789abcdef0123456789abcdef01234567"


def _make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a fake httpx.Response with the given status, JSON body, and headers."""
    return httpx.Response(
        status_code=status_code,
        json=json_data,
        headers=headers or {},
    )


def _commit_json(files: int = 2, additions: int = 10, deletions: int = 4) -> dict:
    return {
        "sha": SHA,
        "stats": {"total": additions + deletions, "additions": additions, "deletions": deletions},
        "files": [{"filename": f"file_{i}.py"} for i in range(files)],
    }


@pytest.fixture(autouse=True)
def _clear_caches():
    """Clear GitHub TTL caches before each test to prevent cross-test pollution."""
    clear_all_caches()
    yield
    clear_all_caches()


# ═══════════════════════════════════════════════════════════════════════════
# handle_error_response
# ═══════════════════════════════════════════════════════════════════════════


class TestHandleErrorResponse:
    def test_ok_passes(self):
        handle_error_response(_make_response(200, {}), "acme/api")

    @pytest.mark.parametrize("status", [401, 404, 422, 500])
    def test_error_statuses_raise(self, status):
        with pytest.raises(GitHubAPIError) as exc_info:
            handle_error_response(_make_response(status, {}), "acme/api")
        assert exc_info.value.status_code == status

    def test_rate_limit_exhausted(self):
        resp = _make_response(
            403,
            {},
            headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )
        with pytest.raises(GitHubAPIError) as exc_info:
            handle_error_response(resp, "acme/api")

        assert "rate limit" in exc_info.value.message
        assert exc_info.value.rate_limit_reset == 1700000000

    def test_forbidden_without_rate_limit(self):
        resp = _make_response(403, {}, headers={"X-RateLimit-Remaining": "12"})
        with pytest.raises(GitHubAPIError) as exc_info:
            handle_error_response(resp, "acme/api")
        assert exc_info.value.rate_limit_reset is None


class TestRateLimitInfo:
    def test_missing_headers(self):
        info = RateLimitInfo.from_response(_make_response(headers={}))
        assert info.reset_timestamp is None
        assert info.is_exhausted is False


# ═══════════════════════════════════════════════════════════════════════════
# get_commit_detail
# ═══════════════════════════════════════════════════════════════════════════


class TestGetCommitDetail:
    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_parses_stats_and_files(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(json_data=_commit_json(3, 25, 9))

        detail = await GitHubReadOperations(TOKEN).get_commit_detail("acme", "api", SHA)

        assert detail.files_changed == 3
        assert detail.additions == 25
        assert detail.deletions == 9

        url = client.get.call_args.args[0]
        headers = client.get.call_args.kwargs["headers"]
        assert url == f"https://api.github.com/repos/acme/api/commits/{SHA}"
        assert headers["Authorization"] == f"Bearer {TOKEN}"

    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_missing_stats_default_to_zero(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(json_data={"sha": SHA})

        detail = await GitHubReadOperations(TOKEN).get_commit_detail("acme", "api", SHA)

        assert detail.files_changed == 0
        assert detail.additions == 0
        assert detail.deletions == 0

    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_successful_lookup_is_cached(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(json_data=_commit_json())

        first = await GitHubReadOperations(TOKEN).get_commit_detail("acme", "api", SHA)
        second = await GitHubReadOperations("other-token").get_commit_detail("acme", "api", SHA)

        assert first == second
        assert client.get.await_count == 1
        assert get_cache_stats()["commit_detail"]["size"] == 1

    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.side_effect = [
            _make_response(status_code=502, json_data={}),
            _make_response(json_data=_commit_json(1, 1, 1)),
        ]
        github = GitHubReadOperations(TOKEN)

        with pytest.raises(GitHubAPIError):
            await github.get_commit_detail("acme", "api", SHA)
        detail = await github.get_commit_detail("acme", "api", SHA)

        assert detail.files_changed == 1
        assert client.get.await_count == 2


# ═══════════════════════════════════════════════════════════════════════════
# get_commit_pull_requests
# ═══════════════════════════════════════════════════════════════════════════


class TestGetCommitPullRequests:
    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_returns_pulls_in_order(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(
            json_data=[
                {"number": 4, "html_url": "https://github.com/acme/api/pull/4", "state": "open"},
                {"number": 2, "html_url": "https://github.com/acme/api/pull/2", "state": "closed"},
            ]
        )

        pulls = await GitHubReadOperations(TOKEN).get_commit_pull_requests("acme", "api", SHA)

        assert [p.number for p in pulls] == [4, 2]
        assert pulls[0].url == "https://github.com/acme/api/pull/4"
        assert client.get.call_args.args[0].endswith(f"/commits/{SHA}/pulls")

    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_empty_list(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(json_data=[])

        assert await GitHubReadOperations(TOKEN).get_commit_pull_requests("acme", "api", SHA) == []

    @patch("app.services.github.read_operations.get_github_client")
    @pytest.mark.asyncio
    async def test_not_found_raises(self, mock_get_client):
        client = AsyncMock()
        mock_get_client.return_value = client
        client.get.return_value = _make_response(status_code=404, json_data={})

        with pytest.raises(GitHubAPIError):
            await GitHubReadOperations(TOKEN).get_commit_pull_requests("acme", "api", SHA)


class TestCommitKey:
    def test_owner_repo_and_sha_are_case_insensitive(self):
        from app.services.github.cache import commit_key

        assert commit_key("Acme", "API", SHA.upper()) == commit_key("acme", "api", SHA)
