"""Root conftest: test infrastructure for all backend tests.

Provides:
- Mocked AsyncSession fixture (no database required)
- API client with dependency overrides
- Autouse guard against real GitHub API calls
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.config.settings import settings
from app.services.github import clear_github_caches
from tests.helpers.mock_factories import TEST_WEBHOOK_SECRET


# ─────────────────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_db() -> AsyncMock:
    """AsyncSession stand-in; configure db.execute per test."""
    db = AsyncMock()
    db.add = MagicMock()
    return db


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(mock_db: AsyncMock):
    """HTTP client against the app with the DB session replaced by mock_db.

    The webhook secret is set to TEST_WEBHOOK_SECRET for the duration.
    Overrides: get_db
    """
    from app.core.database import get_db
    from app.main import app

    async def override_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_db

    with patch.object(settings, "github_webhook_secret", TEST_WEBHOOK_SECRET):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    app.dependency_overrides.clear()


# ─────────────────────────────────────────────────────────────────────────────
# External Service Mocks
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def mock_external_services():
    """SAFETY: Never reach the real GitHub API from tests.

    Enrichment is disabled by default; tests that exercise it construct
    their own StatsEnricher with a token and patch the HTTP client.
    """
    clear_github_caches()
    with (
        patch.object(settings, "github_token", ""),
        patch(
            "app.services.github.read_operations.get_github_client",
            new_callable=MagicMock,
        ) as mock_get_client,
    ):
        mock_get_client.return_value.get = AsyncMock(
            side_effect=AssertionError("Unexpected GitHub API call")
        )
        yield {"github_client": mock_get_client}
    clear_github_caches()
