"""Unit tests for environment-driven settings."""

from __future__ import annotations

from app.config.settings import Settings


class TestSettings:
    def test_defaults_disable_webhook_and_enrichment(self, monkeypatch):
        monkeypatch.delenv("GITHUB_WEBHOOK_SECRET", raising=False)
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        s = Settings(_env_file=None)

        assert s.webhook_secret_configured is False
        assert s.enrichment_enabled is False
        assert s.github_api_timeout == 5.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_WEBHOOK_SECRET", "shh")
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_x")
        monkeypatch.setenv("GITHUB_API_TIMEOUT", "2.5")

        s = Settings(_env_file=None)

        assert s.github_webhook_secret == "shh"
        assert s.webhook_secret_configured is True
        assert s.enrichment_enabled is True
        assert s.github_api_timeout == 2.5
