"""
Tests for application settings.
"""

import pytest

from tracker.config import Settings


class TestSettings:

    @pytest.mark.parametrize("raw,expected", [
        ("http://a.io, http://b.io", ["http://a.io", "http://b.io"]),
        ("*", ["*"]),
        ("", ["http://localhost:3000", "http://localhost:5173"]),
        (["http://c.io"], ["http://c.io"]),
    ])
    def test_cors_origins(self, raw, expected):
        assert Settings(cors_origins=raw).cors_origins == expected

    def test_environment_flags(self):
        settings = Settings(environment="Production")

        assert settings.is_production
        assert not settings.is_development

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Europe/Madrid")
        monkeypatch.setenv("TOP_CLIENTS_LIMIT", "3")

        settings = Settings()

        assert settings.timezone == "Europe/Madrid"
        assert settings.top_clients_limit == 3
