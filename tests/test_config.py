"""
Tests for startup settings checks.
"""
import pytest

import config


class TestRequireSettings:
    def test_missing_secret_refuses_to_start(self, monkeypatch):
        monkeypatch.setattr(config, "JWT_SECRET", None)
        with pytest.raises(RuntimeError, match="JWT_SECRET"):
            config.require_settings()

    def test_empty_secret_refuses_to_start(self, monkeypatch):
        monkeypatch.setattr(config, "JWT_SECRET", "")
        with pytest.raises(RuntimeError):
            config.require_settings()

    def test_configured_secret(self):
        assert config.JWT_SECRET == "test-secret"
        config.require_settings()
