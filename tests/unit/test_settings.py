"""Tests for configuration handling."""

import pytest
from pydantic import ValidationError

from artwork_selector.config import Settings, get_settings


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        """Defaults point at the public artworks API with pages of 10."""
        monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.artworks_api_base_url == "https://api.artic.edu/api/v1"
        assert settings.default_page_size == 10
        assert settings.log_file is None

    def test_environment_override(self, monkeypatch):
        """Environment variables override defaults, case-insensitively."""
        monkeypatch.setenv("default_page_size", "25")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.default_page_size == 25
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        """get_settings returns the same instance until the cache is cleared."""
        assert get_settings() is get_settings()

    def test_invalid_page_size(self, monkeypatch):
        """A non-positive page size is rejected."""
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
