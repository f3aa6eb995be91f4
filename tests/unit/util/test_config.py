"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from discuss.config import MAX_NESTING_DEPTH, Settings, ThreadingSettings
from discuss.domain.value import ReplySortOrder


class TestSettings:
    """Tests for Settings loading."""

    def test_threading_defaults(self):
        settings = ThreadingSettings()

        assert settings.max_depth == 3
        assert settings.default_sort == ReplySortOrder.BEST

    def test_nested_env_override(self, monkeypatch):
        """Nested values are read with the double underscore delimiter."""
        monkeypatch.setenv("THREADING__MAX_DEPTH", "5")
        monkeypatch.setenv("THREADING__DEFAULT_SORT", "newest")

        settings = Settings(_env_file=None)

        assert settings.threading.max_depth == 5
        assert settings.threading.default_sort == ReplySortOrder.NEWEST

    def test_negative_max_depth_rejected(self):
        with pytest.raises(ValidationError):
            ThreadingSettings(max_depth=-1)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="qa")

    def test_max_depth_is_capped(self):
        assert ThreadingSettings(max_depth=MAX_NESTING_DEPTH).max_depth == 100

        with pytest.raises(ValidationError):
            ThreadingSettings(max_depth=MAX_NESTING_DEPTH + 1)
