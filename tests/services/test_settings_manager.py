"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from pocket_translator.services import AppConfig, SettingsManager

CONFIG_KEYS = ("GEMINI_API_KEY", "GOOGLE_SHEET_URL", "GEMINI_MODEL", "LOG_LEVEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove configuration keys from the environment before and after each test."""
    saved = {key: os.environ.pop(key, None) for key in CONFIG_KEYS}
    yield
    for key, value in saved.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with an empty test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("GEMINI_API_KEY=\nGOOGLE_SHEET_URL=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_read_from_env_file(self, temp_env_dir, clean_env):
        """API key should be loaded from the .env file."""
        (temp_env_dir / ".env").write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        """API key should return None for whitespace-only value."""
        os.environ["GEMINI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerSheetAndDefaults:
    """Tests for the store URL and optional settings."""

    def test_sheet_url_none_when_empty(self, settings):
        assert settings.get_sheet_url() is None

    def test_sheet_url_read_from_env_file(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("GOOGLE_SHEET_URL=https://script.google.com/macros/s/abc/exec\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_sheet_url() == "https://script.google.com/macros/s/abc/exec"

    def test_defaults_for_model_and_log_level(self, settings):
        assert settings.get_gemini_model() == "gemini-2.5-flash"
        assert settings.get_log_level() == "INFO"

    def test_log_level_is_upper_cased(self, temp_env_dir, clean_env):
        os.environ["LOG_LEVEL"] = "debug"
        assert SettingsManager(project_root=temp_env_dir).get_log_level() == "DEBUG"

    def test_load_config_with_nothing_configured(self, settings):
        assert settings.load_config() == AppConfig()

    def test_load_config_snapshots_values(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text(
            "GEMINI_API_KEY=key\n"
            "GOOGLE_SHEET_URL=https://example.test/exec\n"
            "GEMINI_MODEL=gemini-2.0-flash\n"
        )

        config = SettingsManager(project_root=temp_env_dir).load_config()
        assert config == AppConfig(
            gemini_api_key="key",
            sheet_url="https://example.test/exec",
            gemini_model="gemini-2.0-flash",
            log_level="INFO",
        )
