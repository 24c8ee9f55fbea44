"""Settings Manager - Handles API key and store endpoint configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Startup configuration injected into the service clients.

    Both external values are optional. A missing API key leaves translation
    returning error strings; a missing sheet URL keeps history local-only.
    """

    gemini_api_key: Optional[str] = None
    sheet_url: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    log_level: str = DEFAULT_LOG_LEVEL


class SettingsManager:
    """
    Reads configuration from a .env file in the project root and the
    process environment. Values already present in the environment win.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self._env_path())

    def _env_path(self) -> Path:
        return self._project_root / ".env"

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return _clean(os.getenv("GEMINI_API_KEY"))

    def get_sheet_url(self) -> Optional[str]:
        """Get the Google Apps Script web app URL backing the history store."""
        return _clean(os.getenv("GOOGLE_SHEET_URL"))

    def get_gemini_model(self) -> str:
        return _clean(os.getenv("GEMINI_MODEL")) or DEFAULT_GEMINI_MODEL

    def get_log_level(self) -> str:
        level = _clean(os.getenv("LOG_LEVEL"))
        return level.upper() if level else DEFAULT_LOG_LEVEL

    def load_config(self) -> AppConfig:
        """Snapshot the current settings into an AppConfig."""
        return AppConfig(
            gemini_api_key=self.get_gemini_api_key(),
            sheet_url=self.get_sheet_url(),
            gemini_model=self.get_gemini_model(),
            log_level=self.get_log_level(),
        )


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if value and value.strip() else None
