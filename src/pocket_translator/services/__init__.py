"""Services layer - external integrations and background workers."""

from pocket_translator.services.settings_manager import AppConfig, SettingsManager

# Translation services
from pocket_translator.services.translation import GeminiTranslationService, TranslationService

# History services
from pocket_translator.services.history import HistoryStore, SheetHistoryStore

from pocket_translator.services.api_workers import (
    ImageTranslationWorker,
    LoadHistoryWorker,
    SaveRecordWorker,
    TextTranslationWorker,
    WorkerSignals,
)
from pocket_translator.services.camera_session import CameraSession, CameraUnavailableError

__all__ = [
    "AppConfig",
    "SettingsManager",
    "TranslationService",
    "GeminiTranslationService",
    "HistoryStore",
    "SheetHistoryStore",
    "WorkerSignals",
    "TextTranslationWorker",
    "ImageTranslationWorker",
    "SaveRecordWorker",
    "LoadHistoryWorker",
    "CameraSession",
    "CameraUnavailableError",
]
