"""Coordinators - Orchestration layer connecting UI with business logic."""

from .screen_coordinator import ScreenCoordinator
from .text_translator_coordinator import TextTranslatorCoordinator
from .image_translator_coordinator import CAMERA_ALERT, ImageSource, ImageTranslatorCoordinator
from .history_coordinator import HistoryCoordinator
from .guide_coordinator import GuideCoordinator
from .app_controller import AppController

__all__ = [
    "ScreenCoordinator",
    "TextTranslatorCoordinator",
    "ImageTranslatorCoordinator",
    "ImageSource",
    "CAMERA_ALERT",
    "HistoryCoordinator",
    "GuideCoordinator",
    "AppController",
]
