"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .navigation_bar import NavigationBar
from .language_pair_selector import LanguagePairSelector
from .text_translator_screen import TextTranslatorScreen
from .image_translator_screen import ImageTranslatorScreen
from .history_screen import HistoryRow, HistoryScreen
from .guide_screen import GuideScreen

__all__ = [
    "MainWindow",
    "NavigationBar",
    "LanguagePairSelector",
    "TextTranslatorScreen",
    "ImageTranslatorScreen",
    "HistoryScreen",
    "HistoryRow",
    "GuideScreen",
]
