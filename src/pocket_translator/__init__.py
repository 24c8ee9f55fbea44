"""
Pocket Translator - A mobile-style AI translator for text and photos.

This package provides a desktop application with:
- Text translation through Google Gemini
- Photo upload and live camera translation of visible text
- Translation history kept in a Google Sheet
"""

__version__ = "0.1.0"

# Make key components available at package level
from pocket_translator.core import PendingRecord, RecordType, Screen, TranslationRecord

__all__ = [
    "PendingRecord",
    "RecordType",
    "Screen",
    "TranslationRecord",
]
