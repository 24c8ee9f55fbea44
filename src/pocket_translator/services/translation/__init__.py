"""Translation services - abstract interface and Gemini implementation."""

from pocket_translator.services.translation.translation_service import (
    IMAGE_ERROR,
    IMAGE_FAILURE,
    NO_TEXT_FOUND,
    TEXT_ERROR,
    TEXT_FAILURE,
    TranslationService,
)
from pocket_translator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "GeminiTranslationService",
    "TEXT_FAILURE",
    "TEXT_ERROR",
    "IMAGE_FAILURE",
    "IMAGE_ERROR",
    "NO_TEXT_FOUND",
]
