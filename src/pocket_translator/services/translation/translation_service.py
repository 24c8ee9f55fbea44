"""Translation Service - Interface for text and image translation."""

from abc import ABC, abstractmethod

TEXT_FAILURE = "Translation failed."
TEXT_ERROR = "Error: Could not translate text."
IMAGE_FAILURE = "Analysis failed."
IMAGE_ERROR = "Error: Could not analyze image."
NO_TEXT_FOUND = "No text found"


class TranslationService(ABC):
    """
    Abstract service translating text or the text inside an image.

    Implementations never raise: every failure comes back as one of the
    fixed result strings above, so callers only ever display a string.
    """

    @abstractmethod
    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate text between two languages.

        Args:
            text: Text to translate. Blank text yields "" without a request.
            source_lang: Source language display label.
            target_lang: Target language display label.

        Returns:
            Translated text, or a failure string.
        """

    @abstractmethod
    def translate_image(self, image_data: str, source_lang: str, target_lang: str) -> str:
        """
        Translate all visible text in an image.

        Args:
            image_data: Image as a data URI or bare base64 payload.
            source_lang: Source language display label.
            target_lang: Target language display label.

        Returns:
            Translated text, "No text found", or a failure string.
        """
