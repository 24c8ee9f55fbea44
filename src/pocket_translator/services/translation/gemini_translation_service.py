"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai
from google.genai import types

from pocket_translator.core.data_uri import decode_data_uri
from pocket_translator.services.translation.translation_service import (
    IMAGE_ERROR,
    IMAGE_FAILURE,
    NO_TEXT_FOUND,
    TEXT_ERROR,
    TEXT_FAILURE,
    TranslationService,
)
from pocket_translator.services.settings_manager import DEFAULT_GEMINI_MODEL

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Each call is a single attempt: no retry and no rate limiting. Uses the
    google.genai package.
    """

    SYSTEM_PROMPT = (
        "You are a professional translator. Translate the input accurately. "
        "Only return the translated text, no explanations."
    )

    TEXT_PROMPT = 'Translate the following text from {source} to {target}. Text: "{text}"'

    IMAGE_PROMPT = (
        "Translate all visible text in this image from {source} to {target}. "
        'Return ONLY the translated text. If there is no text, say "' + NO_TEXT_FOUND + '".'
    )

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_GEMINI_MODEL,
        client: Optional[genai.Client] = None,
    ):
        """
        Args:
            api_key: Gemini API key. None leaves the service unable to translate.
            model_name: Gemini model used for both text and images.
            client: Pre-built client; created lazily from api_key when omitted.
        """
        self.api_key = api_key
        self.model_name = model_name
        self._client = client

        if client is None and not api_key:
            logger.warning("GEMINI_API_KEY is not configured; translations will fail")

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("Gemini API key is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        if not text or not text.strip():
            return ""

        try:
            prompt = self.TEXT_PROMPT.format(source=source_lang, target=target_lang, text=text)
            logger.debug("Text translation request: model=%s, %d chars", self.model_name, len(text))

            response = self._get_client().models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(system_instruction=self.SYSTEM_PROMPT),
            )
            return response.text or TEXT_FAILURE
        except Exception:
            logger.exception("Translation error")
            return TEXT_ERROR

    def translate_image(self, image_data: str, source_lang: str, target_lang: str) -> str:
        try:
            image_bytes, mime_type = decode_data_uri(image_data)
            prompt = self.IMAGE_PROMPT.format(source=source_lang, target=target_lang)
            logger.debug(
                "Image translation request: model=%s, %s, %d bytes",
                self.model_name,
                mime_type,
                len(image_bytes),
            )

            response = self._get_client().models.generate_content(
                model=self.model_name,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    prompt,
                ],
            )
            return response.text or IMAGE_FAILURE
        except Exception:
            logger.exception("Image translation error")
            return IMAGE_ERROR
