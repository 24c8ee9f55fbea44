"""Text Translator Coordinator - Typed text translation workflow."""

import logging
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QThreadPool, Slot

from pocket_translator.core import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL, PendingRecord, RecordType
from pocket_translator.coordinators.screen_coordinator import ScreenCoordinator
from pocket_translator.services import HistoryStore, TranslationService
from pocket_translator.services.api_workers import SaveRecordWorker, TextTranslationWorker
from pocket_translator.services.translation import TEXT_ERROR
from pocket_translator.ui import TextTranslatorScreen

logger = logging.getLogger(__name__)


class TextTranslatorCoordinator(ScreenCoordinator):
    """
    Drives the text screen through ``idle -> translating -> idle``.

    Responsibilities:
    - Track input text and the selected language pair.
    - Enable the translate action only when idle with non-empty input.
    - Run the translation in the background and display the result.
    - Hand the result to the history store; the screen stays in the
      translating state until that save attempt completes.
    """

    def __init__(
        self,
        screen: TextTranslatorScreen,
        translation_service: TranslationService,
        history_store: HistoryStore,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__(thread_pool)

        if screen is None:
            raise ValueError("TextTranslatorScreen must not be None")
        if translation_service is None:
            raise ValueError("TranslationService must not be None")
        if history_store is None:
            raise ValueError("HistoryStore must not be None")

        self.screen = screen
        self.translation_service = translation_service
        self.history_store = history_store

        self.input_text = ""
        self.output_text = ""
        self.source_lang = DEFAULT_SOURCE_LABEL
        self.target_lang = DEFAULT_TARGET_LABEL
        self.is_translating = False

        # request id -> (text, source, target) of translations in flight
        self._pending_requests: Dict[int, Tuple[str, str, str]] = {}

        self.screen.input_changed.connect(self.on_input_changed)
        self.screen.source_changed.connect(self.on_source_changed)
        self.screen.target_changed.connect(self.on_target_changed)
        self.screen.translate_clicked.connect(self.request_translation)

    def activate(self) -> None:
        self._refresh()

    def deactivate(self) -> None:
        super().deactivate()
        self.input_text = ""
        self.output_text = ""
        self.source_lang = DEFAULT_SOURCE_LABEL
        self.target_lang = DEFAULT_TARGET_LABEL
        self.is_translating = False
        self.screen.reset(self.source_lang, self.target_lang)
        self._refresh()

    def can_translate(self) -> bool:
        return not self.is_translating and bool(self.input_text.strip())

    @Slot(str)
    def on_input_changed(self, text: str) -> None:
        self.input_text = text
        self.screen.set_translate_enabled(self.can_translate())

    @Slot(str)
    def on_source_changed(self, label: str) -> None:
        self.source_lang = label
        self.screen.set_placeholder(f"Enter {label} text...")

    @Slot(str)
    def on_target_changed(self, label: str) -> None:
        self.target_lang = label
        self.screen.set_result_title(f"Result ({label})")

    @Slot()
    def request_translation(self) -> None:
        """Translate the current input; ignored while disabled."""
        if not self.can_translate():
            return

        self.is_translating = True
        self._refresh()

        request_id = self._next_request_id()
        self._active_request_id = request_id
        self._pending_requests[request_id] = (self.input_text, self.source_lang, self.target_lang)

        worker = TextTranslationWorker(
            request_id=request_id,
            translation_service=self.translation_service,
            text=self.input_text,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
        )
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        self._start_worker(worker)

    @Slot(int, str)
    def _handle_translation_result(self, request_id: int, result: str) -> None:
        text, source_lang, target_lang = self._pending_requests.pop(request_id)

        if self._is_current(request_id):
            self.output_text = result
            self.screen.show_result(result)
        else:
            logger.debug("Stale translation result for request %d; saving without display", request_id)

        pending = PendingRecord(
            type=RecordType.TEXT,
            original=text,
            translated=result,
            source_lang=source_lang,
            target_lang=target_lang,
        )
        worker = SaveRecordWorker(request_id=request_id, history_store=self.history_store, pending=pending)
        worker.signals.finished.connect(self._handle_save_finished)
        self._start_worker(worker)

    @Slot(int, str)
    def _handle_translation_error(self, request_id: int, error: str) -> None:
        logger.error("Text translation worker failed: %s", error)
        self._handle_translation_result(request_id, TEXT_ERROR)

    @Slot(int)
    def _handle_save_finished(self, request_id: int) -> None:
        if not self._is_current(request_id):
            return
        self.is_translating = False
        self._refresh()

    def _refresh(self) -> None:
        self.screen.set_translating(self.is_translating)
        self.screen.set_translate_enabled(self.can_translate())
        self.screen.set_result_title(f"Result ({self.target_lang})")
        self.screen.set_placeholder(f"Enter {self.source_lang} text...")
