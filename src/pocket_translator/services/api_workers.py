"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from pocket_translator.core import PendingRecord
from pocket_translator.services.history import HistoryStore
from pocket_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. Every payload signal carries the request
    id the worker was started with so receivers can drop stale results.
    """
    finished = Signal(int)
    error = Signal(int, str)
    translation_result = Signal(int, str)
    record_saved = Signal(int, object)  # TranslationRecord
    records_loaded = Signal(int, object)  # list[TranslationRecord]


class _ApiWorker(QRunnable):
    """Shared plumbing: request id, signals, error capture."""

    description = "API call"

    def __init__(self, request_id: int):
        super().__init__()
        self.request_id = request_id
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            self._execute()
        except Exception as e:
            # Services absorb their own failures; anything here is unexpected
            logger.exception("Unexpected error in %s", self.description)
            self.signals.error.emit(self.request_id, f"Unexpected {self.description} error: {e}")
        finally:
            self.signals.finished.emit(self.request_id)

    def _execute(self) -> None:
        raise NotImplementedError


class TextTranslationWorker(_ApiWorker):
    """Runs ``translate_text`` in a background thread."""

    description = "translation"

    def __init__(
        self,
        request_id: int,
        translation_service: TranslationService,
        text: str,
        source_lang: str,
        target_lang: str,
    ):
        super().__init__(request_id)
        self.translation_service = translation_service
        self.text = text
        self.source_lang = source_lang
        self.target_lang = target_lang

    def _execute(self) -> None:
        result = self.translation_service.translate_text(self.text, self.source_lang, self.target_lang)
        self.signals.translation_result.emit(self.request_id, result)


class ImageTranslationWorker(_ApiWorker):
    """Runs ``translate_image`` in a background thread."""

    description = "image translation"

    def __init__(
        self,
        request_id: int,
        translation_service: TranslationService,
        image_data: str,
        source_lang: str,
        target_lang: str,
    ):
        super().__init__(request_id)
        self.translation_service = translation_service
        self.image_data = image_data
        self.source_lang = source_lang
        self.target_lang = target_lang

    def _execute(self) -> None:
        result = self.translation_service.translate_image(self.image_data, self.source_lang, self.target_lang)
        self.signals.translation_result.emit(self.request_id, result)


class SaveRecordWorker(_ApiWorker):
    """Hands a pending record to the history store in a background thread."""

    description = "history save"

    def __init__(self, request_id: int, history_store: HistoryStore, pending: PendingRecord):
        super().__init__(request_id)
        self.history_store = history_store
        self.pending = pending

    def _execute(self) -> None:
        record = self.history_store.save_record(self.pending)
        self.signals.record_saved.emit(self.request_id, record)


class LoadHistoryWorker(_ApiWorker):
    """Fetches every history record in a background thread."""

    description = "history load"

    def __init__(self, request_id: int, history_store: HistoryStore):
        super().__init__(request_id)
        self.history_store = history_store

    def _execute(self) -> None:
        records = self.history_store.list_records()
        self.signals.records_loaded.emit(self.request_id, records)
