"""History Coordinator - Loads saved translations and drives list/detail views."""

import logging
from typing import List, Optional

from PySide6.QtCore import QThreadPool, Slot

from pocket_translator.core import TranslationRecord, newest_first
from pocket_translator.coordinators.screen_coordinator import ScreenCoordinator
from pocket_translator.services import HistoryStore
from pocket_translator.services.api_workers import LoadHistoryWorker
from pocket_translator.ui import HistoryScreen

logger = logging.getLogger(__name__)


class HistoryCoordinator(ScreenCoordinator):
    """Re-fetches the full history on every activation.

    No records are cached between visits. Selecting a record switches to
    the detail view; going back shows the already loaded list.
    """

    def __init__(
        self,
        screen: HistoryScreen,
        history_store: HistoryStore,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__(thread_pool)

        if screen is None:
            raise ValueError("HistoryScreen must not be None")
        if history_store is None:
            raise ValueError("HistoryStore must not be None")

        self.screen = screen
        self.history_store = history_store

        self.records: List[TranslationRecord] = []
        self.selected: Optional[TranslationRecord] = None
        self.is_loading = False

        self.screen.record_selected.connect(self.select_record)
        self.screen.back_clicked.connect(self.back_to_list)

    def activate(self) -> None:
        self.selected = None
        self.screen.show_list()
        self.load_history()

    def deactivate(self) -> None:
        super().deactivate()
        self.records = []
        self.selected = None
        self.is_loading = False
        self.screen.set_loading(False)
        self.screen.display_records(self.records)
        self.screen.show_list()

    def load_history(self) -> None:
        self.is_loading = True
        self.screen.set_loading(True)

        request_id = self._next_request_id()
        self._active_request_id = request_id

        worker = LoadHistoryWorker(request_id=request_id, history_store=self.history_store)
        worker.signals.records_loaded.connect(self._handle_records_loaded)
        worker.signals.error.connect(self._handle_load_error)
        self._start_worker(worker)

    @Slot(int, object)
    def _handle_records_loaded(self, request_id: int, records: List[TranslationRecord]) -> None:
        if not self._is_current(request_id):
            logger.debug("Ignoring stale history load (request %d)", request_id)
            return

        self.records = newest_first(records)
        self.is_loading = False
        self.screen.set_loading(False)
        self.screen.display_records(self.records)

    @Slot(int, str)
    def _handle_load_error(self, request_id: int, error: str) -> None:
        logger.error("History load failed: %s", error)
        self._handle_records_loaded(request_id, [])

    @Slot(object)
    def select_record(self, record: TranslationRecord) -> None:
        self.selected = record
        self.screen.show_detail(record)

    @Slot()
    def back_to_list(self) -> None:
        self.selected = None
        self.screen.show_list()
