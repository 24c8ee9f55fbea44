"""History Store - Interface for the append-only translation history."""

from abc import ABC, abstractmethod
from typing import List

from pocket_translator.core import PendingRecord, TranslationRecord


class HistoryStore(ABC):
    """
    Append-only record store.

    Implementations assign ``id`` and ``timestamp`` and never raise on I/O
    failure: saves degrade to "not persisted", reads to an empty list.
    """

    @abstractmethod
    def save_record(self, pending: PendingRecord) -> TranslationRecord:
        """Persist a record and return it with id and timestamp assigned."""

    @abstractmethod
    def list_records(self) -> List[TranslationRecord]:
        """Return every stored record, in store order."""
