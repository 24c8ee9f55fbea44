"""History services - append-only store interface and spreadsheet implementation."""

from pocket_translator.services.history.history_store import HistoryStore
from pocket_translator.services.history.sheet_history_store import SheetHistoryStore

__all__ = [
    "HistoryStore",
    "SheetHistoryStore",
]
