"""Sheet History Store - Translation history kept in a Google Sheet.

The sheet sits behind a Google Apps Script web app:
- POST ``{"action": "save", "data": <record>}`` appends a row.
- GET returns ``{"data": [<record>, ...]}``.
"""

import json
import logging
import time
import uuid
from typing import Callable, List, Optional

import requests

from pocket_translator.core import PendingRecord, TranslationRecord
from pocket_translator.services.history.history_store import HistoryStore

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return str(uuid.uuid4())


class SheetHistoryStore(HistoryStore):
    """
    History store backed by a spreadsheet web hook.

    Writes are fire-and-forget: the record built locally is returned whether
    or not the POST reached the sheet. Without an endpoint URL the store is
    local-only: saves do no I/O and the history is always empty.
    """

    # text/plain keeps the POST a "simple" request; Apps Script rejects preflights.
    POST_CONTENT_TYPE = "text/plain;charset=utf-8"
    REQUEST_TIMEOUT = 30

    def __init__(
        self,
        endpoint_url: Optional[str],
        session: Optional[requests.Session] = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], int] = _now_ms,
    ):
        """
        Args:
            endpoint_url: Apps Script web app URL, or None for local-only mode.
            session: HTTP session; a new one is created when omitted.
            id_factory: Produces unique record ids.
            clock: Current time in epoch milliseconds.
        """
        self.endpoint_url = endpoint_url or None
        self.session = session or requests.Session()
        self._id_factory = id_factory
        self._clock = clock

    @property
    def is_configured(self) -> bool:
        return self.endpoint_url is not None

    def save_record(self, pending: PendingRecord) -> TranslationRecord:
        record = TranslationRecord.from_pending(
            pending,
            record_id=self._id_factory(),
            timestamp=self._clock(),
        )

        if not self.is_configured:
            logger.warning("GOOGLE_SHEET_URL is not configured; record %s kept local only", record.id)
            return record

        body = json.dumps({"action": "save", "data": record.to_dict()}, ensure_ascii=False)
        try:
            self.session.post(
                self.endpoint_url,
                data=body.encode("utf-8"),
                headers={"Content-Type": self.POST_CONTENT_TYPE},
                timeout=self.REQUEST_TIMEOUT,
            )
        except requests.RequestException:
            logger.exception("Failed to save record %s to Google Sheet", record.id)

        return record

    def list_records(self) -> List[TranslationRecord]:
        if not self.is_configured:
            return []

        try:
            response = self.session.get(self.endpoint_url, timeout=self.REQUEST_TIMEOUT)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException:
            logger.exception("Failed to fetch records")
            return []
        except ValueError:
            logger.exception("Failed to parse records")
            return []

        rows = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            logger.warning("History response has no data list: %s", type(rows).__name__)
            return []

        records = []
        for index, row in enumerate(rows):
            try:
                records.append(TranslationRecord.from_dict(row))
            except ValueError as e:
                logger.warning("Skipping history row %d: %s", index, e)
        return records
