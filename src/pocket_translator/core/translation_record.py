"""Domain entities for translation history records."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping

PREVIEW_LENGTH = 60
IMAGE_PREVIEW_LABEL = "Image Translation"


class RecordType(str, Enum):
    """Screen a record originated from; selects how ``original`` is read."""

    TEXT = "text"
    IMAGE = "image"
    CAMERA = "camera"

    @property
    def is_image(self) -> bool:
        return self is not RecordType.TEXT


@dataclass(frozen=True)
class PendingRecord:
    """A translation result that has not been handed to the history store yet.

    ``id`` and ``timestamp`` are missing on purpose: only the store assigns them.
    """

    type: RecordType
    original: str
    translated: str
    source_lang: str
    target_lang: str


@dataclass(frozen=True)
class TranslationRecord:
    """A persisted translation.

    Attributes:
        id: Unique identifier assigned at save time.
        type: Originating screen (text, image upload or camera).
        original: Input text, or the image as a data URI for image kinds.
        translated: Model output, possibly an error placeholder string.
        source_lang: Source language display label.
        target_lang: Target language display label.
        timestamp: Save time in epoch milliseconds; newest-first sort key.
    """

    id: str
    type: RecordType
    original: str
    translated: str
    source_lang: str
    target_lang: str
    timestamp: int

    @classmethod
    def from_pending(cls, pending: PendingRecord, record_id: str, timestamp: int) -> "TranslationRecord":
        return cls(
            id=record_id,
            type=pending.type,
            original=pending.original,
            translated=pending.translated,
            source_lang=pending.source_lang,
            target_lang=pending.target_lang,
            timestamp=timestamp,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TranslationRecord":
        """Parse a record from its wire mapping.

        Spreadsheet rows come back loosely typed, so ids may be numbers and
        timestamps strings or floats.

        Raises:
            ValueError: If a required field is missing or malformed.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Record must be an object, got {type(data).__name__}")

        missing = [key for key in ("id", "type", "timestamp") if data.get(key) in (None, "")]
        if missing:
            raise ValueError(f"Record is missing required fields: {', '.join(missing)}")

        try:
            record_type = RecordType(str(data["type"]).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown record type: {data['type']!r}")

        try:
            timestamp = int(float(data["timestamp"]))
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Invalid timestamp: {data['timestamp']!r}")

        return cls(
            id=str(data["id"]),
            type=record_type,
            original=_text(data.get("original")),
            translated=_text(data.get("translated")),
            source_lang=_text(data.get("sourceLang")),
            target_lang=_text(data.get("targetLang")),
            timestamp=timestamp,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire mapping with the store's camelCase keys."""
        return {
            "id": self.id,
            "type": self.type.value,
            "original": self.original,
            "translated": self.translated,
            "sourceLang": self.source_lang,
            "targetLang": self.target_lang,
            "timestamp": self.timestamp,
        }

    @property
    def is_image(self) -> bool:
        """True when ``original`` holds an image data URI."""
        return self.type.is_image

    @property
    def preview(self) -> str:
        """One-line summary for list rows."""
        if self.is_image:
            return IMAGE_PREVIEW_LABEL
        return truncate(" ".join(self.original.split()), PREVIEW_LENGTH)

    @property
    def language_pair(self) -> str:
        return f"{self.source_lang or '?'} → {self.target_lang}"

    @property
    def date_label(self) -> str:
        return self._local_datetime().strftime("%Y-%m-%d")

    @property
    def datetime_label(self) -> str:
        return self._local_datetime().strftime("%Y-%m-%d %H:%M:%S")

    def _local_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000)


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def newest_first(records: Iterable[TranslationRecord]) -> List[TranslationRecord]:
    """Sort records by timestamp, descending."""
    return sorted(records, key=lambda record: record.timestamp, reverse=True)
