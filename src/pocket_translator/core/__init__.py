"""Domain layer - Pure entities and constants, free of Qt and network code."""

from .data_uri import decode_data_uri, is_data_uri, mime_type_of, strip_data_uri_prefix, to_data_uri
from .languages import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL, LANGUAGES, Language, language_labels
from .screens import Screen, title_for
from .translation_record import PendingRecord, RecordType, TranslationRecord, newest_first

__all__ = [
    "Language",
    "LANGUAGES",
    "DEFAULT_SOURCE_LABEL",
    "DEFAULT_TARGET_LABEL",
    "language_labels",
    "Screen",
    "title_for",
    "RecordType",
    "PendingRecord",
    "TranslationRecord",
    "newest_first",
    "to_data_uri",
    "is_data_uri",
    "strip_data_uri_prefix",
    "mime_type_of",
    "decode_data_uri",
]
