"""Language catalog used to populate the source/target selectors."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Language:
    """A supported language.

    Attributes:
        code: ISO 639-1 code.
        label: Display label. Selectors and records carry the label, not the code.
    """

    code: str
    label: str


LANGUAGES: List[Language] = [
    Language("en", "English"),
    Language("ko", "한국어"),
    Language("ja", "日本語"),
    Language("zh", "中文"),
    Language("es", "Español"),
    Language("fr", "Français"),
    Language("de", "Deutsch"),
]

DEFAULT_SOURCE_LABEL = LANGUAGES[0].label
DEFAULT_TARGET_LABEL = LANGUAGES[1].label


def language_labels() -> List[str]:
    """Return the display labels in catalog order."""
    return [language.label for language in LANGUAGES]

