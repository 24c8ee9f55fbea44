"""Language Pair Selector - From/To combo boxes shared by the translator screens."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QComboBox, QFrame, QHBoxLayout, QLabel, QVBoxLayout

from pocket_translator.core import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL, language_labels


class LanguagePairSelector(QFrame):
    """Two selectors emitting language display labels.

    Signals:
        source_changed: Emitted with the new source label.
        target_changed: Emitted with the new target label.
    """

    source_changed = Signal(str)
    target_changed = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("languagePairSelector")
        self.setStyleSheet("""
            QFrame#languagePairSelector {
                background-color: white;
                border: 1px solid #e5e7eb;
                border-radius: 12px;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        self.source_combo = self._add_column(layout, "From", "#f9fafb")

        arrow = QLabel("⇄")
        arrow.setStyleSheet("color: #9ca3af; font-size: 18px;")
        arrow.setAlignment(Qt.AlignmentFlag.AlignBottom)
        layout.addWidget(arrow)

        self.target_combo = self._add_column(layout, "To", "#eef2ff")

        self.set_languages(DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL)
        self.source_combo.currentTextChanged.connect(self.source_changed.emit)
        self.target_combo.currentTextChanged.connect(self.target_changed.emit)

    def _add_column(self, layout: QHBoxLayout, caption: str, background: str) -> QComboBox:
        column = QVBoxLayout()
        label = QLabel(caption)
        label.setStyleSheet("color: #6b7280; font-size: 11px; font-weight: bold;")
        combo = QComboBox()
        combo.addItems(language_labels())
        combo.setStyleSheet(f"background-color: {background}; padding: 4px;")
        column.addWidget(label)
        column.addWidget(combo)
        layout.addLayout(column, 1)
        return combo

    def source(self) -> str:
        return self.source_combo.currentText()

    def target(self) -> str:
        return self.target_combo.currentText()

    def set_languages(self, source: str, target: str) -> None:
        self.source_combo.setCurrentText(source)
        self.target_combo.setCurrentText(target)
