"""Text Translator Screen - Typed text input and its translation."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget

from pocket_translator.ui.language_pair_selector import LanguagePairSelector


class TextTranslatorScreen(QWidget):
    """Text input, translate button and result box.

    Signals:
        input_changed: Emitted with the full input text on every edit.
        source_changed: Emitted with the new source language label.
        target_changed: Emitted with the new target language label.
        translate_clicked: Emitted when the user presses Translate.
    """

    input_changed = Signal(str)
    source_changed = Signal(str)
    target_changed = Signal(str)
    translate_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.language_selector = LanguagePairSelector()
        self.language_selector.source_changed.connect(self.source_changed.emit)
        self.language_selector.target_changed.connect(self.target_changed.emit)
        layout.addWidget(self.language_selector)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setStyleSheet("""
            QPlainTextEdit {
                background-color: white;
                border: 1px solid #e5e7eb;
                border-radius: 12px;
                padding: 12px;
                font-size: 15px;
            }
        """)
        self.input_edit.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.input_edit, 1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.setStyleSheet("""
            QPushButton {
                background-color: #4f46e5;
                color: white;
                border: none;
                border-radius: 20px;
                padding: 10px 32px;
                font-weight: bold;
            }
            QPushButton:disabled {
                background-color: #a5b4fc;
            }
        """)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        button_row.addWidget(self.translate_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        result_box = QFrame()
        result_box.setObjectName("resultBox")
        result_box.setStyleSheet("""
            QFrame#resultBox {
                background-color: white;
                border: 1px solid #e5e7eb;
                border-radius: 12px;
            }
        """)
        result_box.setMinimumHeight(150)
        result_layout = QVBoxLayout(result_box)

        self.result_title = QLabel()
        self.result_title.setStyleSheet("color: #9ca3af; font-size: 11px; font-weight: bold;")
        result_layout.addWidget(self.result_title)

        self.result_label = QLabel()
        self.result_label.setWordWrap(True)
        self.result_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.result_label.setStyleSheet("color: #1f2937; font-size: 17px;")
        result_layout.addWidget(self.result_label, 1)

        layout.addWidget(result_box, 1)

    def _on_text_changed(self) -> None:
        self.input_changed.emit(self.input_edit.toPlainText())

    def set_translating(self, translating: bool) -> None:
        self.translate_button.setText("Translating..." if translating else "Translate")

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def set_placeholder(self, text: str) -> None:
        self.input_edit.setPlaceholderText(text)

    def set_result_title(self, text: str) -> None:
        self.result_title.setText(text.upper())

    def show_result(self, text: str) -> None:
        self.result_label.setText(text)

    def result_text(self) -> str:
        return self.result_label.text()

    def reset(self, source: str, target: str) -> None:
        """Return every widget to its initial state."""
        self.language_selector.set_languages(source, target)
        self.input_edit.clear()
        self.result_label.clear()
