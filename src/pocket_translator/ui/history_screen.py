"""History screen - Saved translations as a list with a detail view."""

from typing import List

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pocket_translator.core import TranslationRecord
from pocket_translator.ui.image_utils import pixmap_from_data_uri, scaled_to_cover, scaled_to_fit

THUMBNAIL_SIZE = QSize(48, 48)
DETAIL_IMAGE_SIZE = QSize(360, 256)

_CAPTION_STYLE = "color: #9ca3af; font-size: 11px; font-weight: bold;"


class HistoryRow(QFrame):
    """A clickable row: icon or thumbnail, preview text, date and languages.

    Signals:
        clicked: Emitted with the row's record.
    """

    clicked = Signal(object)

    def __init__(self, record: TranslationRecord, parent=None):
        super().__init__(parent)
        self.record = record
        self.setObjectName("historyRow")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet("""
            QFrame#historyRow {
                background-color: white;
                border: 1px solid #f3f4f6;
                border-radius: 12px;
            }
            QFrame#historyRow:hover {
                background-color: #f9fafb;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(THUMBNAIL_SIZE)
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.icon_label.setStyleSheet("background-color: #e0e7ff; border-radius: 8px; color: #4f46e5; font-size: 20px;")
        if record.is_image:
            pixmap = scaled_to_cover(pixmap_from_data_uri(record.original), THUMBNAIL_SIZE)
            if pixmap.isNull():
                self.icon_label.setText("🖼")
            else:
                self.icon_label.setPixmap(pixmap)
        else:
            self.icon_label.setText("T")
        layout.addWidget(self.icon_label)

        text_column = QVBoxLayout()
        self.preview_label = QLabel(record.preview)
        self.preview_label.setStyleSheet("color: #111827; font-weight: 500;")
        self.meta_label = QLabel(f"{record.date_label} • {record.language_pair}")
        self.meta_label.setStyleSheet("color: #6b7280; font-size: 11px;")
        text_column.addWidget(self.preview_label)
        text_column.addWidget(self.meta_label)
        layout.addLayout(text_column, 1)

        chevron = QLabel("›")
        chevron.setStyleSheet("color: #d1d5db; font-size: 20px;")
        layout.addWidget(chevron)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.record)
        super().mousePressEvent(event)


class HistoryScreen(QWidget):
    """List of saved translations plus a detail page for one record.

    Signals:
        record_selected: Emitted with the clicked TranslationRecord.
        back_clicked: Emitted when the detail view's back button is pressed.
    """

    record_selected = Signal(object)
    back_clicked = Signal()

    LIST_PAGE = 0
    DETAIL_PAGE = 1

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: List[HistoryRow] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_list_page())
        self.pages.addWidget(self._build_detail_page())
        layout.addWidget(self.pages)

    def _build_list_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(16, 16, 16, 16)

        header = QHBoxLayout()
        title = QLabel("Saved Translations")
        title.setStyleSheet("color: #1f2937; font-size: 17px; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        self.loading_label = QLabel("Loading...")
        self.loading_label.setStyleSheet("color: #4f46e5;")
        self.loading_label.hide()
        header.addWidget(self.loading_label)
        layout.addLayout(header)

        self.empty_label = QLabel("🕘\nNo history yet.")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: #9ca3af; font-size: 15px; padding: 60px;")
        self.empty_label.hide()
        layout.addWidget(self.empty_label)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(10)
        self.rows_layout.addStretch()
        scroll_area.setWidget(self.rows_container)
        layout.addWidget(scroll_area, 1)
        return page

    def _build_detail_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(16, 16, 16, 16)

        back_button = QPushButton("‹ Back to List")
        back_button.setStyleSheet("color: #4f46e5; background: transparent; border: none; font-weight: 500; text-align: left;")
        back_button.clicked.connect(self.back_clicked.emit)
        layout.addWidget(back_button)

        card = QFrame()
        card.setObjectName("detailCard")
        card.setStyleSheet("QFrame#detailCard { background-color: white; border-radius: 12px; }")
        card_layout = QVBoxLayout(card)
        card_layout.setSpacing(10)

        self.detail_image = QLabel()
        self.detail_image.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.detail_image.setStyleSheet("background-color: #111827;")
        card_layout.addWidget(self.detail_image)

        self.detail_date = self._add_field(card_layout, "Date")
        self.detail_languages = self._add_field(card_layout, "Language Pair")
        self.detail_languages.setStyleSheet("color: #4f46e5; font-weight: 500;")

        self.detail_original_caption = QLabel("ORIGINAL")
        self.detail_original_caption.setStyleSheet(_CAPTION_STYLE)
        card_layout.addWidget(self.detail_original_caption)
        self.detail_original = QLabel()
        self.detail_original.setWordWrap(True)
        self.detail_original.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.detail_original.setStyleSheet("color: #1f2937; background-color: #f9fafb; padding: 8px; border-radius: 8px;")
        card_layout.addWidget(self.detail_original)

        self.detail_translated = self._add_field(card_layout, "Translation")
        self.detail_translated.setStyleSheet("color: #111827; font-size: 17px; font-weight: 500;")
        card_layout.addStretch()

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        scroll_area.setWidget(card)
        layout.addWidget(scroll_area, 1)
        return page

    @staticmethod
    def _add_field(layout: QVBoxLayout, caption: str) -> QLabel:
        caption_label = QLabel(caption.upper())
        caption_label.setStyleSheet(_CAPTION_STYLE)
        value_label = QLabel()
        value_label.setWordWrap(True)
        value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(caption_label)
        layout.addWidget(value_label)
        return value_label

    def set_loading(self, loading: bool) -> None:
        self.loading_label.setVisible(loading)
        if loading:
            self.empty_label.hide()

    def display_records(self, records: List[TranslationRecord]) -> None:
        """Replace the rows with the given records, in the given order."""
        self._clear_rows()

        if not records:
            self.empty_label.show()
            return
        self.empty_label.hide()

        for record in records:
            row = HistoryRow(record)
            row.clicked.connect(self.record_selected.emit)
            # Keep the trailing stretch last
            self.rows_layout.insertWidget(self.rows_layout.count() - 1, row)
            self._rows.append(row)

    def displayed_records(self) -> List[TranslationRecord]:
        return [row.record for row in self._rows]

    def _clear_rows(self) -> None:
        for row in self._rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []

    def show_list(self) -> None:
        self.pages.setCurrentIndex(self.LIST_PAGE)

    def show_detail(self, record: TranslationRecord) -> None:
        if record.is_image:
            pixmap = scaled_to_fit(pixmap_from_data_uri(record.original), DETAIL_IMAGE_SIZE)
            self.detail_image.setPixmap(pixmap)
            self.detail_image.show()
        else:
            self.detail_image.clear()
            self.detail_image.hide()

        self.detail_date.setText(record.datetime_label)
        self.detail_languages.setText(record.language_pair)

        show_original = not record.is_image
        self.detail_original_caption.setVisible(show_original)
        self.detail_original.setVisible(show_original)
        self.detail_original.setText(record.original if show_original else "")

        self.detail_translated.setText(record.translated)
        self.pages.setCurrentIndex(self.DETAIL_PAGE)
