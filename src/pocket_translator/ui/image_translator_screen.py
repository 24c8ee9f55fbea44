"""Image Translator Screen - Photo upload or live camera capture, then translation."""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFileDialog,
    QFrame,
    QGridLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)
from PySide6.QtMultimediaWidgets import QVideoWidget

from pocket_translator.ui.image_utils import pixmap_from_data_uri, scaled_to_fit
from pocket_translator.ui.language_pair_selector import LanguagePairSelector

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.webp *.bmp *.gif)"

_OVERLAY_BUTTON_STYLE = """
    QPushButton {
        background-color: rgba(0, 0, 0, 130);
        color: white;
        border: none;
        border-radius: 16px;
        font-size: 16px;
    }
"""


class ImageTranslatorScreen(QWidget):
    """Preview area, translate action and result for an image.

    The preview area shows one of three pages: a placeholder prompting for
    an upload or camera start, the live camera feed with a shutter button,
    or the selected image with a clear button.

    Signals:
        file_selected: Emitted with the path of a picked image file.
        start_camera_clicked: Emitted when the camera placeholder is tapped.
        capture_clicked: Emitted when the shutter button is pressed.
        clear_clicked: Emitted when the preview's clear button is pressed.
        translate_clicked: Emitted when "Analyze & Translate" is pressed.
        source_changed: Emitted with the new source language label.
        target_changed: Emitted with the new target language label.
    """

    file_selected = Signal(Path)
    start_camera_clicked = Signal()
    capture_clicked = Signal()
    clear_clicked = Signal()
    translate_clicked = Signal()
    source_changed = Signal(str)
    target_changed = Signal(str)

    PLACEHOLDER_PAGE = 0
    CAMERA_PAGE = 1
    IMAGE_PAGE = 2

    def __init__(self, camera_mode: bool = False, parent=None):
        super().__init__(parent)
        self.camera_mode = camera_mode
        self._image: Optional[str] = None
        self._camera_active = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.language_selector = LanguagePairSelector()
        self.language_selector.source_changed.connect(self.source_changed.emit)
        self.language_selector.target_changed.connect(self.target_changed.emit)
        layout.addWidget(self.language_selector)

        self.preview_stack = QStackedWidget()
        self.preview_stack.setMinimumHeight(260)
        self.preview_stack.setStyleSheet("background-color: #e5e7eb; border-radius: 12px;")
        self.preview_stack.addWidget(self._build_placeholder_page())
        self.preview_stack.addWidget(self._build_camera_page())
        self.preview_stack.addWidget(self._build_image_page())
        layout.addWidget(self.preview_stack, 1)

        self.translate_button = QPushButton("Analyze && Translate")
        self.translate_button.setStyleSheet("""
            QPushButton {
                background-color: #4f46e5;
                color: white;
                border: none;
                border-radius: 12px;
                padding: 12px;
                font-weight: bold;
            }
        """)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        self.translate_button.hide()
        layout.addWidget(self.translate_button)

        self.loading_label = QLabel("Processing image with Gemini AI...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setStyleSheet("color: #6b7280; background-color: white; border-radius: 12px; padding: 20px;")
        self.loading_label.hide()
        layout.addWidget(self.loading_label)

        self.result_box = QFrame()
        self.result_box.setObjectName("resultBox")
        self.result_box.setStyleSheet("""
            QFrame#resultBox {
                background-color: white;
                border: 1px solid #e5e7eb;
                border-radius: 12px;
            }
        """)
        result_layout = QVBoxLayout(self.result_box)
        self.result_title = QLabel()
        self.result_title.setStyleSheet("color: #9ca3af; font-size: 11px; font-weight: bold;")
        result_layout.addWidget(self.result_title)
        self.result_label = QLabel()
        self.result_label.setWordWrap(True)
        self.result_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.result_label.setStyleSheet("color: #1f2937; font-size: 17px;")
        result_layout.addWidget(self.result_label)
        self.result_box.hide()
        layout.addWidget(self.result_box)

    def _build_placeholder_page(self) -> QWidget:
        if self.camera_mode:
            self.placeholder_button = QPushButton("📷\nTap to Start Camera")
            self.placeholder_button.clicked.connect(self.start_camera_clicked.emit)
        else:
            self.placeholder_button = QPushButton("⬆\nTap to Upload Photo")
            self.placeholder_button.clicked.connect(self._on_upload_clicked)
        self.placeholder_button.setStyleSheet("""
            QPushButton {
                color: #4f46e5;
                background: transparent;
                border: none;
                font-size: 16px;
                font-weight: bold;
            }
        """)
        self.placeholder_button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        return self.placeholder_button

    def _build_camera_page(self) -> QWidget:
        page = QWidget()
        grid = QGridLayout(page)
        grid.setContentsMargins(0, 0, 0, 0)

        self.video_widget = QVideoWidget()
        grid.addWidget(self.video_widget, 0, 0)

        self.capture_button = QPushButton("◉")
        self.capture_button.setFixedSize(64, 64)
        self.capture_button.setStyleSheet("""
            QPushButton {
                background-color: white;
                color: #4f46e5;
                border: none;
                border-radius: 32px;
                font-size: 32px;
            }
        """)
        self.capture_button.clicked.connect(self.capture_clicked.emit)
        grid.addWidget(
            self.capture_button,
            0,
            0,
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignBottom,
        )
        return page

    def _build_image_page(self) -> QWidget:
        page = QWidget()
        grid = QGridLayout(page)
        grid.setContentsMargins(0, 0, 0, 0)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setStyleSheet("background-color: black;")
        self.image_label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        grid.addWidget(self.image_label, 0, 0)

        self.clear_button = QPushButton("✕")
        self.clear_button.setFixedSize(32, 32)
        self.clear_button.setStyleSheet(_OVERLAY_BUTTON_STYLE)
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        grid.addWidget(self.clear_button, 0, 0, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTop)
        return page

    def _on_upload_clicked(self) -> None:
        file_name, _selected_filter = QFileDialog.getOpenFileName(
            self,
            "Select Photo",
            str(Path.home()),
            IMAGE_FILE_FILTER,
        )
        if file_name:
            self.file_selected.emit(Path(file_name))

    def _update_preview(self) -> None:
        if self._camera_active:
            self.preview_stack.setCurrentIndex(self.CAMERA_PAGE)
        elif self._image:
            pixmap = scaled_to_fit(pixmap_from_data_uri(self._image), self.preview_stack.size())
            self.image_label.setPixmap(pixmap)
            self.preview_stack.setCurrentIndex(self.IMAGE_PAGE)
        else:
            self.image_label.clear()
            self.preview_stack.setCurrentIndex(self.PLACEHOLDER_PAGE)

    def current_page(self) -> int:
        return self.preview_stack.currentIndex()

    def set_camera_active(self, active: bool) -> None:
        self._camera_active = active
        self._update_preview()

    def set_image(self, data_uri: Optional[str]) -> None:
        self._image = data_uri
        self._update_preview()

    def set_loading(self, loading: bool) -> None:
        self.loading_label.setVisible(loading)

    def set_translate_visible(self, visible: bool) -> None:
        self.translate_button.setVisible(visible)

    def set_result(self, text: str, title: str) -> None:
        self.result_title.setText(title.upper())
        self.result_label.setText(text)
        self.result_box.setVisible(bool(text))

    def show_alert(self, message: str) -> None:
        """Blocking alert, used for camera and file access failures."""
        title = "Camera" if self.camera_mode else "Photo Upload"
        QMessageBox.warning(self, title, message)

    def reset(self, source: str, target: str) -> None:
        self.language_selector.set_languages(source, target)
        self._image = None
        self._camera_active = False
        self._update_preview()
        self.set_result("", "")
        self.set_loading(False)
