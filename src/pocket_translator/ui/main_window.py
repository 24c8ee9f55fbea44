"""Main Window - Application shell with title header and bottom navigation."""

from typing import Dict

from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from pocket_translator.core import Screen
from pocket_translator.ui.navigation_bar import NavigationBar


class MainWindow(QMainWindow):
    """Phone-shaped shell: header, one visible screen, navigation bar."""

    # Signal emitted when the user presses a navigation tab
    screen_requested = Signal(object)
    # Signal emitted right before the window closes
    closing = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Pocket Translator")
        self.resize(420, 820)
        self.setStyleSheet("QMainWindow { background-color: #f9fafb; }")

        self._screens: Dict[Screen, QWidget] = {}
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.header = QLabel()
        self.header.setStyleSheet("""
            QLabel {
                background-color: #4f46e5;
                color: white;
                font-size: 19px;
                font-weight: bold;
                padding: 16px;
            }
        """)
        self.main_layout.addWidget(self.header)

        self.screen_stack = QStackedWidget()
        self.main_layout.addWidget(self.screen_stack, 1)

        self.navigation_bar = NavigationBar()
        self.navigation_bar.screen_selected.connect(self.screen_requested.emit)
        self.main_layout.addWidget(self.navigation_bar)

    def add_screen(self, screen: Screen, widget: QWidget) -> None:
        self._screens[screen] = widget
        self.screen_stack.addWidget(widget)

    def show_screen(self, screen: Screen) -> None:
        self.screen_stack.setCurrentWidget(self._screens[screen])
        self.navigation_bar.set_active(screen)

    def current_screen_widget(self) -> QWidget:
        return self.screen_stack.currentWidget()

    def set_title(self, title: str) -> None:
        self.header.setText(f"文A  {title}")

    def header_text(self) -> str:
        return self.header.text()

    def closeEvent(self, event: QCloseEvent):
        self.closing.emit()
        super().closeEvent(event)
