"""Navigation bar - Bottom tab bar with a raised camera button."""

from typing import Dict

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from pocket_translator.core import Screen

_TAB_STYLE = """
    QPushButton {
        background: transparent;
        border: none;
        color: #9ca3af;
        font-size: 11px;
        padding: 4px;
    }
    QPushButton:checked {
        color: #4f46e5;
        font-weight: bold;
    }
"""

_CAMERA_STYLE = """
    QPushButton {
        background-color: #4f46e5;
        color: white;
        border: none;
        border-radius: 28px;
        font-size: 22px;
    }
    QPushButton:checked {
        background-color: #4338ca;
        border: 4px solid #e0e7ff;
    }
"""


class NavigationBar(QWidget):
    """Five exclusive tabs, one per screen.

    Signals:
        screen_selected: Emitted with the Screen whose tab was pressed.
    """

    screen_selected = Signal(object)

    TABS = [
        (Screen.TEXT, "T\nText"),
        (Screen.UPLOAD, "🖼\nPhoto"),
        (Screen.CAMERA, "📷"),
        (Screen.HISTORY, "🕘\nHistory"),
        (Screen.GUIDE, "📖\nGuide"),
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: white; border-top: 1px solid #e5e7eb;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 6, 16, 6)

        self.buttons: Dict[Screen, QPushButton] = {}
        for screen, label in self.TABS:
            button = QPushButton(label)
            button.setCheckable(True)
            if screen is Screen.CAMERA:
                button.setFixedSize(56, 56)
                button.setStyleSheet(_CAMERA_STYLE)
            else:
                button.setFixedWidth(56)
                button.setStyleSheet(_TAB_STYLE)
            button.clicked.connect(lambda _checked=False, s=screen: self.screen_selected.emit(s))
            layout.addWidget(button)
            self.buttons[screen] = button

    def set_active(self, screen: Screen) -> None:
        for tab_screen, button in self.buttons.items():
            button.setChecked(tab_screen == screen)
