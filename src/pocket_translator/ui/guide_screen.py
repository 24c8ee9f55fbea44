"""Guide screen - Static instructions."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

GUIDE_SECTIONS = [
    ("T", "#dbeafe", "Text Translation",
     "Select source and target languages, type your text, and translate."),
    ("⬆", "#f3e8ff", "Photo Upload",
     "Upload an image. Choose languages to translate text within the photo."),
    ("📷", "#dcfce7", "Live Camera",
     "Snap a photo directly to translate signs or menus."),
    ("💾", "#ffedd5", "History & Storage",
     "Translations are saved to your history sheet. Click history items to see full details."),
]


class GuideScreen(QWidget):
    """Welcome banner followed by one section per feature."""

    def __init__(self, parent=None):
        super().__init__(parent)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        outer.addWidget(scroll_area)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(20)

        banner = QLabel("<h2>Welcome!</h2><p>Here is how to use your new AI Translator.</p>")
        banner.setWordWrap(True)
        banner.setStyleSheet("background-color: #4f46e5; color: white; padding: 20px; border-radius: 16px;")
        layout.addWidget(banner)

        for icon, color, title, description in GUIDE_SECTIONS:
            layout.addLayout(self._section(icon, color, title, description))

        layout.addStretch()
        scroll_area.setWidget(content)

    @staticmethod
    def _section(icon: str, color: str, title: str, description: str) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(16)

        icon_label = QLabel(icon)
        icon_label.setFixedSize(44, 44)
        icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon_label.setStyleSheet(f"background-color: {color}; border-radius: 22px; font-size: 18px;")
        row.addWidget(icon_label, 0, Qt.AlignmentFlag.AlignTop)

        text = QLabel(f"<b>{title}</b><br><span style='color:#4b5563'>{description}</span>")
        text.setWordWrap(True)
        row.addWidget(text, 1)
        return row
