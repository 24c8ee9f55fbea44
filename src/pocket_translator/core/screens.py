"""Screen identifiers for the application shell."""

from enum import Enum


class Screen(str, Enum):
    """The five mutually exclusive screens of the application."""

    TEXT = "text"
    UPLOAD = "upload"
    CAMERA = "camera"
    HISTORY = "history"
    GUIDE = "guide"


_TITLES = {
    Screen.TEXT: "Text Translate",
    Screen.UPLOAD: "Photo Upload",
    Screen.CAMERA: "Camera",
    Screen.HISTORY: "History",
    Screen.GUIDE: "User Guide",
}


def title_for(screen: Screen) -> str:
    """Header title shown while the given screen is active."""
    return _TITLES[screen]
