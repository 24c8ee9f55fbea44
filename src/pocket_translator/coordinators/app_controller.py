"""App Controller - Shell navigation between the five screens."""

import logging
from typing import Mapping, Optional

from PySide6.QtCore import QObject, Slot

from pocket_translator.core import Screen, title_for
from pocket_translator.coordinators.screen_coordinator import ScreenCoordinator
from pocket_translator.ui import MainWindow

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Holds the single active screen.

    Navigating deactivates the outgoing screen's coordinator (which resets
    its state and releases its resources), then activates the incoming one,
    mirroring a mount/unmount cycle.
    """

    def __init__(self, main_window: MainWindow, coordinators: Mapping[Screen, ScreenCoordinator]):
        super().__init__()

        if main_window is None:
            raise ValueError("MainWindow must not be None")
        missing = [screen.value for screen in Screen if screen not in coordinators]
        if missing:
            raise ValueError(f"Missing coordinators for screens: {', '.join(missing)}")

        self.main_window = main_window
        self.coordinators = dict(coordinators)
        self.active_screen: Optional[Screen] = None

        self.main_window.screen_requested.connect(self.navigate)
        self.main_window.closing.connect(self.shutdown)

    def start(self, screen: Screen = Screen.TEXT) -> None:
        self.navigate(screen)

    @Slot(object)
    def navigate(self, screen: Screen) -> None:
        screen = Screen(screen)
        if screen == self.active_screen:
            return

        if self.active_screen is not None:
            self.coordinators[self.active_screen].deactivate()

        logger.debug("Navigating %s -> %s", self.active_screen, screen)
        self.active_screen = screen
        self.main_window.show_screen(screen)
        self.main_window.set_title(title_for(screen))
        self.coordinators[screen].activate()

    @Slot()
    def shutdown(self) -> None:
        """Deactivate the active screen so it releases held devices."""
        if self.active_screen is not None:
            self.coordinators[self.active_screen].deactivate()
            self.active_screen = None
