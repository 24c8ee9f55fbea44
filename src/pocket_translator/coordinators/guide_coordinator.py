"""Guide Coordinator - The guide screen is static and keeps no state."""

from pocket_translator.coordinators.screen_coordinator import ScreenCoordinator


class GuideCoordinator(ScreenCoordinator):
    """No-op lifecycle for the static guide screen."""
