"""Main entry point for the pocket translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from pocket_translator.core import Screen
from pocket_translator.coordinators import (
    AppController,
    GuideCoordinator,
    HistoryCoordinator,
    ImageSource,
    ImageTranslatorCoordinator,
    TextTranslatorCoordinator,
)
from pocket_translator.services import CameraSession, GeminiTranslationService, SettingsManager, SheetHistoryStore
from pocket_translator.ui import GuideScreen, HistoryScreen, ImageTranslatorScreen, MainWindow, TextTranslatorScreen


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Read configuration once and set up logging
    config = SettingsManager().load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Pocket Translator")
    app.setOrganizationName("PocketTranslator")

    # 3. Initialize service clients with explicit configuration
    translation_service = GeminiTranslationService(api_key=config.gemini_api_key, model_name=config.gemini_model)
    history_store = SheetHistoryStore(endpoint_url=config.sheet_url)

    # 4. Construct UI
    main_window = MainWindow()
    text_screen = TextTranslatorScreen()
    upload_screen = ImageTranslatorScreen(camera_mode=False)
    camera_screen = ImageTranslatorScreen(camera_mode=True)
    history_screen = HistoryScreen()
    guide_screen = GuideScreen()

    main_window.add_screen(Screen.TEXT, text_screen)
    main_window.add_screen(Screen.UPLOAD, upload_screen)
    main_window.add_screen(Screen.CAMERA, camera_screen)
    main_window.add_screen(Screen.HISTORY, history_screen)
    main_window.add_screen(Screen.GUIDE, guide_screen)

    # 5. Instantiate Coordinators (Dependency Injection)
    coordinators = {
        Screen.TEXT: TextTranslatorCoordinator(
            screen=text_screen,
            translation_service=translation_service,
            history_store=history_store,
        ),
        Screen.UPLOAD: ImageTranslatorCoordinator(
            screen=upload_screen,
            mode=ImageSource.UPLOAD,
            translation_service=translation_service,
            history_store=history_store,
        ),
        Screen.CAMERA: ImageTranslatorCoordinator(
            screen=camera_screen,
            mode=ImageSource.CAMERA,
            translation_service=translation_service,
            history_store=history_store,
            camera_factory=lambda: CameraSession(camera_screen.video_widget),
        ),
        Screen.HISTORY: HistoryCoordinator(screen=history_screen, history_store=history_store),
        Screen.GUIDE: GuideCoordinator(),
    }
    controller = AppController(main_window=main_window, coordinators=coordinators)

    # 6. Show UI and start event loop
    controller.start(Screen.TEXT)
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
