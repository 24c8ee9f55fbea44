"""Image Translator Coordinator - Photo upload and camera capture workflow."""

import logging
import mimetypes
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from PySide6.QtCore import QThreadPool, Slot

from pocket_translator.core import (
    DEFAULT_SOURCE_LABEL,
    DEFAULT_TARGET_LABEL,
    PendingRecord,
    RecordType,
    to_data_uri,
)
from pocket_translator.coordinators.screen_coordinator import ScreenCoordinator
from pocket_translator.services import CameraSession, CameraUnavailableError, HistoryStore, TranslationService
from pocket_translator.services.api_workers import ImageTranslationWorker, SaveRecordWorker
from pocket_translator.services.translation import IMAGE_ERROR
from pocket_translator.ui import ImageTranslatorScreen

logger = logging.getLogger(__name__)

CAMERA_ALERT = "Cannot access camera. Please allow permissions."


class ImageSource(str, Enum):
    """How the screen acquires its image."""

    UPLOAD = "upload"
    CAMERA = "camera"

    @property
    def record_type(self) -> RecordType:
        return RecordType.IMAGE if self is ImageSource.UPLOAD else RecordType.CAMERA


class ImageTranslatorCoordinator(ScreenCoordinator):
    """
    Manages one image screen, either in upload or in camera mode.

    The camera stream is an acquire/release pair owned by this coordinator:
    it is released after a capture, on camera failure, and unconditionally
    on ``deactivate()``.
    """

    def __init__(
        self,
        screen: ImageTranslatorScreen,
        mode: ImageSource,
        translation_service: TranslationService,
        history_store: HistoryStore,
        camera_factory: Optional[Callable[[], CameraSession]] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__(thread_pool)

        if screen is None:
            raise ValueError("ImageTranslatorScreen must not be None")
        if translation_service is None:
            raise ValueError("TranslationService must not be None")
        if history_store is None:
            raise ValueError("HistoryStore must not be None")
        if mode is ImageSource.CAMERA and camera_factory is None:
            raise ValueError("Camera mode requires a camera factory")

        self.screen = screen
        self.mode = ImageSource(mode)
        self.translation_service = translation_service
        self.history_store = history_store
        self.camera_factory = camera_factory

        self.image: Optional[str] = None
        self.output_text = ""
        self.source_lang = DEFAULT_SOURCE_LABEL
        self.target_lang = DEFAULT_TARGET_LABEL
        self.is_loading = False
        self.is_camera_active = False

        self._camera: Optional[CameraSession] = None
        # request id -> (image, source, target) of translations in flight
        self._pending_requests: Dict[int, Tuple[str, str, str]] = {}

        self.screen.file_selected.connect(self.on_file_selected)
        self.screen.start_camera_clicked.connect(self.start_camera)
        self.screen.capture_clicked.connect(self.capture_image)
        self.screen.clear_clicked.connect(self.clear_image)
        self.screen.translate_clicked.connect(self.request_translation)
        self.screen.source_changed.connect(self.on_source_changed)
        self.screen.target_changed.connect(self.on_target_changed)

    def activate(self) -> None:
        if self.mode is ImageSource.CAMERA:
            self.start_camera()
        else:
            self._refresh()

    def deactivate(self) -> None:
        super().deactivate()
        self._release_camera()
        self.image = None
        self.output_text = ""
        self.source_lang = DEFAULT_SOURCE_LABEL
        self.target_lang = DEFAULT_TARGET_LABEL
        self.is_loading = False
        self.is_camera_active = False
        self.screen.reset(self.source_lang, self.target_lang)
        self._refresh()

    def can_translate(self) -> bool:
        return self.image is not None and not self.is_loading

    @property
    def has_active_stream(self) -> bool:
        return self._camera is not None

    @Slot(str)
    def on_source_changed(self, label: str) -> None:
        self.source_lang = label
        self._refresh()

    @Slot(str)
    def on_target_changed(self, label: str) -> None:
        self.target_lang = label
        self._refresh()

    @Slot(Path)
    def on_file_selected(self, file_path: Path) -> None:
        """Load a picked image file as a data URI."""
        mime_type = mimetypes.guess_type(str(file_path))[0] or "image/jpeg"
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            logger.error("Could not read image file %s: %s", file_path, e)
            self.screen.show_alert(f"Could not read image file:\n{file_path}")
            return

        self.image = to_data_uri(data, mime_type)
        self.output_text = ""
        self._refresh()

    @Slot()
    def start_camera(self) -> None:
        """Acquire the camera stream; alert and go inactive on failure."""
        self._release_camera()
        self.is_camera_active = True
        self.image = None
        self.output_text = ""
        self._refresh()

        session = self.camera_factory()
        try:
            session.start()
        except CameraUnavailableError as e:
            logger.warning("Camera unavailable: %s", e)
            session.stop()
            self.is_camera_active = False
            self._refresh()
            self.screen.show_alert(CAMERA_ALERT)
            return

        session.error_occurred.connect(self._handle_camera_error)
        self._camera = session

    @Slot()
    def capture_image(self) -> None:
        """Freeze the current frame as the image and release the stream."""
        if self._camera is None:
            return

        try:
            data_uri = self._camera.capture()
        except (CameraUnavailableError, ValueError) as e:
            logger.warning("Capture failed: %s", e)
            return

        self._release_camera()
        self.image = data_uri
        self.is_camera_active = False
        self._refresh()

    @Slot()
    def clear_image(self) -> None:
        self.image = None
        self.output_text = ""
        if self.mode is ImageSource.CAMERA:
            self.start_camera()
        else:
            self._refresh()

    @Slot()
    def request_translation(self) -> None:
        if not self.can_translate():
            return

        self.is_loading = True
        self._refresh()

        request_id = self._next_request_id()
        self._active_request_id = request_id
        self._pending_requests[request_id] = (self.image, self.source_lang, self.target_lang)

        worker = ImageTranslationWorker(
            request_id=request_id,
            translation_service=self.translation_service,
            image_data=self.image,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
        )
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        self._start_worker(worker)

    @Slot(int, str)
    def _handle_translation_result(self, request_id: int, result: str) -> None:
        image, source_lang, target_lang = self._pending_requests.pop(request_id)

        if self._is_current(request_id):
            self.output_text = result
            self._refresh()
        else:
            logger.debug("Stale image translation result for request %d; saving without display", request_id)

        pending = PendingRecord(
            type=self.mode.record_type,
            original=image,
            translated=result,
            source_lang=source_lang,
            target_lang=target_lang,
        )
        worker = SaveRecordWorker(request_id=request_id, history_store=self.history_store, pending=pending)
        worker.signals.finished.connect(self._handle_save_finished)
        self._start_worker(worker)

    @Slot(int, str)
    def _handle_translation_error(self, request_id: int, error: str) -> None:
        logger.error("Image translation worker failed: %s", error)
        self._handle_translation_result(request_id, IMAGE_ERROR)

    @Slot(int)
    def _handle_save_finished(self, request_id: int) -> None:
        if not self._is_current(request_id):
            return
        self.is_loading = False
        self._refresh()

    @Slot(str)
    def _handle_camera_error(self, message: str) -> None:
        self._release_camera()
        self.is_camera_active = False
        self._refresh()
        self.screen.show_alert(CAMERA_ALERT)

    def _release_camera(self) -> None:
        if self._camera is None:
            return
        camera, self._camera = self._camera, None
        camera.stop()

    def _refresh(self) -> None:
        self.screen.set_camera_active(self.mode is ImageSource.CAMERA and self.is_camera_active)
        self.screen.set_image(self.image)
        self.screen.set_loading(self.is_loading)
        self.screen.set_translate_visible(self.can_translate())
        self.screen.set_result(self.output_text, f"Translation ({self.source_lang} → {self.target_lang})")
