"""Camera Session - Acquire, capture from, and release a live camera stream."""

import logging
from typing import Optional

from PySide6.QtCore import QBuffer, QCameraPermission, QCoreApplication, QIODevice, QObject, Qt, Signal
from PySide6.QtGui import QImage
from PySide6.QtMultimedia import QCamera, QCameraDevice, QMediaCaptureSession, QMediaDevices
from PySide6.QtMultimediaWidgets import QVideoWidget

from pocket_translator.core import to_data_uri

logger = logging.getLogger(__name__)


class CameraUnavailableError(RuntimeError):
    """The camera could not be acquired or has no frame to capture."""


def image_to_data_uri(image: QImage, image_format: str = "JPEG") -> str:
    """Serialise a QImage into a data URI.

    Raises:
        ValueError: If Qt cannot encode the image.
    """
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    if not image.save(buffer, image_format):
        raise ValueError(f"Could not encode image as {image_format}")
    mime_type = f"image/{image_format.lower()}"
    return to_data_uri(buffer.data().data(), mime_type)


class CameraSession(QObject):
    """
    One acquisition of a camera stream, rendered into a video widget.

    ``start()`` and ``stop()`` form an acquire/release pair; ``stop()`` is
    idempotent so the owner can call it unconditionally on teardown.

    Signals:
        error_occurred: Emitted with a message when the running camera fails.
    """

    error_occurred = Signal(str)

    def __init__(self, video_widget: QVideoWidget, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.video_widget = video_widget
        self._camera: Optional[QCamera] = None
        self._capture_session: Optional[QMediaCaptureSession] = None

    @property
    def is_active(self) -> bool:
        return self._camera is not None

    def start(self) -> None:
        """Acquire the rear-facing camera (or the first one available).

        Raises:
            CameraUnavailableError: If permission is denied, no camera exists,
                or the device fails to start.
        """
        if self.is_active:
            return

        app = QCoreApplication.instance()
        if app is not None and app.checkPermission(QCameraPermission()) == Qt.PermissionStatus.Denied:
            raise CameraUnavailableError("Camera permission denied")

        device = self._select_device()
        camera = QCamera(device)
        capture_session = QMediaCaptureSession()
        capture_session.setCamera(camera)
        capture_session.setVideoOutput(self.video_widget)
        camera.errorOccurred.connect(self._on_camera_error)
        camera.start()

        if camera.error() != QCamera.Error.NoError:
            message = camera.errorString() or "Camera failed to start"
            camera.stop()
            raise CameraUnavailableError(message)

        self._camera = camera
        self._capture_session = capture_session
        logger.info("Camera started: %s", device.description())

    def capture(self) -> str:
        """Grab the current frame at native resolution as a JPEG data URI.

        Raises:
            CameraUnavailableError: If the camera is not running or has not
                produced a frame yet.
        """
        if not self.is_active:
            raise CameraUnavailableError("Camera is not active")

        frame = self.video_widget.videoSink().videoFrame()
        if not frame.isValid():
            raise CameraUnavailableError("No camera frame available yet")

        image = frame.toImage()
        if image.isNull():
            raise CameraUnavailableError("Camera frame could not be converted")
        return image_to_data_uri(image)

    def stop(self) -> None:
        """Release the camera. Safe to call more than once."""
        if self._camera is None:
            return
        self._camera.stop()
        self._camera = None
        self._capture_session = None
        logger.info("Camera stopped")

    @staticmethod
    def _select_device() -> QCameraDevice:
        devices = QMediaDevices.videoInputs()
        if not devices:
            raise CameraUnavailableError("No camera device found")
        for device in devices:
            if device.position() == QCameraDevice.Position.BackFace:
                return device
        return QMediaDevices.defaultVideoInput()

    def _on_camera_error(self, error, message: str) -> None:
        logger.error("Camera error %s: %s", error, message)
        self.error_occurred.emit(message or "Camera error")
