"""Unit tests for ImageTranslatorCoordinator in upload and camera modes."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from pocket_translator.coordinators import CAMERA_ALERT, ImageSource, ImageTranslatorCoordinator
from pocket_translator.core import RecordType, decode_data_uri
from pocket_translator.services import CameraUnavailableError
from pocket_translator.services.translation import IMAGE_ERROR

CAPTURED = "data:image/jpeg;base64,Q0FQVFVSRUQ="


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


class FakeCameraSession:
    """Stands in for CameraSession; counts acquire and release calls."""

    def __init__(self, fail_start=False, capture_result=CAPTURED):
        self.fail_start = fail_start
        self.capture_result = capture_result
        self.error_occurred = MagicMock()
        self.start_calls = 0
        self.stop_calls = 0
        self.capture_calls = 0

    def start(self):
        self.start_calls += 1
        if self.fail_start:
            raise CameraUnavailableError("Camera permission denied")

    def capture(self):
        self.capture_calls += 1
        if isinstance(self.capture_result, Exception):
            raise self.capture_result
        return self.capture_result

    def stop(self):
        self.stop_calls += 1


class CameraFactory:
    """Hands out a fresh FakeCameraSession per acquisition."""

    def __init__(self, **session_kwargs):
        self.session_kwargs = session_kwargs
        self.sessions = []

    def __call__(self):
        session = FakeCameraSession(**self.session_kwargs)
        self.sessions.append(session)
        return session


@pytest.fixture
def screen():
    return MagicMock()


@pytest.fixture
def translation_service():
    service = MagicMock()
    service.translate_image.return_value = "Emergency Exit"
    return service


@pytest.fixture
def history_store():
    return MagicMock()


def make_upload(screen, translation_service, history_store, pool):
    ensure_qt_app()
    return ImageTranslatorCoordinator(
        screen=screen,
        mode=ImageSource.UPLOAD,
        translation_service=translation_service,
        history_store=history_store,
        thread_pool=pool,
    )


def make_camera(screen, translation_service, history_store, pool, factory):
    ensure_qt_app()
    return ImageTranslatorCoordinator(
        screen=screen,
        mode=ImageSource.CAMERA,
        translation_service=translation_service,
        history_store=history_store,
        camera_factory=factory,
        thread_pool=pool,
    )


class TestImageTranslatorCoordinatorInitialization:

    def test_fails_fast_on_none_screen(self, translation_service, history_store, immediate_pool):
        with pytest.raises(ValueError, match="ImageTranslatorScreen must not be None"):
            make_upload(None, translation_service, history_store, immediate_pool)

    def test_camera_mode_requires_factory(self, screen, translation_service, history_store, immediate_pool):
        with pytest.raises(ValueError, match="camera factory"):
            make_camera(screen, translation_service, history_store, immediate_pool, None)

    def test_mode_maps_to_record_type(self):
        assert ImageSource.UPLOAD.record_type is RecordType.IMAGE
        assert ImageSource.CAMERA.record_type is RecordType.CAMERA


class TestUploadMode:

    def test_translate_hidden_without_image(self, screen, translation_service, history_store, immediate_pool):
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)
        coordinator.activate()

        assert not coordinator.can_translate()
        screen.set_translate_visible.assert_called_with(False)
        coordinator.request_translation()
        translation_service.translate_image.assert_not_called()

    def test_file_selection_loads_data_uri(self, screen, translation_service, history_store, immediate_pool, tmp_path):
        image_file = tmp_path / "sign.png"
        image_file.write_bytes(b"\x89PNG-bytes")
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)

        coordinator.on_file_selected(image_file)

        assert coordinator.image.startswith("data:image/png;base64,")
        assert decode_data_uri(coordinator.image) == (b"\x89PNG-bytes", "image/png")
        screen.set_image.assert_called_with(coordinator.image)
        screen.set_translate_visible.assert_called_with(True)

    def test_unreadable_file_alerts(self, screen, translation_service, history_store, immediate_pool, tmp_path):
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)

        coordinator.on_file_selected(tmp_path / "missing.jpg")

        assert coordinator.image is None
        screen.show_alert.assert_called_once()
        assert "missing.jpg" in screen.show_alert.call_args.args[0]

    def test_translation_displays_and_saves_image_record(self, screen, translation_service, history_store,
                                                         immediate_pool, tmp_path):
        image_file = tmp_path / "menu.jpg"
        image_file.write_bytes(b"jpeg-bytes")
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)
        coordinator.on_file_selected(image_file)
        coordinator.on_source_changed("日本語")
        coordinator.on_target_changed("English")

        coordinator.request_translation()

        translation_service.translate_image.assert_called_once_with(coordinator.image, "日本語", "English")
        assert coordinator.output_text == "Emergency Exit"
        screen.set_result.assert_called_with("Emergency Exit", "Translation (日本語 → English)")
        pending = history_store.save_record.call_args.args[0]
        assert pending.type is RecordType.IMAGE
        assert pending.original == coordinator.image
        assert pending.translated == "Emergency Exit"
        assert not coordinator.is_loading

    def test_loading_held_until_save_completes(self, screen, translation_service, history_store,
                                               deferred_pool, tmp_path):
        image_file = tmp_path / "menu.jpg"
        image_file.write_bytes(b"jpeg-bytes")
        coordinator = make_upload(screen, translation_service, history_store, deferred_pool)
        coordinator.on_file_selected(image_file)

        coordinator.request_translation()
        assert coordinator.is_loading
        screen.set_translate_visible.assert_called_with(False)

        deferred_pool.run_next()
        assert coordinator.output_text == "Emergency Exit"
        assert coordinator.is_loading

        deferred_pool.run_next()
        assert not coordinator.is_loading

    def test_worker_error_shows_error_string(self, screen, translation_service, history_store,
                                             immediate_pool, tmp_path):
        image_file = tmp_path / "menu.jpg"
        image_file.write_bytes(b"jpeg-bytes")
        translation_service.translate_image.side_effect = RuntimeError("boom")
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)
        coordinator.on_file_selected(image_file)

        coordinator.request_translation()

        assert coordinator.output_text == IMAGE_ERROR
        assert history_store.save_record.call_args.args[0].translated == IMAGE_ERROR

    def test_clear_resets_image_and_result(self, screen, translation_service, history_store,
                                           immediate_pool, tmp_path):
        image_file = tmp_path / "menu.jpg"
        image_file.write_bytes(b"jpeg-bytes")
        coordinator = make_upload(screen, translation_service, history_store, immediate_pool)
        coordinator.on_file_selected(image_file)
        coordinator.request_translation()

        coordinator.clear_image()

        assert coordinator.image is None
        assert coordinator.output_text == ""
        screen.set_result.assert_called_with("", "Translation (English → 한국어)")


class TestCameraMode:

    def test_activate_acquires_stream(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)

        coordinator.activate()

        assert len(factory.sessions) == 1
        assert factory.sessions[0].start_calls == 1
        assert coordinator.is_camera_active
        assert coordinator.has_active_stream
        screen.set_camera_active.assert_called_with(True)

    def test_capture_releases_stream_exactly_once(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()
        session = factory.sessions[0]

        coordinator.capture_image()

        assert coordinator.image == CAPTURED
        assert not coordinator.is_camera_active
        assert not coordinator.has_active_stream
        assert session.stop_calls == 1

        coordinator.deactivate()
        assert session.stop_calls == 1

    def test_deactivate_releases_live_stream(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()

        coordinator.deactivate()

        assert factory.sessions[0].stop_calls == 1
        assert not coordinator.has_active_stream
        assert not coordinator.is_camera_active
        screen.reset.assert_called_once_with("English", "한국어")

    def test_start_failure_alerts_and_goes_inactive(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory(fail_start=True)
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)

        coordinator.activate()

        screen.show_alert.assert_called_once_with(CAMERA_ALERT)
        assert not coordinator.is_camera_active
        assert not coordinator.has_active_stream
        assert factory.sessions[0].stop_calls == 1
        screen.set_camera_active.assert_called_with(False)

    def test_start_button_retries_after_failure(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory(fail_start=True)
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()

        factory.session_kwargs = {}
        coordinator.start_camera()

        assert coordinator.is_camera_active
        assert factory.sessions[-1].start_calls == 1

    def test_capture_without_frame_keeps_stream(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory(capture_result=CameraUnavailableError("No camera frame available yet"))
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()

        coordinator.capture_image()

        assert coordinator.image is None
        assert coordinator.has_active_stream
        assert factory.sessions[0].stop_calls == 0

    def test_runtime_camera_error_releases_and_alerts(self, screen, translation_service, history_store,
                                                      immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()

        coordinator._handle_camera_error("device lost")

        assert factory.sessions[0].stop_calls == 1
        assert not coordinator.is_camera_active
        screen.show_alert.assert_called_once_with(CAMERA_ALERT)

    def test_clear_restarts_camera(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()
        coordinator.capture_image()

        coordinator.clear_image()

        assert coordinator.image is None
        assert coordinator.is_camera_active
        assert len(factory.sessions) == 2
        assert factory.sessions[1].start_calls == 1

    def test_translation_saves_camera_record(self, screen, translation_service, history_store, immediate_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, immediate_pool, factory)
        coordinator.activate()
        coordinator.capture_image()

        coordinator.request_translation()

        pending = history_store.save_record.call_args.args[0]
        assert pending.type is RecordType.CAMERA
        assert pending.original == CAPTURED
        assert pending.source_lang == "English"
        assert pending.target_lang == "한국어"

    def test_stale_result_not_displayed_after_navigation(self, screen, translation_service, history_store,
                                                         deferred_pool):
        factory = CameraFactory()
        coordinator = make_camera(screen, translation_service, history_store, deferred_pool, factory)
        coordinator.activate()
        coordinator.capture_image()
        coordinator.request_translation()

        coordinator.deactivate()
        deferred_pool.run_all()

        assert coordinator.output_text == ""
        history_store.save_record.assert_called_once()
