"""Tests for the language catalog, screen titles and data URI helpers."""

import base64

import pytest

from pocket_translator.core import (
    DEFAULT_SOURCE_LABEL,
    DEFAULT_TARGET_LABEL,
    Screen,
    decode_data_uri,
    is_data_uri,
    language_labels,
    mime_type_of,
    strip_data_uri_prefix,
    title_for,
    to_data_uri,
)


def test_language_catalog_order_and_defaults():
    assert language_labels() == ["English", "한국어", "日本語", "中文", "Español", "Français", "Deutsch"]
    assert DEFAULT_SOURCE_LABEL == "English"
    assert DEFAULT_TARGET_LABEL == "한국어"


@pytest.mark.parametrize(
    "screen, title",
    [
        (Screen.TEXT, "Text Translate"),
        (Screen.UPLOAD, "Photo Upload"),
        (Screen.CAMERA, "Camera"),
        (Screen.HISTORY, "History"),
        (Screen.GUIDE, "User Guide"),
    ],
)
def test_title_for_every_screen(screen, title):
    assert title_for(screen) == title


class TestDataUri:

    @pytest.mark.parametrize(
        "prefix",
        [
            "data:image/png;base64,",
            "data:image/jpeg;base64,",
            "data:image/webp;base64,",
            "data:image/heic;base64,",
            "data:application/octet-stream;name=x.bin;base64,",
        ],
    )
    def test_strip_removes_any_prefix(self, prefix):
        assert strip_data_uri_prefix(prefix + "QUJD") == "QUJD"

    def test_strip_leaves_bare_payload_alone(self):
        assert strip_data_uri_prefix("QUJD") == "QUJD"

    def test_to_data_uri_encodes_bytes(self):
        uri = to_data_uri(b"ABC", "image/png")
        assert uri == "data:image/png;base64,QUJD"
        assert is_data_uri(uri)

    def test_decode_returns_bytes_and_mime(self):
        data, mime = decode_data_uri("data:image/png;base64," + base64.b64encode(b"\x89PNG").decode())
        assert data == b"\x89PNG"
        assert mime == "image/png"

    def test_decode_bare_payload_defaults_to_jpeg(self):
        data, mime = decode_data_uri("QUJD")
        assert data == b"ABC"
        assert mime == "image/jpeg"
        assert mime_type_of("QUJD") == "image/jpeg"

    def test_decode_rejects_invalid_base64(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            decode_data_uri("data:image/png;base64,not base64!")
