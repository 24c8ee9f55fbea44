"""Helpers for images carried around as base64 data URIs."""

import base64
import binascii
import re
from typing import Tuple

DEFAULT_IMAGE_MIME = "image/jpeg"

_PREFIX_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w=.+-]+)*;base64,", re.IGNORECASE)


def to_data_uri(data: bytes, mime_type: str = DEFAULT_IMAGE_MIME) -> str:
    """Encode raw bytes as a base64 data URI."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def is_data_uri(value: str) -> bool:
    return bool(value) and _PREFIX_PATTERN.match(value) is not None


def strip_data_uri_prefix(value: str) -> str:
    """Return the base64 payload of a data URI.

    Values without a prefix are returned unchanged.
    """
    return _PREFIX_PATTERN.sub("", value, count=1)


def mime_type_of(value: str, default: str = DEFAULT_IMAGE_MIME) -> str:
    """MIME type declared in a data URI prefix, or ``default``."""
    match = _PREFIX_PATTERN.match(value or "")
    if match and match.group("mime"):
        return match.group("mime").lower()
    return default


def decode_data_uri(value: str) -> Tuple[bytes, str]:
    """Decode a data URI (or a bare base64 payload) into bytes and MIME type.

    Raises:
        ValueError: If the payload is not valid base64.
    """
    mime_type = mime_type_of(value)
    payload = strip_data_uri_prefix(value)
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image payload: {e}") from e
    return data, mime_type
