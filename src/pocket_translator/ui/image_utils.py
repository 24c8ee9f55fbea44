"""Helpers for turning data URI images into Qt pixmaps."""

import logging

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QPixmap

from pocket_translator.core import decode_data_uri

logger = logging.getLogger(__name__)


def pixmap_from_data_uri(data_uri: str) -> QPixmap:
    """Decode a data URI into a pixmap; returns a null pixmap if it cannot."""
    pixmap = QPixmap()
    try:
        data, _mime_type = decode_data_uri(data_uri)
    except ValueError as e:
        logger.warning("Cannot decode image: %s", e)
        return pixmap
    pixmap.loadFromData(data)
    return pixmap


def scaled_to_fit(pixmap: QPixmap, size: QSize) -> QPixmap:
    if pixmap.isNull():
        return pixmap
    return pixmap.scaled(size, Qt.AspectRatioMode.KeepAspectRatio, Qt.TransformationMode.SmoothTransformation)


def scaled_to_cover(pixmap: QPixmap, size: QSize) -> QPixmap:
    """Scale to fill ``size`` completely, cropping the overflow."""
    if pixmap.isNull():
        return pixmap
    scaled = pixmap.scaled(
        size,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    x = (scaled.width() - size.width()) // 2
    y = (scaled.height() - size.height()) // 2
    return scaled.copy(x, y, size.width(), size.height())
