"""Qt helpers for painting mosaic items.

Requires PySide6 (``pip install mosaic-layout[qt]``).
"""

from __future__ import annotations

from PySide6.QtCore import QRectF
from PySide6.QtGui import QPainterPath

from .layout import Rect
from .positions import Corner


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def corner_path(rect: Rect, corners: Corner, radius: float) -> QPainterPath:
    """Build a clip path for *rect* rounding only *corners*.

    Qt's ``addRoundedRect`` rounds all four corners; items inside a mosaic
    only round the corners that sit on the outside of the block.
    """
    radius = max(0.0, min(radius, rect.width / 2, rect.height / 2))
    left, top, right, bottom = rect.x, rect.y, rect.max_x, rect.max_y
    diameter = radius * 2

    def r(corner: Corner) -> float:
        return radius if corner in corners and radius > 0 else 0.0

    path = QPainterPath()
    path.moveTo(left + r(Corner.TOP_LEFT), top)

    path.lineTo(right - r(Corner.TOP_RIGHT), top)
    if r(Corner.TOP_RIGHT):
        path.arcTo(QRectF(right - diameter, top, diameter, diameter), 90, -90)

    path.lineTo(right, bottom - r(Corner.BOTTOM_RIGHT))
    if r(Corner.BOTTOM_RIGHT):
        path.arcTo(QRectF(right - diameter, bottom - diameter, diameter, diameter), 0, -90)

    path.lineTo(left + r(Corner.BOTTOM_LEFT), bottom)
    if r(Corner.BOTTOM_LEFT):
        path.arcTo(QRectF(left, bottom - diameter, diameter, diameter), 270, -90)

    path.lineTo(left, top + r(Corner.TOP_LEFT))
    if r(Corner.TOP_LEFT):
        path.arcTo(QRectF(left, top, diameter, diameter), 180, -90)

    path.closeSubpath()
    return path
