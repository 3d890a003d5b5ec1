"""RectangleItem — axis-aligned rectangle, optionally with rounded corners."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QBrush, QPainter, QPainterPath

from layerfit.items.vector_item import VectorItem


class RectangleItem(VectorItem):
    def __init__(
        self,
        rect: QRectF | None = None,
        corner_radius: float = 0.0,
        parent: VectorItem | None = None,
    ) -> None:
        super().__init__(parent)
        self._rect = QRectF(rect) if rect is not None else QRectF(0, 0, 100, 60)
        self._corner_radius = max(0.0, corner_radius)

    @property
    def corner_radius(self) -> float:
        return self._corner_radius

    def geometry_rect(self) -> QRectF:
        return QRectF(self._rect)

    def _path(self) -> QPainterPath:
        path = QPainterPath()
        r = self._corner_radius
        if r > 0:
            path.addRoundedRect(self._rect, r, r)
        else:
            path.addRect(self._rect)
        return path

    def shape(self) -> QPainterPath:
        return self._path()

    def paint(self, painter: QPainter | None, option: Any, widget: Any = None) -> None:
        if painter is None:
            return
        painter.setPen(self.pen())
        painter.setBrush(QBrush(self.fill_color))
        painter.drawPath(self._path())
