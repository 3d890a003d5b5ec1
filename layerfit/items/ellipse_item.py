"""EllipseItem — ellipse inscribed in its geometry rect."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QBrush, QPainter, QPainterPath

from layerfit.items.vector_item import VectorItem


class EllipseItem(VectorItem):
    def __init__(self, rect: QRectF | None = None, parent: VectorItem | None = None) -> None:
        super().__init__(parent)
        self._rect = QRectF(rect) if rect is not None else QRectF(0, 0, 100, 100)

    def geometry_rect(self) -> QRectF:
        return QRectF(self._rect)

    def shape(self) -> QPainterPath:
        path = QPainterPath()
        path.addEllipse(self._rect)
        return path

    def paint(self, painter: QPainter | None, option: Any, widget: Any = None) -> None:
        if painter is None:
            return
        painter.setPen(self.pen())
        painter.setBrush(QBrush(self.fill_color))
        painter.drawEllipse(self._rect)
