"""VectorItem — items drawn as a path with a stroke and a fill."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPen

from layerfit.config.constants import (
    DEFAULT_FILL_COLOR,
    DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_WIDTH,
)
from layerfit.items.base_item import CanvasItem


class VectorItem(CanvasItem):
    """Stroked and filled path item.

    The stroke is centred on the path, so half of it lies outside
    :meth:`geometry_rect`.
    """

    def __init__(self, parent: CanvasItem | None = None) -> None:
        super().__init__(parent)
        self.stroke_color: QColor = QColor(DEFAULT_STROKE_COLOR)
        self.fill_color: QColor = QColor(DEFAULT_FILL_COLOR)
        self._stroke_width: float = DEFAULT_STROKE_WIDTH

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, width: float) -> None:
        self.prepareGeometryChange()
        self._stroke_width = max(0.0, width)
        self.update()

    def outline_margin(self) -> float:
        return self._stroke_width / 2

    def style_state(self) -> dict[str, Any]:
        return {"stroke_width": self._stroke_width}

    def restore_style_state(self, state: dict[str, Any]) -> None:
        if "stroke_width" in state:
            self.stroke_width = state["stroke_width"]

    def counter_scale_outline(self, factor: float) -> None:
        if factor <= 0:
            raise ValueError(f"scale factor must be positive, got {factor}")
        self.stroke_width = self._stroke_width / factor

    def pen(self) -> QPen:
        p = QPen(self.stroke_color, self._stroke_width)
        p.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return p
