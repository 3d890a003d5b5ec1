"""CanvasItem — scene item that belongs to a layer and exposes its geometry.

Fitting measures items by their *geometry*: the path outline without any
stroke.  ``boundingRect`` grows that rect by :meth:`CanvasItem.outline_margin`
so Qt still repaints the whole stroke.
"""

from __future__ import annotations

import uuid
from abc import abstractmethod
from typing import Any

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QPainterPath
from PyQt6.QtWidgets import QGraphicsObject


class CanvasItem(QGraphicsObject):
    """A drawable, layer-owned item with a stable id."""

    def __init__(self, parent: QGraphicsObject | None = None) -> None:
        super().__init__(parent)
        self._item_id: str = uuid.uuid4().hex
        self._layer_id: str = ""
        self.setFlag(QGraphicsObject.GraphicsItemFlag.ItemIsSelectable, True)
        self.setFlag(QGraphicsObject.GraphicsItemFlag.ItemIsMovable, True)

    @property
    def item_id(self) -> str:
        return self._item_id

    @property
    def layer_id(self) -> str:
        return self._layer_id

    @layer_id.setter
    def layer_id(self, value: str) -> None:
        self._layer_id = value

    # --- geometry ---

    @abstractmethod
    def geometry_rect(self) -> QRectF:
        """Local rect of the path itself, stroke excluded."""

    def scene_geometry_rect(self) -> QRectF:
        """:meth:`geometry_rect` mapped through every transform up to the scene."""
        return self.mapRectToScene(self.geometry_rect())

    def outline_margin(self) -> float:
        return 0.0

    def boundingRect(self) -> QRectF:
        m = self.outline_margin()
        return self.geometry_rect().adjusted(-m, -m, m, m)

    def shape(self) -> QPainterPath:
        path = QPainterPath()
        path.addRect(self.geometry_rect())
        return path

    # --- styling hooks used while a fit is applied ---

    def style_state(self) -> dict[str, Any]:
        """Style values a scale may change, for :meth:`restore_style_state`."""
        return {}

    def restore_style_state(self, state: dict[str, Any]) -> None:
        pass

    def counter_scale_outline(self, factor: float) -> None:
        """Keep the rendered outline width while an ancestor scales by *factor*."""

    @abstractmethod
    def paint(self, painter: Any, option: Any, widget: Any = None) -> None: ...
