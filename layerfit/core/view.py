"""FitView — QGraphicsView that paints the pasteboard and the canvas."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, QSizeF, Qt
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QGraphicsView

from layerfit.config.constants import CANVAS_BORDER_COLOR, CANVAS_COLOR, PASTEBOARD_COLOR
from layerfit.core.scene import FitScene


class FitView(QGraphicsView):
    """QGraphicsView with rubber-band selection and a drawn canvas."""

    def __init__(self, scene: FitScene) -> None:
        super().__init__(scene)
        self._fit_scene = scene
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setDragMode(QGraphicsView.DragMode.RubberBandDrag)
        scene.canvas_size_changed.connect(self._on_canvas_size_changed)

    def drawBackground(self, painter: QPainter | None, rect: QRectF) -> None:  # noqa: N802
        if painter is None:
            return
        canvas = self._fit_scene.canvas_rect
        painter.fillRect(rect, QColor(PASTEBOARD_COLOR))
        painter.fillRect(canvas, QColor(CANVAS_COLOR))
        painter.setPen(QPen(QColor(CANVAS_BORDER_COLOR), 0))
        painter.drawRect(canvas)

    def _on_canvas_size_changed(self, _size: QSizeF) -> None:
        self.resetCachedContent()
        viewport = self.viewport()
        if viewport is not None:
            viewport.update()

    def fit_canvas_in_view(self) -> None:
        """Zoom so the whole canvas is visible."""
        self.fitInView(self._fit_scene.canvas_rect, Qt.AspectRatioMode.KeepAspectRatio)
