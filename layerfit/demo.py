"""Sample content for trying the fit operation by hand."""

from __future__ import annotations

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor

from layerfit.core.scene import FitScene
from layerfit.items.ellipse_item import EllipseItem
from layerfit.items.rectangle_item import RectangleItem


def populate_demo_scene(scene: FitScene) -> RectangleItem:
    """Add an artwork layer with a nested detail sub-layer.

    Returns the frame rectangle, which is a natural reference item.
    """
    lm = scene.layer_manager
    art = lm.add_layer("Artwork")
    details = lm.add_layer("Details", parent_id=art.layer_id)

    frame = RectangleItem(rect=QRectF(0, 0, 160, 240))
    frame.setPos(80, 60)
    scene.add_canvas_item(frame, art.layer_id)

    badge = EllipseItem(rect=QRectF(0, 0, 60, 60))
    badge.setPos(40, 30)
    badge.fill_color = QColor("#3366CC")
    scene.add_canvas_item(badge, art.layer_id)

    note = RectangleItem(rect=QRectF(0, 0, 90, 30), corner_radius=6.0)
    note.setPos(200, 280)
    note.stroke_color = QColor("#228822")
    scene.add_canvas_item(note, details.layer_id)
    return frame
