"""FitScene — the backbone QGraphicsScene that owns the LayerManager."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, QSizeF, pyqtSignal
from PyQt6.QtWidgets import QGraphicsScene

from layerfit.config.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    MAX_LAYER_DEPTH,
    PASTEBOARD_MARGIN,
)
from layerfit.core.layer_manager import LayerManager
from layerfit.items.base_item import CanvasItem


class FitScene(QGraphicsScene):
    """Extended QGraphicsScene with layer management and a logical canvas.

    The canvas rect is the frame that layers are fitted into.

    Signals
    -------
    canvas_size_changed(QSizeF)
        Emitted when the logical canvas size changes.
    """

    canvas_size_changed = pyqtSignal(QSizeF)

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        parent: object | None = None,
        max_layer_depth: int = MAX_LAYER_DEPTH,
    ) -> None:
        super().__init__(parent)  # type: ignore[arg-type]
        self._canvas_size = QSizeF(width, height)
        self._update_scene_rect()

        self._layer_manager = LayerManager(self, max_depth=max_layer_depth)

        # Create default layer
        self._layer_manager.add_layer("Layer 1")

    # --- accessors ---

    @property
    def layer_manager(self) -> LayerManager:
        return self._layer_manager

    @property
    def canvas_size(self) -> QSizeF:
        return QSizeF(self._canvas_size)

    @property
    def canvas_rect(self) -> QRectF:
        """Logical canvas bounds (0, 0, w, h) — use instead of sceneRect()."""
        return QRectF(0, 0, self._canvas_size.width(), self._canvas_size.height())

    def set_canvas_size(self, size: QSizeF) -> None:
        """Resize the logical canvas."""
        self._canvas_size = QSizeF(size)
        self._update_scene_rect()
        self.canvas_size_changed.emit(self._canvas_size)

    # --- items ---

    def add_canvas_item(self, item: CanvasItem, layer_id: str | None = None) -> CanvasItem:
        """Add *item* to the scene on top of *layer_id* (default: active layer)."""
        lm = self._layer_manager
        layer = lm.layer_by_id(layer_id) if layer_id else lm.active_layer
        if layer is None:
            raise ValueError(f"unknown layer {layer_id!r}")
        self.addItem(item)
        item.layer_id = layer.layer_id
        layer.item_ids.append(item.item_id)
        item.setZValue(layer.z_base + len(layer.item_ids) - 1)
        return item

    def item_by_id(self, item_id: str) -> CanvasItem | None:
        for scene_item in self.items():
            if isinstance(scene_item, CanvasItem) and scene_item.item_id == item_id:
                return scene_item
        return None

    def items_by_ids(self, item_ids: list[str]) -> list[CanvasItem]:
        """Resolve *item_ids* to scene items, preserving order and skipping unknown ids."""
        by_id = {
            scene_item.item_id: scene_item
            for scene_item in self.items()
            if isinstance(scene_item, CanvasItem)
        }
        return [by_id[iid] for iid in item_ids if iid in by_id]

    def _update_scene_rect(self) -> None:
        """Expand sceneRect beyond the canvas to provide a pasteboard margin."""
        m = PASTEBOARD_MARGIN
        w = self._canvas_size.width()
        h = self._canvas_size.height()
        self.setSceneRect(QRectF(-m, -m, w + 2 * m, h + 2 * m))
