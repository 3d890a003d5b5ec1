"""LayerManager — owns the layer tree and emits change signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from layerfit.config.constants import LAYER_Z_RANGE, MAX_LAYER_DEPTH
from layerfit.core.errors import UnresolvableContainerError
from layerfit.core.layer import Layer


class LayerManager(QObject):
    """Manages a tree of :class:`Layer` objects stored as a flat list.

    The list is kept in pre-order, bottom-to-top: a sub-layer always follows
    its parent and every earlier sibling's subtree.  Index 0 is the lowest
    layer.

    Signals
    -------
    layer_visibility_changed(str, bool)
    layer_lock_changed(str, bool)
    """

    layer_visibility_changed = pyqtSignal(str, bool)
    layer_lock_changed = pyqtSignal(str, bool)

    def __init__(self, parent: QObject | None = None, max_depth: int = MAX_LAYER_DEPTH) -> None:
        super().__init__(parent)
        self._layers: list[Layer] = []
        self._active_id: str = ""
        self._max_depth = max_depth

    # --- queries ---

    @property
    def layers(self) -> list[Layer]:
        """Return the layer list (pre-order, bottom-to-top)."""
        return list(self._layers)

    @property
    def count(self) -> int:
        return len(self._layers)

    @property
    def active_layer(self) -> Layer | None:
        return self.layer_by_id(self._active_id)

    @property
    def active_layer_id(self) -> str:
        return self._active_id

    def layer_by_id(self, layer_id: str) -> Layer | None:
        for layer in self._layers:
            if layer.layer_id == layer_id:
                return layer
        return None

    def index_of(self, layer_id: str) -> int:
        for i, layer in enumerate(self._layers):
            if layer.layer_id == layer_id:
                return i
        return -1

    def children_of(self, layer_id: str) -> list[Layer]:
        """Direct sub-layers of *layer_id*, bottom-to-top."""
        return [layer for layer in self._layers if layer.parent_id == layer_id]

    def top_level_layer(self, layer_id: str) -> Layer:
        """Walk parent links from *layer_id* up to the owning top-level layer.

        Raises :class:`UnresolvableContainerError` for an unknown id, a
        dangling parent link, or a chain deeper than the configured limit.
        """
        layer = self.layer_by_id(layer_id)
        depth = 0
        while layer is not None:
            if layer.is_top_level:
                return layer
            depth += 1
            if depth > self._max_depth:
                break
            layer = self.layer_by_id(layer.parent_id)
        raise UnresolvableContainerError()

    def collect_item_ids(self, layer_id: str) -> list[str]:
        """Item ids owned by *layer_id* and all of its sub-layers.

        Pre-order: the layer's own items in stacking order first, then each
        sub-layer's items, recursively.
        """
        out: list[str] = []
        self._collect(layer_id, out, 0)
        return out

    def _collect(self, layer_id: str, out: list[str], depth: int) -> None:
        if depth > self._max_depth:
            raise UnresolvableContainerError("The layer is nested too deeply.")
        layer = self.layer_by_id(layer_id)
        if layer is None:
            return
        out.extend(layer.item_ids)
        for child in self.children_of(layer_id):
            self._collect(child.layer_id, out, depth + 1)

    # --- mutations ---

    def add_layer(self, name: str | None = None, parent_id: str = "") -> Layer:
        """Create a new layer on top of its siblings. Returns the new layer.

        With *parent_id* the layer becomes a sub-layer of that layer.
        """
        if name is None:
            name = f"Layer {self.count + 1}"
        if parent_id and self.layer_by_id(parent_id) is None:
            raise ValueError(f"unknown parent layer {parent_id!r}")
        layer = Layer(name=name, parent_id=parent_id)
        self._layers.insert(self._subtree_end(parent_id), layer)
        self._recalc_z_bases()
        if not self._active_id:
            self._active_id = layer.layer_id
        return layer

    def set_active(self, layer_id: str) -> None:
        """Make the layer with *layer_id* the active layer."""
        if self.layer_by_id(layer_id) is None:
            return
        self._active_id = layer_id

    def set_visibility(self, layer_id: str, visible: bool) -> None:
        layer = self.layer_by_id(layer_id)
        if layer is not None:
            layer.visible = visible
            self.layer_visibility_changed.emit(layer_id, visible)

    def set_locked(self, layer_id: str, locked: bool) -> None:
        layer = self.layer_by_id(layer_id)
        if layer is not None:
            layer.locked = locked
            self.layer_lock_changed.emit(layer_id, locked)

    # --- internal ---

    def _subtree_end(self, layer_id: str) -> int:
        """Index just past the last descendant of *layer_id* ("" = whole stack)."""
        if not layer_id:
            return len(self._layers)
        idx = self.index_of(layer_id)
        end = idx + 1
        owners = {layer_id}
        while end < len(self._layers) and self._layers[end].parent_id in owners:
            owners.add(self._layers[end].layer_id)
            end += 1
        return end

    def _recalc_z_bases(self) -> None:
        """Recalculate z_base for each layer based on stack position."""
        for i, layer in enumerate(self._layers):
            layer.z_base = i * LAYER_Z_RANGE
