"""SelectionManager — tracks the set of currently selected scene items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QGraphicsItem

if TYPE_CHECKING:
    from layerfit.core.scene import FitScene


class SelectionManager(QObject):
    """Tracks which items are selected, in the order they were selected.

    The first selected item is the reference item of a fit operation.

    Signals
    -------
    selection_changed(list)
        Emitted with the list of currently selected items.
    selection_cleared()
        Emitted when all items are deselected.
    """

    selection_changed = pyqtSignal(list)
    selection_cleared = pyqtSignal()

    def __init__(self, scene: FitScene, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._scene = scene
        self._selected: list[QGraphicsItem] = []
        self._syncing = False
        scene.selectionChanged.connect(self._on_scene_selection_changed)

    @property
    def items(self) -> list[QGraphicsItem]:
        return list(self._selected)

    @property
    def count(self) -> int:
        return len(self._selected)

    @property
    def is_empty(self) -> bool:
        return len(self._selected) == 0

    @property
    def first(self) -> QGraphicsItem | None:
        return self._selected[0] if self._selected else None

    def select(self, item: QGraphicsItem, *, add: bool = False) -> None:
        """Select an item. If *add* is False, deselect everything else first."""
        self._syncing = True
        try:
            if not add:
                self._deselect_all_internal()
            if item not in self._selected:
                self._selected.append(item)
                item.setSelected(True)
        finally:
            self._syncing = False
        self.selection_changed.emit(self._selected)

    def select_items(self, items: list[QGraphicsItem]) -> None:
        """Replace the selection with *items*."""
        self._syncing = True
        try:
            self._deselect_all_internal()
            for item in items:
                self._selected.append(item)
                item.setSelected(True)
        finally:
            self._syncing = False
        self.selection_changed.emit(self._selected)

    def deselect_all(self) -> None:
        """Clear the selection."""
        if self._selected:
            self._syncing = True
            try:
                self._deselect_all_internal()
            finally:
                self._syncing = False
            self.selection_cleared.emit()
            self.selection_changed.emit(self._selected)

    def _deselect_all_internal(self) -> None:
        for item in self._selected:
            item.setSelected(False)
        self._selected.clear()

    def _on_scene_selection_changed(self) -> None:
        """Follow selections made directly in the view (rubber band, clicks)."""
        if self._syncing:
            return
        current = self._scene.selectedItems()
        kept = [item for item in self._selected if item in current]
        added = [item for item in current if item not in kept]
        self._selected = kept + added
        if not self._selected:
            self.selection_cleared.emit()
        self.selection_changed.emit(self._selected)
