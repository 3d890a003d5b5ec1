"""Apply a fit plan to scene items through a temporary QGraphicsItemGroup."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Sequence

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QTransform
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsItemGroup

from layerfit.core.errors import FitError, TransformApplicationError
from layerfit.core.geometry import Rect, aggregate
from layerfit.items.base_item import CanvasItem

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QGraphicsScene

log = logging.getLogger(__name__)


def rect_from_qrectf(rect: QRectF) -> Rect:
    """Convert a Qt rect (always Y-down) into a geometry :class:`Rect`."""
    return Rect.from_xywh(rect.x(), rect.y(), rect.width(), rect.height())


def item_bounds(item: QGraphicsItem) -> Rect:
    """Scene-space geometric bounds of *item*, stroke excluded.

    Items that are not :class:`CanvasItem` fall back to Qt's bounding rect.
    """
    if isinstance(item, CanvasItem):
        return rect_from_qrectf(item.scene_geometry_rect())
    return rect_from_qrectf(item.sceneBoundingRect())


@dataclass
class _ItemState:
    item: QGraphicsItem
    pos: QPointF
    transform: QTransform
    style: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def capture(cls, item: QGraphicsItem) -> _ItemState:
        style = item.style_state() if isinstance(item, CanvasItem) else {}
        return cls(item, QPointF(item.pos()), QTransform(item.transform()), style)

    def restore(self) -> None:
        self.item.setTransform(self.transform)
        self.item.setPos(self.pos)
        if isinstance(self.item, CanvasItem):
            self.item.restore_style_state(self.style)


class GroupHandle:
    """Rigid transforms on a temporary group of items.

    Only valid inside :func:`temporary_group`.
    """

    def __init__(
        self,
        group: QGraphicsItemGroup,
        states: Sequence[_ItemState],
        scale_strokes: bool = True,
    ) -> None:
        self._group = group
        self._states = list(states)
        self._scale_strokes = scale_strokes

    @property
    def items(self) -> list[QGraphicsItem]:
        return [s.item for s in self._states]

    def bounds(self) -> Rect:
        """Geometric bounds of all grouped items in scene space."""
        return aggregate(item_bounds(item) for item in self.items)

    def translate(self, dx: float, dy: float) -> None:
        self._group.moveBy(dx, dy)

    def scale_about_center(self, factor_percent: float) -> None:
        """Scale uniformly about the center of the group's geometric bounds."""
        if factor_percent <= 0:
            raise ValueError(f"scale factor must be positive, got {factor_percent}")
        s = factor_percent / 100.0
        cx, cy = self.bounds().center
        c = self._group.mapFromScene(QPointF(cx, cy))
        t = QTransform().translate(c.x(), c.y()).scale(s, s).translate(-c.x(), -c.y())
        self._group.setTransform(t, True)
        if not self._scale_strokes:
            for item in self.items:
                if isinstance(item, CanvasItem):
                    item.counter_scale_outline(s)


@contextmanager
def temporary_group(
    scene: QGraphicsScene,
    items: Sequence[QGraphicsItem],
    *,
    scale_strokes: bool = True,
) -> Iterator[GroupHandle]:
    """Group *items* for the duration of the ``with`` block, then ungroup.

    Ungrouping keeps every item's scene position, z-value and layer. If the
    block raises, items are first put back exactly where they were; a
    :class:`FitError` propagates unchanged, anything else is wrapped in
    :class:`TransformApplicationError`.
    """
    states = [_ItemState.capture(item) for item in items]
    try:
        group = scene.createItemGroup(list(items))
    except Exception as exc:
        raise TransformApplicationError(f"Could not group the layer items: {exc}") from exc

    handle = GroupHandle(group, states, scale_strokes=scale_strokes)
    ungrouped = False
    try:
        yield handle
    except Exception as exc:
        scene.destroyItemGroup(group)
        ungrouped = True
        for state in states:
            state.restore()
        log.warning("Rolled back transform of %d items: %s", len(states), exc)
        if isinstance(exc, FitError):
            raise
        raise TransformApplicationError(f"An error occurred: {exc}") from exc
    finally:
        if not ungrouped:
            scene.destroyItemGroup(group)
