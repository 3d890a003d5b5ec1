"""Layer data model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass
class Layer:
    """Lightweight data object that groups scene items and controls their rendering.

    A ``Layer`` is *not* a ``QGraphicsItem``; it is metadata that the
    :class:`~layerfit.core.layer_manager.LayerManager` uses to organise items
    and synchronise z-values with the scene.  A layer may be nested inside
    another one through *parent_id*; an empty *parent_id* marks a top-level
    layer.
    """

    name: str
    layer_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    visible: bool = True
    locked: bool = False
    z_base: int = 0
    item_ids: list[str] = field(default_factory=list)
    parent_id: str = ""

    @property
    def is_top_level(self) -> bool:
        return not self.parent_id
