"""Fit the layer of the selected item to the canvas.

Scales and centers every item of the top-level layer that owns the
selected item so the selected item fits the canvas, keeping its aspect
ratio.  Every precondition is checked before the scene is touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layerfit.config.constants import FIT_EPSILON
from layerfit.core.errors import (
    ContainerNotEditableError,
    DegenerateGeometryError,
    EmptyInputError,
    NoActiveContextError,
    NoSelectionError,
    UnresolvableContainerError,
)
from layerfit.core.geometry import FitPlan, aggregate, plan_correction, plan_fit
from layerfit.core.transform_applier import item_bounds, rect_from_qrectf, temporary_group
from layerfit.items.base_item import CanvasItem

if TYPE_CHECKING:
    from layerfit.config.settings import AppSettings
    from layerfit.core.layer import Layer
    from layerfit.core.scene import FitScene
    from layerfit.core.selection_manager import SelectionManager

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    plan: FitPlan
    layer_id: str
    item_count: int
    reference_center: tuple[float, float]

    @property
    def summary(self) -> str:
        return f"Fitted {self.item_count} items at {self.plan.scale_percent:.1f}%"


def _reference_item(selection: SelectionManager | None) -> CanvasItem:
    first = selection.first if selection is not None else None
    if first is None:
        raise NoSelectionError()
    if not isinstance(first, CanvasItem):
        raise NoSelectionError("The selected item is invalid.")
    return first


def _editable_layer(scene: FitScene, item: CanvasItem) -> Layer:
    if not item.layer_id:
        raise UnresolvableContainerError()
    layer = scene.layer_manager.top_level_layer(item.layer_id)
    if not layer.visible or layer.locked:
        raise ContainerNotEditableError()
    return layer


def fit_layer_to_canvas(
    scene: FitScene | None,
    selection: SelectionManager | None,
    settings: AppSettings | None = None,
) -> FitResult:
    """Fit the top-level layer owning the first selected item to the canvas.

    Raises a :class:`~layerfit.core.errors.FitError` subclass describing the
    first failed precondition.  On failure the scene is left unchanged.
    """
    if scene is None:
        raise NoActiveContextError()
    reference = _reference_item(selection)
    layer = _editable_layer(scene, reference)

    frame = rect_from_qrectf(scene.canvas_rect)
    plan = plan_fit(item_bounds(reference), frame)

    items = scene.items_by_ids(scene.layer_manager.collect_item_ids(layer.layer_id))
    if not items:
        raise EmptyInputError()
    if all(item.item_id != reference.item_id for item in items):
        raise UnresolvableContainerError("The selected item does not belong to its layer.")
    group_bounds = aggregate(item_bounds(item) for item in items)
    if group_bounds.is_degenerate():
        raise DegenerateGeometryError("The size of the objects in the layer is invalid.")

    log.debug(
        "Fitting layer %r: %d items, delta_pre=%s, scale=%.4f%%",
        layer.name,
        len(items),
        plan.delta_pre,
        plan.scale_percent,
    )

    scale_strokes = settings.scale_strokes() if settings is not None else True
    with temporary_group(scene, items, scale_strokes=scale_strokes) as group:
        group.translate(plan.delta_pre.dx, plan.delta_pre.dy)
        group.scale_about_center(plan.scale_percent)
        delta_post = plan_correction(item_bounds(reference), frame)
        if not delta_post.is_zero(FIT_EPSILON):
            group.translate(delta_post.dx, delta_post.dy)
        plan = plan.with_correction(delta_post)

    center = item_bounds(reference).center
    log.info(
        "Fitted layer %r to canvas at %.2f%% (correction %.4f, %.4f)",
        layer.name,
        plan.scale_percent,
        delta_post.dx,
        delta_post.dy,
    )
    return FitResult(plan=plan, layer_id=layer.layer_id, item_count=len(items), reference_center=center)
