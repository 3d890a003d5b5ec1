"""Bounding-box math and the two-pass fit planner.

Pure functions over immutable values; nothing here knows about Qt.  The
host measures rects, feeds them in, and applies the returned vectors and
scale factor itself.

The plan is computed in two passes.  :func:`plan_fit` pre-centers the
reference rect on the frame and picks the scale factor.  The host then
scales the whole item group about the *group's* center, which generally
drifts the reference away from the frame center by
``(pivot - reference_center) * (scale - 1)``.  Instead of solving for that
offset up front, :func:`plan_correction` measures the reference rect after
scaling and returns the exact residual translation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from layerfit.config.constants import DEFAULT_Y_AXIS, FIT_EPSILON
from layerfit.core.errors import DegenerateGeometryError, EmptyInputError


class YAxis(str, Enum):
    """Direction in which Y grows.

    ``UP`` is the print/illustration convention (top >= bottom); ``DOWN`` is
    the screen convention used by ``QGraphicsScene`` (top <= bottom).
    """

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Vector:
    dx: float
    dy: float

    def is_zero(self, tol: float = FIT_EPSILON) -> bool:
        return abs(self.dx) <= tol and abs(self.dy) <= tol


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box stored as (left, top, right, bottom).

    Width, height and center are always derived, never stored, so a rect
    measured after a mutation can't disagree with itself.
    """

    left: float
    top: float
    right: float
    bottom: float
    y_axis: YAxis = YAxis(DEFAULT_Y_AXIS)

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a Y-down rect from Qt-style origin and size."""
        return cls(x, y, x + width, y + height, YAxis.DOWN)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        if self.y_axis == YAxis.UP:
            return self.top - self.bottom
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        if self.y_axis == YAxis.UP:
            return self.top - self.height / 2
        return self.top + self.height / 2

    @property
    def center(self) -> tuple[float, float]:
        return self.center_x, self.center_y

    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class FitPlan:
    """Result of :func:`plan_fit`, completed by :meth:`with_correction`.

    ``pivot`` is always ``"center"``: the host scales about the bounding-box
    center of the grouped items.
    """

    delta_pre: Vector
    scale_percent: float
    pivot: str = "center"
    delta_post: Vector | None = None

    @property
    def scale(self) -> float:
        return self.scale_percent / 100.0

    @property
    def is_identity(self) -> bool:
        return self.delta_pre.is_zero() and abs(self.scale_percent - 100.0) <= FIT_EPSILON

    def with_correction(self, delta_post: Vector) -> FitPlan:
        return replace(self, delta_post=delta_post)


def _check_same_axis(*rects: Rect) -> None:
    axes = {r.y_axis for r in rects}
    if len(axes) > 1:
        raise ValueError("rects use different Y-axis conventions")


def _require_extent(rect: Rect, message: str) -> None:
    if rect.is_degenerate():
        raise DegenerateGeometryError(message)


def aggregate(rects: Iterable[Rect]) -> Rect:
    """Return the smallest rect enclosing every rect in *rects*.

    Raises :class:`EmptyInputError` when *rects* is empty.
    """
    it = iter(rects)
    try:
        first = next(it)
    except StopIteration:
        raise EmptyInputError() from None

    y_up = first.y_axis == YAxis.UP
    left, top, right, bottom = first.left, first.top, first.right, first.bottom
    for r in it:
        _check_same_axis(first, r)
        left = min(left, r.left)
        right = max(right, r.right)
        if y_up:
            top = max(top, r.top)
            bottom = min(bottom, r.bottom)
        else:
            top = min(top, r.top)
            bottom = max(bottom, r.bottom)
    return Rect(left, top, right, bottom, first.y_axis)


def center_delta(rect: Rect, frame: Rect) -> Vector:
    """Translation that moves *rect*'s center onto *frame*'s center."""
    return Vector(frame.center_x - rect.center_x, frame.center_y - rect.center_y)


def plan_fit(reference: Rect, frame: Rect) -> FitPlan:
    """Plan the pre-centering move and the uniform scale factor.

    The scale is the smaller of the two axis ratios so the reference rect
    fits inside the frame on both axes; the other axis keeps a margin.
    """
    _check_same_axis(reference, frame)
    _require_extent(reference, "The size of the selected object is invalid.")
    _require_extent(frame, "The size of the canvas is invalid.")

    scale_x = frame.width / reference.width
    scale_y = frame.height / reference.height
    return FitPlan(
        delta_pre=center_delta(reference, frame),
        scale_percent=min(scale_x, scale_y) * 100.0,
    )


def plan_correction(new_reference: Rect, frame: Rect) -> Vector:
    """Residual translation measured from the reference rect after scaling."""
    _check_same_axis(new_reference, frame)
    _require_extent(new_reference, "The size of the selected object became invalid after scaling.")
    return center_delta(new_reference, frame)
