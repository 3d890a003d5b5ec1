"""Tests for temporary grouping and the rigid transforms applied through it."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QRectF
from PyQt6.QtWidgets import QGraphicsItemGroup

from layerfit.core.errors import EmptyInputError, TransformApplicationError
from layerfit.core.geometry import Rect, YAxis
from layerfit.core.scene import FitScene
from layerfit.core.transform_applier import item_bounds, rect_from_qrectf, temporary_group
from layerfit.items.rectangle_item import RectangleItem


def _make_rect(
    scene: FitScene, x: float, y: float, w: float = 50, h: float = 50, stroke: float = 0.0
) -> RectangleItem:
    """Add a rectangle whose scene bounds are (x, y, w, h) grown by half the stroke."""
    item = RectangleItem(rect=QRectF(0, 0, w, h))
    item.stroke_width = stroke
    item.setPos(x, y)
    scene.add_canvas_item(item)
    return item


def _groups(scene: FitScene) -> list[QGraphicsItemGroup]:
    return [i for i in scene.items() if isinstance(i, QGraphicsItemGroup)]


def test_rect_from_qrectf_is_y_down() -> None:
    r = rect_from_qrectf(QRectF(10, 20, 30, 40))
    assert r == Rect(10, 20, 40, 60, YAxis.DOWN)
    assert r.center == (25, 40)


def test_item_bounds_exclude_stroke(scene: FitScene) -> None:
    item = _make_rect(scene, 10, 10, 100, 50, stroke=4.0)
    assert item_bounds(item) == Rect(10, 10, 110, 60, YAxis.DOWN)
    assert rect_from_qrectf(item.sceneBoundingRect()) == Rect(8, 8, 112, 62, YAxis.DOWN)


def test_item_bounds_of_plain_qt_item(scene: FitScene) -> None:
    item = scene.addRect(QRectF(0, 0, 20, 10))
    assert item is not None
    assert item_bounds(item) == rect_from_qrectf(item.sceneBoundingRect())


def test_group_exists_only_inside_block(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0)
    b = _make_rect(scene, 100, 0)
    with temporary_group(scene, [a, b]) as group:
        assert len(_groups(scene)) == 1
        assert group.items == [a, b]
        assert group.bounds() == Rect(0, 0, 150, 50, YAxis.DOWN)
    assert _groups(scene) == []
    assert a.parentItem() is None
    assert b.parentItem() is None
    assert a.scene() is scene


def test_ungroup_keeps_positions_and_z(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0)
    b = _make_rect(scene, 100, 40)
    before = [item_bounds(a), item_bounds(b)]
    z_before = [a.zValue(), b.zValue()]
    with temporary_group(scene, [a, b]):
        pass
    assert [item_bounds(a), item_bounds(b)] == before
    assert [a.zValue(), b.zValue()] == z_before


def test_translate_moves_every_item(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0)
    b = _make_rect(scene, 100, 40)
    with temporary_group(scene, [a, b]) as group:
        group.translate(10, -20)
    assert item_bounds(a) == Rect(10, -20, 60, 30, YAxis.DOWN)
    assert item_bounds(b) == Rect(110, 20, 160, 70, YAxis.DOWN)


def test_scale_about_group_center(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, 100, 50)
    with temporary_group(scene, [a]) as group:
        group.scale_about_center(200)
    r = item_bounds(a)
    assert r.left == pytest.approx(-50)
    assert r.top == pytest.approx(-25)
    assert r.right == pytest.approx(150)
    assert r.bottom == pytest.approx(75)


def test_scale_pivot_is_group_center_not_item_center(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, 10, 10)
    b = _make_rect(scene, 90, 90, 10, 10)
    with temporary_group(scene, [a, b]) as group:
        group.scale_about_center(50)
    # group center (50, 50): a's center (5, 5) moves halfway toward it
    assert item_bounds(a).center == pytest.approx((27.5, 27.5))
    assert item_bounds(b).center == pytest.approx((72.5, 72.5))


def test_scale_rejects_non_positive_factor(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0)
    with pytest.raises(TransformApplicationError), temporary_group(scene, [a]) as group:
        group.scale_about_center(0)
    assert _groups(scene) == []


def test_strokes_scale_with_geometry(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, 100, 100, stroke=2.0)
    with temporary_group(scene, [a]) as group:
        group.scale_about_center(300)
    assert a.stroke_width == 2.0
    assert item_bounds(a).width == pytest.approx(300)
    assert a.sceneBoundingRect().width() == pytest.approx(306)


def test_strokes_kept_when_stroke_scaling_disabled(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, 100, 100, stroke=2.0)
    with temporary_group(scene, [a], scale_strokes=False) as group:
        group.scale_about_center(200)
    assert a.stroke_width == pytest.approx(1.0)
    assert item_bounds(a).width == pytest.approx(200)
    # 1.0 local stroke under a 2x transform renders 2.0 wide
    assert a.sceneBoundingRect().width() == pytest.approx(202)


def test_failure_restores_items_and_removes_group(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, stroke=2.0)
    b = _make_rect(scene, 100, 40)
    before = [item_bounds(a), item_bounds(b)]
    with pytest.raises(TransformApplicationError) as excinfo:
        with temporary_group(scene, [a, b], scale_strokes=False) as group:
            group.translate(30, 30)
            group.scale_about_center(400)
            raise RuntimeError("host failed")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "host failed" in excinfo.value.message
    assert _groups(scene) == []
    assert [item_bounds(a), item_bounds(b)] == before
    assert a.stroke_width == 2.0
    assert a.transform().isIdentity()


def test_fit_errors_pass_through_after_rollback(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0)
    before = item_bounds(a)
    with pytest.raises(EmptyInputError):
        with temporary_group(scene, [a]) as group:
            group.translate(5, 5)
            raise EmptyInputError()
    assert item_bounds(a) == before
    assert _groups(scene) == []


def test_pivot_ignores_strokes(scene: FitScene) -> None:
    thin = _make_rect(scene, 0, 0, 10, 10)
    thick = _make_rect(scene, 90, 90, 10, 10, stroke=20.0)
    with temporary_group(scene, [thin, thick]) as group:
        assert group.bounds() == Rect(0, 0, 100, 100, YAxis.DOWN)
        group.scale_about_center(200)
    assert item_bounds(thin).center == pytest.approx((-40, -40))
    assert item_bounds(thick).center == pytest.approx((140, 140))


def test_scale_after_translate_keeps_pivot(scene: FitScene) -> None:
    a = _make_rect(scene, 0, 0, 20, 20)
    with temporary_group(scene, [a]) as group:
        group.translate(100, 50)
        group.scale_about_center(300)
    assert item_bounds(a) == Rect(80, 30, 140, 90, YAxis.DOWN)
