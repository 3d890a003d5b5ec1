"""Tests for FitScene and FitView."""

import pytest
from PyQt6.QtCore import QRectF, QSizeF
from PyQt6.QtWidgets import QApplication
from pytestqt.qtbot import QtBot

from layerfit.config.constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from layerfit.core.scene import FitScene
from layerfit.core.view import FitView
from layerfit.items.ellipse_item import EllipseItem
from layerfit.items.rectangle_item import RectangleItem


def test_scene_default_canvas_size(qapp: QApplication) -> None:
    s = FitScene()
    assert s.canvas_size.width() == DEFAULT_CANVAS_WIDTH
    assert s.canvas_size.height() == DEFAULT_CANVAS_HEIGHT


def test_scene_custom_canvas_size(scene: FitScene) -> None:
    assert scene.canvas_size == QSizeF(500, 500)
    assert scene.canvas_rect == QRectF(0, 0, 500, 500)


def test_scene_has_default_layer(scene: FitScene) -> None:
    assert scene.layer_manager.count == 1
    assert scene.layer_manager.active_layer is not None


def test_scene_resize_canvas(scene: FitScene) -> None:
    scene.set_canvas_size(QSizeF(1000, 400))
    assert scene.canvas_rect == QRectF(0, 0, 1000, 400)
    assert scene.sceneRect().contains(scene.canvas_rect)


def test_add_canvas_item_to_active_layer(scene: FitScene) -> None:
    item = scene.add_canvas_item(RectangleItem())
    layer = scene.layer_manager.active_layer
    assert layer is not None
    assert item.layer_id == layer.layer_id
    assert layer.item_ids == [item.item_id]
    assert item.scene() is scene


def test_add_canvas_item_stacks_within_layer(scene: FitScene) -> None:
    top = scene.layer_manager.add_layer("Top")
    a = scene.add_canvas_item(RectangleItem(), top.layer_id)
    b = scene.add_canvas_item(EllipseItem(), top.layer_id)
    assert a.zValue() == top.z_base
    assert b.zValue() == top.z_base + 1


def test_add_canvas_item_unknown_layer(scene: FitScene) -> None:
    with pytest.raises(ValueError):
        scene.add_canvas_item(RectangleItem(), "missing")


def test_item_lookup(scene: FitScene) -> None:
    a = scene.add_canvas_item(RectangleItem())
    b = scene.add_canvas_item(EllipseItem())
    assert scene.item_by_id(a.item_id) is a
    assert scene.item_by_id("missing") is None
    assert scene.items_by_ids([b.item_id, "missing", a.item_id]) == [b, a]


def test_view_fits_canvas(qtbot: QtBot, scene: FitScene) -> None:
    view = FitView(scene)
    qtbot.addWidget(view)
    view.resize(400, 300)
    view.fit_canvas_in_view()
    assert view.scene() is scene
    assert view.transform().m11() > 0
