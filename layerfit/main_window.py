"""MainWindow — primary application window."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMenuBar, QMessageBox

from layerfit.config.constants import APP_NAME, APP_VERSION, STATUS_MESSAGE_MS
from layerfit.config.settings import AppSettings
from layerfit.config.shortcuts import SHORTCUTS
from layerfit.core.errors import FitError
from layerfit.core.fit_layer import FitResult, fit_layer_to_canvas
from layerfit.core.scene import FitScene
from layerfit.core.selection_manager import SelectionManager
from layerfit.core.view import FitView

log = logging.getLogger(__name__)

FIT_DIALOG_TITLE = "Fit Layer to Canvas"


class MainWindow(QMainWindow):
    """Primary application window.

    Owns the FitScene, FitView and SelectionManager, and exposes the
    fit-layer-to-canvas operation through the Object menu.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.resize(1200, 800)

        # Core subsystems
        self._scene = FitScene(parent=self, max_layer_depth=self._settings.max_layer_depth())
        self._view = FitView(self._scene)
        self._selection_manager = SelectionManager(self._scene, parent=self)
        self.setCentralWidget(self._view)
        self.statusBar()

        self._fit_layer_action: QAction | None = None
        self._setup_menus()

        self._selection_manager.selection_changed.connect(self._update_menu_states)
        self._connect_layer_signals()
        self._update_menu_states()

        # Restore window geometry
        geo = self._settings.window_geometry()
        if geo is not None:
            self.restoreGeometry(geo)

    # ---- menus ----

    def _setup_menus(self) -> None:
        """Create menu bar actions."""
        menu_bar = self.menuBar()
        if menu_bar is None:
            return

        self._setup_file_menu(menu_bar)
        self._setup_edit_menu(menu_bar)
        self._setup_object_menu(menu_bar)

    def _setup_file_menu(self, menu_bar: QMenuBar) -> None:
        file_menu = menu_bar.addMenu("&File")
        if file_menu is None:
            return
        quit_action = file_menu.addAction("&Quit")
        if quit_action is not None:
            quit_action.setShortcut(QKeySequence(SHORTCUTS["file.quit"]))
            quit_action.triggered.connect(self.close)

    def _setup_edit_menu(self, menu_bar: QMenuBar) -> None:
        edit_menu = menu_bar.addMenu("&Edit")
        if edit_menu is None:
            return
        select_all_action = edit_menu.addAction("Select &All")
        if select_all_action is not None:
            select_all_action.setShortcut(QKeySequence(SHORTCUTS["edit.select_all"]))
            select_all_action.triggered.connect(self._edit_select_all)
        deselect_action = edit_menu.addAction("D&eselect")
        if deselect_action is not None:
            deselect_action.setShortcut(QKeySequence(SHORTCUTS["edit.deselect"]))
            deselect_action.triggered.connect(self._selection_manager.deselect_all)

    def _setup_object_menu(self, menu_bar: QMenuBar) -> None:
        object_menu = menu_bar.addMenu("&Object")
        if object_menu is None:
            return
        self._fit_layer_action = QAction("Fit &Layer to Canvas", self)
        self._fit_layer_action.setShortcut(QKeySequence(SHORTCUTS["object.fit_layer_to_canvas"]))
        self._fit_layer_action.triggered.connect(self.fit_selected_layer)
        object_menu.addAction(self._fit_layer_action)

    def _update_menu_states(self) -> None:
        if self._fit_layer_action is not None:
            self._fit_layer_action.setEnabled(not self._selection_manager.is_empty)

    # ---- signals ----

    def _connect_layer_signals(self) -> None:
        lm = self._scene.layer_manager
        lm.layer_lock_changed.connect(self._on_layer_lock_changed)
        lm.layer_visibility_changed.connect(self._on_layer_visibility_changed)

    def _on_layer_lock_changed(self, layer_id: str, locked: bool) -> None:
        self._show_layer_state(layer_id, "locked" if locked else "unlocked")

    def _on_layer_visibility_changed(self, layer_id: str, visible: bool) -> None:
        self._show_layer_state(layer_id, "shown" if visible else "hidden")

    def _show_layer_state(self, layer_id: str, state: str) -> None:
        layer = self._scene.layer_manager.layer_by_id(layer_id)
        status = self.statusBar()
        if layer is None or status is None:
            return
        status.showMessage(f"Layer '{layer.name}' {state}", STATUS_MESSAGE_MS)

    # ---- operations ----

    def _edit_select_all(self) -> None:
        self._selection_manager.select_items(self._scene.items_by_ids(self._all_item_ids()))

    def _all_item_ids(self) -> list[str]:
        return [iid for layer in self._scene.layer_manager.layers for iid in layer.item_ids]

    def fit_selected_layer(self) -> FitResult | None:
        """Fit the layer of the first selected item, reporting any failure."""
        try:
            result = fit_layer_to_canvas(self._scene, self._selection_manager, self._settings)
        except FitError as e:
            log.info("Fit layer to canvas refused: %s", e.message)
            QMessageBox.warning(self, FIT_DIALOG_TITLE, e.message)
            return None
        status = self.statusBar()
        if status is not None:
            status.showMessage(result.summary, STATUS_MESSAGE_MS)
        return result

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        """Save window geometry on close."""
        self._settings.save_window_geometry(self.saveGeometry().data())
        super().closeEvent(event)

    # ---- properties ----

    @property
    def scene(self) -> FitScene:
        return self._scene

    @property
    def view(self) -> FitView:
        return self._view

    @property
    def selection_manager(self) -> SelectionManager:
        return self._selection_manager
