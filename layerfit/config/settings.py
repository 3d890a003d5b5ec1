"""Persistent application settings backed by QSettings."""

from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from layerfit.config.constants import APP_NAME, MAX_LAYER_DEPTH, ORG_NAME


class AppSettings:
    """Thin wrapper around QSettings for typed access to application preferences."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings(ORG_NAME, APP_NAME)

    # --- window geometry ---

    def save_window_geometry(self, geometry: bytes) -> None:
        self._qs.setValue("window/geometry", geometry)

    def window_geometry(self) -> bytes | None:
        val = self._qs.value("window/geometry")
        if isinstance(val, QByteArray):
            return val.data()
        if isinstance(val, bytes):
            return val
        return None

    # --- fit behaviour ---

    def scale_strokes(self) -> bool:
        val = self._qs.value("fit/scaleStrokes", True)
        if isinstance(val, str):
            return val.lower() == "true"
        return bool(val)

    def set_scale_strokes(self, enabled: bool) -> None:
        self._qs.setValue("fit/scaleStrokes", enabled)

    def max_layer_depth(self) -> int:
        val = self._qs.value("fit/maxLayerDepth", MAX_LAYER_DEPTH)
        return int(val)

    def set_max_layer_depth(self, depth: int) -> None:
        self._qs.setValue("fit/maxLayerDepth", depth)
