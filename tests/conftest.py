"""Shared pytest fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402
from pytestqt.qtbot import QtBot  # noqa: E402

from layerfit.config.settings import AppSettings  # noqa: E402
from layerfit.core.scene import FitScene  # noqa: E402
from layerfit.main_window import MainWindow  # noqa: E402


@pytest.fixture()
def settings(tmp_path: Path) -> AppSettings:
    """AppSettings stored in a throwaway ini file."""
    qs = QSettings(str(tmp_path / "layerfit.ini"), QSettings.Format.IniFormat)
    return AppSettings(qs)


@pytest.fixture()
def scene(qapp: QApplication) -> FitScene:
    """A 500x500 canvas with the default layer."""
    return FitScene(width=500, height=500)


@pytest.fixture()
def main_window(qtbot: QtBot, settings: AppSettings) -> MainWindow:
    """Create a MainWindow instance managed by qtbot."""
    window = MainWindow(settings)
    qtbot.addWidget(window)
    return window
