"""QApplication bootstrap."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from layerfit.demo import populate_demo_scene
from layerfit.main_window import MainWindow


def main() -> None:
    """Launch the application. Pass ``--demo`` to start with sample content."""
    logging.basicConfig(
        level=logging.DEBUG if "--debug" in sys.argv else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    if "--demo" in sys.argv:
        reference = populate_demo_scene(window.scene)
        window.selection_manager.select(reference)
    window.show()
    window.view.fit_canvas_in_view()
    sys.exit(app.exec())
