"""Keyboard shortcut definitions.

Each entry maps a logical action name to a key sequence string
compatible with ``QKeySequence``.
"""

SHORTCUTS: dict[str, str] = {
    # File
    "file.quit": "Ctrl+Q",
    # Edit
    "edit.select_all": "Ctrl+A",
    "edit.deselect": "Escape",
    # Object
    "object.fit_layer_to_canvas": "Ctrl+Alt+F",
}
