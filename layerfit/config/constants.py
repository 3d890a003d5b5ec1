"""Application-wide constants."""

APP_NAME = "LayerFit"
APP_VERSION = "0.1.0"
ORG_NAME = "LayerFit"
ORG_DOMAIN = "layerfit.org"

# Canvas defaults
DEFAULT_CANVAS_WIDTH = 1920
DEFAULT_CANVAS_HEIGHT = 1080

# Pasteboard (gray area around canvas)
PASTEBOARD_MARGIN = 2000

# Layer z-value allocation: each layer gets a range of this size
LAYER_Z_RANGE = 10_000

# Upper bound on layer nesting when walking parents or collecting items
MAX_LAYER_DEPTH = 64

# Y convention of bare geometry; "up" (top >= bottom) or "down" (Qt scene)
DEFAULT_Y_AXIS = "up"

# Tolerance for "already centered" / "no-op scale" checks
FIT_EPSILON = 1e-6

# Default item properties
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_STROKE_COLOR = "#FF0000"
DEFAULT_FILL_COLOR = "#00000000"

# Status bar message timeout in milliseconds
STATUS_MESSAGE_MS = 5_000

# View colors
PASTEBOARD_COLOR = "#505050"
CANVAS_COLOR = "#FFFFFF"
CANVAS_BORDER_COLOR = "#B4B4B4"
