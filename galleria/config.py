"""Application configuration constants."""

from __future__ import annotations

# Window
WINDOW_TITLE = "Galleria"
WINDOW_MIN_W = 320
WINDOW_MIN_H = 240
TARGET_FPS = 60

# Zoom (1.0 = fit to viewport)
ZOOM_MIN = 0.1
ZOOM_MAX = 5.0
ZOOM_DEFAULT = 1.0
ZOOM_STEP_IN = 1.1
ZOOM_STEP_OUT = 0.9
ZOOM_SLIDER_STEP = 0.1

# Letterbox/pillarbox fill (RGBA, always opaque)
BACKGROUND_RGBA = (0, 0, 0, 255)

# Image limits
MAX_FILE_SIZE_MB = 200

# Bottom toolbar
TOOLBAR_HEIGHT = 48
TOOLBAR_PADDING = 8
TOOLBAR_BTN_W = 72
TOOLBAR_BTN_H = 32
TOOLBAR_BTN_SPACING = 8
TOOLBAR_SLIDER_W = 180
TOOLBAR_RESET_W = 32
TOOLBAR_FONT_SIZE = 18
TOOLBAR_BG = (32, 32, 32, 255)
TOOLBAR_BTN_BG = (60, 60, 60, 255)
TOOLBAR_BTN_HOVER_BG = (90, 90, 90, 255)
TOOLBAR_TEXT = (230, 230, 230, 255)
TOOLBAR_ACCENT = (80, 140, 220, 255)

# Messages
MSG_NO_IMAGE = "Click 'Open' to select an image"
MSG_DECODE_FAILED = "Failed to load image"

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_ZOOM_IN = 61            # KEY_EQUAL ('=' and '+' share the key)
KEY_ZOOM_IN_KP = 334        # KEY_KP_ADD
KEY_ZOOM_OUT = 45           # KEY_MINUS
KEY_ZOOM_OUT_KP = 333       # KEY_KP_SUBTRACT
KEY_RESET_ZOOM = 48         # KEY_ZERO
KEY_OPEN = 79               # KEY_O
KEY_CLOSE = 256             # KEY_ESCAPE

# Supported image extensions
IMG_EXTS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"})
