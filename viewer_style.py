# viewer_style.py
"""Shared look and settings for the RGBA viewer."""

import os

# ==== Colors ====
BG_MAIN = "#f0f2f5"
BG_TOOLBAR = "#2c3e50"
BG_PANEL = "#ffffff"
BG_BUTTON = "#34495e"
FG_BUTTON = "#ffffff"
FG_TEXT = "#2c3e50"
FG_SUBTEXT = "#7f8c8d"

# ==== Fonts ====
FONT_HEADER = ("Segoe UI", 12, "bold")
FONT_TEXT = ("Segoe UI", 10)
FONT_MONO = ("Consolas", 9)
FONT_BUTTON = ("Segoe UI", 10, "bold")

# ==== Windows ====
APP_TITLE = "RGBA Image Viewer"
APP_GEOMETRY = "1000x700"
DISPLAY_TITLE = "Preview - ESC to exit"
HISTOGRAM_TITLE = "Channel Histograms"

# ==== Behaviour ====
DEFAULT_THRESHOLD = 128
ZOOM_STEP = 1.25
HIST_PLOT_WIDTH = 256
HIST_PLOT_HEIGHT = 128
CHANNEL_COLORS = ("red", "green", "blue")

IMAGE_FILETYPES = [
    ("Image files", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.pcx"),
    ("PCX files", "*.pcx"),
    ("All files", "*.*"),
]

LOG_LEVEL = os.environ.get("RGBA_LOG_LEVEL", "INFO").upper()
