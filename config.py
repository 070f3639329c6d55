"""
PocketCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 540
DISPLAY_FONT = ("Consolas", 32, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 14)
LABEL_FONT = ("Segoe UI", 10)

# Significant digits kept when a computed number is shown
DISPLAY_PRECISION = 12

# Sentinel display strings
ERROR_TEXT = "Error"
DIVIDE_BY_ZERO_TEXT = "Cannot divide by zero"
ERROR_SENTINELS = (ERROR_TEXT, DIVIDE_BY_ZERO_TEXT)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # high-contrast dark text (LCD dark on light)
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",   # teal-green accent
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "mode_fg":      "#2C5F8A",   # memory keys
    "mode_bg":      "#C8D4DF",
    "accent":       "#2E8B57",
    "text":         "#2B3A4A",
    "subtext":      "#6E8090",
    "danger":       "#B03A2E",
    "listbox_bg":   "#C8D4DF",
    "listbox_fg":   "#1A2332",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # soft green glow – LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "mode_fg":      "#5E8FC8",
    "mode_bg":      "#283040",
    "accent":       "#4DB888",
    "text":         "#BDD0E0",
    "subtext":      "#4E6070",
    "danger":       "#E55A4E",
    "listbox_bg":   "#161C26",
    "listbox_fg":   "#9ADDB0",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Database Settings
DB_PATH = os.environ.get(
    "POCKETCALC_DB",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "pocketcalc.db"),
)

# History Settings
MAX_HISTORY_ITEMS = 100

# Web Portal settings
START_WEB_PORTAL = False
WEB_HOST = '0.0.0.0'
WEB_PORT = int(os.environ.get("POCKETCALC_PORT", 8888))
