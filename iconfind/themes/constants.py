"""Icon theme constants."""

from __future__ import annotations

DEFAULT_THEME_NAME = "hicolor"
DEFAULT_THEME_COMMENT = "Default icon theme"

INDEX_FILE_NAME = "index.theme"
INDEX_SECTION = "Icon Theme"

DEFAULT_SCALE = 1
DEFAULT_THRESHOLD = 2

# Base directories in priority order.
BASE_DIRECTORIES: tuple[str, ...] = (
    "~/.icons",
    "/usr/share/icons",
    "/usr/local/share/icons",
)

# Tried in this order for every candidate location.
ALLOWED_EXTENSIONS: tuple[str, ...] = (
    "png",
    "svg",
    "xpm",
)
