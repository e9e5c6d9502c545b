"""Find icon files by name, size and scale in freedesktop.org icon themes."""

from iconfind.core.lookup import find_best_icon, find_icon
from iconfind.themes.models import DirectoryType, Theme, ThemeDirectory, default_theme

__all__ = [
    "DirectoryType",
    "Theme",
    "ThemeDirectory",
    "default_theme",
    "find_best_icon",
    "find_icon",
]
