"""Icon theme model and loading exports."""

from iconfind.themes.constants import DEFAULT_THEME_NAME
from iconfind.themes.loader import load_theme, parse_index_theme
from iconfind.themes.models import (
    DirectoryType,
    InheritanceCycleError,
    Theme,
    ThemeDirectory,
    ThemeLoadError,
    default_theme,
)
from iconfind.themes.registry import ThemeRegistry

__all__ = [
    "DEFAULT_THEME_NAME",
    "DirectoryType",
    "InheritanceCycleError",
    "Theme",
    "ThemeDirectory",
    "ThemeLoadError",
    "ThemeRegistry",
    "default_theme",
    "load_theme",
    "parse_index_theme",
]
