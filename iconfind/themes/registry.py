"""Icon theme discovery and registry."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from iconfind.themes.constants import INDEX_FILE_NAME
from iconfind.themes.loader import load_theme
from iconfind.themes.models import Theme, ThemeLoadError

_MAX_THEME_DIR_CANDIDATES = 512


class ThemeRegistry:
    """Loads icon themes by name from the base directories and keeps them."""

    def __init__(self, base_dirs: Iterable[str]) -> None:
        self._base_dirs = tuple(base_dirs)
        self._themes: dict[str, Theme] = {}
        self._failed: set[str] = set()
        self._load_errors: list[str] = []

    @property
    def base_dirs(self) -> tuple[str, ...]:
        return self._base_dirs

    def set_base_dirs(self, base_dirs: Iterable[str]) -> None:
        self._base_dirs = tuple(base_dirs)
        self.reload()

    def reload(self) -> None:
        self._themes = {}
        self._failed = set()
        self._load_errors = []

    def get_theme(self, name: str) -> Theme | None:
        """Return the loaded theme ``name`` with its parents, or None if it cannot be loaded.

        A failed name is not retried until ``reload()``.
        """
        cached = self._themes.get(name)
        if cached is not None:
            return cached
        if name in self._failed:
            return None
        try:
            theme = load_theme(name, self._base_dirs, on_warning=self._load_errors.append)
        except ThemeLoadError as exc:
            self._failed.add(name)
            self._load_errors.append(str(exc))
            return None
        self._themes[name] = theme
        return theme

    def list_themes(self) -> list[str]:
        """Names of theme directories with an index.theme, first base directory wins."""
        names: list[str] = []
        seen: set[str] = set()
        for base in self._base_dirs:
            root = Path(base)
            if not root.is_dir():
                continue
            try:
                all_dirs = sorted(path for path in root.iterdir() if path.is_dir())
            except OSError as exc:
                self._load_errors.append(f"Failed to list themes in {root}: {exc}")
                continue
            if len(all_dirs) > _MAX_THEME_DIR_CANDIDATES:
                self._load_errors.append(
                    f"Theme directory limit exceeded in {root}; "
                    f"only first {_MAX_THEME_DIR_CANDIDATES} folders were scanned."
                )
                all_dirs = all_dirs[:_MAX_THEME_DIR_CANDIDATES]
            for path in all_dirs:
                if path.name in seen or not (path / INDEX_FILE_NAME).is_file():
                    continue
                seen.add(path.name)
                names.append(path.name)
        return names

    def load_errors(self) -> list[str]:
        return list(self._load_errors)
