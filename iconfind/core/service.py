"""Icon lookups against the user's selected theme."""

from __future__ import annotations

import logging
from typing import Sequence

from iconfind.config.lookup_config import LookupConfig
from iconfind.config.settings import AppSettings
from iconfind.core.lookup import find_best_icon, find_icon
from iconfind.themes.constants import DEFAULT_THEME_NAME
from iconfind.themes.models import Theme, default_theme
from iconfind.themes.registry import ThemeRegistry

logger = logging.getLogger(__name__)


class IconLookupService:
    """Resolves icon names using the selected theme and the on-disk hicolor theme."""

    def __init__(self, settings: AppSettings, registry: ThemeRegistry, config: LookupConfig) -> None:
        self._settings = settings
        self._registry = registry
        self._config = config
        self._resolved: tuple[str, Theme] | None = None

    @property
    def config(self) -> LookupConfig:
        return self._config

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    def reload(self) -> None:
        """Forget loaded themes so the next lookup reads them from disk again."""
        self._registry.reload()
        self._resolved = None

    def current_theme(self) -> Theme:
        """The selected theme, else hicolor, else the empty in-memory default.

        Resolved once per selected name; a fallback is logged only then.
        """
        requested = self._settings.theme_name
        if self._resolved is not None and self._resolved[0] == requested:
            return self._resolved[1]
        theme = self._resolve(requested)
        self._resolved = (requested, theme)
        return theme

    def _resolve(self, requested: str) -> Theme:
        seen: set[str] = set()
        for candidate in (requested, DEFAULT_THEME_NAME):
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            theme = self._registry.get_theme(candidate)
            if theme is not None:
                if candidate != requested:
                    logger.warning("icon theme %r unavailable, using %r", requested, candidate)
                return theme
        logger.warning("no icon theme could be loaded; using built-in %r", DEFAULT_THEME_NAME)
        return default_theme()

    def fallback_theme(self) -> Theme:
        """The on-disk hicolor theme when installed, else the empty in-memory one."""
        theme = self._registry.get_theme(DEFAULT_THEME_NAME)
        return theme if theme is not None else default_theme()

    def lookup(self, icon_name: str, size: int, scale: int = 1) -> str | None:
        return find_icon(
            icon_name,
            size,
            scale,
            self.current_theme(),
            config=self._config,
            default_theme=self.fallback_theme(),
        )

    def lookup_best(self, icon_names: Sequence[str], size: int, scale: int = 1) -> str | None:
        return find_best_icon(
            icon_names,
            size,
            scale,
            self.current_theme(),
            config=self._config,
            default_theme=self.fallback_theme(),
        )
