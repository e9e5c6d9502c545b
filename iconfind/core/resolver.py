"""Walk a theme's inheritance tree looking for an icon."""

from __future__ import annotations

import logging
from typing import Sequence

from iconfind.config.lookup_config import LookupConfig
from iconfind.core.prober import lookup_icon
from iconfind.themes.models import Theme

logger = logging.getLogger(__name__)


class _Walk:
    """Tracks themes already searched during one lookup.

    Inheritance is expected to be a tree; a theme met again is skipped,
    whether it closes a cycle or is a parent shared by two branches.
    """

    def __init__(self) -> None:
        self._visited: set[str] = set()
        self._path: list[str] = []

    def enter(self, theme: Theme) -> bool:
        if theme.name in self._path:
            logger.warning(
                "inheritance cycle: %s -> %s", " -> ".join(self._path), theme.name
            )
            return False
        if theme.name in self._visited:
            logger.debug("theme %s already searched, skipping", theme.name)
            return False
        self._visited.add(theme.name)
        self._path.append(theme.name)
        return True

    def leave(self) -> None:
        self._path.pop()


def resolve_icon(
    icon_name: str,
    size: int,
    scale: int,
    theme: Theme,
    config: LookupConfig,
) -> str | None:
    """Search ``theme``, then its parents depth first, for one icon name.

    The first theme that holds the icon at any size ends the search, even
    if a parent has a closer size.
    """
    return _resolve_icon(icon_name, size, scale, theme, config, _Walk())


def _resolve_icon(
    icon_name: str,
    size: int,
    scale: int,
    theme: Theme,
    config: LookupConfig,
    walk: _Walk,
) -> str | None:
    if not walk.enter(theme):
        return None
    try:
        file_path = lookup_icon(icon_name, size, scale, theme, config)
        if file_path is not None:
            return file_path
        for parent in theme.inherits:
            file_path = _resolve_icon(icon_name, size, scale, parent, config, walk)
            if file_path is not None:
                return file_path
        return None
    finally:
        walk.leave()


def resolve_best_icon(
    icon_names: Sequence[str],
    size: int,
    scale: int,
    theme: Theme,
    config: LookupConfig,
) -> str | None:
    """Search for the first of several names, trying every name in a theme
    before moving on to its parents."""
    return _resolve_best_icon(icon_names, size, scale, theme, config, _Walk())


def _resolve_best_icon(
    icon_names: Sequence[str],
    size: int,
    scale: int,
    theme: Theme,
    config: LookupConfig,
    walk: _Walk,
) -> str | None:
    if not walk.enter(theme):
        return None
    try:
        for icon_name in icon_names:
            file_path = lookup_icon(icon_name, size, scale, theme, config)
            if file_path is not None:
                return file_path
        for parent in theme.inherits:
            file_path = _resolve_best_icon(icon_names, size, scale, parent, config, walk)
            if file_path is not None:
                return file_path
        return None
    finally:
        walk.leave()
