"""Probe base directories for icon files, inside one theme or unthemed."""

from __future__ import annotations

import logging
from typing import Iterator

from iconfind.config.lookup_config import LookupConfig
from iconfind.core.size_matcher import directory_matches_size, directory_size_distance
from iconfind.themes.models import Theme, ThemeDirectory

logger = logging.getLogger(__name__)


def _themed_candidates(
    icon_name: str,
    theme: Theme,
    config: LookupConfig,
) -> Iterator[tuple[ThemeDirectory, str]]:
    """Yield (directory, existing path) pairs: directories, then roots, then extensions."""
    for directory in theme.directories:
        for root in config.base_dirs:
            for extension in config.extensions:
                file_path = f"{root}/{theme.name}/{directory.name}/{icon_name}.{extension}"
                if config.path_exists(file_path):
                    yield directory, file_path


def lookup_icon(
    icon_name: str,
    size: int,
    scale: int,
    theme: Theme,
    config: LookupConfig,
) -> str | None:
    """Find ``icon_name`` in ``theme`` alone, without looking at its parents.

    An exact size match anywhere in the theme wins over any inexact one.
    Failing that, the existing file whose directory is closest in size is
    returned; the first one found wins a tie.
    """
    for directory, file_path in _themed_candidates(icon_name, theme, config):
        if directory_matches_size(directory, size, scale):
            logger.debug("exact match %s for %s@%dx%d", file_path, icon_name, size, scale)
            return file_path

    closest_path: str | None = None
    minimal_distance = 0
    for directory, file_path in _themed_candidates(icon_name, theme, config):
        distance = directory_size_distance(directory, size, scale)
        if closest_path is None or distance < minimal_distance:
            closest_path = file_path
            minimal_distance = distance

    if closest_path is not None:
        logger.debug(
            "closest match %s (distance %d) for %s@%dx%d",
            closest_path, minimal_distance, icon_name, size, scale,
        )
    return closest_path


def lookup_fallback_icon(icon_name: str, config: LookupConfig) -> str | None:
    """Find an unthemed icon directly under a base directory; size is ignored."""
    for root in config.base_dirs:
        for extension in config.extensions:
            file_path = f"{root}/{icon_name}.{extension}"
            if config.path_exists(file_path):
                logger.debug("unthemed match %s for %s", file_path, icon_name)
                return file_path
    return None
