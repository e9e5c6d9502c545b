"""Public icon lookup entry points."""

from __future__ import annotations

from typing import Sequence

from iconfind.config.lookup_config import LookupConfig, PathExists, current_config
from iconfind.core.prober import lookup_fallback_icon
from iconfind.core.resolver import resolve_best_icon, resolve_icon
from iconfind.themes.models import Theme, default_theme as build_default_theme


def _effective_config(config: LookupConfig | None, path_exists: PathExists | None) -> LookupConfig:
    effective = config if config is not None else current_config()
    if path_exists is not None:
        effective = effective.with_path_exists(path_exists)
    return effective


def find_icon(
    icon_name: str,
    size: int,
    scale: int,
    theme: Theme,
    *,
    config: LookupConfig | None = None,
    path_exists: PathExists | None = None,
    default_theme: Theme | None = None,
) -> str | None:
    """Return the file for ``icon_name`` at ``size``/``scale``, or None.

    ``theme`` and its parents are searched first, then the default theme.
    Unless ``default_theme`` is given, that is an empty in-memory
    ``hicolor`` theme; pass the loaded on-disk hicolor to search it.
    """
    effective = _effective_config(config, path_exists)
    file_path = resolve_icon(icon_name, size, scale, theme, effective)
    if file_path is not None:
        return file_path
    fallback = default_theme if default_theme is not None else build_default_theme()
    return resolve_icon(icon_name, size, scale, fallback, effective)


def find_best_icon(
    icon_names: Sequence[str],
    size: int,
    scale: int,
    theme: Theme,
    *,
    config: LookupConfig | None = None,
    path_exists: PathExists | None = None,
    default_theme: Theme | None = None,
) -> str | None:
    """Return the file for the first available name in ``icon_names``, or None.

    Every name is tried in a theme before its parents are. After the
    default theme, unthemed icons in the base directories are tried per
    name.
    """
    effective = _effective_config(config, path_exists)
    file_path = resolve_best_icon(icon_names, size, scale, theme, effective)
    if file_path is not None:
        return file_path
    fallback = default_theme if default_theme is not None else build_default_theme()
    file_path = resolve_best_icon(icon_names, size, scale, fallback, effective)
    if file_path is not None:
        return file_path
    for icon_name in icon_names:
        file_path = lookup_fallback_icon(icon_name, effective)
        if file_path is not None:
            return file_path
    return None
