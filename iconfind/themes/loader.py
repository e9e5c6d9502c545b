"""Build Theme trees from index.theme files."""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Mapping

from iconfind.themes.constants import INDEX_FILE_NAME, INDEX_SECTION
from iconfind.themes.models import (
    DirectoryType,
    InheritanceCycleError,
    Theme,
    ThemeDirectory,
    ThemeIndex,
    ThemeLoadError,
)

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]

_MAX_INDEX_BYTES = 1024 * 1024


def parse_index_theme(index_path: Path) -> ThemeIndex:
    """Read the directory table and inheritance list from an index.theme file.

    Directories whose sections are missing or unusable are left out and
    reported in ``warnings``; the file is otherwise taken as written.
    """
    cfg = _read_index(index_path)
    if not cfg.has_section(INDEX_SECTION):
        raise ThemeLoadError(f"{index_path}: no [{INDEX_SECTION}] section")

    main = cfg[INDEX_SECTION]
    warnings: list[str] = []
    directories: list[ThemeDirectory] = []
    seen: set[str] = set()
    for key in ("Directories", "ScaledDirectories"):
        for dir_name in _split_list(main.get(key, "")):
            if dir_name in seen:
                continue
            seen.add(dir_name)
            if not cfg.has_section(dir_name):
                warnings.append(f"{index_path}: directory {dir_name!r} has no section")
                continue
            try:
                directories.append(_parse_directory(dir_name, cfg[dir_name]))
            except ValueError as exc:
                warnings.append(f"{index_path}: directory {dir_name!r} skipped: {exc}")

    return ThemeIndex(
        comment=main.get("Comment", "").strip(),
        inherits=tuple(_split_list(main.get("Inherits", ""))),
        directories=tuple(directories),
        warnings=tuple(warnings),
    )


def find_theme_dir(name: str, base_dirs: Iterable[str]) -> Path | None:
    """Return the first ``{base}/{name}`` directory that has an index.theme."""
    for base in base_dirs:
        candidate = Path(base) / name
        if (candidate / INDEX_FILE_NAME).is_file():
            return candidate
    return None


def load_theme(
    name: str,
    base_dirs: Iterable[str],
    *,
    on_warning: WarningSink | None = None,
) -> Theme:
    """Load theme ``name`` and, recursively, every theme it inherits from.

    A parent that cannot be found or read is left out and reported through
    ``on_warning``. A theme that inherits from itself, directly or not,
    raises InheritanceCycleError.
    """
    report = on_warning if on_warning is not None else _log_warning
    return _load_theme(name, tuple(base_dirs), report, stack=(), loaded={})


def _load_theme(
    name: str,
    base_dirs: tuple[str, ...],
    report: WarningSink,
    *,
    stack: tuple[str, ...],
    loaded: dict[str, Theme],
) -> Theme:
    if name in stack:
        chain = " -> ".join(stack + (name,))
        raise InheritanceCycleError(f"Theme {stack[0]!r} has an inheritance cycle: {chain}")
    if name in loaded:
        return loaded[name]

    theme_dir = find_theme_dir(name, base_dirs)
    if theme_dir is None:
        raise ThemeLoadError(f"Theme {name!r} not found in: {', '.join(base_dirs)}")

    index = parse_index_theme(theme_dir / INDEX_FILE_NAME)
    for message in index.warnings:
        report(message)

    parents: list[Theme] = []
    for parent_name in index.inherits:
        try:
            parents.append(
                _load_theme(parent_name, base_dirs, report, stack=stack + (name,), loaded=loaded)
            )
        except InheritanceCycleError:
            raise
        except ThemeLoadError as exc:
            report(f"Theme {name!r}: parent {parent_name!r} skipped: {exc}")

    theme = Theme(
        name=name,
        comment=index.comment,
        inherits=tuple(parents),
        directories=index.directories,
        source_dir=theme_dir,
    )
    loaded[name] = theme
    return theme


def _parse_directory(dir_name: str, section: Mapping[str, str]) -> ThemeDirectory:
    if "Size" not in section:
        raise ValueError("missing Size")
    return ThemeDirectory(
        name=dir_name,
        size=_parse_int(section, "Size"),
        scale=_optional_int(section, "Scale"),
        type=DirectoryType.from_index(section.get("Type")),
        min_size=_optional_int(section, "MinSize"),
        max_size=_optional_int(section, "MaxSize"),
        threshold=_optional_int(section, "Threshold"),
        context=section.get("Context") or None,
    )


def _parse_int(section: Mapping[str, str], key: str) -> int:
    raw = section[key].strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} is not an integer: {raw!r}") from None


def _optional_int(section: Mapping[str, str], key: str) -> int | None:
    if key not in section or not section[key].strip():
        return None
    return _parse_int(section, key)


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _read_index(index_path: Path) -> configparser.ConfigParser:
    try:
        size = index_path.stat().st_size
    except OSError as exc:
        raise ThemeLoadError(f"Unable to stat {index_path}: {exc}") from exc
    if size > _MAX_INDEX_BYTES:
        raise ThemeLoadError(f"{index_path}: file exceeds max size ({_MAX_INDEX_BYTES} bytes)")

    cfg = configparser.ConfigParser(interpolation=None, strict=False)
    cfg.optionxform = str
    try:
        cfg.read_string(index_path.read_text(encoding="utf-8"), source=os.fspath(index_path))
    except (OSError, UnicodeDecodeError, configparser.Error) as exc:
        raise ThemeLoadError(f"Unable to read {index_path}: {exc}") from exc
    return cfg


def _log_warning(message: str) -> None:
    logger.warning(message)
