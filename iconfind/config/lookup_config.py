"""Process-wide lookup configuration: base directories, extensions, existence check."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable

import yaml

from iconfind.errors import ErrorCode, IconFindError
from iconfind.themes.constants import ALLOWED_EXTENSIONS, BASE_DIRECTORIES

PathExists = Callable[[str], bool]

_CONFIG_KEYS = {"base_dirs", "extensions"}


def _default_base_dirs() -> tuple[str, ...]:
    return tuple(os.path.expanduser(path) for path in BASE_DIRECTORIES)


@dataclass(frozen=True, slots=True)
class LookupConfig:
    """Where and how icons are searched for."""

    base_dirs: tuple[str, ...] = field(default_factory=_default_base_dirs)
    extensions: tuple[str, ...] = ALLOWED_EXTENSIONS
    path_exists: PathExists = field(default=os.path.isfile, compare=False)

    def with_path_exists(self, path_exists: PathExists) -> LookupConfig:
        return replace(self, path_exists=path_exists)

    @classmethod
    def from_yaml(cls, path: str | Path) -> LookupConfig:
        """Load base directories and extensions from a YAML file.

        Keys that are absent keep their defaults.
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise IconFindError(ErrorCode.CONFIG_MISSING, path=config_path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise IconFindError(
                ErrorCode.CONFIG_INVALID,
                path=config_path,
                details={"original": str(exc)},
            ) from exc

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise IconFindError(
                ErrorCode.CONFIG_INVALID,
                message=f"Expected a mapping in {config_path}",
                path=config_path,
            )
        unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
        if unknown:
            raise IconFindError(
                ErrorCode.CONFIG_INVALID,
                message=f"Unsupported keys in {config_path}: {', '.join(unknown)}",
                path=config_path,
            )

        kwargs: dict[str, tuple[str, ...]] = {}
        if "base_dirs" in data:
            kwargs["base_dirs"] = tuple(
                os.path.expanduser(item)
                for item in _string_list(data["base_dirs"], "base_dirs", config_path)
            )
        if "extensions" in data:
            kwargs["extensions"] = tuple(
                item.lstrip(".")
                for item in _string_list(data["extensions"], "extensions", config_path)
            )
        return cls(**kwargs)

    def to_yaml(self, path: str | Path) -> Path:
        """Write base directories and extensions to a YAML file and return its path."""
        config_path = Path(path)
        data = {
            "base_dirs": list(self.base_dirs),
            "extensions": list(self.extensions),
        }
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(yaml.dump(data, default_flow_style=False),
                                   encoding="utf-8")
        except PermissionError as exc:
            raise IconFindError(
                ErrorCode.CONFIG_PERMISSION_DENIED,
                path=config_path,
                details={"original": str(exc)},
            ) from exc
        return config_path


def _string_list(value: object, key: str, config_path: Path) -> list[str]:
    if not isinstance(value, list) or not value:
        raise IconFindError(
            ErrorCode.CONFIG_INVALID,
            message=f"{config_path}: {key!r} must be a non-empty list",
            path=config_path,
        )
    cleaned: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise IconFindError(
                ErrorCode.CONFIG_INVALID,
                message=f"{config_path}: {key!r} entries must be non-empty strings",
                path=config_path,
            )
        cleaned.append(item.strip())
    return cleaned


_current: LookupConfig | None = None


def configure(config: LookupConfig) -> None:
    """Install the process-wide lookup configuration."""
    global _current
    _current = config


def current_config() -> LookupConfig:
    """Return the process-wide configuration, creating the default on first use."""
    global _current
    if _current is None:
        _current = LookupConfig()
    return _current


def reset_config() -> None:
    global _current
    _current = None
