"""Icon theme models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from iconfind.themes.constants import (
    DEFAULT_SCALE,
    DEFAULT_THEME_COMMENT,
    DEFAULT_THEME_NAME,
    DEFAULT_THRESHOLD,
)


class ThemeLoadError(ValueError):
    """Raised when a theme cannot be built from its index.theme."""


class InheritanceCycleError(ThemeLoadError):
    """Raised when a theme inherits from itself, directly or through its parents."""


class DirectoryType(Enum):
    """Size policy of a theme directory, spelled as in index.theme."""

    FIXED = "Fixed"
    SCALABLE = "Scalable"
    THRESHOLD = "Threshold"

    @classmethod
    def from_index(cls, raw: str | None) -> DirectoryType:
        """Parse an index.theme ``Type`` value; absent means Threshold."""
        if raw is None or not raw.strip():
            return cls.THRESHOLD
        cleaned = raw.strip()
        for member in cls:
            if member.value.lower() == cleaned.lower():
                return member
        raise ValueError(f"unknown directory type {raw!r}")


@dataclass(frozen=True, slots=True)
class ThemeDirectory:
    """One directory's icon size policy within a theme."""

    name: str
    size: int
    scale: int | None = None
    type: DirectoryType = DirectoryType.THRESHOLD
    min_size: int | None = None
    max_size: int | None = None
    threshold: int | None = None
    context: str | None = None

    @property
    def effective_scale(self) -> int:
        return self.scale if self.scale is not None else DEFAULT_SCALE

    @property
    def effective_min_size(self) -> int:
        return self.min_size if self.min_size is not None else self.size

    @property
    def effective_max_size(self) -> int:
        return self.max_size if self.max_size is not None else self.size

    @property
    def effective_threshold(self) -> int:
        return self.threshold if self.threshold is not None else DEFAULT_THRESHOLD


@dataclass(frozen=True, slots=True)
class Theme:
    """A named, inheritable set of icon directories."""

    name: str
    comment: str = ""
    inherits: tuple[Theme, ...] = ()
    directories: tuple[ThemeDirectory, ...] = ()
    source_dir: Path | None = None

    @property
    def is_root(self) -> bool:
        return not self.inherits


@dataclass(frozen=True, slots=True)
class ThemeIndex:
    """The parts of an index.theme file needed to build a Theme."""

    comment: str
    inherits: tuple[str, ...]
    directories: tuple[ThemeDirectory, ...]
    warnings: tuple[str, ...] = ()


def default_theme() -> Theme:
    """Build the in-memory ``hicolor`` theme used as the last themed fallback."""
    return Theme(name=DEFAULT_THEME_NAME, comment=DEFAULT_THEME_COMMENT)
