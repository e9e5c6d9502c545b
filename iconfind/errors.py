"""Error codes and error handling utilities for IconFind."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for IconFind operations."""

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()
    CONFIG_PERMISSION_DENIED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIG_INVALID: "Lookup configuration is invalid. Using defaults.",
    ErrorCode.CONFIG_MISSING: "Lookup configuration file not found. Using defaults.",
    ErrorCode.CONFIG_PERMISSION_DENIED: "Cannot save lookup configuration. Check folder permissions.",
}


@dataclass
class IconFindError(Exception):
    """Base exception for IconFind with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }
