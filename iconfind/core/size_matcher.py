"""Decide whether a theme directory fits a requested icon size and scale."""

from __future__ import annotations

from iconfind.themes.models import DirectoryType, ThemeDirectory


def directory_matches_size(directory: ThemeDirectory, size: int, scale: int) -> bool:
    """Return True when the directory's size policy accepts ``size`` at ``scale``."""
    if scale != directory.effective_scale:
        return False

    if directory.type is DirectoryType.FIXED:
        return directory.size == size
    if directory.type is DirectoryType.SCALABLE:
        return directory.effective_min_size <= size <= directory.effective_max_size

    threshold = directory.effective_threshold
    return directory.size - threshold <= size <= directory.size + threshold


def directory_size_distance(directory: ThemeDirectory, size: int, scale: int) -> int:
    """Return how far the directory is from ``size`` at ``scale``, in device pixels.

    Both sides are multiplied by their scale so directories of different
    scales compare in the same unit. Zero means the directory accepts the
    size; for Threshold directories the distance outside the band is
    measured from the nominal size, not from the band edge.
    """
    requested = size * scale
    dir_scale = directory.effective_scale

    if directory.type is DirectoryType.FIXED:
        return abs(directory.size * dir_scale - requested)

    if directory.type is DirectoryType.SCALABLE:
        low = directory.effective_min_size * dir_scale
        high = directory.effective_max_size * dir_scale
        if requested < low:
            return low - requested
        if requested > high:
            return requested - high
        return 0

    threshold = directory.effective_threshold
    nominal = directory.size * dir_scale
    if requested < (directory.size - threshold) * dir_scale:
        return nominal - requested
    if requested > (directory.size + threshold) * dir_scale:
        return requested - nominal
    return 0
