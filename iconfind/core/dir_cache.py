"""In-memory directory listings standing in for per-file existence checks."""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

RECHECK_INTERVAL_SECONDS = 5.0


@dataclass
class _RootListing:
    mtime_ns: int | None
    checked_at: float
    files: frozenset[str] = field(default_factory=frozenset)


class DirectoryCache:
    """Answers ``path_exists`` for files under the base directories from memory.

    Each root is listed once and relisted only when its own mtime changes.
    The mtime is looked at no more than once per ``recheck_interval``
    seconds, so a theme installer only needs to touch the top-level
    directory for new icons to show up. Only regular files are listed, so
    this agrees with ``os.path.isfile``. Paths outside every root go
    straight to ``fallback``.
    """

    def __init__(
        self,
        roots: Iterable[str],
        *,
        recheck_interval: float = RECHECK_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        fallback: Callable[[str], bool] = os.path.isfile,
    ) -> None:
        self._roots = tuple(os.path.normpath(root) for root in roots)
        self._recheck_interval = recheck_interval
        self._clock = clock
        self._fallback = fallback
        self._listings: dict[str, _RootListing] = {}
        self._lock = threading.Lock()

    @property
    def roots(self) -> tuple[str, ...]:
        return self._roots

    def __call__(self, path: str) -> bool:
        normalized = os.path.normpath(path)
        root = self._root_for(normalized)
        if root is None:
            return self._fallback(path)
        with self._lock:
            listing = self._current_listing(root)
        return os.path.relpath(normalized, root) in listing.files

    def invalidate(self, root: str | None = None) -> None:
        """Forget the listing of ``root``, or of every root."""
        with self._lock:
            if root is None:
                self._listings.clear()
            else:
                self._listings.pop(os.path.normpath(root), None)

    def _root_for(self, path: str) -> str | None:
        for root in self._roots:
            if path.startswith(root + os.sep):
                return root
        return None

    def _current_listing(self, root: str) -> _RootListing:
        now = self._clock()
        listing = self._listings.get(root)
        if listing is not None and now - listing.checked_at < self._recheck_interval:
            return listing

        mtime_ns = _root_mtime(root)
        if listing is not None and listing.mtime_ns == mtime_ns:
            listing.checked_at = now
            return listing

        files = _scan_root(root) if mtime_ns is not None else frozenset()
        logger.debug("listed %d files under %s", len(files), root)
        listing = _RootListing(mtime_ns=mtime_ns, checked_at=now, files=files)
        self._listings[root] = listing
        return listing


def _root_mtime(root: str) -> int | None:
    try:
        return os.stat(root).st_mtime_ns
    except OSError:
        return None


def _scan_root(root: str) -> frozenset[str]:
    """Relative paths of every file under ``root``.

    Directory symlinks are followed unless they point back at an ancestor.
    """
    found: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        real_dir = os.path.realpath(dirpath)
        dirnames[:] = [
            name for name in dirnames
            if not _loops_back(os.path.join(dirpath, name), real_dir)
        ]
        rel_dir = os.path.relpath(dirpath, root)
        for fname in filenames:
            full = os.path.join(dirpath, fname)
            if os.path.islink(full) and not os.path.exists(full):
                continue
            found.add(fname if rel_dir == os.curdir else os.path.join(rel_dir, fname))
    return frozenset(found)


def _loops_back(child: str, real_parent: str) -> bool:
    if not os.path.islink(child):
        return False
    target = os.path.realpath(child)
    return target == real_parent or real_parent.startswith(target + os.sep)
