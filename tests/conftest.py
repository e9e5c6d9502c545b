"""Shared fixtures for IconFind tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from iconfind.config.lookup_config import LookupConfig, reset_config


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def write_index(theme_dir: Path, body: str) -> Path:
    theme_dir.mkdir(parents=True, exist_ok=True)
    index_path = theme_dir / "index.theme"
    index_path.write_text(body, encoding="utf-8")
    return index_path


@pytest.fixture(autouse=True)
def _isolate_process_state():
    logger = logging.getLogger("iconfind")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    reset_config()
    yield
    reset_config()
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def roots(tmp_path) -> list[Path]:
    """Three empty base directories in priority order."""
    paths = [tmp_path / "user", tmp_path / "system", tmp_path / "local"]
    for path in paths:
        path.mkdir()
    return paths


@pytest.fixture
def config(roots) -> LookupConfig:
    return LookupConfig(base_dirs=tuple(str(root) for root in roots))
