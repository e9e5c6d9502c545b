"""Lookup service bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from iconfind.config.lookup_config import LookupConfig, configure
from iconfind.config.settings import AppSettings
from iconfind.core.dir_cache import DirectoryCache
from iconfind.core.service import IconLookupService
from iconfind.errors import IconFindError
from iconfind.themes.registry import ThemeRegistry


def _configure_lookup_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("iconfind")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "lookup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _load_config(settings: AppSettings, logger: logging.Logger) -> LookupConfig:
    if not settings.config_path:
        return LookupConfig()
    try:
        return LookupConfig.from_yaml(settings.config_path)
    except IconFindError as exc:
        logger.warning("lookup config %s: %s", exc.code.name, exc.message)
        return LookupConfig()


def create_lookup_service(settings: AppSettings | None = None) -> IconLookupService:
    """Build the lookup service and install its configuration process-wide."""
    if settings is None:
        settings = AppSettings()
    logger = _configure_lookup_logger(settings)

    config = _load_config(settings, logger)
    if settings.cache_enabled:
        config = config.with_path_exists(DirectoryCache(config.base_dirs))
    configure(config)
    logger.info(
        "lookup base_dirs=%s extensions=%s cache=%s",
        ",".join(config.base_dirs), ",".join(config.extensions), settings.cache_enabled,
    )

    registry = ThemeRegistry(config.base_dirs)
    service = IconLookupService(settings, registry, config)
    theme = service.current_theme()
    errors = registry.load_errors()
    if errors:
        logger.warning("theme load warnings: %s", " | ".join(errors[:6]))
    logger.info("icon theme %s", theme.name)
    return service
