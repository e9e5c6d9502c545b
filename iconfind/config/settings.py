"""Per-user lookup settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

_DEFAULT_THEME_NAME = "Adwaita"


class AppSettings:
    """Wraps QSettings for persistent lookup configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("IconFind", "IconFind")

    @classmethod
    def from_file(cls, path: str | Path) -> AppSettings:
        """Settings backed by an INI file instead of the platform store."""
        return cls(QSettings(str(path), QSettings.Format.IniFormat))

    # -- theme --

    @property
    def theme_name(self) -> str:
        raw = self._qs.value("theme/name", _DEFAULT_THEME_NAME, type=str)
        value = (raw or "").strip()
        return value or _DEFAULT_THEME_NAME

    @theme_name.setter
    def theme_name(self, value: str) -> None:
        cleaned = (value or "").strip() or _DEFAULT_THEME_NAME
        self._qs.setValue("theme/name", cleaned)

    # -- lookup config file --

    @property
    def config_path(self) -> str:
        return self._qs.value("lookup/config_path", "", type=str)

    @config_path.setter
    def config_path(self, value: str) -> None:
        self._qs.setValue("lookup/config_path", value)

    # -- directory cache --

    @property
    def cache_enabled(self) -> bool:
        return self._qs.value("lookup/cache_enabled", True, type=bool)

    @cache_enabled.setter
    def cache_enabled(self, value: bool) -> None:
        self._qs.setValue("lookup/cache_enabled", bool(value))

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
        return base / "iconfind"


def get_user_selected_theme(settings: AppSettings | None = None) -> str:
    """Return the name of the icon theme the user selected."""
    if settings is None:
        settings = AppSettings()
    return settings.theme_name
