"""Application settings via QSettings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings


class AppSettings:
    """Wraps QSettings for persistent faces file configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("FaceFile", "FaceFile")

    # -- main settings file --

    @property
    def settings_file(self) -> str:
        raw = self._qs.value("custom/settings_file", "", type=str)
        value = (raw or "").strip()
        return value or str(self.app_data_dir / "custom.ini")

    @settings_file.setter
    def settings_file(self, value: str) -> None:
        self._qs.setValue("custom/settings_file", (value or "").strip())

    # -- faces file template --

    @property
    def faces_file_template(self) -> str:
        raw = self._qs.value("custom/faces_file_template", "", type=str)
        return (raw or "").strip()

    @faces_file_template.setter
    def faces_file_template(self, value: str) -> None:
        self._qs.setValue("custom/faces_file_template", (value or "").strip())

    # -- enabled themes --

    @property
    def enabled_themes(self) -> list[str]:
        raw = self._qs.value("ui/enabled_themes", [])
        if raw is None:
            return []
        # INI storage hands back a bare string for single-item lists
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, (list, tuple)):
            return []
        return _clean_theme_ids(raw)

    @enabled_themes.setter
    def enabled_themes(self, value: list[str]) -> None:
        self._qs.setValue("ui/enabled_themes", _clean_theme_ids(value))

    def sync(self) -> None:
        self._qs.sync()

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        import os
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "facefile"


def _clean_theme_ids(values) -> list[str]:
    cleaned: list[str] = []
    for item in values:
        if not isinstance(item, str):
            continue
        theme_id = item.strip()
        if theme_id and theme_id not in cleaned:
            cleaned.append(theme_id)
    return cleaned
