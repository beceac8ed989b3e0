"""Display and theme state reported by the running application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QGuiApplication

if TYPE_CHECKING:
    from facefile.config.settings import AppSettings

TTY_DISPLAY = "tty"

_PLATFORM_DISPLAY_KINDS: dict[str, str] = {
    "xcb": "x",
    "wayland": "pgtk",
    "wayland-egl": "pgtk",
    "windows": "w32",
    "cocoa": "ns",
    "haiku": "haiku",
    "offscreen": TTY_DISPLAY,
    "minimal": TTY_DISPLAY,
    "minimalegl": TTY_DISPLAY,
    "vnc": TTY_DISPLAY,
}


def display_kind_for_platform(name: str) -> str:
    """Map a Qt platform plugin name to a display kind."""
    cleaned = (name or "").strip().lower()
    if not cleaned:
        return TTY_DISPLAY
    return _PLATFORM_DISPLAY_KINDS.get(cleaned, cleaned)


def current_display_kind() -> str:
    if QGuiApplication.instance() is None:
        return TTY_DISPLAY
    return display_kind_for_platform(QGuiApplication.platformName())


class EnabledThemes(QObject):
    """Enabled theme ids in activation order, optionally persisted."""

    themes_changed = Signal(list)

    def __init__(
        self,
        settings: AppSettings | None = None,
        themes: list[str] | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        if themes is None and settings is not None:
            themes = settings.enabled_themes
        self._themes: list[str] = []
        for theme_id in themes or []:
            cleaned = (theme_id or "").strip()
            if cleaned and cleaned not in self._themes:
                self._themes.append(cleaned)

    def themes(self) -> list[str]:
        return list(self._themes)

    def __call__(self) -> list[str]:
        return self.themes()

    def is_enabled(self, theme_id: str) -> bool:
        return (theme_id or "").strip() in self._themes

    def enable(self, theme_id: str) -> bool:
        cleaned = (theme_id or "").strip()
        if not cleaned:
            return False
        if self._themes and self._themes[-1] == cleaned:
            return False
        if cleaned in self._themes:
            self._themes.remove(cleaned)
        self._themes.append(cleaned)
        self._changed()
        return True

    def disable(self, theme_id: str) -> bool:
        cleaned = (theme_id or "").strip()
        if cleaned not in self._themes:
            return False
        self._themes.remove(cleaned)
        self._changed()
        return True

    def set_themes(self, themes: list[str]) -> None:
        cleaned: list[str] = []
        for theme_id in themes:
            value = (theme_id or "").strip()
            if value and value not in cleaned:
                cleaned.append(value)
        if cleaned == self._themes:
            return
        self._themes = cleaned
        self._changed()

    def _changed(self) -> None:
        if self._settings is not None:
            self._settings.enabled_themes = list(self._themes)
        self.themes_changed.emit(list(self._themes))
