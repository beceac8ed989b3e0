"""Tests for facefile.config.settings."""

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from facefile.config.settings import AppSettings


@pytest.fixture
def ini_path(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    return tmp_path / "facefile.ini"


def _settings(ini_path: Path) -> AppSettings:
    return AppSettings(QSettings(str(ini_path), QSettings.Format.IniFormat))


def test_defaults(ini_path, tmp_path):
    settings = _settings(ini_path)
    assert settings.faces_file_template == ""
    assert settings.enabled_themes == []
    assert settings.settings_file == str(tmp_path / "appdata" / "facefile" / "custom.ini")
    assert (tmp_path / "appdata" / "facefile").is_dir()


def test_template_is_stripped(ini_path):
    settings = _settings(ini_path)
    settings.faces_file_template = "  faces-%s.ini "
    assert settings.faces_file_template == "faces-%s.ini"


def test_settings_file_override(ini_path, tmp_path):
    settings = _settings(ini_path)
    settings.settings_file = str(tmp_path / "mine.ini")
    assert settings.settings_file == str(tmp_path / "mine.ini")
    settings.settings_file = "   "
    assert settings.settings_file.endswith("custom.ini")


def test_enabled_themes_are_cleaned(ini_path):
    settings = _settings(ini_path)
    settings.enabled_themes = ["dark", " ", "dark", "solarized"]
    assert settings.enabled_themes == ["dark", "solarized"]


def test_values_survive_reopen(ini_path):
    settings = _settings(ini_path)
    settings.faces_file_template = "faces%{-theme}.ini"
    settings.enabled_themes = ["dark", "solarized"]
    settings.sync()

    reopened = _settings(ini_path)
    assert reopened.faces_file_template == "faces%{-theme}.ini"
    assert reopened.enabled_themes == ["dark", "solarized"]


def test_single_theme_survives_reopen(ini_path):
    settings = _settings(ini_path)
    settings.enabled_themes = ["dark"]
    settings.sync()

    assert _settings(ini_path).enabled_themes == ["dark"]
