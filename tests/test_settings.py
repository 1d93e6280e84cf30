from __future__ import annotations

from pathlib import Path

import pytest

from pyinit.errors import SettingsError
from pyinit.settings import Settings, load_settings, parse_settings, save_settings, settings_path


def test_settings_path_is_in_home(isolated_home: Path) -> None:
    assert settings_path() == isolated_home / ".pyinitrc"


def test_parse_settings() -> None:
    text = "# comment\n\nshow_banner = false\nnot a setting\ncolor=blue\n"
    assert parse_settings(text) == Settings(show_banner=False)


def test_parse_settings_strips_quotes() -> None:
    assert parse_settings('show_banner="false"').show_banner is False


def test_invalid_value_keeps_default() -> None:
    assert parse_settings("show_banner=maybe").show_banner is True


def test_missing_file_creates_defaults(isolated_home: Path) -> None:
    settings = load_settings()
    assert settings.show_banner is True
    text = (isolated_home / ".pyinitrc").read_text(encoding="utf-8")
    assert "show_banner=true" in text
    assert text.startswith("# pyinit configuration file")


def test_save_then_load(tmp_path: Path) -> None:
    path = save_settings(Settings(show_banner=False), tmp_path / "rc")
    assert load_settings(path).show_banner is False


def test_unwritable_location(tmp_path: Path) -> None:
    with pytest.raises(SettingsError):
        save_settings(Settings(), tmp_path / "missing" / "rc")


def test_missing_file_in_unwritable_location_still_loads(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "missing" / "rc") == Settings()
