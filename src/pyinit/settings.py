"""Persisted user preferences stored in ``~/.pyinitrc``.

The file is a list of ``key=value`` lines. Callers only deal with the
:class:`Settings` model through :func:`load_settings` and
:func:`save_settings`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from pydantic import BaseModel, ValidationError

from .errors import SettingsError

CONFIG_FILE_NAME = ".pyinitrc"


class Settings(BaseModel):
    """Preferences that survive between runs."""

    show_banner: bool = True


def settings_path() -> Path:
    return Path.home() / CONFIG_FILE_NAME


def parse_settings(text: str) -> Settings:
    """Build settings from file contents, ignoring unknown keys and bad values."""

    known = set(Settings.model_fields)
    values: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key not in known:
            logger.debug("Ignoring unknown setting {}", key)
            continue
        values[key] = value.strip("\"'")

    settings = Settings()
    for key, value in values.items():
        try:
            settings = Settings.model_validate({**settings.model_dump(), key: value})
        except ValidationError:
            logger.warning("Ignoring invalid value {!r} for setting {}", value, key)
    return settings


def render_settings(settings: Settings) -> str:
    return "\n".join(
        [
            "# pyinit configuration file",
            "# This file configures the behavior of the pyinit CLI tool",
            "",
            "# Show ASCII banner on startup (true/false)",
            f"show_banner={str(settings.show_banner).lower()}",
            "",
        ]
    )


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` to disk and return the file path."""

    path = path or settings_path()
    try:
        path.write_text(render_settings(settings), encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to write {path}: {exc}") from exc
    return path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings, falling back to defaults when the file is missing.

    A missing file is recreated with defaults on a best-effort basis.
    """

    path = path or settings_path()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        settings = Settings()
        try:
            save_settings(settings, path)
        except SettingsError as exc:
            logger.warning("Could not save default settings: {}", exc)
        return settings
    except OSError as exc:
        raise SettingsError(f"Failed to read {path}: {exc}") from exc
    return parse_settings(text)


__all__ = [
    "CONFIG_FILE_NAME",
    "Settings",
    "settings_path",
    "parse_settings",
    "render_settings",
    "load_settings",
    "save_settings",
]
