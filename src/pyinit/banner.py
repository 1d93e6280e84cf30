"""Startup banner."""

from __future__ import annotations

from loguru import logger
from rich.console import Console

from .errors import SettingsError
from .settings import load_settings
from .version import get_version

ASCII_ART = r"""
                 _       _ _
  _ __  _   _   (_)_ __ (_) |_
 | '_ \| | | |  | | '_ \| | __|
 | |_) | |_| |  | | | | | | |_
 | .__/ \__, |  |_|_| |_|_|\__|
 |_|    |___/
"""

TAGLINE = "Interactive Python Project Scaffolding Tool"


def render_banner() -> str:
    return f"{ASCII_ART}\n{TAGLINE}\n{get_version()}\n"


def show_banner_if_enabled(console: Console) -> bool:
    """Print the banner when enabled; never let a failure stop the session."""

    try:
        if not load_settings().show_banner:
            return False
        console.print(render_banner(), style="bold cyan", markup=False, highlight=False)
    except (SettingsError, OSError) as exc:
        logger.warning("Banner display failed: {}", exc)
        return False
    return True


__all__ = ["ASCII_ART", "TAGLINE", "render_banner", "show_banner_if_enabled"]
