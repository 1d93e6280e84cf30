"""Typer-based CLI for pyinit."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from .banner import show_banner_if_enabled
from .errors import Cancelled, GenerationError, PyinitError
from .prompter import RichPrompter
from .session import run_session
from .settings import Settings, load_settings, save_settings, settings_path
from .version import build_info

app = typer.Typer(help="Interactive Python project scaffolding tool.")
config_app = typer.Typer(help="Configure pyinit behavior via ~/.pyinitrc.")
banner_app = typer.Typer(help="Enable or disable the startup banner.")
config_app.add_typer(banner_app, name="banner")
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(
        lambda message: err_console.print(message, end="", markup=False, highlight=False),
        level=level,
        format="{level}: {message}",
    )
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="DEBUG")


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(str(build_info()), markup=False, highlight=False)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write a debug log to this file"),
) -> None:
    """Create a new Python project by answering a few questions."""

    _configure_logging(log_level.upper(), log_file)
    if ctx.invoked_subcommand is not None:
        return

    show_banner_if_enabled(console)
    try:
        result = run_session(RichPrompter(console))
    except Cancelled as exc:
        err_console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(code=1)
    except GenerationError as exc:
        logger.opt(exception=exc).debug("Generation failed")
        if exc.__cause__ is not None:
            err_console.print(f"[red]Error:[/red] {exc}: {exc.__cause__}")
        else:
            err_console.print(f"[red]Error:[/red] {exc}")
        if exc.partial:
            err_console.print(
                f"[yellow]WARNING:[/yellow] {len(exc.created)} item(s) were already written; "
                "the project tree may be incomplete."
            )
        raise typer.Exit(code=1)
    except PyinitError as exc:
        raise _fail(str(exc))

    logger.info("Created {} artifacts under {}", result.file_count, result.project_path)


@config_app.command("show")
def config_show() -> None:
    """Print the current settings."""

    path = settings_path()
    try:
        settings = load_settings(path)
    except PyinitError as exc:
        raise _fail(str(exc))

    console.print(f"Configuration file: {path}", markup=False, highlight=False, soft_wrap=True)
    console.print(f"show_banner: {str(settings.show_banner).lower()}", highlight=False)


@config_app.command("reset")
def config_reset() -> None:
    """Restore default settings."""

    try:
        path = save_settings(Settings())
    except PyinitError as exc:
        raise _fail(str(exc))
    console.print(f"[green]Configuration reset to defaults ({path})[/green]", soft_wrap=True)


def _set_banner(enabled: bool) -> None:
    try:
        settings = load_settings()
        settings.show_banner = enabled
        save_settings(settings)
    except PyinitError as exc:
        raise _fail(str(exc))
    state = "enabled" if enabled else "disabled"
    console.print(f"[green]Banner {state}[/green]")


@banner_app.command("enable")
def banner_enable() -> None:
    """Show the banner on startup."""

    _set_banner(True)


@banner_app.command("disable")
def banner_disable() -> None:
    """Hide the banner on startup."""

    _set_banner(False)


if __name__ == "__main__":
    app()
