"""Development environment setup through ``uv``."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Sequence

from loguru import logger
from rich.console import Console

from .errors import SubprocessError

console = Console()

UV_INSTALL_URL = "https://docs.astral.sh/uv/getting-started/installation/"
DEV_DEPENDENCIES = ("ruff", "pyright")

FASTAPI_DEPENDENCIES = (
    "fastapi[standard]",
    "uvicorn",
    "pydantic-settings",
    "httpx",
    "sqlalchemy",
    "alembic",
    "python-multipart",
)
DEFAULT_FASTAPI_DEPENDENCIES = ("fastapi[standard]", "uvicorn", "pydantic-settings")


def ensure_uv() -> str:
    """Return the path of the ``uv`` executable."""

    executable = shutil.which("uv")
    if executable is None:
        raise SubprocessError(
            ["uv"], message=f"uv is not installed. Please install uv first: {UV_INSTALL_URL}"
        )
    return executable


def run_uv(args: Sequence[str], project_path: Path) -> None:
    """Run ``uv`` inside the project, streaming its output to the terminal."""

    command = ["uv", *args]
    logger.info("Running {} in {}", " ".join(command), project_path)
    try:
        completed = subprocess.run(command, cwd=project_path, check=False)
    except OSError as exc:
        raise SubprocessError(command, message=f"Failed to run {' '.join(command)}: {exc}") from exc
    if completed.returncode != 0:
        raise SubprocessError(command, completed.returncode)


def manual_instructions(project_path: Path) -> List[str]:
    return [
        f"cd {project_path}",
        f"uv add --dev {' '.join(DEV_DEPENDENCIES)}",
        "uv run fmt",
        "uv run fmt-check",
    ]


def manual_fastapi_instructions(project_path: Path, packages: Sequence[str]) -> List[str]:
    lines = [f"cd {project_path}"]
    if packages:
        lines.append(f"uv add {' '.join(packages)}")
    lines.append("uv sync --dev")
    return lines


def print_instructions(title: str, lines: Sequence[str]) -> None:
    console.print(f"[yellow]{title}[/yellow]")
    for line in lines:
        console.print(f"   {line}", markup=False)


def install_dev_dependencies(project_path: Path) -> None:
    """Add the formatter and type checker, then format the new code.

    Formatting problems are reported but do not fail the setup.
    """

    ensure_uv()
    console.print("Setting up development environment...")
    run_uv(["add", "--dev", *DEV_DEPENDENCIES], project_path)

    for script in ("fmt", "fmt-check"):
        try:
            run_uv(["run", script], project_path)
        except SubprocessError as exc:
            logger.warning("{} failed: {}", script, exc)
            console.print(f"[yellow]Warning:[/yellow] {exc}")

    console.print("[green]Development environment setup complete![/green]")


def install_fastapi_dependencies(project_path: Path, packages: Sequence[str]) -> None:
    ensure_uv()
    console.print("Installing FastAPI dependencies...")
    if packages:
        run_uv(["add", *packages], project_path)
    run_uv(["sync", "--dev"], project_path)
    console.print("[green]FastAPI dependencies installed successfully![/green]")


__all__ = [
    "FASTAPI_DEPENDENCIES",
    "DEFAULT_FASTAPI_DEPENDENCIES",
    "DEV_DEPENDENCIES",
    "ensure_uv",
    "run_uv",
    "manual_instructions",
    "manual_fastapi_instructions",
    "print_instructions",
    "install_dev_dependencies",
    "install_fastapi_dependencies",
]
