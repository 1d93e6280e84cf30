"""One interactive project-creation session."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console

from .environment import (
    DEFAULT_FASTAPI_DEPENDENCIES,
    FASTAPI_DEPENDENCIES,
    install_dev_dependencies,
    install_fastapi_dependencies,
    manual_fastapi_instructions,
    manual_instructions,
    print_instructions,
)
from .errors import PromptError, SubprocessError
from .generator import ProjectGenerator
from .models import GenerationResult, ProjectConfig, ProjectType, WebFramework
from .paths import resolve_custom_path, resolve_default_path, sanitize_project_name
from .prompter import Prompt, Prompter, PromptKind
from .questions import build_question_flow, run_question_flow

console = Console()


def collect_project_info(prompter: Prompter, cwd: Optional[Path] = None) -> ProjectConfig:
    """Run the question flow and settle where the project goes."""

    config = run_question_flow(build_question_flow(), ProjectConfig(), prompter)
    resolve_project_location(config, prompter, cwd)
    return config


def resolve_project_location(
    config: ProjectConfig, prompter: Prompter, cwd: Optional[Path] = None
) -> Path:
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    config.project_path = resolve_default_path(cwd, config.project_name)

    create_here = prompter.confirm(
        "Create project in current directory?\n"
        f"Project will be created at: {config.project_path}",
        default=True,
    )
    if not create_here:
        parent = prompter.ask(
            Prompt(
                "Enter parent directory path:",
                default=str(cwd),
                help=(
                    f"Project '{sanitize_project_name(config.project_name)}' "
                    "will be created inside this directory"
                ),
            )
        )
        config.project_path = resolve_custom_path(str(parent).strip() or cwd, config.project_name)
    logger.info("Project path resolved to {}", config.project_path)
    return config.project_path


def setup_fastapi_dependencies(config: ProjectConfig, project_path: Path, prompter: Prompter) -> None:
    if config.project_type is not ProjectType.WEB or config.web_framework is not WebFramework.FASTAPI:
        return

    try:
        selected = prompter.ask(
            Prompt(
                "Select FastAPI dependencies to install:",
                PromptKind.MULTI_SELECT,
                default=list(DEFAULT_FASTAPI_DEPENDENCIES),
                choices=FASTAPI_DEPENDENCIES,
            )
        )
    except PromptError as exc:
        console.print(f"[yellow]Warning:[/yellow] Failed to prompt for FastAPI dependencies: {exc}")
        return

    if not selected:
        console.print("No dependencies selected, skipping installation.")
        return
    try:
        install_fastapi_dependencies(project_path, selected)
    except SubprocessError as exc:
        console.print(f"[yellow]Warning:[/yellow] Failed to set up FastAPI dependencies: {exc}")
        print_instructions(
            "You can install FastAPI dependencies later by running:",
            manual_fastapi_instructions(project_path, selected),
        )


def setup_development_environment(project_path: Path, prompter: Prompter) -> None:
    try:
        wanted = prompter.confirm("Do you want to set up the development environment now?", default=True)
    except PromptError as exc:
        console.print(f"[yellow]Warning:[/yellow] {exc}")
        wanted = False

    if wanted:
        try:
            install_dev_dependencies(project_path)
            return
        except SubprocessError as exc:
            console.print(f"[yellow]Warning:[/yellow] Failed to set up environment: {exc}")
    print_instructions(
        "You can set up the development environment later by running:",
        manual_instructions(project_path),
    )


def run_session(
    prompter: Prompter,
    *,
    cwd: Optional[Path] = None,
    generator: Optional[ProjectGenerator] = None,
    setup_environment: bool = True,
) -> GenerationResult:
    """Ask the questions, generate the project, then offer environment setup."""

    config = collect_project_info(prompter, cwd)
    generator = generator or ProjectGenerator(confirm=prompter.confirm)
    result = generator.generate(config)
    console.print(
        f"[green]Project '{config.project_name}' created successfully at: {result.project_path}[/green]"
    )

    if setup_environment:
        setup_fastapi_dependencies(config, result.project_path, prompter)
        setup_development_environment(result.project_path, prompter)
    return result


__all__ = [
    "collect_project_info",
    "resolve_project_location",
    "setup_fastapi_dependencies",
    "setup_development_environment",
    "run_session",
]
