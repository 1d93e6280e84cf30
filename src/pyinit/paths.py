"""Project name sanitizing and target directory resolution."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

from loguru import logger

from .errors import PromptError, ValidationError

_DISALLOWED = re.compile(r"[^a-z0-9_-]")

ConfirmFn = Callable[..., bool]


def sanitize_project_name(name: str) -> str:
    """Convert a free-form project name into a directory-safe slug.

    Lowercases, turns spaces into hyphens and drops everything outside
    ``[a-z0-9_-]``. Non-ASCII characters are removed, not transliterated.
    """

    return _DISALLOWED.sub("", name.lower().replace(" ", "-"))


def package_name(project_name: str) -> str:
    """Importable package name derived from a project name."""

    return sanitize_project_name(project_name).replace("-", "_")


def _slug_or_raise(project_name: str) -> str:
    slug = sanitize_project_name(project_name)
    if not slug:
        raise ValidationError(
            "invalid_name",
            f"Project name '{project_name}' has no usable characters (a-z, 0-9, '-', '_')",
        )
    return slug


def resolve_default_path(cwd: Path, project_name: str) -> Path:
    """Target path inside the working directory."""

    return (Path(cwd) / _slug_or_raise(project_name)).absolute()


def resolve_custom_path(parent: Path | str, project_name: str) -> Path:
    """Target path inside a user supplied parent directory."""

    return (Path(parent).expanduser() / _slug_or_raise(project_name)).absolute()


def confirm_if_exists(path: Path, confirm: ConfirmFn) -> bool:
    """Gate reuse of an existing directory behind a yes/no question.

    Returns ``True`` straight away when ``path`` does not exist. A failing
    confirmation prompt counts as a refusal.
    """

    if not path.exists():
        return True
    try:
        return bool(
            confirm(f"Directory '{path.name}' already exists. Continue anyway?", default=False)
        )
    except PromptError as exc:
        logger.warning("Could not confirm reuse of {}: {}", path, exc)
        return False


__all__ = [
    "sanitize_project_name",
    "package_name",
    "resolve_default_path",
    "resolve_custom_path",
    "confirm_if_exists",
]
