"""Exception hierarchy shared across pyinit."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence


class PyinitError(Exception):
    """Base class for every error pyinit reports to the user."""


class ValidationError(PyinitError):
    """Raised when an answer typed at a prompt is rejected."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or reason)
        self.reason = reason


class Cancelled(PyinitError):
    """Raised when the user declines to reuse an existing directory."""


class ConfigurationError(PyinitError):
    """Raised when the question flow and the configuration model disagree."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or reason)
        self.reason = reason


class TemplateError(PyinitError):
    """Raised when a template cannot be loaded or rendered."""

    def __init__(self, template: str, message: str) -> None:
        super().__init__(f"{template}: {message}")
        self.template = template


class GenerationError(PyinitError):
    """Raised when a step of the generation plan fails.

    The original ``OSError`` or :class:`TemplateError` is chained as
    ``__cause__``. ``created`` lists what was already on disk when the plan
    stopped; nothing is rolled back.
    """

    def __init__(
        self,
        artifact: str,
        created: Optional[Sequence[Path]] = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"failed to generate {artifact}")
        self.artifact = artifact
        self.created: List[Path] = list(created or [])

    @property
    def partial(self) -> bool:
        return bool(self.created)


class SubprocessError(PyinitError):
    """Raised when an external tool is missing or exits with a failure."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        message: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        if message is None:
            joined = " ".join(self.command)
            message = f"'{joined}' exited with status {returncode}"
        super().__init__(message)


class PromptError(PyinitError):
    """Raised when the terminal cannot deliver an answer."""


class SettingsError(PyinitError):
    """Raised when the settings file cannot be read or written."""


__all__ = [
    "PyinitError",
    "ValidationError",
    "Cancelled",
    "ConfigurationError",
    "TemplateError",
    "GenerationError",
    "SubprocessError",
    "PromptError",
    "SettingsError",
]
