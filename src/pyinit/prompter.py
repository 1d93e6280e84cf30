"""Terminal prompting.

The question flow only talks to the :class:`Prompter` protocol so it can be
driven by scripted answers in tests. :class:`RichPrompter` is the interactive
implementation built on ``rich.prompt``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from rich.console import Console
from rich.prompt import Confirm, Prompt as RichPrompt

from .errors import PromptError, ValidationError


class PromptKind(str, Enum):
    TEXT = "text"
    SELECT = "select"
    MULTI_SELECT = "multi-select"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class Prompt:
    """A fully resolved question ready to be shown."""

    message: str
    kind: PromptKind = PromptKind.TEXT
    default: Any = None
    choices: Tuple[str, ...] = ()
    help: Optional[str] = None


class Prompter(Protocol):
    def ask(self, prompt: Prompt) -> Any:
        """Return the raw answer; raise :class:`PromptError` on I/O failure."""

    def confirm(self, message: str, default: bool = False) -> bool:
        ...

    def report_invalid(self, prompt: Prompt, error: ValidationError) -> None:
        ...


class RichPrompter:
    """Interactive prompts rendered with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, prompt: Prompt) -> Any:
        if prompt.help:
            self.console.print(f"[dim]{prompt.help}[/dim]")
        try:
            if prompt.kind is PromptKind.CONFIRM:
                return Confirm.ask(prompt.message, console=self.console, default=bool(prompt.default))
            if prompt.kind is PromptKind.SELECT:
                return self._select(prompt)
            if prompt.kind is PromptKind.MULTI_SELECT:
                return self._multi_select(prompt)
            return self._text(prompt.message, prompt.default)
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptError(f"No answer received for '{prompt.message}'") from exc

    def confirm(self, message: str, default: bool = False) -> bool:
        return bool(self.ask(Prompt(message, PromptKind.CONFIRM, default=default)))

    def report_invalid(self, prompt: Prompt, error: ValidationError) -> None:
        self.console.print(f"[red]✗ {error}[/red]")

    def _text(self, message: str, default: Any) -> str:
        if default is None:
            return RichPrompt.ask(message, console=self.console)
        return RichPrompt.ask(
            message, console=self.console, default=str(default), show_default=bool(default)
        )

    def _print_options(self, choices: Sequence[str]) -> None:
        for index, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]) {choice}")

    def _pick(self, token: str, choices: Sequence[str]) -> Optional[str]:
        token = token.strip()
        if token.isdigit() and 1 <= int(token) <= len(choices):
            return choices[int(token) - 1]
        return token if token in choices else None

    def _select(self, prompt: Prompt) -> str:
        self._print_options(prompt.choices)
        while True:
            raw = self._text(prompt.message, prompt.default)
            picked = self._pick(raw, prompt.choices)
            if picked is not None:
                return picked
            self.console.print(f"[red]Choose a number between 1 and {len(prompt.choices)}[/red]")

    def _multi_select(self, prompt: Prompt) -> List[str]:
        self._print_options(prompt.choices)
        self.console.print("[dim]Comma-separated numbers or names, 'none' for nothing.[/dim]")
        default = ", ".join(prompt.default or [])
        while True:
            raw = self._text(prompt.message, default)
            if raw.strip().lower() == "none" or not raw.strip():
                return []
            picked = [self._pick(token, prompt.choices) for token in raw.split(",") if token.strip()]
            if all(item is not None for item in picked):
                return list(dict.fromkeys(picked))
            self.console.print("[red]Unknown selection, try again[/red]")


__all__ = ["PromptKind", "Prompt", "Prompter", "RichPrompter"]
