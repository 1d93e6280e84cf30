from __future__ import annotations

import io
from typing import Any, List

import pytest
from rich.console import Console

from pyinit import prompter as prompter_module
from pyinit.errors import PromptError, ValidationError
from pyinit.prompter import Prompt, PromptKind, RichPrompter


def _replay(monkeypatch: pytest.MonkeyPatch, replies: List[Any]) -> None:
    def fake_ask(*_args, **_kwargs):
        reply = replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    monkeypatch.setattr(prompter_module.RichPrompt, "ask", fake_ask)


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def rich_prompter(output: io.StringIO) -> RichPrompter:
    return RichPrompter(Console(file=output, width=120))


def test_text_prompt(monkeypatch: pytest.MonkeyPatch, rich_prompter: RichPrompter) -> None:
    _replay(monkeypatch, ["Ada"])
    assert rich_prompter.ask(Prompt("Enter your name:")) == "Ada"


def test_select_by_number_or_name(monkeypatch: pytest.MonkeyPatch, rich_prompter: RichPrompter) -> None:
    prompt = Prompt("Select:", PromptKind.SELECT, default="a", choices=("a", "b", "c"))
    _replay(monkeypatch, ["2", "c"])
    assert rich_prompter.ask(prompt) == "b"
    assert rich_prompter.ask(prompt) == "c"


def test_select_retries_out_of_range(
    monkeypatch: pytest.MonkeyPatch, rich_prompter: RichPrompter, output: io.StringIO
) -> None:
    prompt = Prompt("Select:", PromptKind.SELECT, choices=("a", "b"))
    _replay(monkeypatch, ["7", "1"])
    assert rich_prompter.ask(prompt) == "a"
    assert "Choose a number between 1 and 2" in output.getvalue()


def test_multi_select(monkeypatch: pytest.MonkeyPatch, rich_prompter: RichPrompter) -> None:
    prompt = Prompt("Pick:", PromptKind.MULTI_SELECT, default=["a"], choices=("a", "b", "c"))
    _replay(monkeypatch, ["1, c, 1", "none", ""])
    assert rich_prompter.ask(prompt) == ["a", "c"]
    assert rich_prompter.ask(prompt) == []
    assert rich_prompter.ask(prompt) == []


def test_interrupt_becomes_prompt_error(monkeypatch: pytest.MonkeyPatch, rich_prompter: RichPrompter) -> None:
    _replay(monkeypatch, [EOFError()])
    with pytest.raises(PromptError):
        rich_prompter.ask(Prompt("Enter your name:"))


def test_report_invalid(rich_prompter: RichPrompter, output: io.StringIO) -> None:
    rich_prompter.report_invalid(Prompt("Email:"), ValidationError("invalid_format", "Enter a valid email address"))
    assert "Enter a valid email address" in output.getvalue()
