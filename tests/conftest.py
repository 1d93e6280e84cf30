from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List

import pytest

from pyinit.errors import PromptError, ValidationError
from pyinit.models import ProjectConfig, ProjectType, WebFramework
from pyinit.prompter import Prompt

# Answer placeholder meaning "accept the prompt's default".
DEFAULT = object()


class ScriptedPrompter:
    """Prompter that replays canned answers in order and records every question."""

    def __init__(self, answers: Iterable[Any]) -> None:
        self.answers: List[Any] = list(answers)
        self.asked: List[Prompt] = []
        self.confirmations: List[str] = []
        self.invalid: List[ValidationError] = []

    def _next(self, message: str, default: Any) -> Any:
        if not self.answers:
            raise PromptError(f"No scripted answer for '{message}'")
        answer = self.answers.pop(0)
        return default if answer is DEFAULT else answer

    def ask(self, prompt: Prompt) -> Any:
        self.asked.append(prompt)
        return self._next(prompt.message, prompt.default)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirmations.append(message)
        return bool(self._next(message, default))

    def report_invalid(self, prompt: Prompt, error: ValidationError) -> None:
        self.invalid.append(error)

    @property
    def messages(self) -> List[str]:
        return [prompt.message for prompt in self.asked]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def basic_config(workspace: Path) -> ProjectConfig:
    return ProjectConfig(
        user_name="Ada Lovelace",
        email="ada@example.com",
        project_name="Demo App",
        project_description='A "tiny" demo',
        project_type=ProjectType.BASIC,
        main_dir_name="demo_app",
        project_path=workspace / "demo-app",
        python_version="3.12",
    )


@pytest.fixture()
def fastapi_config(basic_config: ProjectConfig) -> ProjectConfig:
    basic_config.project_type = ProjectType.WEB
    basic_config.web_framework = WebFramework.FASTAPI
    return basic_config
