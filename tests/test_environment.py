from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

import pytest

from pyinit import environment
from pyinit.errors import SubprocessError


@pytest.fixture()
def uv_calls(monkeypatch: pytest.MonkeyPatch) -> List[List[str]]:
    calls: List[List[str]] = []
    monkeypatch.setattr(environment.shutil, "which", lambda name: f"/usr/bin/{name}")

    def fake_run(command, cwd=None, check=False):
        calls.append(list(command))
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(environment.subprocess, "run", fake_run)
    return calls


def test_missing_uv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(environment.shutil, "which", lambda name: None)
    with pytest.raises(SubprocessError) as excinfo:
        environment.ensure_uv()
    assert environment.UV_INSTALL_URL in str(excinfo.value)


def test_install_dev_dependencies(uv_calls: List[List[str]], tmp_path: Path) -> None:
    environment.install_dev_dependencies(tmp_path)
    assert uv_calls == [
        ["uv", "add", "--dev", "ruff", "pyright"],
        ["uv", "run", "fmt"],
        ["uv", "run", "fmt-check"],
    ]


def test_format_failures_are_not_fatal(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(environment.shutil, "which", lambda name: "/usr/bin/uv")
    monkeypatch.setattr(
        environment.subprocess,
        "run",
        lambda command, cwd=None, check=False: subprocess.CompletedProcess(
            command, 1 if command[1] == "run" else 0
        ),
    )
    environment.install_dev_dependencies(tmp_path)


def test_failed_add_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(environment.shutil, "which", lambda name: "/usr/bin/uv")
    monkeypatch.setattr(
        environment.subprocess,
        "run",
        lambda command, cwd=None, check=False: subprocess.CompletedProcess(command, 2),
    )
    with pytest.raises(SubprocessError) as excinfo:
        environment.install_dev_dependencies(tmp_path)
    assert excinfo.value.returncode == 2
    assert excinfo.value.command == ["uv", "add", "--dev", "ruff", "pyright"]


def test_install_fastapi_dependencies(uv_calls: List[List[str]], tmp_path: Path) -> None:
    environment.install_fastapi_dependencies(tmp_path, ["fastapi[standard]", "httpx"])
    assert uv_calls == [["uv", "add", "fastapi[standard]", "httpx"], ["uv", "sync", "--dev"]]


def test_manual_instructions(tmp_path: Path) -> None:
    lines = environment.manual_instructions(tmp_path)
    assert lines[0] == f"cd {tmp_path}"
    assert "uv add --dev ruff pyright" in lines
    assert environment.manual_fastapi_instructions(tmp_path, []) == [f"cd {tmp_path}", "uv sync --dev"]
