"""Version and build metadata."""

from __future__ import annotations

import platform
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as _dist_version

NAME = "pyinit"

# Release tooling may overwrite these.
GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"


def get_version() -> str:
    try:
        return _dist_version(NAME)
    except PackageNotFoundError:
        return "dev"


@dataclass(frozen=True)
class BuildInfo:
    version: str
    git_commit: str
    build_date: str
    python_version: str
    platform: str

    def __str__(self) -> str:
        lines = [f"{NAME} {self.version}"]
        if self.git_commit != "unknown":
            lines.append(f"Commit: {self.git_commit}")
        if self.build_date != "unknown":
            lines.append(f"Built: {self.build_date}")
        lines.append(f"Python: {self.python_version}")
        lines.append(f"Platform: {self.platform}")
        return "\n".join(lines)


def build_info() -> BuildInfo:
    return BuildInfo(
        version=get_version(),
        git_commit=GIT_COMMIT,
        build_date=BUILD_DATE,
        python_version=platform.python_version(),
        platform=f"{platform.system().lower()}/{platform.machine().lower()}",
    )


__all__ = ["NAME", "BuildInfo", "build_info", "get_version"]
