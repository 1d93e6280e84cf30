"""Project generation from a finished :class:`ProjectConfig`.

Generation always runs the common phase (project root, ``scripts/``,
``.gitignore``, ``.python-version``) and then the plan registered for the
selected project type. New project types plug in through
:func:`register_plan` without touching the common phase.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from loguru import logger

from .errors import Cancelled, GenerationError, TemplateError
from .models import GenerationResult, ProjectConfig, ProjectType, WebFramework
from .paths import ConfirmFn, confirm_if_exists
from .templates import TemplateRenderer

MARKER_FILE = "__init__.py"

PlanKey = Tuple[ProjectType, Optional[WebFramework]]
Plan = Callable[["_PlanRun"], None]

_PLANS: Dict[PlanKey, Plan] = {}


def register_plan(project_type: ProjectType, framework: WebFramework | None = None) -> Callable[[Plan], Plan]:
    """Register the type-specific part of a generation plan."""

    def decorator(func: Plan) -> Plan:
        _PLANS[(project_type, framework)] = func
        return func

    return decorator


def find_plan(config: ProjectConfig) -> Optional[Plan]:
    if config.project_type is None:
        return None
    return _PLANS.get((config.project_type, config.web_framework))


def supported_plans() -> list[PlanKey]:
    return sorted(_PLANS, key=lambda key: (key[0].value, key[1].value if key[1] else ""))


def _decline(*_args, **_kwargs) -> bool:
    return False


class _PlanRun:
    """File operations of one generation, recording what was created."""

    def __init__(self, config: ProjectConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer
        self.root = config.project_path
        self.result = GenerationResult(project_path=self.root)
        self.context = config.template_context()

    @property
    def main_dir(self) -> str:
        return self.config.main_dir_name

    def _fail(self, artifact: str) -> GenerationError:
        return GenerationError(artifact, self.result.created)

    def make_dir(self, relative: str | Path = ".") -> Path:
        target = self.root / relative
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise self._fail(str(target)) from exc
        self.result.created.append(target)
        logger.debug("Created directory {}", target)
        return target

    def write(self, relative: str | Path, content: str) -> Path:
        target = self.root / relative
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise self._fail(str(target)) from exc
        self.result.created.append(target)
        logger.debug("Wrote {}", target)
        return target

    def render(self, template_name: str, relative: str | Path) -> Path:
        try:
            content = self.renderer.render(template_name, self.context)
        except TemplateError as exc:
            raise self._fail(str(self.root / relative)) from exc
        return self.write(relative, content)

    def package(self, relative: str | Path) -> Path:
        """Create a directory holding an empty marker file."""

        directory = self.make_dir(relative)
        self.write(Path(relative) / MARKER_FILE, "")
        return directory


class ProjectGenerator:
    """Materialize a project tree on disk.

    ``confirm`` is asked before reusing an existing project directory; without
    one, existing directories are never reused.
    """

    def __init__(self, renderer: TemplateRenderer | None = None, confirm: ConfirmFn | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.confirm = confirm or _decline

    def generate(self, config: ProjectConfig) -> GenerationResult:
        config.check_ready()
        plan = find_plan(config)
        if plan is None:
            kind = config.project_type.value if config.project_type else "unknown"
            if config.web_framework is not None:
                kind = f"{kind}/{config.web_framework.value}"
            raise GenerationError(
                "project",
                message=f"Project type '{kind}' is not supported yet",
            )

        run = _PlanRun(config, self.renderer)
        logger.info("Generating {} project at {}", config.project_type.value, run.root)
        self._common_phase(run)
        plan(run)
        logger.info("Generated {} artifacts", len(run.result.created))
        return run.result

    def _common_phase(self, run: _PlanRun) -> None:
        if not confirm_if_exists(run.root, self.confirm):
            raise Cancelled(f"Project creation cancelled: {run.root} already exists")
        run.make_dir()
        run.package("scripts")
        run.render("core/fmt.py.j2", Path("scripts") / "fmt.py")
        run.render("core/fmt_check.py.j2", Path("scripts") / "fmt_check.py")
        run.render("core/gitignore.j2", ".gitignore")
        run.render("core/python-version.j2", ".python-version")


@register_plan(ProjectType.BASIC)
def _basic_plan(run: _PlanRun) -> None:
    run.render("basic/README.md.j2", "README.md")
    run.package(run.main_dir)
    run.render("basic/main.py.j2", Path(run.main_dir) / "main.py")
    run.render("basic/pyproject.toml.j2", "pyproject.toml")


_FASTAPI_SUBPACKAGES = (
    ("api", "routes.py"),
    ("core", "config.py"),
    ("schemas", "user.py"),
    ("models", "user.py"),
)


@register_plan(ProjectType.WEB, WebFramework.FASTAPI)
def _fastapi_plan(run: _PlanRun) -> None:
    run.render("web/fastapi/README.md.j2", "README.md")
    run.package(run.main_dir)
    run.render("web/fastapi/pyproject.toml.j2", "pyproject.toml")
    run.render("web/fastapi/main.py.j2", Path(run.main_dir) / "main.py")
    for subpackage, module in _FASTAPI_SUBPACKAGES:
        run.package(Path(run.main_dir) / subpackage)
        run.render(
            f"web/fastapi/{subpackage}/{module}.j2",
            Path(run.main_dir) / subpackage / module,
        )
    run.package("tests")
    run.render("web/fastapi/tests/test_main.py.j2", Path("tests") / "test_main.py")


__all__ = [
    "MARKER_FILE",
    "ProjectGenerator",
    "register_plan",
    "find_plan",
    "supported_plans",
]
