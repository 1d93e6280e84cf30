"""Configuration model collected by the question flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import ConfigurationError, ValidationError
from .paths import package_name


class ProjectType(str, Enum):
    """Top-level project category."""

    BASIC = "basic"
    CLI = "cli"
    WEB = "web"
    LIBRARY = "library"
    DATA_SCIENCE = "data-science"


class WebFramework(str, Enum):
    FASTAPI = "fastapi"
    FLASK = "flask"
    DJANGO = "django"


class ConfigField(str, Enum):
    """Identifiers of the answers the question flow can write."""

    USER_NAME = "username"
    EMAIL = "email"
    PROJECT_NAME = "projectname"
    PROJECT_TYPE = "projecttype"
    WEB_FRAMEWORK = "webframework"
    MAIN_DIR_NAME = "maindirname"
    DESCRIPTION = "description"
    PYTHON_VERSION = "pythonversion"


PYTHON_VERSIONS: Tuple[str, ...] = ("3.13", "3.12", "3.11", "3.10", "3.9")
SRC_DIR_NAME = "src"


def _text(value: Any) -> str:
    return str(value).strip()


def _choice(enum_type: type[Enum]) -> Callable[[Any], Enum]:
    def _convert(value: Any) -> Enum:
        try:
            return enum_type(_text(value))
        except ValueError as exc:
            options = ", ".join(member.value for member in enum_type)
            raise ValidationError(
                "invalid_choice", f"'{value}' is not one of: {options}"
            ) from exc

    return _convert


# ConfigField -> (attribute, converter producing the typed payload)
_DISPATCH: Dict[ConfigField, Tuple[str, Callable[[Any], Any]]] = {
    ConfigField.USER_NAME: ("user_name", _text),
    ConfigField.EMAIL: ("email", _text),
    ConfigField.PROJECT_NAME: ("project_name", _text),
    ConfigField.PROJECT_TYPE: ("project_type", _choice(ProjectType)),
    ConfigField.WEB_FRAMEWORK: ("web_framework", _choice(WebFramework)),
    ConfigField.MAIN_DIR_NAME: ("main_dir_name", _text),
    ConfigField.DESCRIPTION: ("project_description", _text),
    ConfigField.PYTHON_VERSION: ("python_version", _text),
}


def _enum_value(value: Optional[Enum]) -> str:
    return value.value if value is not None else ""


@dataclass
class ProjectConfig:
    """All answers gathered during one session."""

    user_name: str = ""
    email: str = ""
    project_name: str = ""
    project_description: str = ""
    project_type: Optional[ProjectType] = None
    web_framework: Optional[WebFramework] = None
    main_dir_name: str = ""
    project_path: Optional[Path] = None
    python_version: str = ""

    def set(self, identifier: ConfigField | str, value: Any) -> None:
        """Store one answer, converting it to the field's type."""

        try:
            key = ConfigField(identifier)
        except ValueError as exc:
            raise ConfigurationError(
                "unknown_field", f"No configuration field for question '{identifier}'"
            ) from exc
        if key is ConfigField.WEB_FRAMEWORK and self.project_type is not ProjectType.WEB:
            raise ConfigurationError(
                "web_framework_mismatch", "A web framework can only be set for web projects"
            )
        attribute, convert = _DISPATCH[key]
        setattr(self, attribute, convert(value))
        if key is ConfigField.PROJECT_TYPE and self.project_type is not ProjectType.WEB:
            self.web_framework = None

    @property
    def package_name(self) -> str:
        return package_name(self.project_name)

    @property
    def python_version_for_ruff(self) -> str:
        return "py" + self.python_version.replace(".", "")

    def template_context(self) -> Dict[str, str]:
        """Mapping handed to the template renderer."""

        return {
            "project_name": self.project_name,
            "project_type": _enum_value(self.project_type),
            "project_description": self.project_description,
            "user_name": self.user_name,
            "email": self.email,
            "main_dir_name": self.main_dir_name,
            "python_version": self.python_version,
            "python_version_for_ruff": self.python_version_for_ruff,
        }

    def check_ready(self) -> None:
        """Verify the invariants generation relies on."""

        if self.project_type is None:
            raise ConfigurationError("missing_project_type", "Project type has not been set")
        if (self.project_type is ProjectType.WEB) != (self.web_framework is not None):
            raise ConfigurationError(
                "web_framework_mismatch",
                "A web framework is required for web projects and only for web projects",
            )
        if not self.main_dir_name:
            raise ConfigurationError("missing_main_dir", "Main directory name has not been set")
        if self.project_path is None or not self.project_path.is_absolute():
            raise ConfigurationError(
                "relative_project_path", f"Project path must be absolute, got {self.project_path}"
            )


@dataclass(slots=True)
class GenerationResult:
    """Directories and files written for one project."""

    project_path: Path
    created: List[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return sum(1 for path in self.created if path.is_file())


__all__ = [
    "ProjectType",
    "WebFramework",
    "ConfigField",
    "PYTHON_VERSIONS",
    "SRC_DIR_NAME",
    "ProjectConfig",
    "GenerationResult",
]
