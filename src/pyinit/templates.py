"""Jinja2 rendering of the bundled project templates."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from jinja2 import TemplateError as JinjaTemplateError

from .errors import TemplateError
from .paths import package_name, sanitize_project_name

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def toml_str(value: Any) -> str:
    """Double-quoted literal valid in both TOML and Python source.

    Non-ASCII text is kept as is; ``\\u`` escapes would split characters
    outside the BMP into surrogates, which TOML rejects.
    """

    return json.dumps(str(value), ensure_ascii=False).replace("\x7f", "\\u007f")


class TemplateRenderer:
    """Render ``.j2`` templates addressed by their path below the template root.

    Identifiers look like ``"web/fastapi/main.py.j2"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = sanitize_project_name
        self.env.filters["package_name"] = package_name
        self.env.filters["toml_str"] = toml_str

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render one template to a string."""

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as exc:
            raise TemplateError(template_name, "template not found") from exc
        except JinjaTemplateError as exc:
            raise TemplateError(template_name, f"render failed: {exc}") from exc
        try:
            return template.render(**context)
        except JinjaTemplateError as exc:
            raise TemplateError(template_name, f"render failed: {exc}") from exc

    def list_templates(self) -> List[str]:
        if not self.template_dir.is_dir():
            return []
        return sorted(
            path.relative_to(self.template_dir).as_posix()
            for path in self.template_dir.rglob("*.j2")
        )


__all__ = ["DEFAULT_TEMPLATE_DIR", "TemplateRenderer", "toml_str"]
