"""Answer validators used by the question flow."""

from __future__ import annotations

import re
from typing import Any

from .errors import ValidationError
from .paths import sanitize_project_name

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _as_text(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("invalid_input", "Invalid input")
    return value.strip()


def validate_required(value: Any) -> None:
    """Reject empty or whitespace-only answers."""

    if not _as_text(value):
        raise ValidationError("required", "This value is required")


def validate_email(value: Any) -> None:
    """Accept ``local@domain.tld`` addresses with an alphabetic TLD of two or more letters."""

    email = _as_text(value)
    if not email:
        raise ValidationError("required", "Email is required")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("invalid_format", "Enter a valid email address")


def validate_project_name(value: Any) -> None:
    name = _as_text(value)
    if not name:
        raise ValidationError("required", "Project name is required")
    if not sanitize_project_name(name):
        raise ValidationError(
            "invalid_name",
            "Project name must contain at least one letter, digit, '-' or '_'",
        )


__all__ = [
    "EMAIL_PATTERN",
    "validate_required",
    "validate_email",
    "validate_project_name",
]
