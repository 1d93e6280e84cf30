from __future__ import annotations

import pytest

from pyinit.errors import ValidationError
from pyinit.validators import validate_email, validate_project_name, validate_required


def test_required_accepts_text() -> None:
    validate_required("Ada")


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_required_rejects_blank(value: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_required(value)
    assert excinfo.value.reason == "required"


def test_non_string_answer_is_invalid_input() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_required(42)
    assert excinfo.value.reason == "invalid_input"


@pytest.mark.parametrize(
    "value",
    ["ada@example.com", "first.last+tag@mail.example.co.uk", "  padded@example.org  "],
)
def test_email_accepts_valid_addresses(value: str) -> None:
    validate_email(value)


@pytest.mark.parametrize("value", ["ada", "ada@example", "ada@example.c", "@example.com", "a b@example.com"])
def test_email_rejects_malformed_addresses(value: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_email(value)
    assert excinfo.value.reason == "invalid_format"


def test_email_required() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_email(" ")
    assert excinfo.value.reason == "required"


def test_project_name_needs_usable_characters() -> None:
    validate_project_name("My App")
    with pytest.raises(ValidationError) as excinfo:
        validate_project_name("???")
    assert excinfo.value.reason == "invalid_name"
    with pytest.raises(ValidationError) as excinfo:
        validate_project_name("")
    assert excinfo.value.reason == "required"


@pytest.mark.parametrize("value", [None, 7, ["ada@example.com"]])
def test_email_rejects_non_text(value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_email(value)
    assert excinfo.value.reason == "invalid_input"
