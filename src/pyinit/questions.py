"""Conditional question flow.

The flow is an ordered table of :class:`QuestionStep` descriptors interpreted
by :func:`run_question_flow`. A step may carry a condition that decides at
runtime whether it is asked, based only on answers collected by earlier steps.
That ordering contract is checked by :func:`check_flow_order` before anything
is asked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from loguru import logger

from .errors import ConfigurationError, ValidationError
from .models import (
    PYTHON_VERSIONS,
    SRC_DIR_NAME,
    ConfigField,
    ProjectConfig,
    ProjectType,
    WebFramework,
)
from .prompter import Prompt, Prompter, PromptKind
from .validators import validate_email, validate_project_name, validate_required

Validator = Callable[[Any], None]
Condition = Callable[[ProjectConfig], bool]
Dynamic = Union[Any, Callable[[ProjectConfig], Any]]


@dataclass(frozen=True)
class PromptSpec:
    """Prompt description whose default and choices may depend on earlier answers."""

    message: str
    kind: PromptKind = PromptKind.TEXT
    default: Dynamic = None
    choices: Union[Sequence[str], Callable[[ProjectConfig], Sequence[str]]] = ()
    help: Optional[str] = None

    def resolve(self, config: ProjectConfig) -> Prompt:
        default = self.default(config) if callable(self.default) else self.default
        choices = self.choices(config) if callable(self.choices) else self.choices
        return Prompt(
            message=self.message,
            kind=self.kind,
            default=default,
            choices=tuple(choices),
            help=self.help,
        )


@dataclass(frozen=True)
class QuestionStep:
    """One entry of the question table.

    ``reads`` lists the fields the condition and the dynamic prompt parts look
    at; each of them must be written by an earlier step.
    """

    identifier: ConfigField
    prompt: PromptSpec
    validator: Optional[Validator] = None
    condition: Optional[Condition] = None
    reads: Tuple[ConfigField, ...] = ()

    def should_ask(self, config: ProjectConfig) -> bool:
        return self.condition is None or bool(self.condition(config))


def is_web_project(config: ProjectConfig) -> bool:
    return config.project_type is ProjectType.WEB


def _main_dir_choices(config: ProjectConfig) -> Tuple[str, ...]:
    return (config.package_name, SRC_DIR_NAME)


def build_question_flow() -> Tuple[QuestionStep, ...]:
    """Return the question table in the order the questions are asked."""

    return (
        QuestionStep(
            ConfigField.USER_NAME,
            PromptSpec("Enter your name:"),
            validator=validate_required,
        ),
        QuestionStep(
            ConfigField.EMAIL,
            PromptSpec("Enter your email:"),
            validator=validate_email,
        ),
        QuestionStep(
            ConfigField.PROJECT_NAME,
            PromptSpec("Enter project name:"),
            validator=validate_project_name,
        ),
        QuestionStep(
            ConfigField.PROJECT_TYPE,
            PromptSpec(
                "Select project type:",
                PromptKind.SELECT,
                default=ProjectType.BASIC.value,
                choices=tuple(member.value for member in ProjectType),
            ),
        ),
        QuestionStep(
            ConfigField.WEB_FRAMEWORK,
            PromptSpec(
                "Select web framework:",
                PromptKind.SELECT,
                default=WebFramework.FASTAPI.value,
                choices=tuple(member.value for member in WebFramework),
            ),
            condition=is_web_project,
            reads=(ConfigField.PROJECT_TYPE,),
        ),
        QuestionStep(
            ConfigField.MAIN_DIR_NAME,
            PromptSpec(
                "Select main directory name:",
                PromptKind.SELECT,
                default=lambda config: config.package_name,
                choices=_main_dir_choices,
                help="Package directory that holds your code",
            ),
            validator=validate_required,
            reads=(ConfigField.PROJECT_NAME,),
        ),
        QuestionStep(
            ConfigField.DESCRIPTION,
            PromptSpec("Enter project description:", default=""),
        ),
        QuestionStep(
            ConfigField.PYTHON_VERSION,
            PromptSpec(
                "Select Python version:",
                PromptKind.SELECT,
                default=PYTHON_VERSIONS[0],
                choices=PYTHON_VERSIONS,
            ),
            validator=validate_required,
        ),
    )


def _field(identifier: ConfigField | str) -> ConfigField:
    try:
        return ConfigField(identifier)
    except ValueError as exc:
        raise ConfigurationError(
            "unknown_field", f"No configuration field for question '{identifier}'"
        ) from exc


def check_flow_order(steps: Sequence[QuestionStep]) -> None:
    """Reject tables with unknown identifiers or a step that depends on a
    field not written before it."""

    written: set[ConfigField] = set()
    for step in steps:
        identifier = _field(step.identifier)
        if identifier in written:
            raise ConfigurationError(
                "duplicate_step", f"Question '{identifier.value}' appears more than once"
            )
        for dependency in map(_field, step.reads):
            if dependency not in written:
                raise ConfigurationError(
                    "flow_order",
                    f"Question '{identifier.value}' reads '{dependency.value}' "
                    "before it has been asked",
                )
        written.add(identifier)


def ask_step(step: QuestionStep, config: ProjectConfig, prompter: Prompter) -> Any:
    """Ask until the validator accepts the answer."""

    prompt = step.prompt.resolve(config)
    while True:
        answer = prompter.ask(prompt)
        if step.validator is None:
            return answer
        try:
            step.validator(answer)
        except ValidationError as exc:
            logger.debug("Rejected answer for {}: {}", _field(step.identifier).value, exc.reason)
            prompter.report_invalid(prompt, exc)
            continue
        return answer


def run_question_flow(
    steps: Sequence[QuestionStep],
    config: ProjectConfig,
    prompter: Prompter,
) -> ProjectConfig:
    """Execute ``steps`` in order, writing each answer into ``config``."""

    check_flow_order(steps)
    for step in steps:
        if not step.should_ask(config):
            logger.debug("Skipping question {}", _field(step.identifier).value)
            continue
        answer = ask_step(step, config, prompter)
        config.set(step.identifier, answer)
    return config


__all__ = [
    "PromptSpec",
    "QuestionStep",
    "build_question_flow",
    "check_flow_order",
    "ask_step",
    "run_question_flow",
    "is_web_project",
]
