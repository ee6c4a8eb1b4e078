"""Violation report — formats per-argument failures and builds the raised error."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from argcheck.errors import ERROR_KINDS, ArgCheckError
from argcheck.validators.classifier import preview
from argcheck.validators.models import BaseRule, Violation
from argcheck.validators.reference_data import REASON_SEPARATOR


def _rule_header(rule: Union[BaseRule, Mapping, Any]) -> tuple[Optional[str], bool]:
    """Pull (kind, is_optional) from a parsed rule or from a raw rule entry."""
    if isinstance(rule, BaseRule):
        return rule.kind, rule.is_optional
    if isinstance(rule, Mapping):
        kind = rule.get("kind")
        return (str(kind) if kind else None), bool(rule.get("is_optional"))
    return None, False


def format_violation(
    arg_name: str,
    rule: Union[BaseRule, Mapping, Any],
    value: Any,
    reasons: list[str],
) -> Violation:
    """Build the violation for one argument.

    Message format:
        [Optional ]Argument |<name>| data type |<kind>| <preview> <reasons>
    """
    kind, is_optional = _rule_header(rule)
    value_preview = preview(value)

    message = (
        ("Optional " if is_optional else "")
        + f"Argument |{arg_name}| data type |{kind or 'not provided'}| "
        + value_preview
        + " "
        + REASON_SEPARATOR.join(reasons)
    )

    return Violation(
        arg_name=arg_name,
        kind=kind,
        is_optional=is_optional,
        value_preview=value_preview,
        reasons=list(reasons),
        message=message,
    )


def unexpected_violation(arg_name: str) -> Violation:
    return Violation(
        arg_name=arg_name,
        reasons=["unexpected argument"],
        message=f"Unexpected argument |{arg_name}| provided.",
    )


def build_error(error_kind: str, description: str, payload: dict[str, Any], violations=None) -> ArgCheckError:
    """Construct the error object for an error kind ("BadInput", "ValidationFailure")."""
    error_cls = ERROR_KINDS.get(error_kind, ArgCheckError)
    return error_cls(description, data=payload, violations=violations)


class ViolationReport(BaseModel):
    """Accumulates violations across one evaluation pass."""

    violations: list[Violation] = Field(default_factory=list)

    def add(self, arg_name: str, rule: Any, value: Any, reasons: list[str]) -> None:
        if reasons:
            self.violations.append(format_violation(arg_name, rule, value, reasons))

    def add_unexpected(self, arg_name: str) -> None:
        self.violations.append(unexpected_violation(arg_name))

