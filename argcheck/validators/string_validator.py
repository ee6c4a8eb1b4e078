"""String validator — regex filter, emptiness, and length limits."""

from typing import Any

from argcheck.validators.base import BaseValidator
from argcheck.validators.models import StringRule, TypeTag


class StringValidator(BaseValidator):
    """Validates text values.

    When a filter pattern is configured it is authoritative: the plain
    emptiness check is skipped, so "" passes or fails on the pattern alone.
    """

    @property
    def kind(self) -> str:
        return "string"

    def validate(self, value: Any, rule: StringRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        if value_type is not TypeTag.STRING:
            return value, ["is not a string"]

        reasons = []
        length = len(value)

        if rule.filter_pattern is not None:
            if not rule.filter_pattern.search(value):
                reasons.append(f"does not pass regex filter: /{rule.filter_pattern.pattern}/")
        elif not rule.allow_empty and value == "":
            reasons.append("is empty")

        if rule.max_length and length > rule.max_length:
            reasons.append(f"is longer than max length {rule.max_length}")

        if rule.min_length and length < rule.min_length:
            reasons.append(f"is shorter than min length {rule.min_length}")

        return value, reasons
