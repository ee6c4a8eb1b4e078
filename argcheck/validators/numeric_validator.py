"""Numeric validators — integer format, bounds, and autobounding."""

from typing import Any

from argcheck.validators.base import BaseValidator
from argcheck.validators.classifier import is_integer_formatted
from argcheck.validators.models import IntegerRule, NumberRule, TypeTag


class IntegerValidator(BaseValidator):
    """Validates whole numbers written without a fraction or exponent."""

    @property
    def kind(self) -> str:
        return "integer"

    def validate(self, value: Any, rule: IntegerRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        if value_type is not TypeTag.NUMBER:
            return value, [f"is not a number ({value_type.value})"]

        # 1.0 is numerically integral but not integer-formatted
        if not is_integer_formatted(value):
            return value, ["is not an integer"]

        return self._check_bounds(value, rule.min_int, rule.max_int, rule.autobound)


class NumberValidator(BaseValidator):

    @property
    def kind(self) -> str:
        return "number"

    def validate(self, value: Any, rule: NumberRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        if value_type is not TypeTag.NUMBER:
            return value, ["is not a number"]

        return self._check_bounds(value, rule.min_num, rule.max_num, rule.autobound)
