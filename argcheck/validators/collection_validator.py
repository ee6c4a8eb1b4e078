"""Collection validators — array length limits and map emptiness."""

from typing import Any

from argcheck.validators.base import BaseValidator
from argcheck.validators.classifier import item_count
from argcheck.validators.models import ArrayRule, MapRule, TypeTag


class ArrayValidator(BaseValidator):
    """Validates lists, tuples, and array-like sequences."""

    @property
    def kind(self) -> str:
        return "array"

    def validate(self, value: Any, rule: ArrayRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        if value_type is not TypeTag.ARRAY:
            return value, ["is not an array"]

        reasons = []
        count = item_count(value)

        # Each limit is checked independently
        if not rule.allow_empty and count == 0:
            reasons.append("is empty")

        if rule.max_length and count > rule.max_length:
            reasons.append(f"exceeds maximum length: {count} > {rule.max_length}")

        if rule.min_length and count < rule.min_length:
            reasons.append(f"below minimum length: {count} < {rule.min_length}")

        return value, reasons


class MapValidator(BaseValidator):
    """Validates mappings and plain objects."""

    @property
    def kind(self) -> str:
        return "map"

    def validate(self, value: Any, rule: MapRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        if value_type is not TypeTag.OBJECT:
            return value, ["is not a map"]

        if not rule.allow_empty and item_count(value) < 1:
            return value, ["is empty"]

        return value, []
