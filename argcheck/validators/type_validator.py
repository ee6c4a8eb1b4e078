"""Type validators — kinds whose only constraint is the value's classification."""

from typing import Any

from argcheck.validators.base import BaseValidator
from argcheck.validators.models import BaseRule, TypeTag


class AnyValidator(BaseValidator):
    """Accepts every value."""

    @property
    def kind(self) -> str:
        return "any"

    def validate(self, value: Any, rule: BaseRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        return value, []


class BooleanValidator(BaseValidator):

    @property
    def kind(self) -> str:
        return "boolean"

    def validate(self, value: Any, rule: BaseRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        return value, self._check_type(value_type, TypeTag.BOOLEAN, "is not a boolean")


class FunctionValidator(BaseValidator):

    @property
    def kind(self) -> str:
        return "function"

    def validate(self, value: Any, rule: BaseRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        return value, self._check_type(value_type, TypeTag.FUNCTION, "is not a function")


class SvgElementValidator(BaseValidator):
    """Accepts an SVG <g> element only; other SVG shapes are rejected."""

    @property
    def kind(self) -> str:
        return "svgelement"

    def validate(self, value: Any, rule: BaseRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        return value, self._check_type(
            value_type,
            TypeTag.SVG_ELEMENT,
            f"is not an SVG element ({value_type.value})",
        )
