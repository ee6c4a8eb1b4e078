"""Base validator — abstract class implementing the Strategy Pattern.

Each kind validator is a standalone, independently testable unit.
New kinds are added by registering a validator, without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from argcheck.validators.models import BaseRule, TypeTag


class BaseValidator(ABC):
    """Abstract base for all kind validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns the (possibly adjusted) value and a list of reasons
        - an empty reason list means the value passed
        - value problems are reported, never raised
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Rule kind this validator handles."""
        ...

    @abstractmethod
    def validate(self, value: Any, rule: BaseRule, value_type: TypeTag) -> tuple[Any, list[str]]:
        """Check a value against a rule.

        Args:
            value: The argument value
            rule: The parsed rule for this argument
            value_type: Result of classify(value)

        Returns:
            Tuple of (value, reasons). Numeric validators may return a clamped value.
        """
        ...

    # ── Helper Methods ──

    def _check_type(self, value_type: TypeTag, expected: TypeTag, reason: str) -> list[str]:
        """Single-reason list when the classification does not match."""
        if value_type is not expected:
            return [reason]
        return []

    def _check_bounds(
        self,
        value: Any,
        minimum: Optional[float],
        maximum: Optional[float],
        autobound: bool,
    ) -> tuple[Any, list[str]]:
        """Clamp or report a numeric value against its limits.

        Both limits are checked, the second against the possibly clamped value.
        """
        reasons = []

        if maximum is not None and value > maximum:
            if autobound:
                value = maximum
            else:
                reasons.append(f"exceeds allowed maximum of {maximum}")

        if minimum is not None and value < minimum:
            if autobound:
                value = minimum
            else:
                reasons.append(f"below allowed minimum of {minimum}")

        return value, reasons
