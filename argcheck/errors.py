"""Error types raised by the engine.

Every error carries a stable ``name`` (``argcheck:<ErrorKind>``), a
human-readable ``description`` and a ``data`` payload for programmatic
inspection:

    {
        "msg_list": [...],   # validation failures only
        "rule_map": {...},
        "arg_map": {...},
    }
"""

from typing import Any, Optional

ERROR_NAME_PREFIX = "argcheck"


class ArgCheckError(ValueError):
    """Base for all argcheck errors."""

    error_kind = "Error"

    def __init__(
        self,
        description: str,
        data: Optional[dict[str, Any]] = None,
        violations: Optional[list] = None,
    ):
        super().__init__(description)
        self.name = f"{ERROR_NAME_PREFIX}:{self.error_kind}"
        self.description = description
        self.data = data or {}
        self.violations = violations or []

    @property
    def msg_list(self) -> list[str]:
        return list(self.data.get("msg_list", []))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "data": self.data}

    def __str__(self) -> str:
        lines = [f"{self.name}: {self.description}"]
        lines.extend(f"  - {msg}" for msg in self.msg_list)
        return "\n".join(lines)


class BadInputError(ArgCheckError):
    """The rule map or the argument map is not a mapping."""

    error_kind = "BadInput"


class ValidationFailure(ArgCheckError):
    """One or more arguments failed their rules."""

    error_kind = "ValidationFailure"


ERROR_KINDS: dict[str, type[ArgCheckError]] = {
    cls.error_kind: cls for cls in (BadInputError, ValidationFailure)
}
