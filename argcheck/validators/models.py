"""Validation models — modes, type tags, rule variants, and result structure.

Rules are a tagged union on ``kind``: each variant carries only the
constraints that make sense for its kind.
"""

import re
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Mode(str, Enum):
    """Engine behavior switch."""

    OFF = "off"        # Every call is a no-op
    NORMAL = "normal"  # Directives in the rule map are honored
    STRICT = "strict"  # Names always checked, extra and skipped keys always rejected


_MODE_ALIASES = {
    "off": Mode.OFF,
    "disabled": Mode.OFF,
    "strict": Mode.STRICT,
}


def parse_mode(mode_key: Any) -> Mode:
    """Map any input to a Mode. Unrecognized input resets to NORMAL."""
    if isinstance(mode_key, Mode):
        return mode_key
    if not isinstance(mode_key, str):
        return Mode.NORMAL
    return _MODE_ALIASES.get(mode_key, Mode.NORMAL)


class TypeTag(str, Enum):
    """Semantic type of a runtime value."""

    NULL = "Null"
    UNDEFINED = "Undefined"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    FUNCTION = "Function"
    ARRAY = "Array"
    OBJECT = "Object"
    REGEXP = "RegExp"
    SVG_ELEMENT = "SVGGElement"


class _Undefined:
    """Marker for an argument that was not supplied at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return ""


UNDEFINED = _Undefined()


# ── Rules ──


class BaseRule(BaseModel):
    """Constraints shared by every rule kind."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    is_optional: bool = False
    default: Any = None
    allow_falsey: bool = False  # Skip checks for None, False, NaN and ""

    @property
    def has_default(self) -> bool:
        """True when a default was given, even if that default is None."""
        return "default" in self.model_fields_set


class AnyRule(BaseRule):
    kind: Literal["any"] = "any"


class BooleanRule(BaseRule):
    kind: Literal["boolean"] = "boolean"


class FunctionRule(BaseRule):
    kind: Literal["function"] = "function"


class SvgElementRule(BaseRule):
    kind: Literal["svgelement"] = "svgelement"


class ArrayRule(BaseRule):
    kind: Literal["array"] = "array"
    allow_empty: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None


class MapRule(BaseRule):
    kind: Literal["map"] = "map"
    allow_empty: bool = False


class IntegerRule(BaseRule):
    kind: Literal["integer"] = "integer"
    min_int: Optional[int] = None
    max_int: Optional[int] = None
    autobound: bool = False


class NumberRule(BaseRule):
    kind: Literal["number"] = "number"
    min_num: Optional[Union[int, float]] = None
    max_num: Optional[Union[int, float]] = None
    autobound: bool = False


class StringRule(BaseRule):
    kind: Literal["string"] = "string"
    allow_empty: bool = False
    filter_pattern: Optional[re.Pattern] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None


Rule = Annotated[
    Union[
        AnyRule,
        ArrayRule,
        BooleanRule,
        FunctionRule,
        IntegerRule,
        MapRule,
        NumberRule,
        StringRule,
        SvgElementRule,
    ],
    Field(discriminator="kind"),
]

RULE_ADAPTER: TypeAdapter = TypeAdapter(Rule)

SUPPORTED_KINDS = frozenset(
    {"any", "array", "boolean", "function", "integer", "map", "number", "string", "svgelement"}
)


# ── Results ──


class Violation(BaseModel):
    """One failing argument, or one unexpected argument."""

    arg_name: str
    kind: Optional[str] = None
    is_optional: bool = False
    value_preview: str = ""
    reasons: list[str] = Field(default_factory=list)
    message: str


class Change(BaseModel):
    """A value the engine wrote into the argument map."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    action: Literal["default", "clamp"]
    before: Any = None
    after: Any = None


class CheckResult(BaseModel):
    """Outcome of one evaluation pass. The caller's maps are never touched."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    args: dict[str, Any] = Field(default_factory=dict)
    changes: dict[str, Change] = Field(default_factory=dict)
    violations: list[Violation] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def msg_list(self) -> list[str]:
        return [v.message for v in self.violations]
