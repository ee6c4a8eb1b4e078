"""argcheck — named argument checker.

Declare a rule per argument, hand over the argument map, and get one error
listing every violation:

    import argcheck

    argcheck.set_mode("strict")
    argcheck.validate({"item_id": {"kind": "string"}}, arg_map)
"""

from argcheck.decorators import check_args
from argcheck.errors import ArgCheckError, BadInputError, ValidationFailure
from argcheck.logs import configure_logging
from argcheck.validators import (
    UNDEFINED,
    AnyRule,
    ArrayRule,
    BooleanRule,
    CheckResult,
    FunctionRule,
    IntegerRule,
    MapRule,
    Mode,
    NumberRule,
    RuleEngine,
    StringRule,
    SvgElementRule,
    TypeTag,
    Violation,
    classify,
    current_mode,
    normalize,
    rule_engine,
    set_mode,
    validate,
)

__all__ = [
    "ArgCheckError",
    "BadInputError",
    "ValidationFailure",
    "RuleEngine",
    "rule_engine",
    "set_mode",
    "current_mode",
    "validate",
    "normalize",
    "check_args",
    "classify",
    "configure_logging",
    "Mode",
    "TypeTag",
    "UNDEFINED",
    "CheckResult",
    "Violation",
    "AnyRule",
    "ArrayRule",
    "BooleanRule",
    "FunctionRule",
    "IntegerRule",
    "MapRule",
    "NumberRule",
    "StringRule",
    "SvgElementRule",
]
