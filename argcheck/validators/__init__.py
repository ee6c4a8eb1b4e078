"""Argument validators — rule models, kind validators, and the rule engine.

Usage:
    from argcheck.validators import rule_engine

    rule_engine.validate(rule_map, arg_map)
    # arg_map now holds injected defaults and clamped values
"""

from argcheck.validators.classifier import classify
from argcheck.validators.engine import (
    RuleEngine,
    current_mode,
    normalize,
    rule_engine,
    set_mode,
    validate,
)
from argcheck.validators.models import (
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
    StringRule,
    SvgElementRule,
    TypeTag,
    Violation,
    parse_mode,
)

__all__ = [
    "RuleEngine",
    "rule_engine",
    "set_mode",
    "current_mode",
    "validate",
    "normalize",
    "classify",
    "parse_mode",
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
