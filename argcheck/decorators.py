"""Decorator that checks a function's keyword arguments before each call."""

import functools
from collections.abc import Mapping
from typing import Any, Callable, Optional

from argcheck.validators import engine as engine_module
from argcheck.validators.engine import RuleEngine


def check_args(rule_map: Mapping, engine: Optional[RuleEngine] = None) -> Callable:
    """Validate keyword arguments against rule_map on every call.

    The wrapped function receives the normalized keyword arguments, with
    defaults injected and numeric values clamped. Positional arguments pass
    through untouched. Uses the default engine unless one is given.

    Example:
        @check_args({"item_id": {"kind": "string"}, "is_pinned": {"kind": "boolean", "default": False}})
        def render(**kwargs):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            checker = engine or engine_module.rule_engine
            normalized = checker.normalize(rule_map, kwargs)
            return func(*args, **normalized)

        wrapper.rule_map = rule_map
        return wrapper

    return decorator
