"""Rule Engine — checks one argument map against one rule map.

This is the main entry point for argument checking. It walks the rule map,
dispatches each argument to the validator for its kind, injects defaults,
and collects every violation into one error.

Usage:
    engine = RuleEngine(mode="strict")
    engine.validate(
        {"item_id": {"kind": "string"}, "height_px": {"kind": "integer", "max_int": 50, "autobound": True}},
        arg_map,
    )
    # arg_map now holds injected defaults and clamped values
"""

import time
from collections.abc import Mapping
from typing import Any, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from argcheck.config import get_settings
from argcheck.errors import ArgCheckError
from argcheck.validators.base import BaseValidator
from argcheck.validators.classifier import classify, is_falsey, is_zero
from argcheck.validators.collection_validator import ArrayValidator, MapValidator
from argcheck.validators.models import (
    RULE_ADAPTER,
    SUPPORTED_KINDS,
    UNDEFINED,
    BaseRule,
    Change,
    CheckResult,
    Mode,
    parse_mode,
)
from argcheck.validators.numeric_validator import IntegerValidator, NumberValidator
from argcheck.validators.reference_data import (
    ALLOW_EXTRA_KEYS_KEY,
    CHECK_NAMES_KEY,
    DIRECTIVE_PREFIX,
    NAME_CONVENTIONS,
    SKIP_KEYS_KEY,
)
from argcheck.validators.report import ViolationReport, build_error
from argcheck.validators.string_validator import StringValidator
from argcheck.validators.type_validator import (
    AnyValidator,
    BooleanValidator,
    FunctionValidator,
    SvgElementValidator,
)

logger = structlog.get_logger()


class RuleEngine:
    """Evaluates rule maps against argument maps.

    Each engine owns its mode, so independent engines never interfere.
    The module-level ``rule_engine`` is the process-wide default.

    Modes:
        - off: every call returns immediately, even on malformed input
        - normal: directives in the rule map are honored
        - strict: names are always checked; extra keys and skip lists are not allowed
    """

    def __init__(
        self,
        mode: Any = Mode.NORMAL,
        name_conventions: Optional[Mapping] = None,
        validators: Optional[list[BaseValidator]] = None,
    ):
        """Initialize with default validators or custom list.

        Args:
            mode: Initial mode; anything unrecognized means normal
            name_conventions: kind -> compiled pattern; defaults to NAME_CONVENTIONS
            validators: Optional list of validators. If None, uses all defaults.
        """
        self._mode = parse_mode(mode)
        self.name_conventions = dict(NAME_CONVENTIONS if name_conventions is None else name_conventions)
        self.validators: dict[str, BaseValidator] = {
            v.kind: v for v in (validators or self._default_validators())
        }

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        return [
            AnyValidator(),
            ArrayValidator(),
            BooleanValidator(),
            FunctionValidator(),
            IntegerValidator(),
            MapValidator(),
            NumberValidator(),
            StringValidator(),
            SvgElementValidator(),
        ]

    # ── Mode ──

    @property
    def mode(self) -> Mode:
        return self._mode

    def set_mode(self, mode_key: Any) -> None:
        """Set the mode. Never raises: unrecognized input resets to normal."""
        mode = parse_mode(mode_key)
        if mode is not self._mode:
            logger.info("mode_changed", previous=self._mode.value, mode=mode.value)
        self._mode = mode

    # ── Entry points ──

    def validate(self, rule_map: Any, arg_map: Any) -> None:
        """Check arg_map and write defaults and clamped values back into it.

        The in-place update only happens when every rule passes; on failure
        arg_map is left as it was and ValidationFailure is raised.

        Raises:
            BadInputError: rule_map or arg_map is not a mapping
            ValidationFailure: one or more violations were found
        """
        if self._mode is Mode.OFF:
            return

        result = self._checked(rule_map, arg_map)

        for name, change in result.changes.items():
            arg_map[name] = change.after

    def normalize(self, rule_map: Any, arg_map: Any) -> Any:
        """Check arg_map and return a new dict holding defaults and clamped values.

        In off mode arg_map is returned as given.
        """
        if self._mode is Mode.OFF:
            return arg_map

        return self._checked(rule_map, arg_map).args

    def evaluate(self, rule_map: Any, arg_map: Any) -> CheckResult:
        """Run one evaluation pass without raising for violations or touching the inputs.

        Raises:
            BadInputError: rule_map or arg_map is not a mapping (not in off mode)
        """
        mode = self._mode
        if mode is Mode.OFF:
            return CheckResult(args=dict(arg_map) if isinstance(arg_map, Mapping) else {})

        if not isinstance(rule_map, Mapping) or not isinstance(arg_map, Mapping):
            logger.error(
                "bad_input",
                rule_map_type=type(rule_map).__name__,
                arg_map_type=type(arg_map).__name__,
            )
            raise build_error(
                "BadInput",
                "Input does not consist of two maps",
                {"rule_map": rule_map, "arg_map": arg_map},
            )

        start_time = time.perf_counter()
        strict = mode is Mode.STRICT

        args = dict(arg_map)
        changes: dict[str, Change] = {}
        report = ViolationReport()

        # Keys of arg_map not yet matched to a rule, in caller order
        unseen = dict.fromkeys(arg_map)
        claimed: set = set()

        # Skipped keys are exempt from validation; strict mode does not allow this
        if not strict:
            for name in rule_map.get(SKIP_KEYS_KEY) or ():
                unseen.pop(name, None)
                claimed.add(name)

        check_names = strict or bool(rule_map.get(CHECK_NAMES_KEY))

        for name, raw_rule in rule_map.items():
            if isinstance(name, str) and name.startswith(DIRECTIVE_PREFIX):
                continue
            if name in claimed:
                continue

            claimed.add(name)
            unseen.pop(name, None)
            self._evaluate_rule(name, raw_rule, args, changes, report, check_names)

        # Report unexpected arguments
        if strict or not rule_map.get(ALLOW_EXTRA_KEYS_KEY):
            for name in unseen:
                report.add_unexpected(name)

        result = CheckResult(args=args, changes=changes, violations=report.violations)

        logger.debug(
            "evaluation_complete",
            mode=mode.value,
            passed=result.passed,
            violations=len(result.violations),
            changes=len(changes),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result

    # ── Internals ──

    def _checked(self, rule_map: Any, arg_map: Any) -> CheckResult:
        """Evaluate and raise ValidationFailure if anything failed."""
        result = self.evaluate(rule_map, arg_map)
        if result.passed:
            return result

        error: ArgCheckError = build_error(
            "ValidationFailure",
            "Did not pass validation criteria",
            {"msg_list": result.msg_list, "rule_map": rule_map, "arg_map": result.args},
            violations=list(result.violations),
        )
        logger.error(
            "validation_failed",
            error=error.name,
            total_violations=len(result.violations),
            msg_list=result.msg_list,
        )
        raise error

    def _evaluate_rule(
        self,
        name: str,
        raw_rule: Any,
        args: dict,
        changes: dict,
        report: ViolationReport,
        check_names: bool,
    ) -> None:
        """Steps for a single rule entry; violations land in report."""
        value = args.get(name, UNDEFINED)

        rule, reasons = self._parse_rule(raw_rule)
        if rule is None:
            report.add(name, raw_rule, value, reasons)
            return

        defaulted = False
        if value is UNDEFINED:
            if rule.has_default:
                # Defaults are injected as given, never re-checked
                value = rule.default
                args[name] = value
                changes[name] = Change(action="default", before=UNDEFINED, after=value)
                defaulted = True
            elif not rule.is_optional:
                report.add(name, rule, value, ["is required but not provided."])
                return

        if check_names:
            reasons.extend(self._check_name(name, rule.kind))

        # Exempted falsey values skip every remaining check, naming included
        if rule.allow_falsey and is_falsey(value) and not is_zero(value):
            return

        if not defaulted and self._should_dispatch(value, rule):
            validator = self.validators.get(rule.kind)
            if validator is None:
                reasons.append(f"data type {rule.kind} is not supported")
            else:
                adjusted, found = validator.validate(value, rule, classify(value))
                reasons.extend(found)
                if adjusted is not value:
                    args[name] = adjusted
                    changes[name] = Change(action="clamp", before=value, after=adjusted)

        report.add(name, rule, value, reasons)

    @staticmethod
    def _should_dispatch(value: Any, rule: BaseRule) -> bool:
        """Present, required, and truthy or zero.

        Optional arguments are never type-checked. Other falsey values skip
        the kind check, except "" under a string rule so empty-string and
        pattern rules apply.
        """
        if value is UNDEFINED or rule.is_optional:
            return False
        if rule.kind == "string" and isinstance(value, str):
            return True
        return not is_falsey(value) or is_zero(value)

    def _parse_rule(self, raw_rule: Any) -> tuple[Optional[BaseRule], list[str]]:
        """Turn a rule entry into its model, or explain why it cannot be used."""
        if isinstance(raw_rule, BaseRule):
            return raw_rule, []

        if not isinstance(raw_rule, Mapping) or not raw_rule.get("kind"):
            return None, ["Required rule *kind* not provided"]

        kind = raw_rule["kind"]
        if kind not in SUPPORTED_KINDS:
            return None, [f"data type {kind} is not supported"]

        try:
            return RULE_ADAPTER.validate_python(dict(raw_rule)), []
        except PydanticValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'][1:]) or kind}: {err['msg']}"
                for err in e.errors()
            )
            return None, [f"rule is malformed: {details}"]

    def _check_name(self, name: str, kind: str) -> list[str]:
        pattern = self.name_conventions.get(kind)
        if pattern is not None and not pattern.search(name):
            return [f"name does not match convention - /{pattern.pattern}/"]
        return []


# Module-level default engine; its mode is the process-wide mode
rule_engine = RuleEngine(mode=get_settings().MODE)


def set_mode(mode_key: Any) -> None:
    rule_engine.set_mode(mode_key)


def current_mode() -> Mode:
    return rule_engine.mode


def validate(rule_map: Any, arg_map: Any) -> None:
    rule_engine.validate(rule_map, arg_map)


def normalize(rule_map: Any, arg_map: Any) -> Any:
    return rule_engine.normalize(rule_map, arg_map)
