"""Shared fixtures for argcheck tests."""

from __future__ import annotations

import pytest
import structlog

from argcheck.validators.engine import RuleEngine, rule_engine


@pytest.fixture
def engine() -> RuleEngine:
    """Fresh engine in normal mode, independent of the default engine."""
    return RuleEngine()


@pytest.fixture
def strict_engine() -> RuleEngine:
    return RuleEngine(mode="strict")


@pytest.fixture(autouse=True)
def reset_default_engine():
    """Tests that touch the process-wide mode must not leak it."""
    previous = rule_engine.mode
    rule_engine.set_mode("normal")
    yield
    rule_engine.set_mode(previous)
    structlog.reset_defaults()
