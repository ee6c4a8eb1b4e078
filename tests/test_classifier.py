"""Tests for argcheck.validators.classifier - value classification helpers."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections import deque

import pytest

from argcheck.validators.classifier import (
    classify,
    is_falsey,
    is_integer_formatted,
    is_zero,
    item_count,
    preview,
)
from argcheck.validators.models import UNDEFINED, TypeTag
from argcheck.validators.reference_data import SVG_NAMESPACE

# =============================================================================
# Tests: classify
# =============================================================================


class TestClassify:
    """Tests for classify() type tags."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, TypeTag.NULL),
            (UNDEFINED, TypeTag.UNDEFINED),
            (True, TypeTag.BOOLEAN),
            (False, TypeTag.BOOLEAN),
            (0, TypeTag.NUMBER),
            (2.5, TypeTag.NUMBER),
            ("", TypeTag.STRING),
            ("text", TypeTag.STRING),
            (len, TypeTag.FUNCTION),
            (lambda: None, TypeTag.FUNCTION),
            ([1, 2], TypeTag.ARRAY),
            ((), TypeTag.ARRAY),
            ({}, TypeTag.OBJECT),
            ({"a": 1}, TypeTag.OBJECT),
            (re.compile("a+"), TypeTag.REGEXP),
            (object(), TypeTag.OBJECT),
            (set(), TypeTag.OBJECT),
        ],
    )
    def test_basic_values(self, value, expected):
        assert classify(value) is expected

    def test_bool_is_not_number(self):
        """bool is an int subclass but classifies as Boolean."""
        assert classify(True) is TypeTag.BOOLEAN

    def test_array_like_structures(self):
        """Non-empty indexable sequences classify as Array."""
        assert classify(deque([1, 2])) is TypeTag.ARRAY
        assert classify(range(3)) is TypeTag.ARRAY

    def test_empty_array_like_is_object(self):
        """Without an index 0 an array-like object is not an Array."""
        assert classify(deque()) is TypeTag.OBJECT

    def test_broken_sequence_is_object(self):
        """A value whose len() blows up still classifies."""

        class Broken:
            def __len__(self):
                raise ValueError("boom")

            def __getitem__(self, index):
                return index

        assert classify(Broken()) is TypeTag.OBJECT

    def test_bytes_are_not_arrays(self):
        assert classify(b"ab") is TypeTag.OBJECT

    def test_svg_group_element(self):
        element = ET.Element(f"{{{SVG_NAMESPACE}}}g")
        assert classify(element) is TypeTag.SVG_ELEMENT

    def test_other_svg_element_is_not_group(self):
        element = ET.Element(f"{{{SVG_NAMESPACE}}}rect")
        assert classify(element) is TypeTag.OBJECT


# =============================================================================
# Tests: predicates
# =============================================================================


class TestIntegerFormat:
    """Tests for is_integer_formatted()."""

    @pytest.mark.parametrize("value", [0, 5, -5, 10**20, "+7"])
    def test_accepts_digits(self, value):
        assert is_integer_formatted(value)

    @pytest.mark.parametrize("value", [1.0, 2.5, 1e20, float("inf"), "1_000"])
    def test_rejects_fraction_and_exponent(self, value):
        """1.0 is integral but not integer-formatted."""
        assert not is_integer_formatted(value)


class TestFalsey:
    """Tests for is_falsey() and is_zero()."""

    @pytest.mark.parametrize("value", [None, UNDEFINED, False, 0, 0.0, float("nan"), ""])
    def test_falsey_values(self, value):
        assert is_falsey(value)

    @pytest.mark.parametrize("value", [[], {}, "a", 1, -1, True, object()])
    def test_truthy_values(self, value):
        """Empty containers stay truthy."""
        assert not is_falsey(value)

    def test_is_zero(self):
        assert is_zero(0)
        assert is_zero(0.0)
        assert not is_zero(False)
        assert not is_zero("0")
        assert not is_zero(None)


class TestItemCount:
    def test_sized(self):
        assert item_count([1, 2, 3]) == 3
        assert item_count({"a": 1}) == 1

    def test_plain_object_counts_attributes(self):
        class Box:
            def __init__(self):
                self.width = 1

        assert item_count(Box()) == 1
        assert item_count(object()) == 0


# =============================================================================
# Tests: preview
# =============================================================================


class TestPreview:
    """Tests for preview() truncation."""

    def test_short_value_unchanged(self):
        assert preview("short") == "short"

    def test_exactly_twenty_chars_unchanged(self):
        assert preview("x" * 20) == "x" * 20

    def test_long_value_truncated(self):
        assert preview("abcdefghijklmnopqrstuvwxyz") == "(abcdefghijklmnopq...)"

    def test_falsey_value_is_blank(self):
        assert preview(0) == ""
        assert preview(None) == ""
        assert preview(UNDEFINED) == ""

    def test_number(self):
        assert preview(75) == "75"
