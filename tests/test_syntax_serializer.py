"""Tests for plural rule serialization.

Canonical text output plus the parse -> serialize -> parse roundtrip.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from cldrplurals.syntax import (
    Condition,
    parse_condition,
    parse_rule,
    serialize_condition,
    serialize_rule,
)
from tests.strategies import conditions


class TestCanonicalForm:
    """Test the canonical spelling of serialized rules."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("n mod 10 in 2..4", "n % 10 in 2..4"),
            ("i=1   and v =0", "i = 1 and v = 0"),
            ("n = 0, 2..4 ,10", "n = 0,2..4,10"),
            ("n is not 2 or n not within 0..1", "n is not 2 or n not within 0..1"),
        ],
    )
    def test_condition(self, source: str, expected: str) -> None:
        """Whitespace and modulus spelling are normalized."""
        assert serialize_condition(parse_condition(source)) == expected

    def test_always_true_condition(self) -> None:
        """The empty condition serializes to ''."""
        assert serialize_condition(Condition()) == ""

    def test_rule_with_samples(self) -> None:
        """Samples follow the condition; '...' becomes '…'."""
        rule = parse_rule("n = 1 @integer 1, 21~31, ... @decimal 1.0, 1.50")

        assert serialize_rule(rule) == "n = 1 @integer 1, 21~31, … @decimal 1.0, 1.50"

    def test_other_rule(self) -> None:
        """A samples-only rule serializes without a leading space."""
        rule = parse_rule(" @integer 0~15, 100, 1000, …")

        assert serialize_rule(rule) == "@integer 0~15, 100, 1000, …"


class TestRoundtrip:
    """Property: serializing and re-parsing yields an equal AST."""

    @given(conditions())
    def test_condition_roundtrip(self, condition: Condition) -> None:
        """parse(serialize(ast)) == ast."""
        event(f"and_conditions={len(condition.and_conditions)}")
        assert parse_condition(serialize_condition(condition)) == condition

    @given(conditions())
    def test_serialization_is_idempotent(self, condition: Condition) -> None:
        """serialize(parse(serialize(ast))) == serialize(ast)."""
        text = serialize_condition(condition)
        assert serialize_condition(parse_condition(text)) == text
