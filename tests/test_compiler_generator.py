"""Tests for the category decision generator."""

from __future__ import annotations

import pytest
from hypothesis import given

from cldrplurals.compiler import (
    Branch,
    Const,
    DecisionProcedure,
    build_decision,
    compile_rule_set,
    lower_condition,
)
from cldrplurals.enums import PluralCategory
from cldrplurals.operands import PluralOperands
from cldrplurals.syntax import Condition, parse_condition
from tests.strategies import plural_numbers, rule_sets


def _ops(number: str | int) -> PluralOperands:
    return PluralOperands.from_value(number)


class TestBuildDecision:
    """Test decision chain construction."""

    def test_empty_input_always_other(self) -> None:
        """No pairs -> always OTHER."""
        procedure = build_decision([])

        assert procedure == DecisionProcedure()
        assert procedure(_ops(0)) is PluralCategory.OTHER
        assert procedure(_ops("1.5")) is PluralCategory.OTHER

    def test_first_match_wins(self) -> None:
        """ONE before FEW: 1 is ONE, 3 is FEW, 5 falls through to OTHER."""
        procedure = compile_rule_set(
            [
                (PluralCategory.ONE, parse_condition("n = 1")),
                (PluralCategory.FEW, parse_condition("n = 2..4")),
            ]
        )

        assert procedure(_ops(1)) is PluralCategory.ONE
        assert procedure(_ops(3)) is PluralCategory.FEW
        assert procedure(_ops(5)) is PluralCategory.OTHER

    def test_sorted_by_priority(self) -> None:
        """Branches are reordered ZERO..MANY regardless of input order."""
        procedure = build_decision(
            [
                Branch(PluralCategory.MANY, Const(True)),
                Branch(PluralCategory.ZERO, Const(True)),
                Branch(PluralCategory.TWO, Const(True)),
            ]
        )

        assert [b.category for b in procedure.branches] == [
            PluralCategory.ZERO,
            PluralCategory.TWO,
            PluralCategory.MANY,
        ]
        assert procedure(_ops(7)) is PluralCategory.ZERO

    def test_other_is_never_tested(self) -> None:
        """An explicit OTHER pair is dropped; OTHER stays the fallback."""
        procedure = build_decision(
            [
                Branch(PluralCategory.OTHER, Const(True)),
                Branch(PluralCategory.ONE, lower_condition(parse_condition("n = 1"))),
            ]
        )

        assert [b.category for b in procedure.branches] == [PluralCategory.ONE]
        assert procedure.categories == (PluralCategory.ONE, PluralCategory.OTHER)

    def test_stable_for_equal_categories(self) -> None:
        """Two branches of one category keep their input order."""
        first = Branch(PluralCategory.ONE, Const(False), source="first")
        second = Branch(PluralCategory.ONE, Const(True), source="second")

        procedure = build_decision([first, second])

        assert procedure.branches == (first, second)


class TestCompileRuleSet:
    """Test compile_rule_set convenience wrapper."""

    def test_accepts_rule_text_and_names(self) -> None:
        """Categories by name and conditions as rule text (samples ignored)."""
        procedure = compile_rule_set([("one", "i = 1 and v = 0 @integer 1")])

        assert procedure(_ops(1)) is PluralCategory.ONE
        assert procedure(_ops("1.0")) is PluralCategory.OTHER

    def test_source_is_canonical_text(self) -> None:
        """Each branch records its canonical rule text."""
        procedure = compile_rule_set([("one", "i=1 and v=0")])

        assert procedure.branches[0].source == "i = 1 and v = 0"

    def test_unknown_category_name(self) -> None:
        """Unknown category names are rejected."""
        with pytest.raises(ValueError, match="several"):
            compile_rule_set([("several", Condition())])


class TestDecisionProperties:
    """Property tests for decision procedures."""

    @given(rule_sets(), plural_numbers())
    def test_result_is_first_holding_category_by_priority(
        self, pairs: list[tuple[PluralCategory, Condition]], number: str
    ) -> None:
        """The answer is the highest-priority non-OTHER category whose rule holds."""
        operands = _ops(number)
        procedure = compile_rule_set(pairs)

        candidates = [
            category
            for category, condition in sorted(pairs, key=lambda p: p[0].priority)
            if category is not PluralCategory.OTHER
            and _condition_holds(condition, operands)
        ]
        expected = candidates[0] if candidates else PluralCategory.OTHER
        assert procedure(operands) is expected

    @given(plural_numbers())
    def test_empty_rule_set_is_other(self, number: str) -> None:
        """An empty rule set answers OTHER for every number."""
        assert compile_rule_set([])(_ops(number)) is PluralCategory.OTHER


def _condition_holds(condition: Condition, operands: PluralOperands) -> bool:
    """Evaluate one condition on its own."""
    return compile_rule_set([(PluralCategory.ONE, condition)])(operands) is PluralCategory.ONE
