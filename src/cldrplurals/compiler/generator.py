"""Combine per-category predicates into one decision procedure.

A locale's plural rules are a list of (category, condition) pairs. The
decision procedure tests them in fixed category priority order
(ZERO, ONE, TWO, FEW, MANY) and returns the first category whose
predicate holds. OTHER is never tested: it is the fallback.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from cldrplurals.enums import PluralCategory
from cldrplurals.operands import OperandSource
from cldrplurals.syntax import PluralRuleParser, serialize_condition
from cldrplurals.syntax.ast import Condition

from .ir import Predicate, evaluate
from .lowering import lower_condition

__all__ = [
    "Branch",
    "DecisionProcedure",
    "build_decision",
    "compile_rule_set",
]


@dataclass(frozen=True, slots=True)
class Branch:
    """One test of a decision chain.

    Attributes:
        category: Category returned when the predicate holds
        predicate: Lowered condition
        source: Canonical rule text the predicate was lowered from, if known
    """

    category: PluralCategory
    predicate: Predicate
    source: str | None = None


@dataclass(frozen=True, slots=True)
class DecisionProcedure:
    """Priority-ordered chain of branches, falling back to OTHER.

    Immutable and pure: calling it only reads the operand source.

    Example:
        >>> from cldrplurals.operands import PluralOperands
        >>> from cldrplurals.syntax import parse_condition
        >>> choose = compile_rule_set([(PluralCategory.ONE, parse_condition("i = 1 and v = 0"))])
        >>> choose(PluralOperands.from_value(1))
        <PluralCategory.ONE: 'one'>
        >>> choose(PluralOperands.from_value("1.0"))
        <PluralCategory.OTHER: 'other'>
    """

    branches: tuple[Branch, ...] = ()

    def __call__(self, operands: OperandSource) -> PluralCategory:
        for branch in self.branches:
            if evaluate(branch.predicate, operands):
                return branch.category
        return PluralCategory.OTHER

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories this procedure can return, in test order, OTHER last."""
        return (*(b.category for b in self.branches), PluralCategory.OTHER)


def build_decision(branches: Iterable[Branch]) -> DecisionProcedure:
    """Order branches by category priority and drop OTHER.

    The sort is stable: branches of equal category keep their input order.
    An empty input yields a procedure that always returns OTHER.
    """
    ordered = sorted(
        (b for b in branches if b.category is not PluralCategory.OTHER),
        key=lambda b: b.category.priority,
    )
    return DecisionProcedure(tuple(ordered))


def compile_rule_set(
    rule_set: Sequence[tuple[PluralCategory | str, Condition | str]],
    *,
    parser: PluralRuleParser | None = None,
) -> DecisionProcedure:
    """Lower a locale rule set and build its decision procedure.

    Args:
        rule_set: (category, condition) pairs. Categories may be given as
            their CLDR names, conditions as rule text (samples are ignored).
        parser: Parser used for rule text (default: PluralRuleParser())

    Raises:
        ValueError: If a category name is not a CLDR plural category
        PluralRuleSyntaxError: If rule text does not parse
    """
    rule_parser = parser or PluralRuleParser()
    branches: list[Branch] = []
    for category, condition in rule_set:
        if isinstance(condition, str):
            condition = rule_parser.parse_rule(condition).condition
        branches.append(
            Branch(
                category=PluralCategory(category),
                predicate=lower_condition(condition),
                source=serialize_condition(condition),
            )
        )
    return build_decision(branches)
