"""Lower plural rule AST to the abstract predicate tree.

Operator semantics, for a value x = operand (mod m):

    =, is           x equals some member of the expanded range list
    in              x is an integer and equals some member
    within          lower <= x <= upper for some range (values are zero-width)
    !=, is not,
    not in,
    not within      negation of the positive form

Ranges stand for integer sets, so "=" against a range also requires x to
be an integer; "=" and "in" therefore lower to the same tree. Only n can
carry a fraction, so the IsInteger guard is emitted for n alone.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from cldrplurals.enums import Operator
from cldrplurals.syntax.ast import AndCondition, Condition, Relation

from .ir import (
    Compare,
    CompareOp,
    IsInteger,
    OperandRef,
    Predicate,
    TRUE,
    conjoin,
    disjoin,
    negate,
)

__all__ = [
    "lower_and_condition",
    "lower_condition",
    "lower_relation",
]


def _operand_ref(relation: Relation) -> OperandRef:
    modulus = relation.expression.modulus
    return OperandRef(
        relation.expression.operand,
        modulus.value if modulus is not None else None,
    )


def _member(ref: OperandRef, lower: int, upper: int) -> Predicate:
    """x is an integer in lower..upper."""
    if lower == upper:
        return Compare(ref, CompareOp.EQ, lower)
    terms: list[Predicate] = []
    if not ref.operand.is_integral:
        terms.append(IsInteger(ref))
    terms.append(Compare(ref, CompareOp.GE, lower))
    terms.append(Compare(ref, CompareOp.LE, upper))
    return conjoin(terms)


def _within(ref: OperandRef, lower: int, upper: int) -> Predicate:
    """lower <= x <= upper, fractions included."""
    if lower == upper:
        return Compare(ref, CompareOp.EQ, lower)
    return conjoin([Compare(ref, CompareOp.GE, lower), Compare(ref, CompareOp.LE, upper)])


def lower_relation(relation: Relation) -> Predicate:
    """Lower one relation to a predicate.

    An empty range list matches nothing, so the positive operators lower
    to Const(False) and the negated ones to Const(True).

    Example:
        >>> from cldrplurals.syntax import parse_condition
        >>> rel = parse_condition("i = 1").and_conditions[0].relations[0]
        >>> lower_relation(rel).value
        1
    """
    ref = _operand_ref(relation)
    bounds = relation.range_list.bounds()

    match relation.operator.positive:
        case Operator.EQ | Operator.IS | Operator.IN:
            # Equality with an integer member already implies integrality
            positive = disjoin(_member(ref, lo, hi) for lo, hi in bounds)
        case Operator.WITHIN:
            positive = disjoin(_within(ref, lo, hi) for lo, hi in bounds)
        case other:
            msg = f"Not a positive relation operator: {other!r}"
            raise ValueError(msg)

    return negate(positive) if relation.operator.is_negated else positive


def lower_and_condition(and_condition: AndCondition) -> Predicate:
    """Conjunction of the lowered relations."""
    return conjoin(lower_relation(r) for r in and_condition.relations)


def lower_condition(condition: Condition) -> Predicate:
    """Disjunction of the lowered and-conditions.

    The empty condition is always true and lowers to Const(True).
    """
    if condition.is_always_true:
        return TRUE
    return disjoin(lower_and_condition(a) for a in condition.and_conditions)
