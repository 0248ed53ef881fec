"""Plural rule AST (Abstract Syntax Tree) node definitions.

Complete node set for the CLDR plural rule grammar (UTS #35, Part 3,
section "Language Plural Rules") plus the informational sample clauses.

All nodes are frozen, slotted dataclasses: re-parsing the same text yields
structurally equal trees, and nodes can be used as dict keys.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass

from cldrplurals.enums import Operand, Operator

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Condition grammar
    "Value",
    "Range",
    "RangeListItem",
    "RangeList",
    "Expression",
    "Relation",
    "AndCondition",
    "Condition",
    # Samples
    "DecimalValue",
    "SampleRange",
    "SampleList",
    "Samples",
    # Root
    "Rule",
]

# ============================================================================
# CONDITION GRAMMAR
# ============================================================================


@dataclass(frozen=True, slots=True)
class Value:
    """Non-negative integer literal: digit+"""

    value: int

    def __post_init__(self) -> None:
        """Validate value invariants."""
        if self.value < 0:
            msg = f"Value must be >= 0, got {self.value}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive integer range: value..value

    Attributes:
        lower: First member of the range
        upper: Last member of the range

    Example:
        Source: "2..4"
        Range(lower=Value(2), upper=Value(4)) stands for {2, 3, 4}
    """

    lower: Value
    upper: Value


# A range list element: single value or inclusive range.
RangeListItem = Value | Range


@dataclass(frozen=True, slots=True)
class RangeList:
    """Comma-separated range list.

    Semantically a set; parse order is preserved for serialization.
    """

    items: tuple[RangeListItem, ...] = ()

    def bounds(self) -> tuple[tuple[int, int], ...]:
        """Each item as an inclusive (lower, upper) pair.

        Single values become zero-width ranges.

        Example:
            >>> RangeList((Value(1), Range(Value(3), Value(5)))).bounds()
            ((1, 1), (3, 5))
        """
        pairs: list[tuple[int, int]] = []
        for item in self.items:
            match item:
                case Value(value=v):
                    pairs.append((v, v))
                case Range(lower=lo, upper=hi):
                    pairs.append((lo.value, hi.value))
        return tuple(pairs)


@dataclass(frozen=True, slots=True)
class Expression:
    """Left-hand side of a relation: operand ("mod" value)?

    Examples:
        "n"        -> Expression(Operand.N)
        "i % 100"  -> Expression(Operand.I, Value(100))
    """

    operand: Operand
    modulus: Value | None = None


@dataclass(frozen=True, slots=True)
class Relation:
    """One atomic test: expression operator range_list

    Example:
        Source: "n % 10 = 2..4"
        Relation(Expression(N, Value(10)), Operator.EQ, RangeList((Range(2, 4),)))
    """

    expression: Expression
    operator: Operator
    range_list: RangeList


@dataclass(frozen=True, slots=True)
class AndCondition:
    """Conjunction of relations joined by 'and'. Never empty after parsing."""

    relations: tuple[Relation, ...]


@dataclass(frozen=True, slots=True)
class Condition:
    """Disjunction of and-conditions joined by 'or'.

    An empty condition is always true; CLDR writes the 'other' rule this way.
    """

    and_conditions: tuple[AndCondition, ...] = ()

    @property
    def is_always_true(self) -> bool:
        """True for the empty condition."""
        return not self.and_conditions


# ============================================================================
# SAMPLES
# ============================================================================


@dataclass(frozen=True, slots=True)
class DecimalValue:
    """Sample number as written: integer ("." digits)? (("e"|"c") digits)?

    The fraction is kept as a digit string so trailing zeros survive
    ("1.50" and "1.5" are different samples for the v and f operands).
    """

    integer: int
    fraction: str | None = None
    exponent: int | None = None

    def __str__(self) -> str:
        text = str(self.integer)
        if self.fraction is not None:
            text += "." + self.fraction
        if self.exponent is not None:
            text += f"e{self.exponent}"
        return text


@dataclass(frozen=True, slots=True)
class SampleRange:
    """Single sample or low~high sample range."""

    lower: DecimalValue
    upper: DecimalValue | None = None


@dataclass(frozen=True, slots=True)
class SampleList:
    """Comma-separated sample ranges with optional trailing ellipsis.

    Attributes:
        sample_ranges: Parsed samples in source order
        ellipsis: True when the list ends with '...' or '…' (unbounded)
    """

    sample_ranges: tuple[SampleRange, ...]
    ellipsis: bool = False


@dataclass(frozen=True, slots=True)
class Samples:
    """The @integer and @decimal clauses of one rule."""

    integer: SampleList | None = None
    decimal: SampleList | None = None


# ============================================================================
# ROOT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Rule:
    """One plural category's rule: condition plus documentation samples."""

    condition: Condition
    samples: Samples | None = None
