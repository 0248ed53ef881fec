"""Enumerations for cldrplurals type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum

__all__ = [
    "Operand",
    "Operator",
    "PluralCategory",
    "RuleType",
]


class PluralCategory(StrEnum):
    """CLDR plural category.

    Members are declared in priority order: a decision chain tests
    ZERO first and falls back to OTHER last.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def priority(self) -> int:
        """Position in the fixed test order (ZERO=0 ... OTHER=5)."""
        return _CATEGORY_PRIORITY[self]


_CATEGORY_PRIORITY: dict[PluralCategory, int] = {
    category: index for index, category in enumerate(PluralCategory)
}


class RuleType(StrEnum):
    """CLDR plural rule family.

    StrEnum provides automatic string conversion: str(RuleType.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Counting rules: 1 apple, 2 apples"""

    ORDINAL = "ordinal"
    """Ranking rules: 1st place, 2nd place"""


class Operand(StrEnum):
    """CLDR numeric operand of a source number.

    StrEnum provides automatic string conversion: str(Operand.N) == "n"
    """

    N = "n"
    """Absolute value of the source number"""

    I = "i"  # noqa: E741 - CLDR operand name
    """Integer digits of n"""

    V = "v"
    """Number of visible fraction digits, with trailing zeros"""

    W = "w"
    """Number of visible fraction digits, without trailing zeros"""

    F = "f"
    """Visible fraction digits, with trailing zeros, as an integer"""

    T = "t"
    """Visible fraction digits, without trailing zeros, as an integer"""

    E = "e"
    """Compact decimal exponent"""

    C = "c"
    """Deprecated synonym of e"""

    @property
    def is_integral(self) -> bool:
        """True for operands that can never carry a fraction.

        Only n keeps the fractional part of the source number.
        """
        return self is not Operand.N


class Operator(StrEnum):
    """Relation operator of a plural rule.

    Values are the canonical source spellings, so str(op) serializes it.
    """

    EQ = "="
    NOT_EQ = "!="
    IS = "is"
    IS_NOT = "is not"
    IN = "in"
    NOT_IN = "not in"
    WITHIN = "within"
    NOT_WITHIN = "not within"

    @property
    def is_negated(self) -> bool:
        """True for the four negating operators."""
        return self in _NEGATED_OPERATORS

    @property
    def positive(self) -> "Operator":
        """Non-negated counterpart (NOT_IN -> IN, EQ -> EQ)."""
        return _POSITIVE_OPERATOR.get(self, self)


_NEGATED_OPERATORS: frozenset[Operator] = frozenset(
    {Operator.NOT_EQ, Operator.IS_NOT, Operator.NOT_IN, Operator.NOT_WITHIN}
)

_POSITIVE_OPERATOR: dict[Operator, Operator] = {
    Operator.NOT_EQ: Operator.EQ,
    Operator.IS_NOT: Operator.IS,
    Operator.NOT_IN: Operator.IN,
    Operator.NOT_WITHIN: Operator.WITHIN,
}
