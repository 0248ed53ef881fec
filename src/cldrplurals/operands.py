"""CLDR plural operands of a number.

Computes the operand vector a decision procedure consumes:

    n  absolute value of the source number
    i  integer digits of n
    v  number of visible fraction digits, with trailing zeros
    w  number of visible fraction digits, without trailing zeros
    f  visible fraction digits, with trailing zeros, as an integer
    t  visible fraction digits, without trailing zeros, as an integer
    e  compact decimal exponent (c is a deprecated synonym)

Visible fraction digits are the digits as written: 1.50 has v=2, f=50,
while 1.5 has v=1, f=5. Pass numbers as str or Decimal to keep trailing
zeros; floats are converted through their shortest repr.

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Protocol

__all__ = ["OperandSource", "PluralOperands"]


class OperandSource(Protocol):
    """Anything exposing the CLDR operands as attributes.

    Decision procedures read operands only through this interface, so
    callers may supply their own provider.
    """

    n: Decimal | int | float
    i: int
    v: int
    w: int
    f: int
    t: int
    e: int

    @property
    def c(self) -> int: ...


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Immutable operand vector for one number.

    Example:
        >>> ops = PluralOperands.from_value("1.50")
        >>> (ops.i, ops.v, ops.w, ops.f, ops.t)
        (1, 2, 1, 50, 5)
        >>> PluralOperands.from_value(-3).n
        Decimal('3')
    """

    n: Decimal
    i: int
    v: int = 0
    w: int = 0
    f: int = 0
    t: int = 0
    e: int = 0

    @property
    def c(self) -> int:
        """Deprecated synonym of e."""
        return self.e

    @classmethod
    def from_value(cls, value: int | float | Decimal | str, *, exponent: int = 0) -> PluralOperands:
        """Compute operands for a number.

        Args:
            value: Number to categorize. Sign is ignored.
            exponent: Compact decimal exponent (1.2 million -> 6)

        Returns:
            PluralOperands for |value|

        Raises:
            ValueError: If value is not a finite number
        """
        number = _to_decimal(value)
        _, digits, exp = number.as_tuple()
        if not isinstance(exp, int):
            msg = f"Plural operands need a finite number, got {value!r}"
            raise ValueError(msg)

        integer = int(number)
        if exp >= 0:
            return cls(n=number, i=integer, e=exponent)

        visible = -exp
        fraction = "".join(str(d) for d in digits[-visible:]).rjust(visible, "0")
        trimmed = fraction.rstrip("0")
        return cls(
            n=number,
            i=integer,
            v=visible,
            w=len(trimmed),
            f=int(fraction),
            t=int(trimmed) if trimmed else 0,
            e=exponent,
        )


def _to_decimal(value: int | float | Decimal | str) -> Decimal:
    if isinstance(value, bool):
        msg = "Plural operands need a number, got bool"
        raise TypeError(msg)
    try:
        match value:
            case Decimal():
                number = value
            case int():
                number = Decimal(value)
            case float():
                number = Decimal(repr(value))
            case str():
                number = Decimal(value.strip())
            case _:
                msg = f"Plural operands need a number, got {type(value).__name__}"
                raise TypeError(msg)
    except InvalidOperation as e:
        msg = f"Not a decimal number: {value!r}"
        raise ValueError(msg) from e
    return abs(number)
