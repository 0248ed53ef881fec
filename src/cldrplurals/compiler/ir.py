"""Abstract predicate tree for lowered plural rules.

A lowered condition is a small boolean expression tree over operand
references. It is language-neutral: the interpreter below evaluates it
directly, and each renderer in :mod:`cldrplurals.render` turns it into
source text for one target language.

Node set (closed, matched exhaustively):
    Const        constant true / false
    Compare      operand_ref <op> integer
    IsInteger    operand_ref has no fractional part
    All          all terms hold
    Any          some term holds
    Not          term does not hold

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from cldrplurals.enums import Operand
from cldrplurals.operands import OperandSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Nodes
    "OperandRef",
    "CompareOp",
    "Const",
    "Compare",
    "IsInteger",
    "All",
    "Any",
    "Not",
    "Predicate",
    "TRUE",
    "FALSE",
    # Constructors
    "conjoin",
    "disjoin",
    "negate",
    # Interpreter
    "evaluate",
    "resolve_operand",
]


class CompareOp(StrEnum):
    """Comparison operator. Values are the spellings shared by Python and Rust."""

    EQ = "=="
    NE = "!="
    LE = "<="
    GE = ">="


@dataclass(frozen=True, slots=True)
class OperandRef:
    """Operand value, optionally reduced by a modulus."""

    operand: Operand
    modulus: int | None = None


@dataclass(frozen=True, slots=True)
class Const:
    value: bool


@dataclass(frozen=True, slots=True)
class Compare:
    ref: OperandRef
    op: CompareOp
    value: int


@dataclass(frozen=True, slots=True)
class IsInteger:
    ref: OperandRef


@dataclass(frozen=True, slots=True)
class All:
    terms: tuple[Predicate, ...]


@dataclass(frozen=True, slots=True)
class Any:
    terms: tuple[Predicate, ...]


@dataclass(frozen=True, slots=True)
class Not:
    term: Predicate


Predicate = Const | Compare | IsInteger | All | Any | Not

TRUE = Const(True)
FALSE = Const(False)

_NEGATED_COMPARE: dict[CompareOp, CompareOp] = {
    CompareOp.EQ: CompareOp.NE,
    CompareOp.NE: CompareOp.EQ,
}


# ============================================================================
# CONSTRUCTORS
# ============================================================================


def conjoin(terms: Iterable[Predicate]) -> Predicate:
    """Build a conjunction, flattening nested conjunctions and folding constants.

    Example:
        >>> conjoin([])
        Const(value=True)
    """
    flat: list[Predicate] = []
    for term in terms:
        match term:
            case Const(value=True):
                continue
            case Const(value=False):
                return FALSE
            case All(terms=inner):
                flat.extend(inner)
            case _:
                flat.append(term)
    if not flat:
        return TRUE
    if len(flat) == 1:
        return flat[0]
    return All(tuple(flat))


def disjoin(terms: Iterable[Predicate]) -> Predicate:
    """Build a disjunction, flattening nested disjunctions and folding constants.

    Example:
        >>> disjoin([])
        Const(value=False)
    """
    flat: list[Predicate] = []
    for term in terms:
        match term:
            case Const(value=False):
                continue
            case Const(value=True):
                return TRUE
            case Any(terms=inner):
                flat.extend(inner)
            case _:
                flat.append(term)
    if not flat:
        return FALSE
    if len(flat) == 1:
        return flat[0]
    return Any(tuple(flat))


def negate(term: Predicate) -> Predicate:
    """Negate a predicate, folding constants, double negation and ==/!=."""
    match term:
        case Const(value=v):
            return Const(not v)
        case Not(term=inner):
            return inner
        case Compare(ref=ref, op=op, value=v) if op in _NEGATED_COMPARE:
            return Compare(ref, _NEGATED_COMPARE[op], v)
        case _:
            return Not(term)


# ============================================================================
# INTERPRETER
# ============================================================================


def resolve_operand(ref: OperandRef, operands: OperandSource) -> object:
    """Read the referenced operand and apply the modulus."""
    value = getattr(operands, ref.operand.value)
    if ref.modulus is not None:
        value = value % ref.modulus
    return value


def evaluate(predicate: Predicate, operands: OperandSource) -> bool:
    """Evaluate a predicate against an operand source.

    Pure: the result depends only on the predicate and the operand values.
    """
    match predicate:
        case Const(value=v):
            return v
        case Compare(ref=ref, op=op, value=v):
            x = resolve_operand(ref, operands)
            match op:
                case CompareOp.EQ:
                    return x == v
                case CompareOp.NE:
                    return x != v
                case CompareOp.LE:
                    return x <= v  # type: ignore[operator]
                case CompareOp.GE:
                    return x >= v  # type: ignore[operator]
        case IsInteger(ref=ref):
            return resolve_operand(ref, operands) % 1 == 0  # type: ignore[operator]
        case All(terms=terms):
            return all(evaluate(t, operands) for t in terms)
        case Any(terms=terms):
            return any(evaluate(t, operands) for t in terms)
        case Not(term=term):
            return not evaluate(term, operands)
    msg = f"Unknown predicate node: {type(predicate).__name__}"
    raise TypeError(msg)
