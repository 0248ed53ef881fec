"""Render a plural registry as a Python module.

The module defines:

    PluralRule     Callable[[OperandSource], PluralCategory]
    CLDR_VERSION   CLDR release tag (str)
    PRS_CARDINAL   ((LanguageIdentifier, PluralRule), ...) in registry order
    PRS_ORDINAL    same, for ordinal rules

Locale identifiers are rebuilt from their packed integers through
LanguageIdentifier.from_raw_parts, so the module carries no locale strings
to parse at import time. Each decision procedure becomes one function;
the canonical source rule is kept as a comment above its test.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import re

from cldrplurals.compiler import (
    All,
    Any,
    Compare,
    Const,
    DecisionProcedure,
    IsInteger,
    Not,
    OperandRef,
    PluralRegistry,
    Predicate,
)
from cldrplurals.enums import RuleType
from cldrplurals.langid import LanguageIdentifier

__all__ = ["render_predicate", "render_python"]

_INDENT = "    "

_HEADER = '''\
"""CLDR plural rules, generated by cldrplurals. Do not edit.

CLDR version: {version}
"""

from collections.abc import Callable

from cldrplurals.enums import PluralCategory
from cldrplurals.langid import LanguageIdentifier
from cldrplurals.operands import OperandSource

PluralRule = Callable[[OperandSource], PluralCategory]

CLDR_VERSION = {version!r}

_langid = LanguageIdentifier.from_raw_parts
'''

_TABLE_NAMES: dict[RuleType, str] = {
    RuleType.CARDINAL: "PRS_CARDINAL",
    RuleType.ORDINAL: "PRS_ORDINAL",
}


def _render_ref(ref: OperandRef) -> str:
    if ref.modulus is None:
        return f"po.{ref.operand}"
    return f"po.{ref.operand} % {ref.modulus}"


def render_predicate(predicate: Predicate) -> str:
    """Python boolean expression over an operand source named po.

    Example:
        >>> from cldrplurals.compiler import lower_condition
        >>> from cldrplurals.syntax import parse_condition
        >>> render_predicate(lower_condition(parse_condition("i = 1 and v = 0")))
        'po.i == 1 and po.v == 0'
    """
    match predicate:
        case Const(value=v):
            return "True" if v else "False"
        case Compare(ref=ref, op=op, value=v):
            return f"{_render_ref(ref)} {op} {v}"
        case IsInteger(ref=ref):
            return f"{_render_ref(ref)} % 1 == 0"
        case All(terms=terms):
            return " and ".join(
                f"({render_predicate(t)})" if isinstance(t, Any) else render_predicate(t)
                for t in terms
            )
        case Any(terms=terms):
            return " or ".join(render_predicate(t) for t in terms)
        case Not(term=term):
            return f"not ({render_predicate(term)})"
    msg = f"Unknown predicate node: {type(predicate).__name__}"
    raise TypeError(msg)


def _function_name(rule_type: RuleType, langid: LanguageIdentifier) -> str:
    return f"_{rule_type}_" + re.sub(r"[^0-9A-Za-z]", "_", str(langid)).lower()


def _render_langid(langid: LanguageIdentifier) -> str:
    raw = langid.to_raw()
    return f"_langid({raw.language}, {raw.script}, {raw.region})"


def _render_function(name: str, procedure: DecisionProcedure) -> list[str]:
    lines = [f"def {name}(po: OperandSource) -> PluralCategory:"]
    for branch in procedure.branches:
        if branch.source:
            lines.append(f"{_INDENT}# {branch.source}")
        lines.append(f"{_INDENT}if {render_predicate(branch.predicate)}:")
        lines.append(f"{_INDENT * 2}return PluralCategory.{branch.category.name}")
    lines.append(f"{_INDENT}return PluralCategory.OTHER")
    return lines


def render_python(registry: PluralRegistry) -> str:
    """Render the whole registry as Python module source."""
    parts = [_HEADER.format(version=registry.cldr_version)]
    tables: list[str] = []

    for rule_type, table_name in _TABLE_NAMES.items():
        entries: list[str] = []
        for langid, procedure in registry.table(rule_type).items():
            name = _function_name(rule_type, langid)
            parts.append("\n" + "\n".join(_render_function(name, procedure)) + "\n")
            entries.append(f"{_INDENT}({_render_langid(langid)}, {name}),")

        body = "\n".join(entries)
        annotation = "tuple[tuple[LanguageIdentifier, PluralRule], ...]"
        if entries:
            tables.append(f"{table_name}: {annotation} = (\n{body}\n)")
        else:
            tables.append(f"{table_name}: {annotation} = ()")

    parts.append("\n" + "\n".join(tables) + "\n")
    return "\n".join(parts)
