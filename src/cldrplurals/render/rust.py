"""Render a plural registry as a Rust source file.

The output is meant to be included as a module of a crate that provides
PluralOperands (n: f64; i, f, t: u64; v, w, e: usize) and PluralCategory,
and depends on unic_langid. It defines:

    PluralRule     fn(&PluralOperands) -> PluralCategory
    CLDR_VERSION   CLDR major release (usize)
    PRS_CARDINAL   &[(LanguageIdentifier, PluralRule)]
    PRS_ORDINAL    same, for ordinal rules

Locale identifiers are built with a langid! macro from the packed subtag
integers, so the tables are constant data.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

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
from cldrplurals.enums import Operand, RuleType
from cldrplurals.langid import LanguageIdentifier

__all__ = ["render_predicate", "render_rust"]

_HEADER = """\
//! CLDR plural rules, generated by cldrplurals. Do not edit.
#![allow(unused_variables, unused_parens)]
#![cfg_attr(feature = "cargo-clippy", allow(clippy::float_cmp))]
#![cfg_attr(feature = "cargo-clippy", allow(clippy::unreadable_literal))]
#![cfg_attr(feature = "cargo-clippy", allow(clippy::nonminimal_bool))]
use super::operands::PluralOperands;
use super::PluralCategory;
use unic_langid::LanguageIdentifier;
use unic_langid::subtags;

pub type PluralRule = fn(&PluralOperands) -> PluralCategory;

pub static CLDR_VERSION: usize = {version};

macro_rules! langid {{
    ($lang:expr, $script:expr, $region:expr) => {{
        {{
            unsafe {{
                LanguageIdentifier::from_raw_parts_unchecked($lang, $script, $region, None)
            }}
        }}
    }};
}}
"""

_TABLE_NAMES: dict[RuleType, str] = {
    RuleType.CARDINAL: "PRS_CARDINAL",
    RuleType.ORDINAL: "PRS_ORDINAL",
}

# c is the deprecated spelling of e; the Rust operand struct only has e
_FIELD_NAMES: dict[Operand, str] = {Operand.C: "e"}


def _major_version(version: str) -> int:
    major = version.split(".", 1)[0]
    if not major.isdigit():
        msg = f"CLDR version '{version}' has no numeric major release"
        raise ValueError(msg)
    return int(major)


def _render_ref(ref: OperandRef) -> str:
    name = f"po.{_FIELD_NAMES.get(ref.operand, ref.operand)}"
    if ref.modulus is None:
        return name
    if ref.operand is Operand.N:
        return f"({name} % {ref.modulus}.0)"
    return f"({name} % {ref.modulus})"


def _render_literal(operand: Operand, value: int) -> str:
    # n is f64; every other operand is an unsigned integer
    return f"{value}.0" if operand is Operand.N else str(value)


def render_predicate(predicate: Predicate) -> str:
    """Rust boolean expression over an operand reference named po.

    Example:
        >>> from cldrplurals.compiler import lower_condition
        >>> from cldrplurals.syntax import parse_condition
        >>> render_predicate(lower_condition(parse_condition("n = 1 or i = 0")))
        'po.n == 1.0 || po.i == 0'
    """
    match predicate:
        case Const(value=v):
            return "true" if v else "false"
        case Compare(ref=ref, op=op, value=v):
            return f"{_render_ref(ref)} {op} {_render_literal(ref.operand, v)}"
        case IsInteger(ref=ref):
            return f"{_render_ref(ref)}.fract() == 0.0"
        case All(terms=terms):
            return " && ".join(
                f"({render_predicate(t)})" if isinstance(t, Any) else render_predicate(t)
                for t in terms
            )
        case Any(terms=terms):
            return " || ".join(render_predicate(t) for t in terms)
        case Not(term=term):
            return f"!({render_predicate(term)})"
    msg = f"Unknown predicate node: {type(predicate).__name__}"
    raise TypeError(msg)


def _render_langid(langid: LanguageIdentifier) -> str:
    raw = langid.to_raw()
    language = f"subtags::Language::from_raw_unchecked({raw.language}u64)"
    script = (
        f"Some(subtags::Script::from_raw_unchecked({raw.script}u32))"
        if raw.script is not None
        else "None"
    )
    region = (
        f"Some(subtags::Region::from_raw_unchecked({raw.region}u32))"
        if raw.region is not None
        else "None"
    )
    return f"langid!({language}, {script}, {region})"


def _render_closure(procedure: DecisionProcedure) -> str:
    chain: list[str] = []
    for branch in procedure.branches:
        comment = f" // {branch.source}" if branch.source else ""
        chain.append(
            f"if {render_predicate(branch.predicate)} "
            f"{{ PluralCategory::{branch.category.name} }}{comment}"
        )
    chain.append("{ PluralCategory::OTHER }")
    body = "\n        else ".join(chain)
    return f"|po| {{\n        {body}\n    }}"


def render_rust(registry: PluralRegistry) -> str:
    """Render the whole registry as Rust source.

    Raises:
        ValueError: If the CLDR version has no numeric major release
    """
    parts = [_HEADER.format(version=_major_version(registry.cldr_version))]
    for rule_type, table_name in _TABLE_NAMES.items():
        entries = [
            f"    ({_render_langid(langid)}, {_render_closure(procedure)}),"
            for langid, procedure in registry.table(rule_type).items()
        ]
        body = "\n".join(entries)
        parts.append(
            f"pub const {table_name}: &[(LanguageIdentifier, PluralRule)] = &[\n{body}\n];\n"
        )
    return "\n".join(parts)
