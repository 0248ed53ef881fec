"""Serialize plural rule AST back to CLDR rule syntax.

Converts AST nodes to canonical rule text. Useful for:
- Code generators (the source rule is embedded next to generated code)
- Diagnostics
- Property-based testing (roundtrip: parse -> serialize -> parse)

Canonical form: single spaces around operators, "%" for modulus, ", " between
list items. Parsing the output yields an AST equal to the input.

Python 3.11+.
"""

from .ast import (
    AndCondition,
    Condition,
    Expression,
    Range,
    RangeList,
    Relation,
    Rule,
    SampleList,
    SampleRange,
    Samples,
    Value,
)

__all__ = [
    "serialize_condition",
    "serialize_relation",
    "serialize_rule",
    "serialize_samples",
]


def _serialize_range_list(range_list: RangeList) -> str:
    parts: list[str] = []
    for item in range_list.items:
        match item:
            case Value(value=v):
                parts.append(str(v))
            case Range(lower=lower, upper=upper):
                parts.append(f"{lower.value}..{upper.value}")
    return ",".join(parts)


def _serialize_expression(expression: Expression) -> str:
    if expression.modulus is None:
        return str(expression.operand)
    return f"{expression.operand} % {expression.modulus.value}"


def serialize_relation(relation: Relation) -> str:
    """Serialize one relation.

    Example:
        >>> condition = parse_condition("n mod 10 in 2..4")
        >>> serialize_relation(condition.and_conditions[0].relations[0])
        'n % 10 in 2..4'
    """
    return (
        f"{_serialize_expression(relation.expression)} {relation.operator} "
        f"{_serialize_range_list(relation.range_list)}"
    ).rstrip()


def _serialize_and_condition(and_condition: AndCondition) -> str:
    return " and ".join(serialize_relation(r) for r in and_condition.relations)


def serialize_condition(condition: Condition) -> str:
    """Serialize a condition. The always-true condition serializes to ''."""
    return " or ".join(_serialize_and_condition(a) for a in condition.and_conditions)


def _serialize_sample_range(sample_range: SampleRange) -> str:
    if sample_range.upper is None:
        return str(sample_range.lower)
    return f"{sample_range.lower}~{sample_range.upper}"


def _serialize_sample_list(sample_list: SampleList) -> str:
    parts = [_serialize_sample_range(r) for r in sample_list.sample_ranges]
    if sample_list.ellipsis:
        parts.append("…")
    return ", ".join(parts)


def serialize_samples(samples: Samples) -> str:
    """Serialize the @integer / @decimal clauses."""
    clauses: list[str] = []
    if samples.integer is not None:
        clauses.append(f"@integer {_serialize_sample_list(samples.integer)}")
    if samples.decimal is not None:
        clauses.append(f"@decimal {_serialize_sample_list(samples.decimal)}")
    return " ".join(clauses)


def serialize_rule(rule: Rule) -> str:
    """Serialize a full rule: condition, then samples if present."""
    parts = [serialize_condition(rule.condition)]
    if rule.samples is not None:
        parts.append(serialize_samples(rule.samples))
    return " ".join(p for p in parts if p)
