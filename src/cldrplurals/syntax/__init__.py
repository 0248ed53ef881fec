"""Plural rule syntax package.

Provides parser, AST definitions and serialization for the CLDR plural
rule grammar. Separate from the compiler so tooling (linters, data checks)
can parse rules without generating code.

Python 3.11+.
"""

from .ast import (
    AndCondition,
    Condition,
    DecimalValue,
    Expression,
    Range,
    RangeList,
    RangeListItem,
    Relation,
    Rule,
    SampleList,
    SampleRange,
    Samples,
    Value,
)
from .cursor import Cursor, ParseResult
from .parser import PluralRuleParser
from .serializer import serialize_condition, serialize_rule, serialize_samples

__all__ = [
    "AndCondition",
    "Condition",
    "Cursor",
    "DecimalValue",
    "Expression",
    "ParseResult",
    "PluralRuleParser",
    "Range",
    "RangeList",
    "RangeListItem",
    "Relation",
    "Rule",
    "SampleList",
    "SampleRange",
    "Samples",
    "Value",
    "parse_condition",
    "parse_rule",
    "serialize_condition",
    "serialize_rule",
    "serialize_samples",
]


def parse_rule(source: str) -> Rule:
    """Parse one CLDR plural rule into AST.

    Convenience function for PluralRuleParser().parse_rule().

    Example:
        >>> from cldrplurals.syntax import parse_rule
        >>> rule = parse_rule("n = 1 @integer 1")
        >>> rule.samples.integer.sample_ranges[0].lower.integer
        1
    """
    return PluralRuleParser().parse_rule(source)


def parse_condition(source: str) -> Condition:
    """Parse the condition part of one CLDR plural rule.

    Convenience function for PluralRuleParser().parse_condition().

    Example:
        >>> from cldrplurals.syntax import parse_condition
        >>> parse_condition("").is_always_true
        True
    """
    return PluralRuleParser().parse_condition(source)
