"""Plural rule compiler.

Lowers parsed rules to an abstract predicate tree, orders them into one
decision procedure per locale and collects the procedures in a registry.

Python 3.11+.
"""

from .generator import Branch, DecisionProcedure, build_decision, compile_rule_set
from .ir import (
    All,
    Any,
    Compare,
    CompareOp,
    Const,
    IsInteger,
    Not,
    OperandRef,
    Predicate,
    evaluate,
)
from .lowering import lower_and_condition, lower_condition, lower_relation
from .registry import LocaleRuleSet, PluralRegistry, build_registry, coerce_rule_type

__all__ = [
    "All",
    "Any",
    "Branch",
    "Compare",
    "CompareOp",
    "Const",
    "DecisionProcedure",
    "IsInteger",
    "LocaleRuleSet",
    "Not",
    "OperandRef",
    "PluralRegistry",
    "Predicate",
    "build_decision",
    "build_registry",
    "coerce_rule_type",
    "compile_rule_set",
    "evaluate",
    "lower_and_condition",
    "lower_condition",
    "lower_relation",
]
