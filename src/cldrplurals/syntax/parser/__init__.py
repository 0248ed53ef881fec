"""Plural rule parser module.

This module provides the main PluralRuleParser class and related
parsing utilities organized into focused submodules.

Module Organization:
- core.py: PluralRuleParser class (entry points, failure policy)
- primitives.py: Basic parsers (values, operands, keywords)
- rules.py: Condition grammar (range lists, relations, and/or chains)
- samples.py: @integer / @decimal sample clauses

Public API:
    PluralRuleParser: Main parser class
"""

from cldrplurals.syntax.parser.core import PluralRuleParser

__all__ = ["PluralRuleParser"]
