"""cldrplurals - CLDR plural rule compiler.

Parses CLDR plural rule text, lowers each locale's rules to a single
priority-ordered decision procedure and collects them in an immutable
registry. The registry can be queried directly or rendered as Python or
Rust source code.

Public API:
    PluralRegistry - Locale -> decision procedure tables plus CLDR version
    build_registry - Compile locale rule sets into a registry
    PluralOperands - CLDR operands (n, i, v, w, f, t, e) of a number
    PluralCategory - zero / one / two / few / many / other
    RuleType - cardinal / ordinal
    LanguageIdentifier - Locale key with fixed-width integer encoding
    parse_rule - Parse one rule (condition and samples) to AST
    parse_condition - Parse the condition part of one rule
    load_cldr_files - Load cldr-json plurals.json / ordinals.json
    load_babel_rules - Read rules from Babel's bundled CLDR data
    render_source - Render a registry as Python or Rust source

Exceptions:
    PluralRuleError - Base exception class
    PluralRuleSyntaxError - Rule text does not match the grammar
    UnknownRuleTypeError - Rule type outside cardinal/ordinal
    LocaleIdentifierError - Malformed locale identifier
    CLDRDataError - Invalid CLDR JSON

Submodules:
    cldrplurals.syntax - AST, parser and serializer
    cldrplurals.compiler - Lowering, decision procedures and registry
    cldrplurals.render - Source renderers
    cldrplurals.diagnostics - Error types and diagnostic formatting
"""

from .compiler import PluralRegistry, build_registry
from .diagnostics import (
    CLDRDataError,
    LocaleIdentifierError,
    PluralRuleError,
    PluralRuleSyntaxError,
    UnknownRuleTypeError,
)
from .enums import PluralCategory, RuleType
from .langid import LanguageIdentifier
from .loading import load_babel_rules, load_cldr_files
from .operands import PluralOperands
from .render import render_source
from .syntax import parse_condition, parse_rule

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrplurals")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CLDRDataError",
    "LanguageIdentifier",
    "LocaleIdentifierError",
    "PluralCategory",
    "PluralOperands",
    "PluralRegistry",
    "PluralRuleError",
    "PluralRuleSyntaxError",
    "RuleType",
    "UnknownRuleTypeError",
    "__version__",
    "build_registry",
    "load_babel_rules",
    "load_cldr_files",
    "parse_condition",
    "parse_rule",
    "render_source",
]
