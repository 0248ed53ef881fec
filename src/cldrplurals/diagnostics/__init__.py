"""Diagnostic system for plural rule errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CLDRDataError,
    LocaleIdentifierError,
    PluralRuleError,
    PluralRuleSyntaxError,
    PluralSampleError,
    SampleParseWarning,
    UnknownRuleTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CLDRDataError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleIdentifierError",
    "OutputFormat",
    "PluralRuleError",
    "PluralRuleSyntaxError",
    "PluralSampleError",
    "SampleParseWarning",
    "SourceSpan",
    "UnknownRuleTypeError",
]
