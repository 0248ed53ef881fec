"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (rule grammar failures)
        4000-4999: Data errors (CLDR data and rule-type contract violations)
        5000-5999: Locale identifier errors
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_INPUT = 3001
    RULE_TOO_LONG = 3002
    INVALID_RANGE = 3003
    SAMPLE_INVALID = 3004

    # Data errors (4000-4999)
    UNKNOWN_RULE_TYPE = 4001
    UNKNOWN_CATEGORY = 4002
    CLDR_DATA_INVALID = 4003

    # Locale identifier errors (5000-5999)
    LOCALE_INVALID = 5001
    SUBTAG_TOO_LONG = 5002
    SUBTAG_NOT_ASCII = 5003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside one rule string.

    Rule strings are single-line, so only character offsets are tracked;
    the column is start + 1.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the rule text (None for non-syntax errors)
        hint: Suggestion for fixing the error
        source: Offending rule text or locale, for context lines
        location: Where the input came from (file, locale, category)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNEXPECTED_INPUT]: Unexpected input 'xor i = 2'
              --> column 7
              |
              | i = 1 xor i = 2
              |       ^
              = help: Relations are joined with 'and' or 'or'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
