"""Plural rule exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CLDRDataError",
    "LocaleIdentifierError",
    "PluralRuleError",
    "PluralRuleSyntaxError",
    "PluralSampleError",
    "SampleParseWarning",
    "UnknownRuleTypeError",
]


class PluralRuleError(Exception):
    """Base exception for all cldrplurals errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralRuleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralRuleSyntaxError(PluralRuleError):
    """Rule text does not match the plural rule grammar.

    The parser does not recover: one malformed rule aborts the batch.

    Attributes:
        source: Full rule text
        position: Offset of the first unconsumed character
        remainder: Unconsumed text starting at position
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "", position: int = 0) -> None:
        """Initialize PluralRuleSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            source: Full rule text
            position: Offset of the first unconsumed character
        """
        super().__init__(message)
        self.source = source
        self.position = position

    @property
    def remainder(self) -> str:
        """Unconsumed text, for diagnostics."""
        return self.source[self.position :]


class PluralSampleError(PluralRuleError):
    """Sample clause is malformed (strict sample parsing only).

    Non-strict parsing reports the same problem as SampleParseWarning.
    """


class UnknownRuleTypeError(PluralRuleError):
    """Rule type label outside {cardinal, ordinal} reached the generator.

    Indicates a caller or data contract violation, never user input.
    """


class CLDRDataError(PluralRuleError):
    """CLDR JSON document is structurally invalid."""


class LocaleIdentifierError(PluralRuleError, ValueError):
    """Locale identifier is malformed or a subtag exceeds its encoded width."""


class SampleParseWarning(UserWarning):
    """Sample clause could not be parsed; the condition is unaffected."""
