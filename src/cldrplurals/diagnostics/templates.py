"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Longest remainder quoted verbatim in a syntax error message.
_MAX_QUOTED_REMAINDER: int = 40


def _quote_remainder(remainder: str) -> str:
    if len(remainder) > _MAX_QUOTED_REMAINDER:
        return repr(remainder[:_MAX_QUOTED_REMAINDER] + "...")
    return repr(remainder)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unexpected_input(
        source: str, position: int, expected: tuple[str, ...] = ()
    ) -> Diagnostic:
        """Rule text has an unconsumed remainder.

        Args:
            source: Full rule text
            position: Offset of the first unconsumed character
            expected: Tokens that would have been accepted

        Returns:
            Diagnostic for UNEXPECTED_INPUT
        """
        remainder = source[position:]
        if remainder:
            msg = f"Unexpected input {_quote_remainder(remainder)} at column {position + 1}"
        else:
            msg = f"Unexpected end of rule at column {position + 1}"
        hint = None
        if expected:
            hint = "Expected " + " or ".join(f"'{token}'" for token in expected)
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_INPUT,
            message=msg,
            span=SourceSpan(start=position, end=len(source)),
            hint=hint,
            source=source,
        )

    @staticmethod
    def rule_too_long(length: int, limit: int) -> Diagnostic:
        """Rule text exceeds the parser input limit.

        Args:
            length: Actual length in characters
            limit: Maximum accepted length

        Returns:
            Diagnostic for RULE_TOO_LONG
        """
        msg = f"Plural rule of {length} characters exceeds limit of {limit}"
        return Diagnostic(code=DiagnosticCode.RULE_TOO_LONG, message=msg)

    @staticmethod
    def invalid_range(source: str, start: int, end: int, lower: int, upper: int) -> Diagnostic:
        """Range with upper bound below lower bound.

        Args:
            source: Full rule text
            start: Offset of the range
            end: Offset after the range
            lower: Parsed lower bound
            upper: Parsed upper bound

        Returns:
            Diagnostic for INVALID_RANGE
        """
        msg = f"Range {lower}..{upper} is empty (upper bound below lower bound)"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RANGE,
            message=msg,
            span=SourceSpan(start=start, end=end),
            hint=f"Write the range as {upper}..{lower}",
            source=source,
        )

    @staticmethod
    def sample_invalid(source: str, position: int) -> Diagnostic:
        """Sample clause could not be parsed.

        Args:
            source: Full rule text
            position: Offset of the first unconsumed character

        Returns:
            Diagnostic for SAMPLE_INVALID (severity: warning)
        """
        remainder = source[position:]
        msg = f"Malformed sample clause near {_quote_remainder(remainder)}"
        return Diagnostic(
            code=DiagnosticCode.SAMPLE_INVALID,
            message=msg,
            span=SourceSpan(start=position, end=len(source)),
            hint="Samples look like '@integer 0, 2~16, 100, …'",
            source=source,
            severity="warning",
        )

    @staticmethod
    def unknown_rule_type(label: str) -> Diagnostic:
        """Rule type label outside cardinal/ordinal.

        Args:
            label: The offending rule type label

        Returns:
            Diagnostic for UNKNOWN_RULE_TYPE
        """
        msg = f"Unknown plural rule type '{label}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_RULE_TYPE,
            message=msg,
            hint="Plural rule types are 'cardinal' and 'ordinal'",
        )

    @staticmethod
    def unknown_category(label: str, location: str | None = None) -> Diagnostic:
        """Plural category label outside zero/one/two/few/many/other.

        Args:
            label: The offending category label
            location: Locale and rule type the label came from

        Returns:
            Diagnostic for UNKNOWN_CATEGORY
        """
        msg = f"Unknown plural category '{label}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CATEGORY,
            message=msg,
            hint="Plural categories are zero, one, two, few, many and other",
            location=location,
        )

    @staticmethod
    def cldr_data_invalid(reason: str, location: str | None = None) -> Diagnostic:
        """CLDR JSON document does not have the expected structure.

        Args:
            reason: What was missing or malformed
            location: Source file or key path

        Returns:
            Diagnostic for CLDR_DATA_INVALID
        """
        msg = f"Invalid CLDR plural data: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CLDR_DATA_INVALID,
            message=msg,
            hint="Expected cldr-json supplemental/plurals.json or ordinals.json",
            location=location,
        )

    @staticmethod
    def locale_invalid(locale: str, reason: str) -> Diagnostic:
        """Locale identifier could not be split into subtags.

        Args:
            locale: Locale identifier as given
            reason: Parser explanation

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale identifier '{locale}': {reason}"
        return Diagnostic(code=DiagnosticCode.LOCALE_INVALID, message=msg, source=locale)

    @staticmethod
    def subtag_too_long(subtag: str, width: int) -> Diagnostic:
        """Subtag does not fit its fixed-width integer.

        Args:
            subtag: Offending subtag
            width: Width in bytes

        Returns:
            Diagnostic for SUBTAG_TOO_LONG
        """
        msg = f"Subtag '{subtag}' is longer than {width} bytes"
        return Diagnostic(
            code=DiagnosticCode.SUBTAG_TOO_LONG,
            message=msg,
            hint="Language subtags hold up to 8 characters, script and region up to 4",
        )

    @staticmethod
    def subtag_not_ascii(subtag: str) -> Diagnostic:
        """Subtag contains characters outside ASCII.

        Args:
            subtag: Offending subtag

        Returns:
            Diagnostic for SUBTAG_NOT_ASCII
        """
        msg = f"Subtag {subtag!r} contains non-ASCII characters"
        return Diagnostic(code=DiagnosticCode.SUBTAG_NOT_ASCII, message=msg)
