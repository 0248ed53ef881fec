"""Tests for diagnostics: codes, spans, templates, formatter and exceptions."""

from __future__ import annotations

import json

import pytest

from cldrplurals.diagnostics import (
    CLDRDataError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    LocaleIdentifierError,
    OutputFormat,
    PluralRuleError,
    PluralRuleSyntaxError,
    PluralSampleError,
    SourceSpan,
    UnknownRuleTypeError,
)

SOURCE = "i = 1 xor v = 0"


class TestSourceSpan:
    """SourceSpan invariants."""

    def test_column_is_one_indexed(self) -> None:
        """Offset 6 is column 7."""
        assert SourceSpan(6, 9).column == 7

    def test_negative_start(self) -> None:
        """Negative offsets are rejected."""
        with pytest.raises(ValueError, match="start"):
            SourceSpan(-1, 0)

    def test_end_before_start(self) -> None:
        """end must not precede start."""
        with pytest.raises(ValueError, match="end"):
            SourceSpan(5, 4)

    def test_empty_span(self) -> None:
        """start == end is a valid point span."""
        assert SourceSpan(3, 3).end == 3


class TestErrorTemplate:
    """Message templates and their codes."""

    def test_unexpected_input(self) -> None:
        """Remainder, column and span point at the unconsumed text."""
        diagnostic = ErrorTemplate.unexpected_input(SOURCE, 6, ("and", "or"))

        assert diagnostic.code is DiagnosticCode.UNEXPECTED_INPUT
        assert diagnostic.message == "Unexpected input 'xor v = 0' at column 7"
        assert diagnostic.span == SourceSpan(6, len(SOURCE))
        assert diagnostic.hint == "Expected 'and' or 'or'"

    def test_unexpected_end(self) -> None:
        """Running out of input is reported as end of rule."""
        diagnostic = ErrorTemplate.unexpected_input("n =", 3)

        assert diagnostic.message == "Unexpected end of rule at column 4"
        assert diagnostic.hint is None

    def test_long_remainder_is_truncated(self) -> None:
        """Only the first 40 characters of the remainder are quoted."""
        source = "x" * 100
        diagnostic = ErrorTemplate.unexpected_input(source, 0)

        assert "x" * 40 + "..." in diagnostic.message
        assert "x" * 41 not in diagnostic.message

    def test_sample_invalid_is_warning(self) -> None:
        """Sample problems have warning severity."""
        diagnostic = ErrorTemplate.sample_invalid("n = 1 @integer x", 15)

        assert diagnostic.code is DiagnosticCode.SAMPLE_INVALID
        assert diagnostic.severity == "warning"

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (ErrorTemplate.rule_too_long(20000, 10240), DiagnosticCode.RULE_TOO_LONG),
            (ErrorTemplate.invalid_range("n = 4..2", 4, 8, 4, 2), DiagnosticCode.INVALID_RANGE),
            (ErrorTemplate.unknown_rule_type("decimal"), DiagnosticCode.UNKNOWN_RULE_TYPE),
            (ErrorTemplate.unknown_category("several"), DiagnosticCode.UNKNOWN_CATEGORY),
            (ErrorTemplate.cldr_data_invalid("no version"), DiagnosticCode.CLDR_DATA_INVALID),
            (ErrorTemplate.locale_invalid("", "empty"), DiagnosticCode.LOCALE_INVALID),
            (ErrorTemplate.subtag_too_long("ABCDE", 4), DiagnosticCode.SUBTAG_TOO_LONG),
            (ErrorTemplate.subtag_not_ascii("ñ"), DiagnosticCode.SUBTAG_NOT_ASCII),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        """Each template carries its own code."""
        assert diagnostic.code is code
        assert diagnostic.severity == "error"

    def test_codes_are_unique(self) -> None:
        """No two codes share a number."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_style(self) -> None:
        """Header, location, source line, caret underline and hint."""
        diagnostic = ErrorTemplate.unexpected_input(SOURCE, 6, ("and", "or"))

        assert DiagnosticFormatter().format(diagnostic) == "\n".join(
            [
                "error[UNEXPECTED_INPUT]: Unexpected input 'xor v = 0' at column 7",
                "  --> column 7",
                "  |",
                "  | i = 1 xor v = 0",
                "  |       ^^^^^^^^^",
                "  = help: Expected 'and' or 'or'",
            ]
        )

    def test_location_replaces_column(self) -> None:
        """A location takes the place of the column pointer."""
        diagnostic = ErrorTemplate.cldr_data_invalid("bad", "plurals.json")

        assert "  --> plurals.json" in DiagnosticFormatter().format(diagnostic)

    def test_color(self) -> None:
        """Severity is highlighted with ANSI codes."""
        formatted = DiagnosticFormatter(color=True).format(
            ErrorTemplate.unknown_rule_type("decimal")
        )

        assert formatted.startswith("\033[1;31merror\033[0m[UNKNOWN_RULE_TYPE]")

    def test_simple(self) -> None:
        """One line: code and message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.unknown_rule_type("decimal")) == (
            "UNKNOWN_RULE_TYPE: Unknown plural rule type 'decimal'"
        )

    def test_json(self) -> None:
        """JSON output for tooling."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.unexpected_input(SOURCE, 6)))

        assert data["code"] == "UNEXPECTED_INPUT"
        assert data["code_value"] == DiagnosticCode.UNEXPECTED_INPUT.value
        assert (data["start"], data["end"]) == (6, len(SOURCE))
        assert data["source"] == SOURCE
        assert "hint" not in data

    def test_format_all(self) -> None:
        """Diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.unknown_rule_type("a"), ErrorTemplate.unknown_rule_type("b")]

        assert formatter.format_all(diagnostics).count("\n\n") == 1


class TestExceptions:
    """Exception hierarchy."""

    def test_diagnostic_is_attached(self) -> None:
        """Exceptions keep the diagnostic and render it as their message."""
        diagnostic = ErrorTemplate.unknown_rule_type("decimal")
        error = UnknownRuleTypeError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_plain_message(self) -> None:
        """A plain string message has no diagnostic."""
        error = CLDRDataError("broken")

        assert error.diagnostic is None
        assert str(error) == "broken"

    def test_syntax_error_remainder(self) -> None:
        """The unconsumed text is available for diagnostics."""
        error = PluralRuleSyntaxError(
            ErrorTemplate.unexpected_input(SOURCE, 6), source=SOURCE, position=6
        )

        assert error.remainder == "xor v = 0"
        assert error.position == 6

    @pytest.mark.parametrize(
        "error_type",
        [PluralRuleSyntaxError, PluralSampleError, UnknownRuleTypeError, CLDRDataError],
    )
    def test_common_base(self, error_type: type[PluralRuleError]) -> None:
        """Every error derives from PluralRuleError."""
        assert issubclass(error_type, PluralRuleError)

    def test_locale_error_is_value_error(self) -> None:
        """Locale errors are also ValueErrors."""
        assert issubclass(LocaleIdentifierError, ValueError)
        assert issubclass(LocaleIdentifierError, PluralRuleError)
