"""Tests for locale identifiers and their integer encoding."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cldrplurals.diagnostics import DiagnosticCode, LocaleIdentifierError
from cldrplurals.langid import (
    LanguageIdentifier,
    RawLanguageIdentifier,
    decode_subtag,
    encode_subtag,
)

# ============================================================================
# SUBTAG ENCODING
# ============================================================================


class TestEncodeSubtag:
    """Little-endian zero-padded packing."""

    def test_two_letter_language(self) -> None:
        """'en' -> 0x6E65 (e=0x65 low byte, n=0x6E next)."""
        assert encode_subtag("en", 8) == 0x6E65

    def test_region(self) -> None:
        """'US' packs into a 4-byte integer."""
        assert encode_subtag("US", 4) == ord("U") | ord("S") << 8

    def test_full_width(self) -> None:
        """A subtag of exactly width bytes uses every byte."""
        assert encode_subtag("Hant", 4) == int.from_bytes(b"Hant", "little")

    def test_empty(self) -> None:
        """The empty subtag encodes to 0."""
        assert encode_subtag("", 4) == 0

    def test_too_long(self) -> None:
        """Oversized subtags are rejected, never truncated."""
        with pytest.raises(LocaleIdentifierError) as exc_info:
            encode_subtag("ABCDE", 4)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SUBTAG_TOO_LONG

    def test_non_ascii(self) -> None:
        """Non-ASCII subtags are rejected."""
        with pytest.raises(LocaleIdentifierError) as exc_info:
            encode_subtag("ñ", 8)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SUBTAG_NOT_ASCII

    def test_error_is_value_error(self) -> None:
        """LocaleIdentifierError is also a ValueError."""
        with pytest.raises(ValueError):
            encode_subtag("toolonglang", 8)

    @given(st.text(alphabet=string.ascii_letters + string.digits, max_size=8))
    def test_roundtrip(self, subtag: str) -> None:
        """decode(encode(s)) == s for ASCII alphanumerics within width."""
        assert decode_subtag(encode_subtag(subtag, 8), 8) == subtag


# ============================================================================
# LANGUAGE IDENTIFIER
# ============================================================================


class TestLanguageIdentifier:
    """Parsing, encoding and fallback of locale identifiers."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("en", ("en", None, None)),
            ("en-US", ("en", None, "US")),
            ("en_US", ("en", None, "US")),
            ("zh_Hant_TW", ("zh", "Hant", "TW")),
            ("es-419", ("es", None, "419")),
            ("sr-Latn", ("sr", "Latn", None)),
        ],
    )
    def test_parse(self, source: str, expected: tuple[str, str | None, str | None]) -> None:
        """BCP-47 and POSIX spellings both parse."""
        langid = LanguageIdentifier.parse(source)

        assert (langid.language, langid.script, langid.region) == expected

    def test_variants_are_dropped(self) -> None:
        """Variants are not part of the key."""
        assert LanguageIdentifier.parse("ca_ES_VALENCIA") == LanguageIdentifier("ca", None, "ES")

    def test_str_uses_hyphens(self) -> None:
        """str() renders BCP-47."""
        assert str(LanguageIdentifier.parse("zh_Hant_TW")) == "zh-Hant-TW"

    def test_parse_invalid(self) -> None:
        """Unparseable identifiers raise LocaleIdentifierError."""
        with pytest.raises(LocaleIdentifierError):
            LanguageIdentifier.parse("")

    def test_construction_validates_width(self) -> None:
        """Direct construction checks every subtag."""
        with pytest.raises(LocaleIdentifierError):
            LanguageIdentifier("en", region="TOOLONG")

    def test_to_raw(self) -> None:
        """to_raw packs every present subtag."""
        raw = LanguageIdentifier("en", None, "US").to_raw()

        assert raw == RawLanguageIdentifier(encode_subtag("en", 8), None, encode_subtag("US", 4))

    def test_from_raw_parts(self) -> None:
        """from_raw_parts is the inverse used by generated tables."""
        assert LanguageIdentifier.from_raw_parts(0x6E65, None, None) == LanguageIdentifier("en")

    @pytest.mark.parametrize(
        ("source", "fallbacks"),
        [
            ("en", ["en"]),
            ("en-US", ["en-US", "en"]),
            ("zh-Hant", ["zh-Hant", "zh"]),
            ("zh-Hant-TW", ["zh-Hant-TW", "zh-Hant", "zh-TW", "zh"]),
        ],
    )
    def test_fallbacks(self, source: str, fallbacks: list[str]) -> None:
        """Fallback chain from most to least specific."""
        assert [str(x) for x in LanguageIdentifier.parse(source).fallbacks()] == fallbacks

    def test_hashable(self) -> None:
        """Identifiers are dict keys."""
        table = {LanguageIdentifier.parse("en-US"): 1}

        assert table[LanguageIdentifier("en", None, "US")] == 1

    @given(
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=2, max_size=8),
        st.none() | st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=4, max_size=4),
        st.none() | st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=2, max_size=2),
    )
    def test_raw_roundtrip(self, language: str, script: str | None, region: str | None) -> None:
        """from_raw(to_raw(x)) == x."""
        langid = LanguageIdentifier(language, script, region)

        assert LanguageIdentifier.from_raw(langid.to_raw()) == langid
