"""Locale identifiers and their fixed-width integer encoding.

Generated tables refer to locales through packed integers instead of
strings, so a consumer can materialize identifiers as static data with no
runtime string parsing. Each subtag is stored little-endian, zero-padded
on the right:

    encode(s) = sum(byte(s[k]) << (8 * k) for k in range(len(s)))

Widths: language 8 bytes, script 4 bytes, region 4 bytes.

Subtags that do not fit, or that contain non-ASCII characters, are
rejected with LocaleIdentifierError. CLDR bounds subtag lengths, so an
oversized subtag always means malformed input.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass

from cldrplurals.constants import LANGUAGE_WIDTH, REGION_WIDTH, SCRIPT_WIDTH
from cldrplurals.diagnostics import ErrorTemplate, LocaleIdentifierError
from cldrplurals.locale_utils import split_locale

__all__ = [
    "LanguageIdentifier",
    "RawLanguageIdentifier",
    "decode_subtag",
    "encode_subtag",
]


def encode_subtag(subtag: str, width: int) -> int:
    """Pack an ASCII subtag into a little-endian integer of width bytes.

    Raises:
        LocaleIdentifierError: If subtag is non-ASCII or longer than width

    Example:
        >>> encode_subtag("en", 8)
        28261
        >>> hex(encode_subtag("US", 4))
        '0x5355'
    """
    try:
        raw = subtag.encode("ascii")
    except UnicodeEncodeError as e:
        raise LocaleIdentifierError(ErrorTemplate.subtag_not_ascii(subtag)) from e
    if len(raw) > width:
        raise LocaleIdentifierError(ErrorTemplate.subtag_too_long(subtag, width))
    return int.from_bytes(raw.ljust(width, b"\0"), "little")


def decode_subtag(value: int, width: int) -> str:
    """Inverse of encode_subtag: strip the zero padding.

    Example:
        >>> decode_subtag(28261, 8)
        'en'
    """
    return value.to_bytes(width, "little").rstrip(b"\0").decode("ascii")


@dataclass(frozen=True, slots=True)
class RawLanguageIdentifier:
    """Encoded form of a LanguageIdentifier.

    Attributes:
        language: 8-byte little-endian packed language subtag
        script: 4-byte packed script subtag, or None
        region: 4-byte packed region subtag, or None
    """

    language: int
    script: int | None = None
    region: int | None = None


@dataclass(frozen=True, slots=True)
class LanguageIdentifier:
    """Language, optional script and optional region of a locale.

    Example:
        >>> langid = LanguageIdentifier.parse("zh-Hant-TW")
        >>> str(langid)
        'zh-Hant-TW'
        >>> LanguageIdentifier.from_raw(langid.to_raw()) == langid
        True
    """

    language: str
    script: str | None = None
    region: str | None = None

    def __post_init__(self) -> None:
        """Validate that every subtag fits its encoded width."""
        encode_subtag(self.language, LANGUAGE_WIDTH)
        if self.script is not None:
            encode_subtag(self.script, SCRIPT_WIDTH)
        if self.region is not None:
            encode_subtag(self.region, REGION_WIDTH)

    @classmethod
    def parse(cls, identifier: str) -> LanguageIdentifier:
        """Parse a BCP-47 or POSIX locale identifier.

        Raises:
            LocaleIdentifierError: If the identifier is malformed
        """
        try:
            language, script, region = split_locale(identifier)
        except ValueError as e:
            raise LocaleIdentifierError(ErrorTemplate.locale_invalid(identifier, str(e))) from e
        return cls(language, script, region)

    @classmethod
    def from_raw(cls, raw: RawLanguageIdentifier) -> LanguageIdentifier:
        """Decode an encoded identifier."""
        return cls.from_raw_parts(raw.language, raw.script, raw.region)

    @classmethod
    def from_raw_parts(
        cls, language: int, script: int | None, region: int | None
    ) -> LanguageIdentifier:
        """Decode packed subtags, the constructor used by generated tables."""
        return cls(
            decode_subtag(language, LANGUAGE_WIDTH),
            decode_subtag(script, SCRIPT_WIDTH) if script is not None else None,
            decode_subtag(region, REGION_WIDTH) if region is not None else None,
        )

    def to_raw(self) -> RawLanguageIdentifier:
        """Encode every subtag to its fixed-width integer."""
        return RawLanguageIdentifier(
            language=encode_subtag(self.language, LANGUAGE_WIDTH),
            script=encode_subtag(self.script, SCRIPT_WIDTH) if self.script is not None else None,
            region=encode_subtag(self.region, REGION_WIDTH) if self.region is not None else None,
        )

    def fallbacks(self) -> tuple[LanguageIdentifier, ...]:
        """Self followed by progressively less specific identifiers.

        Example:
            >>> [str(x) for x in LanguageIdentifier.parse("zh-Hant-TW").fallbacks()]
            ['zh-Hant-TW', 'zh-Hant', 'zh-TW', 'zh']
        """
        candidates = [self]
        if self.script is not None and self.region is not None:
            candidates.append(LanguageIdentifier(self.language, self.script))
            candidates.append(LanguageIdentifier(self.language, region=self.region))
        if self.script is not None or self.region is not None:
            candidates.append(LanguageIdentifier(self.language))
        return tuple(candidates)

    def __str__(self) -> str:
        return "-".join(p for p in (self.language, self.script, self.region) if p is not None)
