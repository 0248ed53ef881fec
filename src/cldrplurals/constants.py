"""Shared constants for cldrplurals.

Centralizes grammar tokens, identifier widths and generator defaults used
across the syntax, compiler and render packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar tokens: Literal spellings accepted by the rule parser
- Identifier widths: Fixed byte widths of encoded locale subtags
- CLDR data keys: JSON structure of the CLDR supplemental files
- Generator defaults: Output target and formatter commands

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar tokens
    "ASCII_DIGITS",
    "OPERAND_CHARS",
    "SAMPLE_MARKER",
    "INTEGER_SAMPLE_TAG",
    "DECIMAL_SAMPLE_TAG",
    "ELLIPSIS_TOKENS",
    # Identifier widths
    "LANGUAGE_WIDTH",
    "SCRIPT_WIDTH",
    "REGION_WIDTH",
    # CLDR data keys
    "CLDR_RULE_PREFIX",
    "CLDR_RULE_TYPE_PREFIX",
    "CLDR_ROOT_LOCALE",
    "UNDETERMINED_LANGUAGE",
    # Generator defaults
    "DEFAULT_TARGET",
    "FORMATTER_COMMANDS",
    "MAX_RULE_LENGTH",
]

# ============================================================================
# GRAMMAR TOKENS
# ============================================================================

# ASCII digits only. str.isdigit() accepts Unicode digits like ² which int()
# rejects, so the parser checks membership in this string instead.
ASCII_DIGITS: str = "0123456789"

# Operand letters in the order CLDR lists them. 'c' is the deprecated
# synonym of 'e' and still appears in older CLDR releases.
OPERAND_CHARS: str = "nivwftec"

SAMPLE_MARKER: str = "@"
INTEGER_SAMPLE_TAG: str = "@integer"
DECIMAL_SAMPLE_TAG: str = "@decimal"

# Three ASCII dots or U+2026 HORIZONTAL ELLIPSIS. Longest first.
ELLIPSIS_TOKENS: tuple[str, ...] = ("...", "…")

# ============================================================================
# IDENTIFIER WIDTHS
# ============================================================================

# Byte widths of the packed little-endian subtag integers. Language subtags
# fit in 8 bytes (BCP-47 allows 2-3 or 5-8 letters), script and region in 4.
LANGUAGE_WIDTH: int = 8
SCRIPT_WIDTH: int = 4
REGION_WIDTH: int = 4

# ============================================================================
# CLDR DATA KEYS
# ============================================================================

# supplemental/plurals.json:
#   {"supplemental": {"plurals-type-cardinal": {"en": {"pluralRule-count-one": ...}}}}
CLDR_RULE_PREFIX: str = "pluralRule-count-"
CLDR_RULE_TYPE_PREFIX: str = "plurals-type-"
CLDR_ROOT_LOCALE: str = "root"

# BCP-47 has no "root" language; the root locale is keyed as "und".
UNDETERMINED_LANGUAGE: str = "und"

# ============================================================================
# GENERATOR DEFAULTS
# ============================================================================

DEFAULT_TARGET: str = "python"

# External formatter per render target. Invoked with the output path appended.
FORMATTER_COMMANDS: dict[str, tuple[str, ...]] = {
    "python": ("ruff", "format"),
    "rust": ("rustfmt",),
}

# Longest CLDR rule today is well under 300 characters.
# 10 KB is clearly malformed input and bounds parser work per rule.
MAX_RULE_LENGTH: int = 10 * 1024
