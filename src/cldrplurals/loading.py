"""Plural rule data loading.

Two sources of locale rule sets:

    CLDR JSON   supplemental/plurals.json and ordinals.json from cldr-json
    Babel       the CLDR snapshot bundled with Babel

Both produce CLDRPluralData: the CLDR version tag plus, per rule type,
locale -> ordered (category, condition) pairs. Every rule is parsed while
loading, so a malformed rule aborts the load with PluralRuleSyntaxError.

Components:
    CLDRPluralData - Immutable result of a load
    parse_cldr_document - Extract rule sets from a decoded JSON document
    load_cldr_json - Load one JSON file
    load_cldr_files - Load and merge several JSON files
    load_babel_rules - Read rule sets from Babel's locale data

Python 3.11+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cldrplurals.compiler import PluralRegistry, build_registry, coerce_rule_type
from cldrplurals.constants import (
    CLDR_ROOT_LOCALE,
    CLDR_RULE_PREFIX,
    CLDR_RULE_TYPE_PREFIX,
    UNDETERMINED_LANGUAGE,
)
from cldrplurals.diagnostics import CLDRDataError, ErrorTemplate
from cldrplurals.enums import PluralCategory, RuleType
from cldrplurals.langid import LanguageIdentifier
from cldrplurals.locale_utils import get_babel_locale
from cldrplurals.syntax import PluralRuleParser
from cldrplurals.syntax.ast import Condition

if TYPE_CHECKING:
    from babel.plural import PluralRule

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Result type
    "CLDRPluralData",
    "RuleSetTable",
    # CLDR JSON
    "parse_cldr_document",
    "load_cldr_json",
    "load_cldr_files",
    # Babel
    "load_babel_rules",
]

logger = logging.getLogger(__name__)

# Locale -> ordered (category, condition) pairs
RuleSetTable = Mapping[str, tuple[tuple[PluralCategory, Condition], ...]]


@dataclass(frozen=True, slots=True)
class CLDRPluralData:
    """Parsed plural rules of one CLDR release.

    Attributes:
        cldr_version: CLDR release tag, e.g. "46"
        rule_sets: Rule type -> locale -> (category, condition) pairs in
            source order
    """

    cldr_version: str
    rule_sets: Mapping[RuleType, RuleSetTable] = field(default_factory=dict)

    def locale_count(self, rule_type: RuleType) -> int:
        """Number of locales with rules of the given type."""
        return len(self.rule_sets.get(rule_type, {}))

    def merge(self, other: CLDRPluralData) -> CLDRPluralData:
        """Combine two loads; other wins for locales present in both.

        The version of self is kept. A version mismatch is logged, since
        mixing releases usually means a wrong input file.
        """
        if other.cldr_version != self.cldr_version:
            logger.warning(
                "Merging CLDR %s data into CLDR %s data; keeping version %s",
                other.cldr_version,
                self.cldr_version,
                self.cldr_version,
            )
        merged: dict[RuleType, RuleSetTable] = dict(self.rule_sets)
        for rule_type, table in other.rule_sets.items():
            merged[rule_type] = {**merged.get(rule_type, {}), **table}
        return CLDRPluralData(self.cldr_version, merged)

    def to_registry(self) -> PluralRegistry:
        """Compile every rule set into a PluralRegistry."""
        return build_registry(self.rule_sets, self.cldr_version)


# ============================================================================
# CLDR JSON
# ============================================================================


def _require_mapping(value: object, what: str, location: str | None) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise CLDRDataError(ErrorTemplate.cldr_data_invalid(f"{what} is not an object", location))
    return value


def _locale_key(locale: str) -> str:
    """Canonical table key of a CLDR locale name."""
    if locale == CLDR_ROOT_LOCALE:
        locale = UNDETERMINED_LANGUAGE
    return str(LanguageIdentifier.parse(locale))


def _parse_locale_rules(
    rules: Mapping[str, Any],
    parser: PluralRuleParser,
    location: str,
) -> tuple[tuple[PluralCategory, Condition], ...]:
    pairs: list[tuple[PluralCategory, Condition]] = []
    for key, text in rules.items():
        if not key.startswith(CLDR_RULE_PREFIX):
            reason = f"unexpected key '{key}'"
            raise CLDRDataError(ErrorTemplate.cldr_data_invalid(reason, location))
        label = key.removeprefix(CLDR_RULE_PREFIX)
        try:
            category = PluralCategory(label)
        except ValueError:
            raise CLDRDataError(ErrorTemplate.unknown_category(label, location)) from None
        if not isinstance(text, str):
            reason = f"rule for '{label}' is not a string"
            raise CLDRDataError(ErrorTemplate.cldr_data_invalid(reason, location))
        pairs.append((category, parser.parse_rule(text).condition))
    return tuple(pairs)


def parse_cldr_document(
    document: Mapping[str, Any],
    *,
    location: str | None = None,
    parser: PluralRuleParser | None = None,
) -> CLDRPluralData:
    """Extract plural rule sets from a decoded cldr-json document.

    Expected shape::

        {"supplemental": {
            "version": {"_cldrVersion": "46"},
            "plurals-type-cardinal": {
                "en": {"pluralRule-count-one": "i = 1 and v = 0 @integer 1", ...}}}}

    Args:
        document: Decoded JSON document
        location: Source name for diagnostics (usually the file path)
        parser: Rule parser (default: PluralRuleParser())

    Returns:
        CLDRPluralData with every plurals-type-* table found

    Raises:
        CLDRDataError: If the document structure is invalid
        UnknownRuleTypeError: If a plurals-type-* key names an unknown type
        PluralRuleSyntaxError: If a rule does not parse
        LocaleIdentifierError: If a locale name is malformed
    """
    rule_parser = parser or PluralRuleParser()
    supplemental = _require_mapping(document.get("supplemental"), "'supplemental'", location)
    version_info = _require_mapping(supplemental.get("version"), "'supplemental.version'", location)
    cldr_version = version_info.get("_cldrVersion")
    if not isinstance(cldr_version, str):
        reason = "missing 'supplemental.version._cldrVersion'"
        raise CLDRDataError(ErrorTemplate.cldr_data_invalid(reason, location))

    rule_sets: dict[RuleType, RuleSetTable] = {}
    for key, locales in supplemental.items():
        if not key.startswith(CLDR_RULE_TYPE_PREFIX):
            continue
        rule_type = coerce_rule_type(key.removeprefix(CLDR_RULE_TYPE_PREFIX))
        table: dict[str, tuple[tuple[PluralCategory, Condition], ...]] = {}
        for locale, rules in _require_mapping(locales, f"'{key}'", location).items():
            where = f"{location or '<document>'}: {rule_type}/{locale}"
            table[_locale_key(locale)] = _parse_locale_rules(
                _require_mapping(rules, f"'{key}.{locale}'", location), rule_parser, where
            )
        logger.debug("Loaded %d %s rule sets (CLDR %s)", len(table), rule_type, cldr_version)
        rule_sets[rule_type] = table

    if not rule_sets:
        logger.warning("No plurals-type-* tables in %s", location or "CLDR document")
    return CLDRPluralData(cldr_version, rule_sets)


def load_cldr_json(path: str | Path, *, parser: PluralRuleParser | None = None) -> CLDRPluralData:
    """Load one cldr-json plurals.json or ordinals.json file.

    Raises:
        FileNotFoundError: If path does not exist
        CLDRDataError: If the file is not valid JSON or has the wrong shape
    """
    source = Path(path)
    logger.info("Loading CLDR plural data from %s", source)
    try:
        with source.open(encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise CLDRDataError(ErrorTemplate.cldr_data_invalid(str(e), str(source))) from e
    return parse_cldr_document(
        _require_mapping(document, "document", str(source)),
        location=str(source),
        parser=parser,
    )


def load_cldr_files(
    paths: Iterable[str | Path], *, parser: PluralRuleParser | None = None
) -> CLDRPluralData:
    """Load several cldr-json files and merge them in order.

    Raises:
        ValueError: If paths is empty
        FileNotFoundError: If any path does not exist
        CLDRDataError: If any file is invalid
    """
    loaded = [load_cldr_json(p, parser=parser) for p in paths]
    if not loaded:
        msg = "At least one CLDR JSON file is required"
        raise ValueError(msg)
    data = loaded[0]
    for other in loaded[1:]:
        data = data.merge(other)
    return data


# ============================================================================
# BABEL
# ============================================================================


def _babel_rule_set(
    plural_rule: PluralRule, parser: PluralRuleParser
) -> tuple[tuple[PluralCategory, Condition], ...]:
    # Babel omits 'other'; its rule text uses the CLDR condition grammar
    return tuple(
        (PluralCategory(tag), parser.parse_condition(text))
        for tag, text in plural_rule.rules.items()
    )


def load_babel_rules(
    locales: Iterable[str] | None = None,
    *,
    parser: PluralRuleParser | None = None,
) -> CLDRPluralData:
    """Read cardinal and ordinal rules from Babel's bundled CLDR data.

    Args:
        locales: Locale identifiers to read (default: every locale Babel knows).
            Identifiers that map to the same language/script/region key
            (variants) are read once.
        parser: Rule parser (default: PluralRuleParser())

    Raises:
        babel.core.UnknownLocaleError: If a requested locale is unknown to Babel
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_cldr_version  # noqa: PLC0415
    from babel.localedata import locale_identifiers  # noqa: PLC0415

    rule_parser = parser or PluralRuleParser()
    identifiers = list(locales) if locales is not None else sorted(locale_identifiers())

    cardinal: dict[str, tuple[tuple[PluralCategory, Condition], ...]] = {}
    ordinal: dict[str, tuple[tuple[PluralCategory, Condition], ...]] = {}
    for identifier in identifiers:
        key = _locale_key(identifier)
        if key in cardinal:
            logger.debug("Skipping %s: rules already read for %s", identifier, key)
            continue
        babel_locale = get_babel_locale(identifier)
        cardinal[key] = _babel_rule_set(babel_locale.plural_form, rule_parser)
        ordinal[key] = _babel_rule_set(babel_locale.ordinal_form, rule_parser)

    cldr_version = str(get_cldr_version())
    logger.info("Read plural rules for %d locales from Babel (CLDR %s)", len(cardinal), cldr_version)
    return CLDRPluralData(cldr_version, {RuleType.CARDINAL: cardinal, RuleType.ORDINAL: ordinal})
