"""Plural rule registry: locale -> decision procedure, per rule type.

The registry is the one long-lived artifact of the compiler. It is built
once from locale rule sets and is read-only afterwards: both tables are
MappingProxyType views ordered by locale identifier string.

Thread-safe: no mutation after construction.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from cldrplurals.diagnostics import ErrorTemplate, UnknownRuleTypeError
from cldrplurals.enums import PluralCategory, RuleType
from cldrplurals.langid import LanguageIdentifier
from cldrplurals.operands import OperandSource, PluralOperands
from cldrplurals.syntax import PluralRuleParser
from cldrplurals.syntax.ast import Condition

from .generator import DecisionProcedure, compile_rule_set

__all__ = [
    "LocaleRuleSet",
    "PluralRegistry",
    "build_registry",
    "coerce_rule_type",
]

# Locales may be given as identifiers or as text ("en-US", "zh_Hant")
LocaleKey = LanguageIdentifier | str

# (category, condition) pairs of one locale and rule type
LocaleRuleSet = Sequence[tuple[PluralCategory | str, Condition | str]]


def coerce_rule_type(label: RuleType | str) -> RuleType:
    """Map a rule type label to RuleType.

    Raises:
        UnknownRuleTypeError: If label is not 'cardinal' or 'ordinal'
    """
    try:
        return RuleType(label)
    except ValueError:
        raise UnknownRuleTypeError(ErrorTemplate.unknown_rule_type(str(label))) from None


def _empty_table() -> Mapping[LanguageIdentifier, DecisionProcedure]:
    return MappingProxyType({})


def _as_langid(locale: LocaleKey) -> LanguageIdentifier:
    if isinstance(locale, LanguageIdentifier):
        return locale
    return LanguageIdentifier.parse(locale)


@dataclass(frozen=True, slots=True)
class PluralRegistry:
    """Cardinal and ordinal decision tables plus the CLDR version tag.

    Attributes:
        cldr_version: CLDR release the rules came from, e.g. "46"
        cardinal: Locale -> cardinal decision procedure
        ordinal: Locale -> ordinal decision procedure

    Example:
        >>> registry = build_registry({"cardinal": {"en": [("one", "i = 1 and v = 0")]}}, "46")
        >>> registry.select("en-US", 1)
        <PluralCategory.ONE: 'one'>
        >>> registry.select("en", "1.0")
        <PluralCategory.OTHER: 'other'>
    """

    cldr_version: str
    cardinal: Mapping[LanguageIdentifier, DecisionProcedure] = field(default_factory=_empty_table)
    ordinal: Mapping[LanguageIdentifier, DecisionProcedure] = field(default_factory=_empty_table)

    def table(self, rule_type: RuleType | str) -> Mapping[LanguageIdentifier, DecisionProcedure]:
        """Decision table of one rule type."""
        match coerce_rule_type(rule_type):
            case RuleType.CARDINAL:
                return self.cardinal
            case RuleType.ORDINAL:
                return self.ordinal

    def locales(self, rule_type: RuleType | str = RuleType.CARDINAL) -> tuple[LanguageIdentifier, ...]:
        """Locales with rules of the given type, in table order."""
        return tuple(self.table(rule_type))

    def get(
        self,
        locale: LocaleKey,
        rule_type: RuleType | str = RuleType.CARDINAL,
    ) -> DecisionProcedure | None:
        """Decision procedure for a locale, or None.

        Falls back from lang-Script-REGION to lang-Script, lang-REGION and
        finally lang.

        Raises:
            LocaleIdentifierError: If locale is malformed
            UnknownRuleTypeError: If rule_type is not cardinal or ordinal
        """
        table = self.table(rule_type)
        for candidate in _as_langid(locale).fallbacks():
            procedure = table.get(candidate)
            if procedure is not None:
                return procedure
        return None

    def select(
        self,
        locale: LocaleKey,
        number: int | float | Decimal | str | OperandSource,
        rule_type: RuleType | str = RuleType.CARDINAL,
    ) -> PluralCategory:
        """Plural category of a number in a locale.

        Locales without rules of the requested type select OTHER, like
        CLDR's root locale.

        Args:
            locale: Locale identifier ("en-US", "zh_Hant") or LanguageIdentifier
            number: Number, or a ready operand source
            rule_type: cardinal (default) or ordinal
        """
        procedure = self.get(locale, rule_type)
        if procedure is None:
            return PluralCategory.OTHER
        if isinstance(number, int | float | Decimal | str):
            number = PluralOperands.from_value(number)
        return procedure(number)


def build_registry(
    rule_sets: Mapping[RuleType | str, Mapping[LocaleKey, LocaleRuleSet]],
    cldr_version: str,
    *,
    parser: PluralRuleParser | None = None,
) -> PluralRegistry:
    """Compile every locale rule set into a registry.

    Args:
        rule_sets: Rule type -> locale -> (category, condition) pairs
        cldr_version: CLDR release tag stored on the registry
        parser: Parser for rule text conditions (default: PluralRuleParser())

    Raises:
        UnknownRuleTypeError: If a rule type label is not cardinal or ordinal
        LocaleIdentifierError: If a locale identifier is malformed
        PluralRuleSyntaxError: If a rule text does not parse
    """
    tables: dict[RuleType, Mapping[LanguageIdentifier, DecisionProcedure]] = {}
    for label, locales in rule_sets.items():
        rule_type = coerce_rule_type(label)
        compiled = _compile_table(locales.items(), parser)
        if rule_type in tables:
            compiled = {**tables[rule_type], **compiled}
        tables[rule_type] = compiled

    return PluralRegistry(
        cldr_version=cldr_version,
        cardinal=_freeze(tables.get(RuleType.CARDINAL, {})),
        ordinal=_freeze(tables.get(RuleType.ORDINAL, {})),
    )


def _compile_table(
    entries: Iterable[tuple[LocaleKey, LocaleRuleSet]],
    parser: PluralRuleParser | None,
) -> dict[LanguageIdentifier, DecisionProcedure]:
    return {
        _as_langid(locale): compile_rule_set(rule_set, parser=parser)
        for locale, rule_set in entries
    }


def _freeze(
    table: Mapping[LanguageIdentifier, DecisionProcedure],
) -> Mapping[LanguageIdentifier, DecisionProcedure]:
    return MappingProxyType(dict(sorted(table.items(), key=lambda item: str(item[0]))))
