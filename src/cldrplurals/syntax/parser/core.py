"""Core plural rule parser implementation.

This module provides the PluralRuleParser class that orchestrates parsing
of one CLDR rule string into the AST defined in :mod:`cldrplurals.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~cldrplurals.syntax.cursor.Cursor`)
    to traverse rule text. Each grammar rule (in :mod:`~cldrplurals.syntax.parser.rules`,
    :mod:`~cldrplurals.syntax.parser.samples`, :mod:`~cldrplurals.syntax.parser.primitives`)
    returns either a :class:`~cldrplurals.syntax.cursor.ParseResult` or None.

Failure policy:
    There is no recovery. Input the grammar cannot consume raises
    PluralRuleSyntaxError carrying the unconsumed remainder. A malformed
    sample clause only warns (SampleParseWarning) unless strict_samples
    is set; the condition is returned unchanged either way.

See Also:
    - :mod:`cldrplurals.syntax.parser.rules` - Condition grammar
    - :mod:`cldrplurals.syntax.parser.samples` - Sample clause grammar
"""

import warnings
from typing import NoReturn

from cldrplurals.constants import (
    DECIMAL_SAMPLE_TAG,
    INTEGER_SAMPLE_TAG,
    MAX_RULE_LENGTH,
    SAMPLE_MARKER,
)
from cldrplurals.diagnostics import (
    ErrorTemplate,
    PluralRuleSyntaxError,
    PluralSampleError,
    SampleParseWarning,
)
from cldrplurals.syntax.ast import Condition, Rule, Samples
from cldrplurals.syntax.cursor import Cursor, ParseResult
from cldrplurals.syntax.parser.rules import parse_condition_body
from cldrplurals.syntax.parser.samples import parse_samples

__all__ = ["PluralRuleParser"]

_OPERAND_EXPECTED: tuple[str, ...] = ("n", "i", "v", "w", "f", "t", "e")
_CONTINUATION_EXPECTED: tuple[str, ...] = ("and", "or", INTEGER_SAMPLE_TAG, DECIMAL_SAMPLE_TAG)


class PluralRuleParser:
    """CLDR plural rule parser using immutable cursor pattern.

    Attributes:
        max_rule_length: Maximum accepted rule length in characters
        strict_samples: Raise PluralSampleError instead of warning on
            malformed sample clauses

    Example:
        >>> parser = PluralRuleParser()
        >>> rule = parser.parse_rule("i = 1 and v = 0 @integer 1")
        >>> len(rule.condition.and_conditions[0].relations)
        2
    """

    __slots__ = ("_max_rule_length", "_strict_samples")

    def __init__(
        self,
        *,
        max_rule_length: int | None = None,
        strict_samples: bool = False,
    ) -> None:
        """Initialize parser.

        Args:
            max_rule_length: Maximum rule length (default: 10 KB).
                Set to 0 to disable the limit.
            strict_samples: Treat malformed samples as errors (default: False)
        """
        self._max_rule_length = (
            max_rule_length if max_rule_length is not None else MAX_RULE_LENGTH
        )
        self._strict_samples = strict_samples

    @property
    def max_rule_length(self) -> int:
        """Maximum accepted rule length in characters."""
        return self._max_rule_length

    @property
    def strict_samples(self) -> bool:
        """Whether malformed samples raise instead of warn."""
        return self._strict_samples

    def parse_condition(self, source: str) -> Condition:
        """Parse the condition part of a rule, ignoring any samples.

        Empty input and input that starts with '@' after trimming are the
        always-true condition used for 'other'.

        Raises:
            PluralRuleSyntaxError: If the condition is malformed
        """
        return self._parse_condition(source).value

    def parse_rule(self, source: str) -> Rule:
        """Parse a full rule: condition followed by optional samples.

        Args:
            source: Rule text, e.g. "n % 10 = 1 @integer 1, 21, 31, …"

        Returns:
            Rule with the parsed condition and samples (None if absent)

        Raises:
            PluralRuleSyntaxError: If the condition is malformed
            PluralSampleError: If samples are malformed and strict_samples is set
        """
        condition = self._parse_condition(source)
        samples = self._parse_sample_tail(condition.cursor)
        return Rule(condition=condition.value, samples=samples)

    def _check_length(self, source: str) -> None:
        if self._max_rule_length > 0 and len(source) > self._max_rule_length:
            diagnostic = ErrorTemplate.rule_too_long(len(source), self._max_rule_length)
            raise PluralRuleSyntaxError(diagnostic, source=source, position=0)

    def _parse_condition(self, source: str) -> ParseResult[Condition]:
        self._check_length(source)
        cursor = Cursor(source, 0).skip_spaces()

        if cursor.is_eof or cursor.startswith(SAMPLE_MARKER):
            return ParseResult(Condition(), cursor)

        result = parse_condition_body(cursor)
        if result is None:
            self._raise_unexpected(cursor, _OPERAND_EXPECTED)

        tail = result.cursor.skip_spaces()
        if not tail.is_eof and not tail.startswith(SAMPLE_MARKER):
            self._raise_unexpected(tail, _CONTINUATION_EXPECTED)
        return ParseResult(result.value, tail)

    def _parse_sample_tail(self, cursor: Cursor) -> Samples | None:
        if cursor.is_eof:
            return None

        result = parse_samples(cursor)
        tail = result.cursor.skip_spaces()
        if tail.is_eof:
            return result.value

        diagnostic = ErrorTemplate.sample_invalid(cursor.source, tail.pos)
        if self._strict_samples:
            raise PluralSampleError(diagnostic)
        warnings.warn(diagnostic.message, SampleParseWarning, stacklevel=4)
        return None

    @staticmethod
    def _raise_unexpected(cursor: Cursor, expected: tuple[str, ...]) -> NoReturn:
        diagnostic = ErrorTemplate.unexpected_input(cursor.source, cursor.pos, expected)
        raise PluralRuleSyntaxError(diagnostic, source=cursor.source, position=cursor.pos)
