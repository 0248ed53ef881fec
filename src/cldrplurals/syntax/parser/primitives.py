"""Primitive parsing utilities for the plural rule parser.

This module provides low-level parsers for integer literals, operand
letters and keywords. Each returns ParseResult on success and None when
the input does not match, leaving backtracking to the caller.
"""

from cldrplurals.constants import ASCII_DIGITS, OPERAND_CHARS
from cldrplurals.enums import Operand
from cldrplurals.syntax.ast import Value
from cldrplurals.syntax.cursor import Cursor, ParseResult

__all__ = [
    "parse_digits",
    "parse_keyword",
    "parse_operand",
    "parse_value",
    "parse_word_operator",
]


def parse_digits(cursor: Cursor) -> ParseResult[str] | None:
    """Parse one or more ASCII digits: [0-9]+

    Returns the raw digit string so callers can keep leading and trailing
    zeros (sample fractions need them).

    Example:
        >>> parse_digits(Cursor("100..", 0)).value
        '100'
    """
    start = cursor
    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()
    if cursor.pos == start.pos:
        return None
    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_value(cursor: Cursor) -> ParseResult[Value] | None:
    """Parse value: digit+

    Examples:
        0 -> Value(0)
        1000000 -> Value(1000000)
    """
    result = parse_digits(cursor)
    if result is None:
        return None
    return ParseResult(Value(int(result.value)), result.cursor)


def parse_operand(cursor: Cursor) -> ParseResult[Operand] | None:
    """Parse operand: 'n' | 'i' | 'v' | 'w' | 'f' | 't' | 'e' | 'c'

    Operands are single letters. A letter immediately followed by another
    letter is a word, not an operand ("in" is never the operand 'i').
    """
    if cursor.is_eof or cursor.current not in OPERAND_CHARS:
        return None
    after = cursor.advance()
    if not after.is_eof and after.current.isalpha():
        return None
    return ParseResult(Operand(cursor.current), after)


def parse_keyword(cursor: Cursor, keyword: str) -> Cursor | None:
    """Consume keyword when it is a whole word.

    Example:
        >>> parse_keyword(Cursor("and i = 1", 0), "and").pos
        3
        >>> parse_keyword(Cursor("android", 0), "and") is None
        True
    """
    after = cursor.expect(keyword)
    if after is None:
        return None
    if not after.is_eof and after.current.isalpha():
        return None
    return after


def parse_word_operator(cursor: Cursor, keyword: str) -> Cursor | None:
    """Consume space1 keyword, the form of 'and'/'or' separators.

    Returns the cursor after the keyword (trailing space is not consumed),
    or None so that the caller backtracks to before the leading space.
    """
    spaced = cursor.expect_spaces()
    if spaced is None:
        return None
    return parse_keyword(spaced, keyword)
