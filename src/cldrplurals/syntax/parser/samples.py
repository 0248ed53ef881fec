"""Sample clause parser.

Parses the informational tail of a CLDR rule:

    sample_decl  = ("@integer" sample_list)? ("@decimal" sample_list)?
    sample_list  = sample_range ("," sample_range)* ("," ("..." | "…"))?
    sample_range = decimal_value ("~" decimal_value)?
    decimal_value = value ("." digit+)? (("e" | "c") value)?

Samples document a rule; they never influence category selection.
"""

from cldrplurals.constants import DECIMAL_SAMPLE_TAG, ELLIPSIS_TOKENS, INTEGER_SAMPLE_TAG
from cldrplurals.syntax.ast import DecimalValue, SampleList, SampleRange, Samples
from cldrplurals.syntax.cursor import Cursor, ParseResult
from cldrplurals.syntax.parser.primitives import parse_digits, parse_keyword

__all__ = ["parse_decimal_value", "parse_sample_list", "parse_samples"]


def parse_decimal_value(cursor: Cursor) -> ParseResult[DecimalValue] | None:
    """Parse decimal_value.

    Examples:
        "15"      -> DecimalValue(15)
        "1.50"    -> DecimalValue(1, "50")
        "1.0c6"   -> DecimalValue(1, "0", 6)
    """
    integer = parse_digits(cursor)
    if integer is None:
        return None
    cursor = integer.cursor

    fraction: str | None = None
    dot = cursor.expect(".")
    if dot is not None:
        digits = parse_digits(dot)
        if digits is not None:
            fraction = digits.value
            cursor = digits.cursor

    exponent: int | None = None
    if not cursor.is_eof and cursor.current in "ec":
        digits = parse_digits(cursor.advance())
        if digits is not None:
            exponent = int(digits.value)
            cursor = digits.cursor

    return ParseResult(DecimalValue(int(integer.value), fraction, exponent), cursor)


def _parse_sample_range(cursor: Cursor) -> ParseResult[SampleRange] | None:
    lower = parse_decimal_value(cursor)
    if lower is None:
        return None

    tilde = lower.cursor.skip_spaces().expect("~")
    if tilde is not None:
        upper = parse_decimal_value(tilde.skip_spaces())
        if upper is not None:
            return ParseResult(SampleRange(lower.value, upper.value), upper.cursor)
    return ParseResult(SampleRange(lower.value), lower.cursor)


def _parse_ellipsis(cursor: Cursor) -> Cursor | None:
    for token in ELLIPSIS_TOKENS:
        after = cursor.expect(token)
        if after is not None:
            return after
    return None


def parse_sample_list(cursor: Cursor) -> ParseResult[SampleList] | None:
    """Parse sample_list.

    Example:
        "0, 2~16, 100, …" -> SampleList((0, 2~16, 100), ellipsis=True)
    """
    first = _parse_sample_range(cursor)
    if first is None:
        return None

    ranges = [first.value]
    cursor = first.cursor
    ellipsis = False
    while True:
        comma = cursor.skip_spaces().expect(",")
        if comma is None:
            break
        item_start = comma.skip_spaces()
        item = _parse_sample_range(item_start)
        if item is not None:
            ranges.append(item.value)
            cursor = item.cursor
            continue
        after_ellipsis = _parse_ellipsis(item_start)
        if after_ellipsis is not None:
            ellipsis = True
            cursor = after_ellipsis
        break

    return ParseResult(SampleList(tuple(ranges), ellipsis), cursor)


def _parse_tagged_list(cursor: Cursor, tag: str) -> ParseResult[SampleList] | None:
    after_tag = parse_keyword(cursor.skip_spaces(), tag)
    if after_tag is None:
        return None
    spaced = after_tag.expect_spaces()
    if spaced is None:
        return None
    return parse_sample_list(spaced)


def parse_samples(cursor: Cursor) -> ParseResult[Samples | None]:
    """Parse sample_decl. Always succeeds.

    Returns None as the value when neither clause is present. The caller
    checks the returned cursor for unconsumed input.
    """
    integer = _parse_tagged_list(cursor, INTEGER_SAMPLE_TAG)
    if integer is not None:
        cursor = integer.cursor
    decimal = _parse_tagged_list(cursor, DECIMAL_SAMPLE_TAG)
    if decimal is not None:
        cursor = decimal.cursor

    if integer is None and decimal is None:
        return ParseResult(None, cursor)
    samples = Samples(
        integer=integer.value if integer is not None else None,
        decimal=decimal.value if decimal is not None else None,
    )
    return ParseResult(samples, cursor)
