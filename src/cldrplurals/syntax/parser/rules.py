"""Grammar rules for the plural rule parser.

This module provides the condition grammar of UTS #35 plural rules:

    value        = digit+
    range        = value ".." value
    range_list   = (range | value) ("," (range | value))*
    operand      = 'n' | 'i' | 'v' | 'w' | 'f' | 't' | 'e' | 'c'
    expression   = operand (("mod" | "%") value)?
    rel_operator = "=" | "!=" | "is" "not"? | "in" | "not" ("in" | "within") | "within"
    relation     = expression rel_operator range_list
    and_cond     = relation ("and" relation)*
    condition    = and_cond ("or" and_cond)*

Whitespace:
    Symbolic operators ("=", "!=", "%", ",") take optional spaces on both
    sides. Word operators ("and", "or", "is", "not", "in", "within", "mod")
    must be separated from their neighbours by at least one space.

Backtracking:
    Repetitions (range list items, "and"/"or" chains) stop at the first
    separator that is not followed by a complete element, leaving the
    cursor before the separator. The caller then sees the separator as
    unconsumed input and reports it.
"""

from cldrplurals.diagnostics import ErrorTemplate, PluralRuleSyntaxError
from cldrplurals.enums import Operator
from cldrplurals.syntax.ast import (
    AndCondition,
    Condition,
    Expression,
    Range,
    RangeList,
    RangeListItem,
    Relation,
    Value,
)
from cldrplurals.syntax.cursor import Cursor, ParseResult
from cldrplurals.syntax.parser.primitives import (
    parse_keyword,
    parse_operand,
    parse_value,
    parse_word_operator,
)

__all__ = [
    "parse_and_condition",
    "parse_condition_body",
    "parse_expression",
    "parse_range_list",
    "parse_relation",
    "parse_relation_operator",
]


# =============================================================================
# Range Lists
# =============================================================================


def parse_range_list_item(cursor: Cursor) -> ParseResult[RangeListItem] | None:
    """Parse range | value.

    Raises:
        PluralRuleSyntaxError: If a range has its upper bound below its lower bound
    """
    lower = parse_value(cursor)
    if lower is None:
        return None

    dots = lower.cursor.expect("..")
    if dots is None:
        return lower
    upper = parse_value(dots)
    if upper is None:
        # "5.." is a value followed by junk; leave ".." unconsumed
        return lower

    if upper.value.value < lower.value.value:
        diagnostic = ErrorTemplate.invalid_range(
            cursor.source,
            cursor.pos,
            upper.cursor.pos,
            lower.value.value,
            upper.value.value,
        )
        raise PluralRuleSyntaxError(diagnostic, source=cursor.source, position=cursor.pos)

    return ParseResult(Range(lower.value, upper.value), upper.cursor)


def parse_range_list(cursor: Cursor) -> ParseResult[RangeList]:
    """Parse range_list. Always succeeds; an empty list is accepted.

    Examples:
        "1"           -> RangeList((Value(1),))
        "0, 2..4, 10" -> RangeList((Value(0), Range(2, 4), Value(10)))
    """
    first = parse_range_list_item(cursor)
    if first is None:
        return ParseResult(RangeList(), cursor)

    items: list[RangeListItem] = [first.value]
    cursor = first.cursor
    while True:
        comma = cursor.skip_spaces().expect(",")
        if comma is None:
            break
        item = parse_range_list_item(comma.skip_spaces())
        if item is None:
            break
        items.append(item.value)
        cursor = item.cursor

    return ParseResult(RangeList(tuple(items)), cursor)


# =============================================================================
# Expressions and Relations
# =============================================================================


def _parse_modulus(cursor: Cursor) -> ParseResult[Value] | None:
    spaced = cursor.skip_spaces()

    after_op = spaced.expect("%")
    if after_op is not None:
        after_op = after_op.skip_spaces()
    elif spaced.pos > cursor.pos:
        # 'mod' is a word operator: space1 on both sides
        keyword = parse_keyword(spaced, "mod")
        after_op = keyword.expect_spaces() if keyword is not None else None

    if after_op is None:
        return None
    return parse_value(after_op)


def parse_expression(cursor: Cursor) -> ParseResult[Expression] | None:
    """Parse expression: operand (("mod" | "%") value)?

    Examples:
        "n"        -> Expression(Operand.N)
        "i % 10"   -> Expression(Operand.I, Value(10))
        "n mod 100" -> Expression(Operand.N, Value(100))
    """
    operand = parse_operand(cursor)
    if operand is None:
        return None

    modulus = _parse_modulus(operand.cursor)
    if modulus is None:
        return ParseResult(Expression(operand.value), operand.cursor)
    return ParseResult(Expression(operand.value, modulus.value), modulus.cursor)


def _parse_word_relation_operator(cursor: Cursor) -> ParseResult[Operator] | None:
    after_is = parse_keyword(cursor, "is")
    if after_is is not None:
        after_not = parse_word_operator(after_is, "not")
        if after_not is not None:
            return ParseResult(Operator.IS_NOT, after_not)
        return ParseResult(Operator.IS, after_is)

    after_in = parse_keyword(cursor, "in")
    if after_in is not None:
        return ParseResult(Operator.IN, after_in)

    after_not = parse_keyword(cursor, "not")
    if after_not is not None:
        spaced = after_not.expect_spaces()
        if spaced is None:
            return None
        after = parse_keyword(spaced, "in")
        if after is not None:
            return ParseResult(Operator.NOT_IN, after)
        after = parse_keyword(spaced, "within")
        if after is not None:
            return ParseResult(Operator.NOT_WITHIN, after)
        return None

    after_within = parse_keyword(cursor, "within")
    if after_within is not None:
        return ParseResult(Operator.WITHIN, after_within)

    return None


def parse_relation_operator(cursor: Cursor) -> ParseResult[Operator] | None:
    """Parse rel_operator including its surrounding whitespace.

    The returned cursor sits at the start of the range list.
    """
    spaced = cursor.skip_spaces()

    for token, operator in (("!=", Operator.NOT_EQ), ("=", Operator.EQ)):
        after = spaced.expect(token)
        if after is not None:
            return ParseResult(operator, after.skip_spaces())

    if spaced.pos == cursor.pos:
        return None
    word = _parse_word_relation_operator(spaced)
    if word is None:
        return None
    after = word.cursor.expect_spaces()
    if after is None:
        return None
    return ParseResult(word.value, after)


def parse_relation(cursor: Cursor) -> ParseResult[Relation] | None:
    """Parse relation: expression rel_operator range_list

    Examples:
        "i = 1"          -> Relation(Expression(I), EQ, RangeList((Value(1),)))
        "n % 10 in 3..4" -> Relation(Expression(N, Value(10)), IN, ...)
        "n within 0..2"  -> Relation(Expression(N), WITHIN, ...)
    """
    expression = parse_expression(cursor)
    if expression is None:
        return None

    operator = parse_relation_operator(expression.cursor)
    if operator is None:
        return None

    range_list = parse_range_list(operator.cursor)
    relation = Relation(expression.value, operator.value, range_list.value)
    return ParseResult(relation, range_list.cursor)


# =============================================================================
# Conditions
# =============================================================================


def parse_and_condition(cursor: Cursor) -> ParseResult[AndCondition] | None:
    """Parse and_cond: relation ("and" relation)*"""
    first = parse_relation(cursor)
    if first is None:
        return None

    relations = [first.value]
    cursor = first.cursor
    while True:
        keyword = parse_word_operator(cursor, "and")
        spaced = keyword.expect_spaces() if keyword is not None else None
        relation = parse_relation(spaced) if spaced is not None else None
        if relation is None:
            break
        relations.append(relation.value)
        cursor = relation.cursor

    return ParseResult(AndCondition(tuple(relations)), cursor)


def parse_condition_body(cursor: Cursor) -> ParseResult[Condition] | None:
    """Parse condition: and_cond ("or" and_cond)*

    'and' binds tighter than 'or', so the result is already in disjunctive
    normal form.

    Example:
        "n = 0 or n != 1 and n % 100 = 1..19"
        -> Condition((AndCondition((n = 0,)), AndCondition((n != 1, n % 100 = 1..19))))
    """
    first = parse_and_condition(cursor)
    if first is None:
        return None

    and_conditions = [first.value]
    cursor = first.cursor
    while True:
        keyword = parse_word_operator(cursor, "or")
        spaced = keyword.expect_spaces() if keyword is not None else None
        and_condition = parse_and_condition(spaced) if spaced is not None else None
        if and_condition is None:
            break
        and_conditions.append(and_condition.value)
        cursor = and_condition.cursor

    return ParseResult(Condition(tuple(and_conditions)), cursor)
