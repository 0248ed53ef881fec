"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.11+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - A failed grammar rule returns None and leaves the caller's cursor
      untouched, so backtracking is free

Plural rules are single-line strings, so positions are plain character
offsets; no line:column bookkeeping is needed.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["INLINE_SPACE", "Cursor", "ParseResult"]

T = TypeVar("T")

# Inline whitespace between tokens. CLDR data uses U+0020 only; tabs are
# accepted for hand-written rules.
INLINE_SPACE: str = " \t"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("n = 1", 0)
        >>> cursor.current
        'n'
        >>> cursor.advance().skip_spaces().current
        '='
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of rule at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def remainder(self) -> str:
        """Unconsumed text from the current position to the end."""
        return self.source[self.pos :]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def startswith(self, token: str) -> bool:
        """Check whether the unconsumed text begins with token.

        Example:
            >>> Cursor("n mod 10", 2).startswith("mod")
            True
        """
        return self.source.startswith(token, self.pos)

    def expect(self, token: str) -> "Cursor | None":
        """Consume token if it matches, return None otherwise.

        Example:
            >>> Cursor("..5", 0).expect("..").pos
            2
            >>> Cursor("5", 0).expect("..") is None
            True
        """
        if self.startswith(token):
            return self.advance(len(token))
        return None

    def skip_spaces(self) -> "Cursor":
        """Skip inline whitespace (space0)."""
        c = self
        while not c.is_eof and c.current in INLINE_SPACE:
            c = c.advance()
        return c

    def expect_spaces(self) -> "Cursor | None":
        """Consume at least one inline whitespace character (space1).

        Returns:
            Cursor after the whitespace run, or None if there was none

        Example:
            >>> Cursor("  and", 0).expect_spaces().pos
            2
            >>> Cursor("and", 0).expect_spaces() is None
            True
        """
        c = self.skip_spaces()
        if c.pos == self.pos:
            return None
        return c


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None

        None means "no match here"; the caller still holds the cursor it
        passed in and may try another alternative.

    Example:
        >>> result = ParseResult(1, Cursor("1..2", 1))
        >>> result.value
        1
        >>> result.cursor.remainder
        '..2'
    """

    value: T
    cursor: Cursor
