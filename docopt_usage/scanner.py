"""
Scanner module for walking usage text character by character.

This module provides the cursor shared by the usage and option-description
parsers: peeking and advancing over characters, backtracking to a saved
mark, and remembering the furthest point any grammar rule failed so that
errors point at the deepest position the parse reached.
"""

import string


# Character classes
LOWERS = string.ascii_lowercase
UPPERS = string.ascii_uppercase
LETTERS = string.ascii_letters
DIGITS = string.digits
ALPHANUMERICS = LETTERS + DIGITS
NAME_CHARS = ALPHANUMERICS + "-_"
PLACEHOLDER_CHARS = UPPERS + DIGITS + "-_"
INLINE_SPACES = " \t"
WHITESPACE = " \t\r\n"

# Grammar literals
USAGE_HEADERS = ("Usage:", "usage:")
ANY_OPTIONS_KEYWORD = "options"
ELLIPSIS = "..."
DEFAULT_TAG = "[default:"


class ParseError(Exception):
    """Exception raised when usage text violates the grammar."""

    def __init__(
        self,
        message: str,
        position: int,
        line: int = 1,
        column: int = 1,
        expected: tuple[str, ...] = (),
    ):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        text = f"{message} at line {line}, column {column}"
        if expected:
            text += f" (expected {', '.join(expected)})"
        super().__init__(text)


class Scanner:
    """
    Backtracking cursor over a source string.

    Parsers save a mark before trying an alternative and reset to it when
    the alternative fails, so a failed rule never consumes input. Every
    failed expectation is reported through ``expect`` and the scanner
    keeps the descriptions gathered at the furthest failing offset.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)
        self._failure_pos = -1
        self._expected: set[str] = set()

    def current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def advance(self) -> str | None:
        """Advance position and return the character."""
        char = self.current_char()
        if char is not None:
            self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= self.length

    def at(self, chars: str) -> bool:
        """Check if the current character is one of ``chars``."""
        char = self.current_char()
        return char is not None and char in chars

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark

    def expect(self, description: str, position: int | None = None) -> None:
        """Record that ``description`` was expected at ``position``."""
        if position is None:
            position = self.pos
        if position > self._failure_pos:
            self._failure_pos = position
            self._expected = {description}
        elif position == self._failure_pos:
            self._expected.add(description)

    def match_char(self, chars: str, description: str | None = None) -> str | None:
        """Consume and return the current character if it is one of ``chars``."""
        if self.at(chars):
            return self.advance()
        self.expect(description or repr(chars))
        return None

    def match_string(self, text: str, description: str | None = None) -> bool:
        """Consume ``text`` if the source continues with it."""
        if self.source.startswith(text, self.pos):
            self.pos += len(text)
            return True
        self.expect(description or repr(text))
        return False

    def take_while(self, chars: str) -> str:
        """Consume the longest run of characters drawn from ``chars``."""
        start = self.pos
        while self.at(chars):
            self.pos += 1
        return self.source[start:self.pos]

    def take_until(self, chars: str) -> str:
        """Consume characters up to (not including) one of ``chars``."""
        start = self.pos
        while not self.at_end() and not self.at(chars):
            self.pos += 1
        return self.source[start:self.pos]

    def skip_inline_spaces(self) -> int:
        """Skip spaces and tabs, returning how many were skipped."""
        return len(self.take_while(INLINE_SPACES))

    def at_line_end(self) -> bool:
        """Check for a newline or the end of input, recording the expectation."""
        if self.at_end() or self.current_char() == "\n":
            return True
        self.expect("end of line")
        return False

    def location(self, position: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of an offset."""
        line = self.source.count("\n", 0, position) + 1
        line_start = self.source.rfind("\n", 0, position) + 1
        return line, position - line_start + 1

    def error(
        self,
        message: str | None = None,
        position: int | None = None,
        expected: tuple[str, ...] = (),
    ) -> ParseError:
        """
        Build a ParseError.

        Without an explicit position the error points at the furthest
        recorded failure, or at the current position if nothing failed
        further along.
        """
        if position is None:
            if self._failure_pos >= self.pos:
                position = self._failure_pos
                expected = tuple(sorted(self._expected))
            else:
                position = self.pos

        if message is None:
            if position >= self.length:
                message = "unexpected end of input"
            elif self.source[position] == "\n":
                message = "unexpected end of line"
            else:
                message = f"unexpected {self.source[position]!r}"

        line, column = self.location(position)
        return ParseError(message, position, line, column, expected)
