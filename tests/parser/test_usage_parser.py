"""
Tests for the usage block parser.

Covers header detection, line splitting, block boundaries and error
positions.
"""

import pytest

from docopt_usage.parser.usage_parser import UsageParser
from docopt_usage.scanner import ParseError, Scanner
from docopt_usage.syntax_tree.nodes import (
    Argument,
    AtomNode,
    Command,
    OneOfNode,
    SequenceNode,
    ShortOption,
)


def parse(text: str):
    scanner = Scanner(text)
    return UsageParser(scanner).parse(), scanner


class TestHeader:
    """Tests for locating the usage header."""

    def test_preamble_is_skipped(self):
        pattern, _ = parse("My program.\n\nUsage:\n  prog run\n")
        assert pattern == AtomNode(Command("run"))

    def test_lowercase_header(self):
        pattern, _ = parse("usage:\n  prog run\n")
        assert pattern == AtomNode(Command("run"))

    def test_first_line_on_header_line(self):
        pattern, _ = parse("Usage: prog -a\n       prog -b\n")
        assert pattern == OneOfNode((AtomNode(ShortOption("a")), AtomNode(ShortOption("b"))))

    def test_missing_header(self):
        with pytest.raises(ParseError) as exc_info:
            parse("prog -a\n")
        assert exc_info.value.expected == ("'usage:'",)

    def test_uppercase_header_is_not_recognized(self):
        with pytest.raises(ParseError):
            parse("USAGE:\n  prog -a\n")


class TestLines:
    """Tests for usage lines."""

    def test_single_line_sequence(self):
        pattern, _ = parse("Usage:\n  prog -a -b\n")
        assert pattern == SequenceNode((AtomNode(ShortOption("a")), AtomNode(ShortOption("b"))))

    def test_lines_become_alternation(self):
        pattern, _ = parse("Usage:\n  prog add <name>\n  prog list\n")
        assert pattern == OneOfNode((
            SequenceNode((AtomNode(Command("add")), AtomNode(Argument("name")))),
            AtomNode(Command("list")),
        ))

    def test_program_name_only(self):
        """A line holding only the program name is an empty sequence."""
        pattern, _ = parse("Usage:\n  prog\n")
        assert pattern == SequenceNode(())

    def test_no_trailing_newline(self):
        pattern, scanner = parse("Usage:\n  prog run")
        assert pattern == AtomNode(Command("run"))
        assert scanner.at_end()

    def test_trailing_spaces_allowed(self):
        pattern, _ = parse("Usage:\n  prog run   \n")
        assert pattern == AtomNode(Command("run"))


class TestBlockEnd:
    """Tests for where the usage block stops."""

    def test_blank_line_ends_block(self):
        pattern, scanner = parse("Usage:\n  prog a\n\n  prog b\n")
        assert pattern == AtomNode(Command("a"))
        assert scanner.current_char() == "\n"

    def test_section_header_ends_block(self):
        pattern, scanner = parse("Usage:\n  prog a\nOptions:\n  -v\n")
        assert pattern == AtomNode(Command("a"))
        assert scanner.current_char() == "O"

    def test_option_line_ends_block(self):
        pattern, scanner = parse("Usage:\n  prog a\n  -v  Verbose.\n")
        assert pattern == AtomNode(Command("a"))
        assert scanner.source[scanner.pos:].startswith("  -v")


class TestErrors:
    """Tests for grammar violations."""

    def test_bare_dash(self):
        """The error points just past the dash, where a letter was expected."""
        with pytest.raises(ParseError) as exc_info:
            parse("Usage:\n  prog -\n")
        error = exc_info.value
        assert error.line == 2
        assert error.column == 9
        assert "letter" in error.expected

    def test_trailing_garbage(self):
        with pytest.raises(ParseError) as exc_info:
            parse("Usage:\n  prog <a>b\n")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 11

    def test_error_message_has_position(self):
        with pytest.raises(ParseError, match="line 2, column 9"):
            parse("Usage:\n  prog -\n")


class TestCarriageReturns:
    """Tests that a stray '\\r' is a grammar violation, not a blank line."""

    def test_crlf_after_header_fails(self):
        """CRLF text fails at the first '\\r' instead of yielding an empty pattern."""
        with pytest.raises(ParseError) as exc_info:
            parse("Usage:\r\n  prog -a\r\n\r\nOptions:\r\n  -a  All.\r\n")
        error = exc_info.value
        assert error.line == 1
        assert error.column == 7
        assert "end of line" in error.expected

    def test_crlf_on_usage_line_fails(self):
        with pytest.raises(ParseError) as exc_info:
            parse("Usage:\n  prog -a\r\n")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 10
