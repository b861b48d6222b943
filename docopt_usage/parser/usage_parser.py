"""
Usage Parser - Parses the "Usage:" block of a help text.

This module locates the usage header and turns each following usage line
into a pattern, combining all lines into a single alternation.
"""

import logging

from docopt_usage.parser.expression_parser import ExpressionParser
from docopt_usage.scanner import INLINE_SPACES, USAGE_HEADERS, WHITESPACE, Scanner
from docopt_usage.syntax_tree.nodes import OneOfNode, Pattern, SequenceNode, flatten

logger = logging.getLogger(__name__)


class UsageParser:
    """
    Parser for the usage block.

    Grammar (simplified):
        usage_block := preamble 'Usage:' ws* newline? (usage_line newline)*
        usage_line  := ws* program_name (ws+ alternatives)? ws*

    The block ends at end of input, at a blank line, at a line starting
    with '-' (an option description) or at a line whose first word ends
    with ':' (the next section header).
    """

    def __init__(self, scanner: Scanner):
        self.scanner = scanner
        self.expressions = ExpressionParser(scanner)

    def parse(self) -> Pattern:
        """Parse the usage block into one pattern covering every usage line."""
        self._skip_header()

        lines: list[Pattern] = []
        while not self._at_block_end():
            lines.append(self._parse_line())
            if self.scanner.match_char("\n", "newline") is None:
                break

        logger.debug("Parsed %d usage line(s)", len(lines))
        return flatten(OneOfNode(tuple(lines)))

    def _skip_header(self) -> None:
        """Skip everything up to and including the first usage header."""
        source = self.scanner.source
        found = [i for i in (source.find(h, self.scanner.pos) for h in USAGE_HEADERS) if i >= 0]
        if not found:
            self.scanner.reset(self.scanner.length)
            raise self.scanner.error(
                "missing usage header", self.scanner.length, expected=("'usage:'",)
            )

        self.scanner.reset(min(found) + len(USAGE_HEADERS[0]))
        self.scanner.skip_inline_spaces()
        if self.scanner.current_char() == "\n":
            self.scanner.advance()

    def _at_block_end(self) -> bool:
        """Check whether the line at the current position closes the usage block."""
        if self.scanner.at_end():
            return True

        source = self.scanner.source
        line_end = source.find("\n", self.scanner.pos)
        if line_end == -1:
            line_end = self.scanner.length
        # Only spaces and tabs are blank; a stray '\r' is left for _parse_line to reject
        line = source[self.scanner.pos:line_end].strip(INLINE_SPACES)

        if not line or line.startswith("-"):
            return True
        words = line.split()
        return bool(words) and words[0].endswith(":")

    def _parse_line(self) -> Pattern:
        """Parse one usage line, ignoring the program name."""
        self.scanner.skip_inline_spaces()
        self.scanner.take_until(WHITESPACE)
        self.scanner.skip_inline_spaces()
        if self.scanner.at_line_end():
            return SequenceNode(())

        pattern = self.expressions.parse_alternatives()
        if pattern is None:
            raise self.scanner.error()

        self.scanner.skip_inline_spaces()
        if not self.scanner.at_line_end():
            raise self.scanner.error()
        return pattern
