"""
Option Description Parser - Parses the option descriptions section.

This module reads the records that follow the usage block, one per line
starting with '-', collecting each option's synonyms, default value and
whether it takes a value.
"""

import logging
import re

from docopt_usage.parser.expression_parser import ExpressionParser
from docopt_usage.scanner import DEFAULT_TAG, INLINE_SPACES, Scanner
from docopt_usage.syntax_tree.nodes import LongOption, OptionAtom, ShortOption
from docopt_usage.syntax_tree.option_info import OptInfo

logger = logging.getLogger(__name__)

# A record starts on a line whose first non-space character is '-'
RECORD_START = re.compile(r"^[ \t]*-", re.MULTILINE)
DEFAULT_OPEN = re.compile(re.escape(DEFAULT_TAG), re.IGNORECASE)


class OptionDescriptionParser:
    """
    Parser for option description records.

    Grammar (simplified):
        record  := ws* synonym (sep synonym)* text* default? text*
        synonym := ('-' LETTER | '--' NAME) option_argument?
        sep     := "," ws* | ws
        default := '[default:' ws* TEXT ']'     (tag is case-insensitive)

    A record runs until the next line starting with '-' or end of input;
    lines in between are description text.
    """

    def __init__(self, scanner: Scanner):
        self.scanner = scanner
        self.expressions = ExpressionParser(scanner)

    def parse(self) -> dict[OptionAtom, OptInfo]:
        """
        Parse every record from the current position to the end of input.

        Returns:
            OptInfo for every declared spelling; later records overwrite
            earlier entries for the same spelling
        """
        descriptions: dict[OptionAtom, OptInfo] = {}
        records = 0

        start = self._next_record(self.scanner.pos)
        while start < self.scanner.length:
            end = self._next_record(start + 1)
            self._parse_record(start, end, descriptions)
            records += 1
            start = end

        self.scanner.reset(self.scanner.length)
        logger.debug("Parsed %d option description record(s)", records)
        return descriptions

    def _next_record(self, position: int) -> int:
        """Return the offset of the first record line at or after ``position``."""
        match = RECORD_START.search(self.scanner.source, position)
        if match is None:
            return self.scanner.length
        return match.start()

    def _parse_record(
        self, start: int, end: int, descriptions: dict[OptionAtom, OptInfo]
    ) -> None:
        """Parse the record spanning ``start:end`` into ``descriptions``."""
        self.scanner.reset(start)
        synonyms, expects_value = self._parse_synonyms()
        default_value = self._parse_default(end)

        info = OptInfo(
            synonyms=synonyms,
            default_value=default_value,
            expects_value=expects_value,
        )
        for synonym in synonyms:
            descriptions[synonym] = info

    def _parse_synonyms(self) -> tuple[tuple[OptionAtom, ...], bool]:
        """Parse the leading option spellings of a record."""
        self.scanner.skip_inline_spaces()
        synonyms: list[OptionAtom] = []
        expects_value = False

        while True:
            parsed = self._parse_synonym()
            if parsed is None:
                if not synonyms:
                    raise self.scanner.error()
                break

            synonym, takes_value = parsed
            synonyms.append(synonym)
            expects_value = expects_value or takes_value

            # After a comma any run of spaces may follow; otherwise exactly one
            if self.scanner.match_char(",", "','") is not None:
                self.scanner.skip_inline_spaces()
            elif self.scanner.match_char(INLINE_SPACES, "space") is None:
                break

        return tuple(dict.fromkeys(synonyms)), expects_value

    def _parse_synonym(self) -> tuple[OptionAtom, bool] | None:
        short = self.expressions.parse_short_option()
        if short is not None:
            return ShortOption(short[0]), short[1]

        long = self.expressions.parse_long_option()
        if long is not None:
            return LongOption(long[0]), long[1]
        return None

    def _parse_default(self, end: int) -> str | None:
        """Find the first '[default: ...]' tag before ``end`` and return its text."""
        source = self.scanner.source
        match = DEFAULT_OPEN.search(source, self.scanner.pos, end)
        if match is None:
            return None

        self.scanner.reset(match.end())
        self.scanner.skip_inline_spaces()
        value_start = self.scanner.pos
        closing = source.find("]", value_start, end)
        if closing == -1:
            raise self.scanner.error(
                "unterminated default tag", match.start(), expected=("']'",)
            )
        return source[value_start:closing]
