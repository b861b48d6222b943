"""
Docopt - Entry point for parsing usage text.

This module provides the DocoptParser class and the parse_usage helper
that callers use to turn a help text into a usage pattern plus option
metadata.
"""

import logging
from dataclasses import dataclass

from docopt_usage.parser.option_parser import OptionDescriptionParser
from docopt_usage.parser.usage_parser import UsageParser
from docopt_usage.scanner import ParseError, Scanner
from docopt_usage.syntax_tree.nodes import Pattern
from docopt_usage.syntax_tree.option_info import OptFormat, OptInfoMap
from docopt_usage.syntax_tree.transformer import PatternTransformer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Docopt:
    """A parsed usage text, kept next to the text it came from."""

    opt_format: OptFormat
    usage: str

    @property
    def pattern(self) -> Pattern:
        return self.opt_format.pattern

    @property
    def info_map(self) -> OptInfoMap:
        return self.opt_format.info_map


class DocoptParser:
    """
    Main parser for usage texts.

    Usage:
        parser = DocoptParser("Usage:\\n  prog [--verbose] <file>\\n")
        docopt = parser.parse()
    """

    def __init__(self, usage: str):
        """
        Initialize the parser.

        Args:
            usage: The full help text, including the "Usage:" block
        """
        self.usage = usage
        self._docopt: Docopt | None = None
        self._transformer = PatternTransformer()

    def parse(self) -> Docopt:
        """
        Parse the usage text.

        Returns:
            The parsed Docopt

        Raises:
            ParseError: If the text violates the usage grammar
        """
        if self._docopt is None:
            scanner = Scanner(self.usage)
            try:
                pattern = UsageParser(scanner).parse()
                descriptions = OptionDescriptionParser(scanner).parse()
            except ParseError as e:
                logger.debug("Rejected usage text: %s", e)
                raise

            opt_format = self._transformer.resolve(pattern, descriptions)
            self._docopt = Docopt(opt_format, self.usage)
        return self._docopt


def parse_usage(usage: str) -> Docopt:
    """Parse a help text into its usage pattern and option metadata."""
    return DocoptParser(usage).parse()
