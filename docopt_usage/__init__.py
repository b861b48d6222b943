"""
docopt-usage - Parser for docopt-style usage texts.

This package turns a program's help text (a "Usage:" block followed by
option descriptions) into a pattern tree plus per-option metadata, ready
for an argument matcher to consume.

Usage:
    from docopt_usage import parse_usage

    docopt = parse_usage(HELP_TEXT)
    docopt.pattern      # the usage pattern tree
    docopt.info_map     # synonyms, defaults, repeatability per atom
"""

from docopt_usage.docopt import Docopt, DocoptParser, parse_usage
from docopt_usage.scanner import ParseError
from docopt_usage.syntax_tree import (
    AnyOption,
    Argument,
    AtomNode,
    Command,
    LongOption,
    OneOfNode,
    OptFormat,
    OptInfo,
    OptionalNode,
    PatternTransformer,
    RepeatedNode,
    SequenceNode,
    ShortOption,
)

__all__ = [
    "Docopt",
    "DocoptParser",
    "parse_usage",
    "ParseError",
    "AnyOption",
    "Argument",
    "AtomNode",
    "Command",
    "LongOption",
    "OneOfNode",
    "OptFormat",
    "OptInfo",
    "OptionalNode",
    "PatternTransformer",
    "RepeatedNode",
    "SequenceNode",
    "ShortOption",
]

__version__ = "0.1.0"
