"""
Syntax Tree module for usage patterns.

This module defines the pattern node and atom types produced by the
parsers, the per-option metadata, and the whole-tree transformations.
"""

from docopt_usage.syntax_tree.nodes import (
    AnyOption,
    Argument,
    AtomNode,
    Command,
    LongOption,
    OneOfNode,
    OptionAtom,
    OptionalNode,
    Pattern,
    RepeatedNode,
    SequenceNode,
    ShortOption,
    atoms,
    flatten,
)
from docopt_usage.syntax_tree.option_info import OptFormat, OptInfo, OptInfoMap
from docopt_usage.syntax_tree.transformer import PatternTransformer

__all__ = [
    "AnyOption",
    "Argument",
    "AtomNode",
    "Command",
    "LongOption",
    "OneOfNode",
    "OptionAtom",
    "OptionalNode",
    "Pattern",
    "RepeatedNode",
    "SequenceNode",
    "ShortOption",
    "atoms",
    "flatten",
    "OptFormat",
    "OptInfo",
    "OptInfoMap",
    "PatternTransformer",
]
