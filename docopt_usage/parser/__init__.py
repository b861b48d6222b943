"""
Parser module for usage text.

This module provides recursive descent parsers for the usage block,
its pattern expressions and the option descriptions section.
"""

from .expression_parser import ExpressionParser
from .option_parser import OptionDescriptionParser
from .usage_parser import UsageParser

__all__ = [
    "ExpressionParser",
    "OptionDescriptionParser",
    "UsageParser",
]
