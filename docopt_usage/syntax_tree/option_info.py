"""
Per-option metadata collected from the option descriptions section.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from docopt_usage.syntax_tree.nodes import OptionAtom, Pattern


@dataclass(frozen=True)
class OptInfo:
    """
    Metadata shared by every spelling of one option.

    Attributes:
        synonyms: All spellings treated as the same option, in the order
            they were declared
        default_value: Text of the ``[default: ...]`` tag, if any
        expects_value: Whether the option is followed by a value placeholder
        is_repeated: Whether the option may legally occur more than once
    """

    synonyms: tuple[OptionAtom, ...] = ()
    default_value: str | None = None
    expects_value: bool = False
    is_repeated: bool = False


OptInfoMap = Mapping[OptionAtom, OptInfo]


class OptFormat(NamedTuple):
    """A parsed usage pattern together with its option metadata."""

    pattern: Pattern
    info_map: OptInfoMap
