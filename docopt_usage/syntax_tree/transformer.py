"""
Pattern transformer for synonym expansion and repeatability analysis.

This module provides the whole-tree passes run after parsing: replacing
each option with the alternation of its spellings, working out which
atoms may occur more than once, and exporting a pattern as plain data.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any

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

logger = logging.getLogger(__name__)


class PatternTransformer:
    """
    Transforms parsed usage patterns.

    Provides methods to:
    - expand option atoms into alternations of their synonyms
    - decide whether an atom can repeat within a pattern
    - combine both into the final OptFormat
    - export a pattern as nested dicts (for serialization)
    """

    def expand_synonyms(self, pattern: Pattern, info_map: OptInfoMap) -> Pattern:
        """
        Replace every described option atom with the alternation of its synonyms.

        Args:
            pattern: The parsed usage pattern
            info_map: Option metadata keyed by option atom

        Returns:
            A new pattern with the same node structure
        """
        if isinstance(pattern, SequenceNode):
            return SequenceNode(tuple(self.expand_synonyms(p, info_map) for p in pattern.children))
        elif isinstance(pattern, OneOfNode):
            return OneOfNode(tuple(self.expand_synonyms(p, info_map) for p in pattern.children))
        elif isinstance(pattern, OptionalNode):
            return OptionalNode(self.expand_synonyms(pattern.child, info_map))
        elif isinstance(pattern, RepeatedNode):
            return RepeatedNode(self.expand_synonyms(pattern.child, info_map))

        atom = pattern.atom
        if not isinstance(atom, (ShortOption, LongOption)):
            return pattern

        info = info_map.get(atom)
        if info is None or not info.synonyms:
            return pattern
        return flatten(OneOfNode(tuple(AtomNode(synonym) for synonym in info.synonyms)))

    def can_repeat(self, pattern: Pattern, target: OptionAtom) -> bool:
        """Check whether ``target`` may match more than once within ``pattern``."""
        if isinstance(pattern, SequenceNode):
            if any(self.can_repeat(child, target) for child in pattern.children):
                return True
            # Mentioning an atom twice in one sequence repeats it too
            return atoms(pattern).count(target) > 1
        elif isinstance(pattern, OneOfNode):
            return any(self.can_repeat(child, target) for child in pattern.children)
        elif isinstance(pattern, OptionalNode):
            return self.can_repeat(pattern.child, target)
        elif isinstance(pattern, RepeatedNode):
            return target in atoms(pattern.child)
        return False

    def resolve(self, pattern: Pattern, info_map: OptInfoMap) -> OptFormat:
        """
        Expand synonyms and record repeatability for every atom in the pattern.

        Atoms missing from ``info_map`` (commands, arguments, undescribed
        options) get a blank OptInfo so the result covers the whole pattern.

        Args:
            pattern: The parsed usage pattern
            info_map: Option metadata from the descriptions section

        Returns:
            The expanded pattern and the completed, read-only metadata map
        """
        expanded = self.expand_synonyms(pattern, info_map)

        resolved: dict[OptionAtom, OptInfo] = dict(info_map)
        for atom in dict.fromkeys(atoms(expanded)):
            info = resolved.get(atom, OptInfo())
            resolved[atom] = replace(info, is_repeated=self.can_repeat(expanded, atom))

        logger.debug(
            "Resolved %d atoms (%d described options)", len(resolved), len(info_map)
        )
        return OptFormat(expanded, MappingProxyType(resolved))

    def to_structured(self, pattern: Pattern) -> dict[str, Any]:
        """
        Transform a pattern to nested dicts and lists.

        Args:
            pattern: The pattern to transform

        Returns:
            Dictionary representing the pattern structure
        """
        if isinstance(pattern, SequenceNode):
            return {
                "type": "sequence",
                "children": [self.to_structured(child) for child in pattern.children],
            }
        elif isinstance(pattern, OneOfNode):
            return {
                "type": "one_of",
                "children": [self.to_structured(child) for child in pattern.children],
            }
        elif isinstance(pattern, OptionalNode):
            return {"type": "optional", "child": self.to_structured(pattern.child)}
        elif isinstance(pattern, RepeatedNode):
            return {"type": "repeated", "child": self.to_structured(pattern.child)}
        return {"type": "atom", **self._atom_to_python(pattern.atom)}

    def _atom_to_python(self, atom: OptionAtom) -> dict[str, Any]:
        """Convert an atom to its kind and name."""
        if isinstance(atom, ShortOption):
            return {"kind": "short_option", "name": atom.char}
        elif isinstance(atom, LongOption):
            return {"kind": "long_option", "name": atom.name}
        elif isinstance(atom, Command):
            return {"kind": "command", "name": atom.name}
        elif isinstance(atom, Argument):
            return {"kind": "argument", "name": atom.name}
        elif isinstance(atom, AnyOption):
            return {"kind": "any_option", "name": None}
        else:
            raise TypeError(f"Unknown atom: {atom!r}")
