"""
Pattern node definitions for parsed usage text.

This module defines the leaf atoms (options, arguments, commands) and the
four structural node kinds that make up a usage pattern tree.
"""

from dataclasses import dataclass


# Atoms


@dataclass(frozen=True)
class ShortOption:
    """A single-letter option such as ``-v``."""

    char: str

    def __repr__(self) -> str:
        return f"-{self.char}"


@dataclass(frozen=True)
class LongOption:
    """A named option such as ``--verbose``."""

    name: str

    def __repr__(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True)
class Command:
    """A literal word the invocation must contain."""

    name: str

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Argument:
    """A positional placeholder such as ``<file>``."""

    name: str

    def __repr__(self) -> str:
        return f"<{self.name}>"


@dataclass(frozen=True)
class AnyOption:
    """Stands for any option from the descriptions section (``[options]``)."""

    def __repr__(self) -> str:
        return "[options]"


OptionAtom = ShortOption | LongOption | Command | Argument | AnyOption


# Pattern nodes


@dataclass(frozen=True)
class SequenceNode:
    """All children must match, in order."""

    children: tuple["Pattern", ...] = ()

    def __repr__(self) -> str:
        return f"Seq[{', '.join(repr(child) for child in self.children)}]"


@dataclass(frozen=True)
class OneOfNode:
    """Exactly one child must match; earlier children are preferred."""

    children: tuple["Pattern", ...] = ()

    def __repr__(self) -> str:
        return f"OneOf[{', '.join(repr(child) for child in self.children)}]"


@dataclass(frozen=True)
class OptionalNode:
    """The child may match zero or one time."""

    child: "Pattern"

    def __repr__(self) -> str:
        return f"Opt({self.child!r})"


@dataclass(frozen=True)
class RepeatedNode:
    """The child must match one or more times."""

    child: "Pattern"

    def __repr__(self) -> str:
        return f"Rep({self.child!r})"


@dataclass(frozen=True)
class AtomNode:
    """Leaf holding a single atom."""

    atom: OptionAtom

    def __repr__(self) -> str:
        return repr(self.atom)


Pattern = SequenceNode | OneOfNode | OptionalNode | RepeatedNode | AtomNode


def flatten(pattern: Pattern) -> Pattern:
    """
    Collapse a single-child sequence or alternation into its child.

    Any other node is returned unchanged; the collapse never alters what
    the pattern matches.
    """
    if isinstance(pattern, (SequenceNode, OneOfNode)) and len(pattern.children) == 1:
        return pattern.children[0]
    return pattern


def atoms(pattern: Pattern) -> list[OptionAtom]:
    """Return every leaf atom of a pattern, left to right, duplicates kept."""
    if isinstance(pattern, AtomNode):
        return [pattern.atom]
    if isinstance(pattern, (OptionalNode, RepeatedNode)):
        return atoms(pattern.child)

    result: list[OptionAtom] = []
    for child in pattern.children:
        result.extend(atoms(child))
    return result
