"""
Expression Parser for usage-line patterns.

This module parses the pattern expressions that follow the program name
on a usage line: options, arguments, commands, groups, alternation and
repetition.
"""

from docopt_usage.scanner import (
    ALPHANUMERICS,
    ANY_OPTIONS_KEYWORD,
    ELLIPSIS,
    INLINE_SPACES,
    LETTERS,
    LOWERS,
    NAME_CHARS,
    PLACEHOLDER_CHARS,
    UPPERS,
    Scanner,
)
from docopt_usage.syntax_tree.nodes import (
    AnyOption,
    Argument,
    AtomNode,
    Command,
    LongOption,
    OneOfNode,
    OptionalNode,
    Pattern,
    RepeatedNode,
    SequenceNode,
    ShortOption,
    flatten,
)


class ExpressionParser:
    """
    Recursive descent parser for usage expressions.

    Grammar:
        alternatives  := sequence (ws* '|' sequence)*
        sequence      := ws* expression (ws+ expression)* ws*
        expression    := value (ws* '...')?
        value         := '[' alternatives ']' | '(' alternatives ')'
                       | stacked_short | long_option | 'options'
                       | argument | command
        stacked_short := '-' LETTER+
        long_option   := '--' NAME option_argument?
        argument      := '<' NAME '>'
        command       := ALNUM NAME_CHAR*

    Alternatives are tried in order. A rule that fails before it has
    committed resets the scanner to where it started, so the next
    alternative sees the same input. Once a bracket, a '<' or a '|' has
    been consumed the rule is committed and failure raises ParseError.
    """

    def __init__(self, scanner: Scanner):
        self.scanner = scanner

    def parse_alternatives(self) -> Pattern | None:
        """Parse pipe-separated sequences into a (flattened) alternation."""
        first = self.parse_sequence()
        if first is None:
            return None

        branches = [first]
        while True:
            start = self.scanner.mark()
            self.scanner.skip_inline_spaces()
            if self.scanner.match_char("|", "'|'") is None:
                self.scanner.reset(start)
                break

            branch = self.parse_sequence()
            if branch is None:
                raise self.scanner.error()
            branches.append(branch)

        return flatten(OneOfNode(tuple(branches)))

    def parse_sequence(self) -> Pattern | None:
        """Parse whitespace-separated expressions into a (flattened) sequence."""
        self.scanner.skip_inline_spaces()
        first = self.parse_expression()
        if first is None:
            return None

        expressions = [first]
        while self.scanner.skip_inline_spaces():
            expression = self.parse_expression()
            if expression is None:
                break
            expressions.append(expression)

        return flatten(SequenceNode(tuple(expressions)))

    def parse_expression(self) -> Pattern | None:
        """Parse one value, wrapping it in RepeatedNode if an ellipsis follows."""
        value = self._parse_value()
        if value is None:
            return None

        start = self.scanner.mark()
        self.scanner.skip_inline_spaces()
        if self.scanner.match_string(ELLIPSIS, "'...'"):
            return RepeatedNode(value)
        self.scanner.reset(start)
        return value

    def parse_short_option(self) -> tuple[str, bool] | None:
        """
        Parse a single short option with an optional value placeholder.

        Returns:
            The option letter and whether a value placeholder follows,
            or None without consuming input
        """
        start = self.scanner.mark()
        if self.scanner.match_char("-", "'-'") is None:
            return None

        letter = self.scanner.match_char(LETTERS, "letter")
        if letter is None:
            self.scanner.reset(start)
            return None

        return letter, self.parse_option_argument()

    def parse_long_option(self) -> tuple[str, bool] | None:
        """
        Parse a long option with an optional value placeholder.

        Returns:
            The option name and whether a value placeholder follows,
            or None without consuming input
        """
        start = self.scanner.mark()
        if not self.scanner.match_string("--", "'--'"):
            return None

        name = self.scanner.take_while(NAME_CHARS)
        if not name:
            self.scanner.expect("option name")
            self.scanner.reset(start)
            return None

        return name, self.parse_option_argument()

    def parse_option_argument(self) -> bool:
        """Consume an '=VALUE' or ' VALUE' suffix if present; report whether one was found."""
        start = self.scanner.mark()
        if self.scanner.match_char("=" + INLINE_SPACES, "'='") is None:
            return False

        if self._read_argument() is not None or self._read_placeholder() is not None:
            return True

        self.scanner.reset(start)
        return False

    def _parse_value(self) -> Pattern | None:
        """Parse a single expression without its ellipsis."""
        if self.scanner.match_char("[", "'['") is not None:
            return OptionalNode(self._parse_group("]"))

        if self.scanner.match_char("(", "'('") is not None:
            return self._parse_group(")")

        stacked = self._parse_stacked_short_option()
        if stacked is not None:
            return stacked

        long_option = self.parse_long_option()
        if long_option is not None:
            return AtomNode(LongOption(long_option[0]))

        if self._parse_any_option():
            return RepeatedNode(AtomNode(AnyOption()))

        name = self._read_argument()
        if name is not None:
            return AtomNode(Argument(name))
        if self.scanner.current_char() == "<":
            # '<' commits to an argument
            self.scanner.advance()
            raise self.scanner.error()

        if self.scanner.at(ALPHANUMERICS):
            return AtomNode(Command(self.scanner.take_while(NAME_CHARS)))
        self.scanner.expect("command")
        return None

    def _parse_group(self, closing: str) -> Pattern:
        """Parse the alternatives inside a bracket pair whose opener was consumed."""
        inner = self.parse_alternatives()
        if inner is None:
            raise self.scanner.error()
        self.scanner.skip_inline_spaces()
        if self.scanner.match_char(closing, repr(closing)) is None:
            raise self.scanner.error()
        return inner

    def _parse_stacked_short_option(self) -> Pattern | None:
        """Parse '-abc' as a repeatable choice of -a, -b, -c ('-a' is a single atom)."""
        start = self.scanner.mark()
        if self.scanner.match_char("-", "'-'") is None:
            return None

        letters = self.scanner.take_while(LETTERS)
        if not letters:
            self.scanner.expect("letter")
            self.scanner.reset(start)
            return None

        if len(letters) == 1:
            return AtomNode(ShortOption(letters))
        return RepeatedNode(OneOfNode(tuple(AtomNode(ShortOption(c)) for c in letters)))

    def _parse_any_option(self) -> bool:
        """Consume the 'options' keyword when it stands as a whole word."""
        start = self.scanner.mark()
        if self.scanner.match_string(ANY_OPTIONS_KEYWORD, repr(ANY_OPTIONS_KEYWORD)):
            if not self.scanner.at(NAME_CHARS):
                return True
        self.scanner.reset(start)
        return False

    def _read_argument(self) -> str | None:
        """Read '<name>' and return the name, or None without consuming input."""
        start = self.scanner.mark()
        if self.scanner.match_char("<", "'<'") is None:
            return None

        name = self.scanner.take_while(NAME_CHARS)
        if not name:
            self.scanner.expect("argument name")
        elif self.scanner.match_char(">", "'>'") is not None:
            return name

        self.scanner.reset(start)
        return None

    def _read_placeholder(self) -> str | None:
        """Read an uppercase placeholder word such as FILE, or None without consuming input."""
        if not self.scanner.at(UPPERS):
            self.scanner.expect("placeholder")
            return None

        start = self.scanner.mark()
        word = self.scanner.take_while(PLACEHOLDER_CHARS)
        if self.scanner.at(LOWERS):
            self.scanner.reset(start)
            return None
        return word
