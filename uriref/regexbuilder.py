"""
A small AST for building regular expressions out of named parts.

The URI grammar and the character classes used for percent-encoding are
assembled from these nodes so that each piece can be reused (and tested)
on its own, and rendered into a single :mod:`re` pattern when needed.
"""
from __future__ import annotations

import re
from abc import abstractmethod
from typing import Iterable
from typing import Sequence as TypingSequence


class Regex:
    @abstractmethod
    def render(self) -> str:
        ...

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.render())

    def is_singular(self) -> bool:
        return False

    def is_expansive(self) -> bool:
        """
        If this expression B was placed between expressions A and C,
        is_expansive() returns True if the meaning of A or C could be changed.
        """
        return False

    def render_singular(self) -> str:
        """
        Render this regex for placement in a context which requires a single
        expression, e.g. the operand of a ``*`` or ``?``.
        """
        rendered = self.render()
        if self.is_singular():
            return rendered
        return "(?:{0})".format(rendered)

    def render_non_expansive(self) -> str:
        if self.is_expansive():
            return self.render_singular()
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} -> {str(self)!r}>"


class BaseSequence(Regex):
    expressions: TypingSequence[Regex]

    def __init__(self, *expressions: Regex) -> None:
        assert all(isinstance(e, Regex) for e in expressions), expressions
        self.expressions = expressions

    def is_singular(self) -> bool:
        return len(self.expressions) == 1 and self.expressions[0].is_singular()

    def get_operator(self) -> str:
        return ""

    def render(self) -> str:
        return self.get_operator().join(
            e.render_non_expansive() for e in self.expressions
        )


class Sequence(BaseSequence):
    pass


class Choice(BaseSequence):
    def get_operator(self) -> str:
        return "|"

    def is_expansive(self) -> bool:
        # | binds looser than anything else, so an unwrapped choice swallows
        # its neighbours.
        return not self.is_singular()


class Capture(Sequence):
    """
    A capturing group. Groups are numbered by the position of their opening
    parenthesis, exactly as in a hand-written pattern, whether or not they
    are also named.
    """

    name: str | None

    def __init__(self, *expressions: Regex, name: str | None = None) -> None:
        super().__init__(*expressions)

        if name is not None and not is_name(name):
            raise ValueError("Invalid capture group name: {0}".format(name))
        self.name = name

    def render(self) -> str:
        expressions = super().render()

        if self.name is not None:
            return "(?P<{0}>{1})".format(self.name, expressions)
        return "({0})".format(expressions)

    def is_singular(self) -> bool:
        return True


class Literal(Regex):
    text: str

    def __init__(self, text: str) -> None:
        self.text = text

    def is_singular(self) -> bool:
        return len(self.text) == 1

    def render(self) -> str:
        return re.escape(self.text)


class Set(Regex):
    """
    A character class. Items may be single characters, code points,
    ``(start, end)`` ranges or other sets, whose ranges are merged in.
    """

    ranges: list[SetRange]
    negated = False

    def __init__(
        self, *items: Set | SetRange | int | str | tuple[int | str, int | str]
    ) -> None:
        if len(items) == 0:
            raise ValueError("empty {0}()".format(type(self).__name__))
        self.ranges = [SetRange.create(i) for i in items if not isinstance(i, Set)]
        self.ranges += [r for s in items if isinstance(s, Set) for r in s.ranges]

    def render(self) -> str:
        contents = "".join(
            r.render(pos == 0 and not self.negated) for pos, r in enumerate(self.ranges)
        )
        return "[{0}{1}]".format("^" if self.negated else "", contents)

    def is_singular(self) -> bool:
        return True

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        code_point = ord(char)
        found = any(r.start <= code_point <= r.end for r in self.ranges)
        return found != self.negated

    def characters(self) -> Iterable[str]:
        for r in self.ranges:
            for code_point in range(r.start, r.end + 1):
                yield chr(code_point)


class NotSet(Set):
    """A negated character class, e.g. ``[^:/?#]``."""

    negated = True


class SetRange:
    start: int
    end: int

    def __init__(self, start: int, end: int) -> None:
        if end < start:
            raise ValueError("end < start. start: {0}, end: {1}".format(start, end))
        self.start = start
        self.end = end

    def is_single(self) -> bool:
        return self.start == self.end

    @classmethod
    def create(
        cls, item: SetRange | int | str | tuple[int | str, int | str]
    ) -> SetRange:
        if isinstance(item, SetRange):
            return item
        if isinstance(item, (int, str)):
            code_point = cls.get_codepoint(item)
            return SetRange(code_point, code_point)
        if isinstance(item, tuple) and len(item) == 2:
            start, end = item
            return SetRange(cls.get_codepoint(start), cls.get_codepoint(end))
        raise ValueError("Don't know how to create a SetRange from: {0!r}".format(item))

    @staticmethod
    def get_codepoint(item: int | str) -> int:
        if isinstance(item, int):
            return item
        return ord(item)

    def render_char(self, code_point: int, is_first: bool) -> str:
        char = chr(code_point)
        # ^ is only special at the start of a class
        if (is_first and char == "^") or char in "\\]-[":
            return "\\" + char
        return char

    def render(self, is_first: bool) -> str:
        if self.is_single():
            return self.render_char(self.start, is_first)
        return "{0}-{1}".format(
            self.render_char(self.start, is_first), self.render_char(self.end, False)
        )


class Repeat(Regex):
    expression: Regex
    min: int | None
    max: int | None

    def __init__(
        self,
        expression: Regex,
        min: int | None = None,
        max: int | None = None,
        count: int | None = None,
    ) -> None:
        assert isinstance(expression, Regex), expression
        if count is not None:
            assert min is None and max is None
            min = max = count

        assert min is None or min >= 0
        assert max is None or max >= 0
        assert min is None or max is None or min <= max, (min, max)

        self.expression = expression
        self.min = min
        self.max = max

    @property
    def operator(self) -> str:
        if self.min is None and self.max is None:
            return "*"
        elif self.min == 1 and self.max is None:
            return "+"
        elif self.min == 0 and self.max == 1:
            return "?"
        elif self.min == self.max:
            return "{{{0:d}}}".format(self.min)
        elif self.min is None:
            return "{{,{0:d}}}".format(self.max)
        elif self.max is None:
            return "{{{0:d},}}".format(self.min)
        return "{{{0:d},{1:d}}}".format(self.min, self.max)

    def render(self) -> str:
        return "{0}{1}".format(self.expression.render_singular(), self.operator)


class ZeroOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super().__init__(expression)


class OneOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super().__init__(expression, min=1)


class Optional(Repeat):
    def __init__(self, expression: Regex) -> None:
        super().__init__(expression, min=0, max=1)


class StandAlone(Regex):
    """Base class for stand alone expressions like ``^`` and ``.``."""

    representation: str

    def render(self) -> str:
        return self.representation

    def is_singular(self) -> bool:
        return True


class Start(StandAlone):
    representation = "^"


class Anything(StandAlone):
    # . including newlines
    representation = "(?s:.)"


NAME = re.compile(r"^[a-zA-Z_]\w*$")


def is_name(string: str) -> bool:
    """Returns: True if string is a Python name/identifier."""
    return bool(NAME.match(string))
