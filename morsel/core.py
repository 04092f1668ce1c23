"""Core types shared by every parser: results, errors and the notion of "needed" input.

A parser is any callable that takes an input sequence (``str``, ``bytes`` or
any sliceable sequence) and returns a ``(remaining, output)`` tuple. A parser
that cannot succeed raises one of three exceptions:

* :class:`Error` is a recoverable failure, so another branch may be tried;
* :class:`Failure` is unrecoverable, so no backtracking happens;
* :class:`Incomplete` means more input is required to decide.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Tuple

__all__ = [
    "ErrorKind",
    "Needed",
    "ParseError",
    "ParserException",
    "Incomplete",
    "Error",
    "Failure",
    "error_position",
    "run",
]


class ErrorKind(enum.Enum):
    """Identifies which parser or combinator produced an error."""

    TAG = enum.auto()
    MAP_RES = enum.auto()
    MAP_OPT = enum.auto()
    ALT = enum.auto()
    IS_NOT = enum.auto()
    IS_A = enum.auto()
    SEPARATED_LIST = enum.auto()
    SEPARATED_NON_EMPTY_LIST = enum.auto()
    MANY0 = enum.auto()
    MANY1 = enum.auto()
    MANY_TILL = enum.auto()
    COUNT = enum.auto()
    TAKE_UNTIL = enum.auto()
    LENGTH_VALUE = enum.auto()
    TAG_CLOSURE = enum.auto()
    ALPHA = enum.auto()
    DIGIT = enum.auto()
    HEX_DIGIT = enum.auto()
    OCT_DIGIT = enum.auto()
    ALPHA_NUMERIC = enum.auto()
    SPACE = enum.auto()
    MULTI_SPACE = enum.auto()
    LENGTH_VALUE_FN = enum.auto()
    EOF = enum.auto()
    SWITCH = enum.auto()
    TAG_BITS = enum.auto()
    ONE_OF = enum.auto()
    NONE_OF = enum.auto()
    CHAR = enum.auto()
    CR_LF = enum.auto()
    REGEXP_MATCH = enum.auto()
    REGEXP_MATCHES = enum.auto()
    REGEXP_FIND = enum.auto()
    REGEXP_CAPTURE = enum.auto()
    REGEXP_CAPTURES = enum.auto()
    TAKE_WHILE1 = enum.auto()
    COMPLETE = enum.auto()
    FIX = enum.auto()
    ESCAPED = enum.auto()
    ESCAPED_TRANSFORM = enum.auto()
    NON_EMPTY = enum.auto()
    MANY_M_N = enum.auto()
    NOT = enum.auto()
    PERMUTATION = enum.auto()
    VERIFY = enum.auto()
    TAKE_TILL1 = enum.auto()
    TAKE_WHILE_M_N = enum.auto()
    TOO_LARGE = enum.auto()
    MANY0_COUNT = enum.auto()
    MANY1_COUNT = enum.auto()
    FLOAT = enum.auto()
    SATISFY = enum.auto()
    FAIL = enum.auto()


@dataclass(frozen=True)
class Needed:
    """How much more input a streaming parser needs; ``size`` is ``None`` when unknown.

    A size of zero carries no information and is treated as unknown.
    """

    size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size is None:
            return
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError("Needed size must be an int or None")
        if self.size < 0:
            raise ValueError("Needed size cannot be negative")
        if self.size == 0:
            object.__setattr__(self, "size", None)

    def is_known(self) -> bool:
        """Return True when the amount of missing input is known."""
        return self.size is not None


@dataclass(frozen=True)
class ParseError:
    """The default error value: where parsing stopped and which parser stopped it.

    ``context`` lists the enclosing combinators that passed the error on,
    innermost first. It does not take part in equality, so two errors are
    equal when they stopped at the same place for the same reason.
    """

    input: Any
    kind: ErrorKind
    context: Tuple[Tuple[Any, ErrorKind], ...] = field(default=(), compare=False)

    def append(self, input: Any, kind: ErrorKind) -> "ParseError":
        """Return this error with the enclosing combinator's position and kind recorded."""
        return replace(self, context=self.context + ((input, kind),))


class ParserException(Exception):
    """Base class for everything a parser raises instead of returning a result."""


class Incomplete(ParserException):
    """More input is required before the parser can decide."""

    def __init__(self, needed: Needed | None = None) -> None:
        self.needed = needed if needed is not None else Needed()
        super().__init__(self.needed)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Incomplete) and self.needed == other.needed

    def __hash__(self) -> int:
        return hash((Incomplete, self.needed))

    def __repr__(self) -> str:
        return f"Incomplete({self.needed!r})"


class _ErrorCarrier(ParserException):
    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(error)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.error == other.error  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.error))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error!r})"


class Error(_ErrorCarrier):
    """A recoverable parse error: alternatives may still be tried."""


class Failure(_ErrorCarrier):
    """An unrecoverable parse error: no backtracking will happen."""


def error_position(input: Any, kind: ErrorKind) -> ParseError:
    """Build the error value for ``kind`` occurring at ``input``."""
    return ParseError(input, kind)


Parser = Callable[[Any], Tuple[Any, Any]]


def run(parser: Parser, input: Any) -> Tuple[Any, Any]:
    """Apply ``parser`` to ``input`` and return its ``(remaining, output)`` pair.

    Parser exceptions propagate unchanged; a parser that returns anything other
    than a two-element tuple is a programming error and raises ``TypeError``.
    """
    result = parser(input)
    if not isinstance(result, tuple) or len(result) != 2:
        raise TypeError(
            f"parser must return a (remaining, output) tuple, got {result!r}"
        )
    return result