"""Combinators that fold repeated results into one value, and length-prefixed parsers."""

from __future__ import annotations

from typing import Any, Callable, List, Tuple

from .core import (
    Error,
    ErrorKind,
    Failure,
    Incomplete,
    Needed,
    error_position,
    run,
)
from .repeat import _repeat, _repeat_bounded, _repeat_exactly

__all__ = [
    "fold_many0",
    "fold_many1",
    "fold_many_m_n",
    "length_data",
    "length_value",
    "length_count",
]

Parser = Callable[[Any], Tuple[Any, Any]]


def fold_many0(f: Parser, init: Callable[[], Any], g: Callable[[Any, Any], Any]) -> Parser:
    """Apply ``f`` until it fails, folding each output into ``init()`` with ``g``.

    A child parser that succeeds without consuming input raises an error,
    since repeating it would never end.
    """

    def parser(input: Any) -> Tuple[Any, Any]:
        return _repeat(f, input, init(), g, ErrorKind.MANY0)

    return parser


def fold_many1(f: Parser, init: Callable[[], Any], g: Callable[[Any, Any], Any]) -> Parser:
    """Like :func:`fold_many0`, but ``f`` has to succeed at least once."""

    def parser(input: Any) -> Tuple[Any, Any]:
        start = init()
        try:
            rest, output = run(f, input)
        except Error:
            raise Error(error_position(input, ErrorKind.MANY1)) from None
        return _repeat(f, rest, g(start, output), g, ErrorKind.MANY1, Failure)

    return parser


def fold_many_m_n(
    min_count: int,
    max_count: int,
    f: Parser,
    init: Callable[[], Any],
    fold: Callable[[Any, Any], Any],
) -> Parser:
    """Apply ``f`` at most ``max_count`` times, at least ``min_count``, folding the outputs.

    ``min_count`` greater than ``max_count`` is reported as a :class:`Failure`.
    """

    def parser(input: Any) -> Tuple[Any, Any]:
        return _repeat_bounded(min_count, max_count, f, input, init, fold)

    return parser


def _split_by_length(input: Any, length: Any) -> Tuple[Any, Any]:
    size = int(length)
    missing = size - len(input)
    if missing > 0:
        raise Incomplete(Needed(missing))
    return input[size:], input[:size]


def length_data(f: Parser) -> Parser:
    """Read a length with ``f`` and return that many items of the following input."""

    def parser(input: Any) -> Tuple[Any, Any]:
        rest, length = run(f, input)
        return _split_by_length(rest, length)

    return parser


def length_value(f: Parser, g: Parser) -> Parser:
    """Read a length with ``f``, then apply ``g`` to exactly that many items.

    If ``g`` asks for more input than the slice holds, this is reported as
    an :class:`Error` of kind ``COMPLETE``.
    """

    def parser(input: Any) -> Tuple[Any, Any]:
        rest, length = run(f, input)
        rest, chunk = _split_by_length(rest, length)
        try:
            _, output = run(g, chunk)
        except Incomplete:
            raise Error(error_position(chunk, ErrorKind.COMPLETE)) from None
        return rest, output

    return parser


def length_count(f: Parser, g: Parser) -> Parser:
    """Read a count with ``f``, then apply ``g`` that many times and return a list."""

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        start, times = run(f, input)
        outputs: List[Any] = []
        rest = _repeat_exactly(g, start, int(times), outputs)
        return rest, outputs

    return parser