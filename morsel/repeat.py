"""Combinators that apply a child parser several times and collect what it returns."""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Tuple, Type

from .core import Error, ErrorKind, Failure, error_position, run

__all__ = [
    "many0",
    "many1",
    "many_till",
    "separated_list0",
    "separated_list1",
    "many_m_n",
    "many0_count",
    "many1_count",
    "count",
    "fill",
]

Parser = Callable[[Any], Tuple[Any, Any]]
Step = Callable[[Any, Any], Any]


def _collect(acc: List[Any], output: Any) -> List[Any]:
    acc.append(output)
    return acc


def _increment(total: int, _output: Any) -> int:
    return total + 1


def _repeat(
    f: Parser,
    input: Any,
    acc: Any,
    step: Step,
    kind: ErrorKind,
    error_type: Type[Exception] = Error,
) -> Tuple[Any, Any]:
    """Apply ``f`` until it errors, folding outputs with ``step``.

    A success that consumes nothing raises ``error_type`` with ``kind``.
    """
    while True:
        length = len(input)
        try:
            rest, output = run(f, input)
        except Error:
            return input, acc
        if len(rest) == length:
            raise error_type(error_position(input, kind))
        acc = step(acc, output)
        input = rest


def _repeat_bounded(
    min_count: int,
    max_count: int,
    f: Parser,
    input: Any,
    init: Callable[[], Any],
    step: Step,
) -> Tuple[Any, Any]:
    """Apply ``f`` between ``min_count`` and ``max_count`` times, folding outputs."""
    if min_count > max_count:
        raise Failure(error_position(input, ErrorKind.MANY_M_N))
    acc = init()
    for done in range(max_count):
        length = len(input)
        try:
            rest, output = run(f, input)
        except Error as exc:
            if done < min_count:
                raise Error(exc.error.append(input, ErrorKind.MANY_M_N)) from None
            break
        if len(rest) == length:
            raise Error(error_position(input, ErrorKind.MANY_M_N))
        acc = step(acc, output)
        input = rest
    return input, acc


def _repeat_exactly(f: Parser, input: Any, times: int, sink: List[Any]) -> Any:
    """Apply ``f`` ``times`` times, appending outputs to ``sink``; return the rest."""
    start = input
    for _ in range(times):
        try:
            input, output = run(f, input)
        except Error as exc:
            raise Error(exc.error.append(start, ErrorKind.COUNT)) from None
        sink.append(output)
    return input


def many0(f: Parser) -> Parser:
    """Apply ``f`` until it fails with an error and return the outputs as a list.

    A child parser that succeeds without consuming input raises an error,
    since repeating it would never end.
    """

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        return _repeat(f, input, [], _collect, ErrorKind.MANY0)

    return parser


def many1(f: Parser) -> Parser:
    """Like :func:`many0`, but ``f`` has to succeed at least once."""

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        try:
            rest, output = run(f, input)
        except Error as exc:
            raise Error(exc.error.append(input, ErrorKind.MANY1)) from None
        return _repeat(f, rest, [output], _collect, ErrorKind.MANY1)

    return parser


def many_till(f: Parser, g: Parser) -> Parser:
    """Apply ``f`` until ``g`` succeeds; return ``(outputs_of_f, output_of_g)``."""

    def parser(input: Any) -> Tuple[Any, Tuple[List[Any], Any]]:
        outputs: List[Any] = []
        while True:
            length = len(input)
            try:
                rest, end = run(g, input)
            except Error:
                pass
            else:
                return rest, (outputs, end)
            try:
                rest, output = run(f, input)
            except Error as exc:
                raise Error(exc.error.append(input, ErrorKind.MANY_TILL)) from None
            if len(rest) == length:
                raise Error(error_position(rest, ErrorKind.MANY_TILL))
            outputs.append(output)
            input = rest

    return parser


def _separated_tail(sep: Parser, f: Parser, input: Any, outputs: List[Any]) -> Tuple[Any, List[Any]]:
    while True:
        length = len(input)
        try:
            after_sep, _ = run(sep, input)
        except Error:
            return input, outputs
        if len(after_sep) == length:
            raise Error(error_position(after_sep, ErrorKind.SEPARATED_LIST))
        try:
            rest, output = run(f, after_sep)
        except Error:
            return input, outputs
        outputs.append(output)
        input = rest


def separated_list0(sep: Parser, f: Parser) -> Parser:
    """Parse elements with ``f`` separated by ``sep``; the list may be empty."""

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        try:
            rest, output = run(f, input)
        except Error:
            return input, []
        return _separated_tail(sep, f, rest, [output])

    return parser


def separated_list1(sep: Parser, f: Parser) -> Parser:
    """Parse elements with ``f`` separated by ``sep``; at least one element is required."""

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        rest, output = run(f, input)
        return _separated_tail(sep, f, rest, [output])

    return parser


def many_m_n(min_count: int, max_count: int, f: Parser) -> Parser:
    """Apply ``f`` at most ``max_count`` times, requiring at least ``min_count`` successes.

    ``min_count`` greater than ``max_count`` is reported as a :class:`Failure`.
    """

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        return _repeat_bounded(min_count, max_count, f, input, list, _collect)

    return parser


def many0_count(f: Parser) -> Parser:
    """Apply ``f`` until it fails and return how many times it succeeded."""

    def parser(input: Any) -> Tuple[Any, int]:
        return _repeat(f, input, 0, _increment, ErrorKind.MANY0_COUNT)

    return parser


def many1_count(f: Parser) -> Parser:
    """Like :func:`many0_count`, but ``f`` has to succeed at least once."""

    def parser(input: Any) -> Tuple[Any, int]:
        try:
            rest, _ = run(f, input)
        except Error:
            raise Error(error_position(input, ErrorKind.MANY1_COUNT)) from None
        return _repeat(f, rest, 1, _increment, ErrorKind.MANY1_COUNT)

    return parser


def count(f: Parser, times: int) -> Parser:
    """Apply ``f`` exactly ``times`` times and return the outputs as a list."""

    def parser(input: Any) -> Tuple[Any, List[Any]]:
        outputs: List[Any] = []
        rest = _repeat_exactly(f, input, times, outputs)
        return rest, outputs

    return parser


def fill(f: Parser, buf: MutableSequence[Any]) -> Parser:
    """Apply ``f`` once per slot of ``buf``, storing each output in ``buf`` in order.

    The parser's own output is ``None``. Slots filled before a failure keep
    the values parsed so far.
    """

    def parser(input: Any) -> Tuple[Any, None]:
        filled: List[Any] = []
        try:
            rest = _repeat_exactly(f, input, len(buf), filled)
        finally:
            buf[: len(filled)] = filled
        return rest, None

    return parser