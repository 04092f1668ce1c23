# morsel

Parser combinators that apply a child parser many times: repetition,
counting, separated lists, folding and length-prefixed data.

## Parsers

A parser is any callable that takes the remaining input (a `str`, `bytes`
or other sliceable sequence) and returns a pair `(rest, value)`. A parser
that does not match raises an exception instead. `morsel.core` defines
three kinds, all subclasses of `ParserException`:

- `Error`: this parser did not match; another one may be tried.
- `Failure`: unrecoverable; nothing else should be tried.
- `Incomplete`: the input ended too early. `exc.needed` is a `Needed`
  whose `size` says how many more items are wanted, or is `None` when that
  is unknown (`Needed.is_known()` tells which). A size of zero is treated
  as unknown.

`Error` and `Failure` carry a `ParseError` in `exc.error`, holding the
input where parsing stopped and an `ErrorKind`. `error_position(input, kind)`
builds one. `ParseError.append(input, kind)` returns a copy with an
enclosing combinator's position and kind added to its `context`; the
context does not take part in equality, so two errors compare equal when
they stopped at the same input for the same kind. Exceptions compare equal
when they are of the same class and carry equal errors (or equal `Needed`).

`run(parser, input)` calls a parser and returns its `(rest, value)` pair.
Parser exceptions pass through unchanged; if the parser returns anything
other than a two-element tuple, `run` raises `TypeError`.

## Installation

```
pip install morsel
```

## Example

```python
from morsel.core import Error, ErrorKind, error_position
from morsel.repeat import many0, separated_list1

def abc(text):
    if text.startswith("abc"):
        return text[3:], "abc"
    raise Error(error_position(text, ErrorKind.TAG))

def comma(text):
    if text.startswith(","):
        return text[1:], ","
    raise Error(error_position(text, ErrorKind.TAG))

assert many0(abc)("abcabc123") == ("123", ["abc", "abc"])
assert separated_list1(comma, abc)("abc,abc;") == (";", ["abc", "abc"])
```

## Repetition (`morsel.repeat`)

- `many0(f)` collects outputs until `f` raises `Error`.
- `many1(f)` does the same, but `f` must match at least once.
- `many_m_n(min_count, max_count, f)` applies `f` at most `max_count`
  times and needs at least `min_count` matches. `min_count` greater than
  `max_count` raises `Failure`.
- `many_till(f, g)` applies `f` until `g` matches and returns
  `(outputs_of_f, output_of_g)`.
- `separated_list0(sep, f)` and `separated_list1(sep, f)` parse elements
  separated by `sep`; the first may return an empty list, the second needs
  at least one element.
- `many0_count(f)` and `many1_count(f)` return how many times `f` matched.
- `count(f, times)` requires exactly `times` matches.
- `fill(f, buf)` applies `f` once per slot of the list `buf`, writing the
  outputs into it; the parser's own value is `None`.

A child parser that succeeds without consuming input would make the loop
run forever; these combinators raise `Error` in that case. `Incomplete`
and `Failure` from the child are always passed on.

## Folding and length-prefixed data (`morsel.accumulate`)

- `fold_many0(f, init, g)`, `fold_many1(f, init, g)` and
  `fold_many_m_n(min_count, max_count, f, init, fold)` combine outputs into
  an accumulator. `init` is called to get the starting value, and the
  folding function receives `(accumulator, output)` and returns the new
  accumulator. In `fold_many1`, a repeat that consumes nothing raises
  `Failure`.
- `length_data(f)` reads a length with `f` and returns that many items of
  the following input, raising `Incomplete` with the missing count when
  there are too few.
- `length_value(f, g)` reads a length with `f` and runs `g` on exactly that
  slice; if `g` raises `Incomplete`, it becomes an `Error` of kind
  `ErrorKind.COMPLETE`.
- `length_count(f, g)` reads a count with `f` and runs `g` that many times.

## What is not included

morsel has no primitive parsers of its own: nothing that matches a literal
tag, a character class, whitespace or a binary number. You write those as
ordinary functions, as in the example above, and combine them with the
functions described here. There are also no choice or sequence combinators
and no command-line tool.