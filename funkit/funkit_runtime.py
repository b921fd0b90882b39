"""
Python implementations of the funkit combinators.

Binary arithmetic and the collection operators are written as plain
functions and rebound to their curried form at the bottom of the module;
negate and identity are unary and stay plain.
"""
import collections
import math
import numbers
from typing import Callable

from funkit.funkit_curry import curry
from funkit.funkit_datatypes import ArityError, Shape, classify, own_items, type_name
from funkit.funkit_log import logger


# --- Math ---
def add(x, y): return x + y
def mult(x, y): return x * y

def div(x, y):
    # IEEE-754 float semantics: x/0 is a signed infinity, 0/0 is nan.
    try:
        return x / y
    except ZeroDivisionError:
        if not (isinstance(x, numbers.Real) and isinstance(y, numbers.Real)):
            raise
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)

def negate(x):
    """Arithmetic negation."""
    return -x

def identity(x):
    """Always returns its argument."""
    return x


# --- Composition ---
class Pipeline:
    """Left-to-right composition of functions.

    The first function receives every argument given to the pipeline; each
    following function receives the previous result as its only argument.
    """
    def __init__(self, funcs):
        if not funcs:
            raise ArityError("pipe requires at least one function")
        self.funcs = tuple(funcs)
        self._first = self.funcs[0]
        self._rest = self.funcs[1:]

    def __call__(self, *args):
        x = self._first(*args)
        for func in self._rest:
            x = func(x)
        return x

    def __repr__(self) -> str:
        from funkit.funkit_printer import Printer
        return Printer().pformat(self)


def pipe(*funcs: Callable) -> Pipeline:
    """Compose funcs left to right.

    >>> pipe(add(10), mult(2), negate)(5)
    -30
    """
    pipeline = Pipeline(funcs)
    logger.debug("pipe of %d functions", len(pipeline.funcs))
    return pipeline


# --- Collection Utilities ---
def _unsupported(xs):
    return TypeError(f"expected an ordered sequence or keyed mapping, got {type_name(xs)}")


def _same_kind(xs, items: list):
    """Rebuild a filtered sequence as the same kind of container as xs."""
    if isinstance(xs, str):
        return "".join(items)
    if isinstance(xs, collections.UserString):
        # indexing a UserString yields UserStrings
        return type(xs)("".join(str(c) for c in items))
    if isinstance(xs, tuple):
        # namedtuples cannot be rebuilt with fewer fields
        return tuple(items)
    if isinstance(xs, bytearray):
        return bytearray(items)
    if isinstance(xs, bytes):
        return bytes(items)
    return items


def map(f, xs):
    """Apply f to every element of a sequence, or every value of a mapping.

    Sequences (text included) produce a list; mappings produce a dict with
    the same own keys. xs is left untouched.
    """
    shape = classify(xs)
    if shape is Shape.SEQUENCE:
        return [f(xs[i]) for i in range(len(xs))]
    if shape is Shape.MAPPING:
        return {k: f(v) for k, v in own_items(xs)}
    raise _unsupported(xs)


def filter(f, xs):
    """Keep the elements (or mapping values) for which f is truthy.

    Text stays text (str or UserString), tuples and namedtuples become plain
    tuples, byte strings stay bytes or bytearray; other sequences become
    lists and mappings become dicts.
    """
    shape = classify(xs)
    if shape is Shape.SEQUENCE:
        return _same_kind(xs, [xs[i] for i in range(len(xs)) if f(xs[i])])
    if shape is Shape.MAPPING:
        return {k: v for k, v in own_items(xs) if f(v)}
    raise _unsupported(xs)


def _require_sequence(xs):
    if classify(xs) is not Shape.SEQUENCE:
        raise TypeError(f"expected an ordered sequence, got {type_name(xs)}")


def foldl(f, acc, xs):
    """Left fold: acc = f(acc, x) for x from first to last."""
    _require_sequence(xs)
    for i in range(len(xs)):
        acc = f(acc, xs[i])
    return acc


def foldr(f, acc, xs):
    """Right fold: acc = f(x, acc) for x from last to first."""
    _require_sequence(xs)
    for i in range(len(xs) - 1, -1, -1):
        acc = f(xs[i], acc)
    return acc


add = curry(add)
mult = curry(mult)
div = curry(div)
map = curry(map)
filter = curry(filter)
foldl = curry(foldl)
foldr = curry(foldr)
