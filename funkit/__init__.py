"""
funkit: curried arithmetic, left-to-right composition and polymorphic
map/filter/fold over sequences, text and mappings.
"""
from funkit.funkit_datatypes import ArityError, Shape, classify
from funkit.funkit_curry import Curried, arity_of, curry
from funkit.funkit_runtime import (
    Pipeline, add, mult, div, negate, identity, pipe,
    map, filter, foldl, foldr,
)
from funkit.funkit_printer import Printer

__all__ = [
    "add", "mult", "div", "negate", "identity", "pipe", "curry",
    "map", "filter", "foldl", "foldr",
    "ArityError", "Shape", "classify", "arity_of",
    "Curried", "Pipeline", "Printer",
]
