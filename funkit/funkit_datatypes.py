"""
Defines the error types and container shapes for the funkit combinators.

Collection operators never look at a value's declared type directly. They ask
`classify` which shape the value has and pick an execution path from that.
"""

import collections
import collections.abc
from enum import Enum
from typing import Any, Iterator, Tuple

from funkit.funkit_log import logger


class ArityError(TypeError):
    """Raised when a callable is invoked without the arguments it needs."""
    def __init__(self, message: str = "at least one argument required"):
        super().__init__(message)


# =================================================================
# Container Shapes
# =================================================================

class Shape(Enum):
    """The closed set of container shapes understood by map/filter/fold."""
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


def _is_indexable(value) -> bool:
    # Sequence-like without registering with collections.abc (e.g. array types).
    cls = type(value)
    return hasattr(cls, "__len__") and hasattr(cls, "__getitem__")


def classify(value: Any) -> Shape:
    """Return the shape of value.

    None and scalars are UNSUPPORTED. Mappings are checked before the
    sequence probe since dicts also expose __len__ and __getitem__.
    """
    if value is None:
        shape = Shape.UNSUPPORTED
    elif isinstance(value, collections.abc.Mapping):
        shape = Shape.MAPPING
    elif isinstance(value, collections.abc.Sequence) or _is_indexable(value):
        shape = Shape.SEQUENCE
    else:
        shape = Shape.UNSUPPORTED
    logger.debug("classify %s -> %s", type(value).__name__, shape.value)
    return shape


def own_items(mapping: collections.abc.Mapping) -> Iterator[Tuple[Any, Any]]:
    """Yield the key/value pairs that belong directly to mapping.

    A ChainMap's parent layers are inherited fields, so only maps[0] counts.
    """
    if isinstance(mapping, collections.ChainMap):
        mapping = mapping.maps[0]
    for key in mapping.keys():
        yield key, mapping[key]


def type_name(value: Any) -> str:
    """Short type label used in error messages."""
    if value is None:
        return "none"
    return type(value).__name__
