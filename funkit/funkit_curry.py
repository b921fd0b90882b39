"""
The currying engine.

A Curried object is the argument accumulator for one call chain: it holds the
original function, the tuple of arguments bound so far, and the arity that
was captured when the chain started. Partial application never mutates a
Curried; it returns a new one with a longer prefix.
"""
import functools
import inspect
import logging
from typing import Any, Callable, Optional, Tuple

from funkit.funkit_datatypes import ArityError
from funkit.funkit_log import logger


def _declared_arity(func: Callable) -> int:
    """Number of required positional parameters of func.

    Parameters with defaults, *args and keyword-only parameters do not count.
    """
    bound = False
    target = func
    if inspect.ismethod(func):
        target = getattr(func, "__func__", func)
        bound = True
    code = getattr(target, "__code__", None)
    if code is not None and inspect.isfunction(target):
        pos = int(code.co_argcount)
        defaults = getattr(target, "__defaults__", None) or ()
        req_pos = pos - len(defaults)
        if bound and req_pos > 0:
            req_pos -= 1  # account for bound 'self'
        return req_pos
    # Builtins, partials and callable objects: ask inspect
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise ArityError(f"cannot determine the arity of {func!r}; pass arity= explicitly") from e
    req = [
        p for p in sig.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and p.default is inspect.Parameter.empty
    ]
    return len(req)


class Curried:
    """A function that can be called with its arguments spread over several calls.

    Each call must pass at least one argument. When the arguments of a call
    cover what is still missing, the original function runs with the bound
    prefix followed by everything passed in that call, extras included.
    Otherwise the arguments are bound and a new Curried is returned.

    >>> add3 = curry(lambda a, b, c: a + b + c)
    >>> add3(1)(2, 3)
    6
    """
    def __init__(self, func: Callable, bound: Tuple[Any, ...] = (), arity: Optional[int] = None):
        functools.update_wrapper(self, func)
        self.func = func
        self.bound = tuple(bound)
        self.arity = _declared_arity(func) if arity is None else arity

    @property
    def remaining(self) -> int:
        """Arguments still needed before the original function runs."""
        return max(self.arity - len(self.bound), 0)

    def __call__(self, *args):
        if not args:
            raise ArityError()
        if len(args) >= self.remaining:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("curry fire %s with %d bound + %d new", self._label(), len(self.bound), len(args))
            return self.func(*self.bound, *args)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("curry bind %s: %d of %d", self._label(), len(self.bound) + len(args), self.arity)
        return Curried(self.func, self.bound + args, self.arity)

    def _label(self) -> str:
        return getattr(self.func, "__name__", None) or type(self.func).__name__

    def __repr__(self) -> str:
        from funkit.funkit_printer import Printer
        return Printer().pformat(self)


def curry(func: Callable, *, arity: Optional[int] = None) -> Curried:
    """Return a curried wrapper around func.

    Args:
        func: Any callable with a determinable number of positional parameters.
        arity: Number of arguments to wait for, for callables whose signature
            cannot be introspected. When func is already curried this counts
            the arguments it still needs.

    Raises:
        ArityError: The arity cannot be determined and none was given.
        ValueError: arity is negative.
    """
    if arity is not None and arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    if isinstance(func, Curried):
        total = func.arity if arity is None else len(func.bound) + arity
        return Curried(func.func, func.bound, total)
    return Curried(func, (), arity)


def arity_of(func: Callable) -> int:
    """Declared arity of a callable, or the remaining arity of a Curried."""
    if isinstance(func, Curried):
        return func.remaining
    return _declared_arity(func)
