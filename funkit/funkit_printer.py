"""
A pretty-printer for funkit values.
"""
import collections.abc
import types

from funkit.funkit_curry import Curried
from funkit.funkit_runtime import Pipeline


class Printer:
    """Formats combinators and containers as they would be written in source."""

    def __init__(self):
        self._handlers = self._create_handlers()

    def pformat(self, obj):
        """Public entry point to format an object."""
        handler = self._get_handler(obj)
        return handler(obj)

    def _get_handler(self, obj):
        """Dispatcher to find the correct formatting method."""
        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        if isinstance(obj, Curried): return self._pformat_curried
        if isinstance(obj, collections.abc.Mapping): return self._pformat_dict
        if callable(obj) and hasattr(obj, "__name__"): return self._pformat_named
        # Default to Python's repr for unknown types
        return repr

    def _create_handlers(self):
        return {
            Curried: self._pformat_curried,
            Pipeline: self._pformat_pipeline,
            types.FunctionType: self._pformat_named,
            types.BuiltinFunctionType: self._pformat_named,
            list: self._pformat_list,
            tuple: self._pformat_tuple,
            dict: self._pformat_dict,
        }

    def _pformat_named(self, obj):
        return obj.__name__

    def _pformat_curried(self, obj):
        name = getattr(obj, "__name__", None) or self.pformat(obj.func)
        if not obj.bound:
            return name
        args = ", ".join(self.pformat(a) for a in obj.bound)
        return f"{name}({args})"

    def _pformat_pipeline(self, obj):
        return f"pipe({', '.join(self.pformat(f) for f in obj.funcs)})"

    def _pformat_list(self, obj):
        return f"[{', '.join(self.pformat(x) for x in obj)}]"

    def _pformat_tuple(self, obj):
        if len(obj) == 1:
            return f"({self.pformat(obj[0])},)"
        return f"({', '.join(self.pformat(x) for x in obj)})"

    def _pformat_dict(self, obj):
        items = ", ".join(f"{self.pformat(k)}: {self.pformat(v)}" for k, v in obj.items())
        return f"{{{items}}}"
