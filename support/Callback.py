from __future__ import annotations

import inspect
from typing import Any, Callable


def fit_arity(callback: Callable[..., Any], max_args: int) -> Callable[..., Any]:
    """Wrap a callback so it only receives as many positional args as it declares.

    Predicates are called with ``(value, key)``; a one-argument lambda such
    as ``lambda value: value > 2`` receives only the value.
    """
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without a signature such as str take the value only
        return _truncated(callback, 1)

    count = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return callback
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1

    if count >= max_args:
        return callback

    return _truncated(callback, count)


def _truncated(callback: Callable[..., Any], count: int) -> Callable[..., Any]:
    def fitted(*args: Any) -> Any:
        return callback(*args[:count])

    return fitted
