# craft_planner/src/application/memo.py
from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Tuple

_SCALARS = (int, float, str, bool, type(None))


def _same(a: Any, b: Any) -> bool:
    # snapshots compare by reference; plain scalars (counts, ids) by value
    if a is b:
        return True
    return isinstance(a, _SCALARS) and type(a) is type(b) and a == b


class LastCallMemo:
    """
    Single-slot memo for pure derivations: skip recomputation when every
    argument is the same object (or an equal scalar) as on the previous call.
    """

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        self.hits = 0
        self._last: Optional[Tuple[Tuple[Any, ...], Any]] = None
        functools.update_wrapper(self, fn)

    def __call__(self, *args: Any) -> Any:
        last = self._last
        if last is not None:
            prev_args, prev_result = last
            if len(prev_args) == len(args) and all(_same(a, b) for a, b in zip(prev_args, args)):
                self.hits += 1
                return prev_result
        result = self.fn(*args)
        self._last = (args, result)
        return result

    def clear(self) -> None:
        self._last = None
        self.hits = 0


def memoize_last(fn: Callable[..., Any]) -> LastCallMemo:
    return LastCallMemo(fn)
