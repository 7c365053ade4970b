"""Entry/exit tracing decorators for observing composition order."""

from __future__ import annotations

import functools
from typing import Callable, Hashable, List

from ..typing import F


def bracket(trace: List[Hashable], trace_id: Hashable) -> Callable[[F], F]:
    """Build a decorator recording ``trace_id`` before and after each call.

    The exit marker is appended even when the wrapped function raises.
    """

    def _decorator(fn: F) -> F:
        @functools.wraps(fn)
        def _wrapped(*args, **kwargs):
            trace.append(trace_id)
            try:
                return fn(*args, **kwargs)
            finally:
                trace.append(trace_id)

        return _wrapped  # type: ignore[return-value]

    return _decorator


__all__ = ["bracket"]
