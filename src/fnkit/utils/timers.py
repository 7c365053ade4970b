"""Wall-clock timers usable as context managers or function decorators."""

from __future__ import annotations

import contextlib
import functools
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator

from ..typing import F


@dataclass
class TimerRecord:
    """Accumulates elapsed wall-clock time for a named section."""

    total: float = 0.0
    calls: int = 0

    def update(self, dt: float) -> None:
        self.total += dt
        self.calls += 1


@dataclass
class TimerRegistry:
    """Registry of timers keyed by string labels."""

    records: Dict[str, TimerRecord] = field(default_factory=dict)

    @contextlib.contextmanager
    def time(self, label: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            dt = time.perf_counter() - start
            self.records.setdefault(label, TimerRecord()).update(dt)

    def decorator(self, label: str) -> Callable[[F], F]:
        """Return a decorator that times every call of the wrapped function under ``label``."""

        def _decorator(fn: F) -> F:
            @functools.wraps(fn)
            def _timed(*args, **kwargs):
                with self.time(label):
                    return fn(*args, **kwargs)

            return _timed  # type: ignore[return-value]

        return _decorator


__all__ = ["TimerRecord", "TimerRegistry"]
