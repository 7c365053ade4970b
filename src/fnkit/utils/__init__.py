"""Utility helpers for the :mod:`fnkit` package."""

from .timers import TimerRecord, TimerRegistry
from .tracing import bracket

__all__ = ["TimerRecord", "TimerRegistry", "bracket"]
