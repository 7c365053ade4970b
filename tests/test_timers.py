"""Timer registry and logging setup tests."""

from __future__ import annotations

import logging

import pytest

from fnkit.functional import decorate
from fnkit.utils.timers import TimerRecord, TimerRegistry


def test_timer_record_update() -> None:
    record = TimerRecord()
    record.update(0.5)
    record.update(0.25)
    assert record.calls == 2
    assert record.total == pytest.approx(0.75)


def test_timer_context_manager_records_on_error() -> None:
    registry = TimerRegistry()
    with pytest.raises(ValueError):
        with registry.time("section"):
            raise ValueError("inside")
    assert registry.records["section"].calls == 1


def test_timer_decorator_composes_with_decorate() -> None:
    registry = TimerRegistry()

    def square(x: int) -> int:
        return x * x

    timed = decorate(square, registry.decorator("inner"), registry.decorator("outer"))
    assert timed(3) == 9
    assert timed(4) == 16
    assert timed.__name__ == "square"
    assert registry.records["inner"].calls == 2
    assert registry.records["outer"].calls == 2
    assert registry.records["outer"].total >= registry.records["inner"].total >= 0.0


def test_setup_logging_sets_package_level() -> None:
    from fnkit.utils.logging import setup_logging

    package_logger = setup_logging(level="debug")
    try:
        assert package_logger.name == "fnkit"
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(logging.NOTSET)
