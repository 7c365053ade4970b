"""Decorator composition order tests."""

from __future__ import annotations

import pytest

from fnkit.functional import decorate, reversed_decorate
from fnkit.utils.tracing import bracket


def _setup():
    trace = []

    def center(x: int) -> None:
        trace.append(0)

    return trace, center, [bracket(trace, 1), bracket(trace, 2), bracket(trace, 3)]


def test_decorate_without_decorators_returns_base() -> None:
    def base(x: int) -> int:
        return x + 1

    assert decorate(base) is base
    assert reversed_decorate(base) is base


def test_decorate_trace_order() -> None:
    trace, center, decorators = _setup()
    decorate(center, *decorators)(0)
    assert trace == [3, 2, 1, 0, 1, 2, 3]


def test_reversed_decorate_trace_order() -> None:
    trace, center, decorators = _setup()
    reversed_decorate(center, *decorators)(0)
    assert trace == [1, 2, 3, 0, 3, 2, 1]


def test_reversed_decorate_leaves_caller_sequence_untouched() -> None:
    trace, center, decorators = _setup()
    snapshot = list(decorators)
    reversed_decorate(center, *decorators)
    assert decorators == snapshot


def test_decorate_applies_left_to_right() -> None:
    def tag(label: str):
        def _decorator(fn):
            return lambda: f"{label}({fn()})"

        return _decorator

    def base() -> str:
        return "f"

    assert decorate(base, tag("g"), tag("h"), tag("i"))() == "i(h(g(f)))"
    assert reversed_decorate(base, tag("g"), tag("h"), tag("i"))() == "g(h(i(f)))"


def test_bracket_records_exit_when_wrapped_raises() -> None:
    trace = []

    def failing() -> None:
        trace.append(0)
        raise RuntimeError("center failed")

    wrapped = decorate(failing, bracket(trace, 1), bracket(trace, 2))
    with pytest.raises(RuntimeError, match="center failed"):
        wrapped()
    assert trace == [2, 1, 0, 1, 2]


def test_decorator_errors_propagate() -> None:
    def broken(fn):
        raise TypeError("cannot wrap")

    with pytest.raises(TypeError, match="cannot wrap"):
        decorate(lambda: None, broken)
