"""Worked examples for each primitive in :mod:`fnkit.functional`."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from .functional import apply_options, decorate, filter_, map_, reduce, reverse, reversed_decorate
from .utils.tracing import bracket

logger = logging.getLogger(__name__)


def example_sum() -> int:
    """Sum ``1..5`` with :func:`reduce`."""

    return reduce(0, [1, 2, 3, 4, 5], lambda acc, v: acc + v)


def example_concat() -> str:
    """Concatenate single letters with :func:`reduce`."""

    return reduce("", ["a", "b", "c"], lambda acc, v: acc + v)


def example_double() -> List[int]:
    """Double each integer with :func:`map_`."""

    return map_([1, 2, 3], lambda v: v * 2)


def example_uppercase() -> List[str]:
    """Upper-case each letter with :func:`map_`."""

    return map_(["a", "b", "c"], str.upper)


def example_odd() -> List[int]:
    """Keep the odd integers with :func:`filter_`."""

    return filter_([1, 2, 3, 4, 5], lambda v: v % 2 == 1)


@dataclass
class _ExampleOptions:
    """Target record mutated by the option callables."""

    a: int = 0
    b: str = ""


def example_options() -> Dict[str, Any]:
    """Set two fields through :func:`apply_options` and return the record."""

    def with_a(a: int) -> Callable[[_ExampleOptions], None]:
        def _option(opts: _ExampleOptions) -> None:
            opts.a = a

        return _option

    def with_b(b: str) -> Callable[[_ExampleOptions], None]:
        def _option(opts: _ExampleOptions) -> None:
            opts.b = b

        return _option

    opts = _ExampleOptions()
    apply_options(opts, with_a(1), with_b("b"))
    return asdict(opts)


def _traced_call(compose: Callable[..., Callable[[int], None]]) -> List[int]:
    trace: List[int] = []

    def center(x: int) -> None:
        trace.append(0)

    fn = compose(center, bracket(trace, 1), bracket(trace, 2), bracket(trace, 3))
    fn(0)
    return trace


def example_decorate() -> List[int]:
    """Trace of a base call wrapped by :func:`decorate`."""

    return _traced_call(decorate)


def example_reverse() -> List[int]:
    """Reverse a list in place with :func:`reverse`."""

    return reverse([1, 2, 3, 4, 5])


def example_reversed_decorate() -> List[int]:
    """Trace of a base call wrapped by :func:`reversed_decorate`."""

    return _traced_call(reversed_decorate)


EXAMPLES: Dict[str, Callable[[], Any]] = {
    "sum": example_sum,
    "concat": example_concat,
    "double": example_double,
    "uppercase": example_uppercase,
    "odd": example_odd,
    "options": example_options,
    "decorate": example_decorate,
    "reverse": example_reverse,
    "reversed_decorate": example_reversed_decorate,
}


def run_examples(names: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """Run the named examples (all by default) and return their results by name."""

    selected = list(EXAMPLES) if names is None else list(names)
    results: Dict[str, Any] = {}
    for name in selected:
        try:
            example = EXAMPLES[name]
        except KeyError:
            raise ValueError(f"Unknown example '{name}'") from None
        results[name] = example()
        logger.info("%s -> %r", name, results[name])
    return results


__all__ = ["EXAMPLES", "run_examples"]
