"""Generic fold-based helpers over sequences and callables.

Every helper here is a single sequential pass over caller-supplied data.
Exceptions raised by callbacks propagate unchanged; partially built results
are discarded with the call stack.
"""

from __future__ import annotations

import copy
import logging
from typing import Iterable, List, TypeVar

from .typing import Decorator, F, Mapper, MutableIndexable, Option, Predicate, R, Reducer, T

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=MutableIndexable)


def reduce(initial: R, items: Iterable[T], reducer: Reducer[R, T]) -> R:
    """Left-fold ``items`` into ``initial`` using ``reducer``.

    ``reduce(0, [1, 2, 3], add) == add(add(add(0, 1), 2), 3)``. An empty
    iterable returns ``initial`` unchanged.
    """

    acc = initial
    count = 0
    for item in items:
        acc = reducer(acc, item)
        count += 1
    logger.debug("Folded %d item(s) with %r", count, reducer)
    return acc


def map_(items: Iterable[T], mapper: Mapper[T, R]) -> List[R]:
    """Return a new list with ``mapper`` applied to every element."""

    def _append(acc: List[R], item: T) -> List[R]:
        acc.append(mapper(item))
        return acc

    return reduce([], items, _append)


def filter_(items: Iterable[T], predicate: Predicate[T]) -> List[T]:
    """Return a new list holding the elements for which ``predicate`` is true."""

    def _keep(acc: List[T], item: T) -> List[T]:
        if predicate(item):
            acc.append(item)
        return acc

    return reduce([], items, _keep)


def reverse(items: S) -> S:
    """Reverse ``items`` in place and return the same object.

    Performs ``len(items) // 2`` pairwise swaps from both ends. The argument
    is mutated. Rows of multi-dimensional arrays are views, so the head row
    is copied before it is overwritten.
    """

    rows_are_views = getattr(items, "ndim", 1) > 1
    i, j = 0, len(items) - 1
    while i < j:
        head = copy.copy(items[i]) if rows_are_views else items[i]
        items[i] = items[j]
        items[j] = head
        i, j = i + 1, j - 1
    return items


def decorate(f: F, *decorators: Decorator[F]) -> F:
    """Wrap ``f`` with ``decorators`` from left to right.

    ``decorate(f, g, h, i) == i(h(g(f)))``, so at call time the last
    decorator runs first on entry and last on exit.
    """

    logger.debug("Decorating %r with %d decorator(s)", f, len(decorators))
    return reduce(f, decorators, lambda acc, decorator: decorator(acc))


def reversed_decorate(f: F, *decorators: Decorator[F]) -> F:
    """Wrap ``f`` with ``decorators`` from right to left.

    ``reversed_decorate(f, g, h, i) == g(h(i(f)))``. The reversal runs on a
    private copy of the decorators.
    """

    return decorate(f, *reverse(list(decorators)))


def apply_options(target: T, *options: Option[T]) -> None:
    """Invoke each option on ``target`` in order, for its side effects only."""

    def _apply(acc: T, option: Option[T]) -> T:
        option(acc)
        return acc

    reduce(target, options, _apply)


__all__ = ["reduce", "map_", "filter_", "reverse", "decorate", "reversed_decorate", "apply_options"]
