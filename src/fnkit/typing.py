"""Shared typing aliases for the fnkit package."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")
R = TypeVar("R")
F = TypeVar("F", bound=Callable[..., object])

Reducer = Callable[[R, T], R]
Mapper = Callable[[T], R]
Predicate = Callable[[T], bool]
Decorator = Callable[[F], F]
Option = Callable[[T], None]


class MutableIndexable(Protocol[T]):
    """Protocol for sequences supporting ``len`` and item assignment."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> T:
        ...

    def __setitem__(self, index: int, value: T) -> None:
        ...


__all__ = ["T", "R", "F", "Reducer", "Mapper", "Predicate", "Decorator", "Option", "MutableIndexable"]
