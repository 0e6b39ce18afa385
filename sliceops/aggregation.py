"""Aggregation, projection and filtering over sequences."""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from sliceops.errors import EmptySequenceError, InvalidCastError, SizeBelowOneError

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
K = TypeVar("K", bound=Hashable)


def aggregate(source: Iterable[T], seed: A, accumulate: Callable[[A, T], A]) -> A:
    """Fold ``source`` into a single value, starting from ``seed``."""
    return functools.reduce(accumulate, source, seed)


def all_of(source: Iterable[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return True if every element satisfies ``predicate`` (True when empty)."""
    return all(predicate(item) for item in source or ())


def any_of(
    source: Iterable[T] | None, predicate: Callable[[T], bool] | None = None
) -> bool:
    """Return True if any element satisfies ``predicate``.

    Without a predicate, return True if the sequence has any elements.
    """
    items = source or ()
    if predicate is None:
        return any(True for _ in items)
    return any(predicate(item) for item in items)


def average(source: Iterable[float] | None) -> float:
    """Return the arithmetic mean of the values in ``source``."""
    values = list(source or ())
    if not values:
        raise EmptySequenceError()
    return float(sum(values)) / len(values)


def cast(source: Iterable[Any] | None, type_: type[T]) -> list[T]:
    """Return the elements as a list, checking each is an instance of ``type_``."""
    result: list[T] = []
    for item in source or ():
        if not isinstance(item, type_):
            raise InvalidCastError()
        result.append(item)
    return result


def chunk(source: Iterable[T] | None, size: int) -> list[list[T]]:
    """Split ``source`` into lists of at most ``size`` elements."""
    if size < 1:
        raise SizeBelowOneError()
    items = list(source or ())
    return [items[start:start + size] for start in range(0, len(items), size)]


def convert(source: Iterable[T] | None, converter: Callable[[T], R]) -> list[R]:
    """Convert every element with ``converter``."""
    return [converter(item) for item in source or ()]


def count(
    source: Iterable[T] | None, predicate: Callable[[T], bool] | None = None
) -> int:
    """Count the elements, or those that satisfy ``predicate`` if given."""
    items = source or ()
    if predicate is None:
        return sum(1 for _ in items)
    return sum(1 for item in items if predicate(item))


def group_by(
    source: Iterable[T] | None, key_selector: Callable[[T], K]
) -> dict[K, list[T]]:
    """Group elements into lists keyed by ``key_selector``, keeping order."""
    groups: dict[K, list[T]] = {}
    for item in source or ():
        groups.setdefault(key_selector(item), []).append(item)
    return groups


def select(source: Iterable[T] | None, selector: Callable[[T], R]) -> list[R]:
    """Project every element into a new form."""
    return [selector(item) for item in source or ()]


def select_many(
    source: Iterable[T] | None, selector: Callable[[T], Iterable[R]]
) -> list[R]:
    """Project every element into a sequence and flatten the results."""
    return [value for item in source or () for value in selector(item)]


def sum_of(source: Iterable[T] | None, start: T | None = None) -> Any:
    """Add the elements with ``+``.

    Works for numbers and strings. Without ``start`` an empty sequence sums
    to 0; pass ``start=""`` to get an empty string instead.
    """
    items = iter(source or ())
    if start is None:
        try:
            start = next(items)
        except StopIteration:
            return 0
    return functools.reduce(operator.add, items, start)


def where(source: Iterable[T] | None, predicate: Callable[[T], bool]) -> list[T]:
    """Return the elements that satisfy ``predicate``."""
    return [item for item in source or () if predicate(item)]