"""Set-like operations over sequences that keep the source order."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sliceops.membership import Equality, contains

T = TypeVar("T")
R = TypeVar("R")


def distinct_by(
    source: Iterable[T] | None,
    selector: Callable[[T], R],
    equality: Equality | None = None,
) -> list[T]:
    """Return the elements whose selected values have not been seen before."""
    result: list[T] = []
    seen: list[Any] = []
    for item in source or ():
        key = selector(item)
        if not contains(seen, key, equality):
            seen.append(key)
            result.append(item)
    return result


def distinct(
    source: Iterable[T] | None, equality: Equality | None = None
) -> list[T]:
    """Return the elements without duplicates, keeping first occurrences."""
    result: list[T] = []
    for item in source or ():
        if not contains(result, item, equality):
            result.append(item)
    return result


def difference_by(
    source: Iterable[T] | None,
    excluded: Iterable[T] | None,
    selector: Callable[[T], R],
    equality: Equality | None = None,
) -> list[T]:
    """Return the elements whose selected value matches no excluded element's."""
    excluded_keys = [selector(item) for item in excluded or ()]
    return [
        item
        for item in source or ()
        if not contains(excluded_keys, selector(item), equality)
    ]


def difference(
    source: Iterable[T] | None,
    excluded: Iterable[T] | None,
    equality: Equality | None = None,
) -> list[T]:
    """Return the elements of ``source`` that do not appear in ``excluded``.

    Duplicates in ``source`` are kept.
    """
    excluded_items = list(excluded or ())
    return [
        item
        for item in source or ()
        if not contains(excluded_items, item, equality)
    ]


def intersect(
    first: Iterable[T] | None,
    second: Iterable[T] | None,
    equality: Equality | None = None,
) -> list[T]:
    """Return the distinct elements of ``first`` that also appear in ``second``."""
    others = distinct(second, equality)
    return [item for item in distinct(first, equality) if contains(others, item, equality)]


def union(
    first: Iterable[T] | None,
    second: Iterable[T] | None,
    equality: Equality | None = None,
) -> list[T]:
    """Return the distinct elements of both sequences, first ones first."""
    combined = [*(first or ()), *(second or ())]
    return distinct(combined, equality)