"""Smallest and largest elements of sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sliceops.errors import EmptySequenceError

T = TypeVar("T")

Key = Callable[[Any], Any]

_MISSING = object()


def maximum(source: Iterable[T] | None, key: Key | None = None) -> T:
    """Return the largest element, the first one if several are equal.

    Elements are compared directly, or by ``key(element)`` if given.
    Raises EmptySequenceError for an empty sequence.
    """
    result = max(source or (), key=key, default=_MISSING)
    if result is _MISSING:
        raise EmptySequenceError()
    return result


def minimum(source: Iterable[T] | None, key: Key | None = None) -> T:
    """Return the smallest element, the first one if several are equal.

    Elements are compared directly, or by ``key(element)`` if given.
    Raises EmptySequenceError for an empty sequence.
    """
    result = min(source or (), key=key, default=_MISSING)
    if result is _MISSING:
        raise EmptySequenceError()
    return result


def min_max(source: Iterable[T] | None, key: Key | None = None) -> tuple[T, T]:
    """Return the smallest and the largest element in one pass.

    Among equal elements the first one found is kept. Raises
    EmptySequenceError for an empty sequence.
    """
    items = iter(source or ())
    try:
        low = high = next(items)
    except StopIteration:
        raise EmptySequenceError() from None
    if key is None:
        low_key = high_key = low
        for item in items:
            if item < low_key:
                low = low_key = item
            elif item > high_key:
                high = high_key = item
        return low, high
    low_key = high_key = key(low)
    for item in items:
        item_key = key(item)
        if item_key < low_key:
            low, low_key = item, item_key
        elif item_key > high_key:
            high, high_key = item, item_key
    return low, high