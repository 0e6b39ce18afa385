"""Taking and skipping leading or trailing parts of sequences."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")


def skip(source: Iterable[T] | None, count: int) -> list[T]:
    """Return the elements after the first ``count`` ones.

    Raises ValueError for a negative count.
    """
    _check_count(count)
    return list(source or ())[count:]


def skip_last(source: Iterable[T] | None, count: int) -> list[T]:
    """Return the elements with the last ``count`` ones left out.

    Raises ValueError for a negative count.
    """
    _check_count(count)
    items = list(source or ())
    return items[: max(len(items) - count, 0)]


def skip_while(
    source: Iterable[T] | None, predicate: Callable[[T], bool]
) -> list[T]:
    """Skip elements while ``predicate`` holds and return the rest."""
    return list(itertools.dropwhile(predicate, source or ()))


def take(source: Iterable[T] | None, count: int) -> list[T]:
    """Return at most the first ``count`` elements.

    Raises ValueError for a negative count.
    """
    _check_count(count)
    return list(itertools.islice(source or (), count))


def take_last(source: Iterable[T] | None, count: int) -> list[T]:
    """Return at most the last ``count`` elements.

    Raises ValueError for a negative count.
    """
    _check_count(count)
    items = list(source or ())
    return items[max(len(items) - count, 0):]


def take_while(
    source: Iterable[T] | None, predicate: Callable[[T], bool]
) -> list[T]:
    """Return the leading elements for which ``predicate`` holds."""
    return list(itertools.takewhile(predicate, source or ()))