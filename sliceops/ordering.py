"""Sorted copies of sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

Key = Callable[[Any], Any]


def order(source: Iterable[T] | None, key: Key | None = None) -> list[T]:
    """Return a new list of the elements in ascending order.

    Elements are compared directly, or by ``key(element)`` if given.
    """
    return sorted(source or (), key=key)


def order_descending(source: Iterable[T] | None, key: Key | None = None) -> list[T]:
    """Return a new list of the elements in descending order.

    Elements are compared directly, or by ``key(element)`` if given.
    """
    return sorted(source or (), key=key, reverse=True)