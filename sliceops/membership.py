"""Membership tests over sequences."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Equality = Callable[[Any, Any], bool]


def _equality(equality: Equality | None) -> Equality:
    return operator.eq if equality is None else equality


def contains(
    source: Iterable[T] | None, value: T, equality: Equality | None = None
) -> bool:
    """Return True if ``source`` holds an element equal to ``value``.

    Elements are compared with ``==`` unless ``equality`` is given.
    """
    equal = _equality(equality)
    return any(equal(item, value) for item in source or ())


def contains_by(
    source: Iterable[T] | None,
    value: T,
    selector: Callable[[T], R],
    equality: Equality | None = None,
) -> bool:
    """Return True if some element's selected value equals that of ``value``."""
    equal = _equality(equality)
    wanted = selector(value)
    return any(equal(wanted, selector(item)) for item in source or ())


def contains_all(
    source: Iterable[T] | None, *args: T, equality: Equality | None = None
) -> bool:
    """Return True if ``source`` holds every one of the given values.

    With no values given the result is True.
    """
    items = list(source or ())
    return all(contains(items, value, equality) for value in args)


def contains_any(
    source: Iterable[T] | None, *args: T, equality: Equality | None = None
) -> bool:
    """Return True if ``source`` holds at least one of the given values.

    With no values given the result is False.
    """
    items = list(source or ())
    return any(contains(items, value, equality) for value in args)