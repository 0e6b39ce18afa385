"""Retrieval of single elements from sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sliceops.errors import (
    EmptySequenceError,
    MoreThanOneElementError,
    MultipleMatchError,
    NoMatchError,
)

T = TypeVar("T")

Predicate = Callable[[Any], bool]

_MISSING = object()


def first(source: Iterable[T] | None, predicate: Predicate | None = None) -> T:
    """Return the first element, or the first one satisfying ``predicate``.

    Raises EmptySequenceError for an empty sequence and NoMatchError when
    no element satisfies the predicate.
    """
    items = list(source or ())
    if not items:
        raise EmptySequenceError()
    if predicate is None:
        return items[0]
    for item in items:
        if predicate(item):
            return item
    raise NoMatchError()


def first_or_default(
    source: Iterable[T] | None,
    default: Any = None,
    predicate: Predicate | None = None,
) -> Any:
    """Return the first (matching) element, or ``default`` if there is none."""
    items = source or ()
    if predicate is None:
        return next(iter(items), default)
    return next((item for item in items if predicate(item)), default)


def last(source: Iterable[T] | None, predicate: Predicate | None = None) -> T:
    """Return the last element, or the last one satisfying ``predicate``.

    With a predicate, raises NoMatchError when nothing matches, including
    for an empty sequence. Without one, raises EmptySequenceError for an
    empty sequence.
    """
    items = list(source or ())
    if predicate is not None:
        for item in reversed(items):
            if predicate(item):
                return item
        raise NoMatchError()
    if not items:
        raise EmptySequenceError()
    return items[-1]


def last_or_default(
    source: Iterable[T] | None,
    default: Any = None,
    predicate: Predicate | None = None,
) -> Any:
    """Return the last (matching) element, or ``default`` if there is none."""
    items = list(source or ())
    if predicate is None:
        return items[-1] if items else default
    return next((item for item in reversed(items) if predicate(item)), default)


def _single(items: list[Any], predicate: Predicate | None) -> Any:
    if not items:
        raise EmptySequenceError()
    if predicate is None:
        if len(items) > 1:
            raise MoreThanOneElementError()
        return items[0]
    found: Any = _MISSING
    for item in items:
        if predicate(item):
            if found is not _MISSING:
                raise MultipleMatchError()
            found = item
    if found is _MISSING:
        raise NoMatchError()
    return found


def single(source: Iterable[T] | None, predicate: Predicate | None = None) -> T:
    """Return the only element, or the only one satisfying ``predicate``.

    Raises EmptySequenceError for an empty sequence, MoreThanOneElementError
    when there is no predicate and several elements, NoMatchError when no
    element matches and MultipleMatchError when several do.
    """
    return _single(list(source or ()), predicate)


def single_or_default(
    source: Iterable[T] | None,
    default: Any = None,
    predicate: Predicate | None = None,
) -> Any:
    """Return the only (matching) element, or ``default`` if there is not
    exactly one."""
    try:
        return _single(list(source or ()), predicate)
    except (
        EmptySequenceError,
        MoreThanOneElementError,
        NoMatchError,
        MultipleMatchError,
    ):
        return default