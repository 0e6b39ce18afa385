"""Exceptions raised by the sequence operations."""


class SequenceError(ValueError):
    """Base class for errors raised by sequence operations."""

    default_message = "invalid sequence operation"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptySequenceError(SequenceError):
    """The source sequence contains no elements."""

    default_message = "the source sequence is empty"


class NoMatchError(SequenceError):
    """No element satisfies the condition in the predicate."""

    default_message = "no element satisfies the condition in predicate"


class MultipleMatchError(SequenceError):
    """More than one element satisfies the condition in the predicate."""

    default_message = "more than one element satisfies the condition in predicate"


class MoreThanOneElementError(SequenceError):
    """The source sequence holds more than one element."""

    default_message = "the source sequence has more than one element"


class SizeBelowOneError(SequenceError):
    """A requested size is smaller than one."""

    default_message = "size is below 1"


class InvalidCastError(SequenceError, TypeError):
    """An element cannot be cast to the requested type."""

    default_message = "an element in the sequence cannot be cast to requested type"