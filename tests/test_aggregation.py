import pytest

from sliceops.aggregation import (
    aggregate,
    all_of,
    any_of,
    average,
    cast,
    chunk,
    convert,
    count,
    group_by,
    select,
    select_many,
    sum_of,
    where,
)
from sliceops.errors import (
    EmptySequenceError,
    InvalidCastError,
    SequenceError,
    SizeBelowOneError,
)


def below_five(value):
    return value < 5


def test_aggregate_builds_string():
    result = aggregate([1, 2, 3], "Seed ", lambda acc, value: acc + f"{value} ")
    assert result == "Seed 1 2 3 "


def test_aggregate_empty_returns_seed():
    assert aggregate([], 10, lambda acc, value: acc + value) == 10


@pytest.mark.parametrize(
    "source, expected",
    [
        ([1, 2, 3], True),
        ([1, 2, 6], False),
        ([6, 7, 8], False),
        ([], True),
        (None, True),
    ],
)
def test_all_of(source, expected):
    assert all_of(source, below_five) is expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ([1, 2, 3], True),
        ([1, 2, 6], True),
        ([6, 7, 8], False),
        ([], False),
        (None, False),
    ],
)
def test_any_of(source, expected):
    assert any_of(source, below_five) is expected


def test_any_of_without_predicate():
    assert any_of([0]) is True
    assert any_of([]) is False
    assert any_of(None) is False


def test_average_of_values():
    assert average([1, 2, 3]) == 2.0


@pytest.mark.parametrize("source", [[], None])
def test_average_of_empty_raises(source):
    with pytest.raises(EmptySequenceError):
        average(source)


def test_cast_ok():
    assert cast([1, 2, 3], int) == [1, 2, 3]


def test_cast_error():
    with pytest.raises(InvalidCastError):
        cast([1.0, 2.0, 3.0], int)


def test_invalid_cast_error_is_type_error():
    with pytest.raises(TypeError):
        cast(["a"], int)


@pytest.mark.parametrize(
    "source, size, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, [[1, 2, 3], [4, 5, 6], [7, 8, 9]]),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 0], 3, [[1, 2, 3], [4, 5, 6], [7, 8, 9], [0]]),
        ([], 3, []),
        (None, 3, []),
    ],
)
def test_chunk(source, size, expected):
    assert chunk(source, size) == expected


def test_chunk_size_below_one():
    with pytest.raises(SizeBelowOneError):
        chunk([], 0)


def test_chunk_error_message():
    with pytest.raises(SequenceError, match="size is below 1"):
        chunk([1], -1)


def test_convert():
    assert convert([1, 2, 3], str) == ["1", "2", "3"]
    assert convert(None, str) == []


def test_count_with_and_without_predicate():
    assert count([1, 2, 6, 7]) == 4
    assert count([1, 2, 6, 7], below_five) == 2
    assert count(None) == 0


def test_group_by_keeps_order():
    result = group_by([1, 2, 3, 4, 5], lambda v: v % 2)
    assert result == {1: [1, 3, 5], 0: [2, 4]}
    assert list(result) == [1, 0]


def test_select():
    assert select([1, 2, 3], lambda v: v * 10) == [10, 20, 30]


def test_select_many():
    assert select_many([1, 2, 3], lambda v: [v] * v) == [1, 2, 2, 3, 3, 3]
    assert select_many(None, lambda v: [v]) == []


@pytest.mark.parametrize(
    "source, expected",
    [
        (None, 0),
        ([], 0),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 0], 45),
    ],
)
def test_sum_of(source, expected):
    assert sum_of(source) == expected


def test_sum_of_strings():
    assert sum_of(["a", "b", "c"]) == "abc"
    assert sum_of([], start="") == ""


def test_where():
    assert where([1, 6, 2, 7, 3], below_five) == [1, 2, 3]
    assert where(None, below_five) == []