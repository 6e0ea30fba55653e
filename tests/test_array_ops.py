import random

import pytest

from workshare.array_ops import (
    ParityPattern,
    multiply_arrays,
    operations_for,
    parity_pattern,
    random_array,
    subtract_arrays,
    sum_arrays,
)


@pytest.mark.parametrize(
    "parent, child, expected",
    [
        (2, 4, ParityPattern.BOTH_EVEN),
        (3, 5, ParityPattern.BOTH_ODD),
        (2, 3, ParityPattern.PARENT_EVEN_CHILD_ODD),
        (3, 2, ParityPattern.PARENT_ODD_CHILD_EVEN),
        (1000, 1001, ParityPattern.PARENT_EVEN_CHILD_ODD),
    ],
)
def test_parity_pattern(parent, child, expected):
    assert parity_pattern(parent, child) is expected


def test_random_array_length_and_range():
    values = random_array(500, random.Random(7))
    assert len(values) == 500
    assert all(0 <= value < 100 for value in values)


def test_random_array_is_reproducible_with_seed():
    first = random_array(20, random.Random(42))
    assert len(first) == 20
    assert all(0 <= value < 100 for value in first)
    second = random_array(20, random.Random(42))
    assert second == first


def test_random_array_empty_and_negative():
    assert random_array(0) == []
    with pytest.raises(ValueError):
        random_array(-1)


def test_sum_then_subtract_round_trip():
    rng = random.Random(1)
    a = random_array(30, rng)
    b = random_array(30, rng)
    assert subtract_arrays(sum_arrays(a, b), b) == a


def test_sum_is_commutative():
    rng = random.Random(2)
    a = random_array(25, rng)
    b = random_array(25, rng)
    assert sum_arrays(a, b) == sum_arrays(b, a)


def test_subtract_self_gives_zeros():
    a = random_array(10, random.Random(3))
    assert subtract_arrays(a, a) == [0] * 10


def test_multiply_identity_and_zero():
    a = random_array(12, random.Random(4))
    assert multiply_arrays(a, [1] * 12) == a
    assert multiply_arrays(a, [0] * 12) == [0] * 12


@pytest.mark.parametrize("operation", [multiply_arrays, subtract_arrays, sum_arrays])
def test_length_mismatch_raises(operation):
    with pytest.raises(ValueError):
        operation([1, 2, 3], [1, 2])


def test_operations_for_each_pattern():
    assert operations_for(ParityPattern.BOTH_EVEN) == (multiply_arrays,)
    assert operations_for(ParityPattern.BOTH_ODD) == (subtract_arrays,)
    assert operations_for(ParityPattern.PARENT_ODD_CHILD_EVEN) == (sum_arrays,)
    assert operations_for(ParityPattern.PARENT_EVEN_CHILD_ODD) == (
        multiply_arrays,
        subtract_arrays,
        sum_arrays,
    )


def test_every_pattern_has_operations():
    assert all(operations_for(pattern) for pattern in ParityPattern)