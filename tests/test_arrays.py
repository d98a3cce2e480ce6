import numpy as np
import pytest

from array_console.core.arrays import INT32_MAX, INT32_MIN, crop, generate_unique_random_numbers
from array_console.core.input_validation import InvalidArgumentError


def test_crop_truncates_length():
    # (7 - 2) // 2 == 2, so index 6 is dropped even though it matches the stride
    assert crop(list(range(10)), 2, 7, 2) == [2, 4]


def test_crop_stride_tests_absolute_index():
    # offsets from start would give [1, 4, 7]; absolute indices give [3, 6]
    assert crop(list(range(10)), 1, 9, 3) == [3, 6]


def test_crop_default_stride_is_plain_slice():
    assert crop(["a", "b", "c", "d"], 1, 3) == ["b", "c"]


def test_crop_numpy_keeps_dtype():
    array = np.arange(10, dtype=np.int16)
    cropped = crop(array, 0, 10, 5)
    assert isinstance(cropped, np.ndarray)
    assert cropped.dtype == np.int16
    assert cropped.tolist() == [0, 5]


def test_crop_empty_range():
    assert crop([1, 2, 3], 2, 2) == []
    assert crop(np.array([1.0, 2.0]), 0, 1, 2).tolist() == []


def test_crop_does_not_modify_input():
    array = [5, 6, 7, 8]
    crop(array, 0, 4, 2)
    assert array == [5, 6, 7, 8]


@pytest.mark.parametrize("start,end,skip_by", [(0, 11, 1), (-1, 3, 1), (4, 2, 1), (0, 5, 0), (0, 5, -2)])
def test_crop_rejects_invalid_arguments(start, end, skip_by):
    with pytest.raises(InvalidArgumentError):
        crop(list(range(10)), start, end, skip_by)


def test_generate_unique_random_numbers_in_range_and_distinct():
    numbers = generate_unique_random_numbers(5, max_value=10, min_value=0)
    assert len(numbers) == 5
    assert len(set(numbers.tolist())) == 5
    assert all(0 <= n < 10 for n in numbers)


def test_generate_unique_random_numbers_full_range_is_a_permutation():
    numbers = generate_unique_random_numbers(10, max_value=10, min_value=0, seed=3)
    assert sorted(numbers.tolist()) == list(range(10))


def test_generate_unique_random_numbers_can_produce_zero():
    numbers = generate_unique_random_numbers(3, max_value=3, min_value=0, seed=11)
    assert 0 in numbers.tolist()


def test_generate_unique_random_numbers_is_deterministic_under_seed():
    first = generate_unique_random_numbers(20, max_value=1000, min_value=-1000, seed=42)
    second = generate_unique_random_numbers(20, max_value=1000, min_value=-1000, seed=42)
    assert first.tolist() == second.tolist()


def test_generate_unique_random_numbers_default_range_is_int32():
    numbers = generate_unique_random_numbers(50, seed=7)
    assert all(INT32_MIN <= n < INT32_MAX for n in numbers.tolist())
    assert len(set(numbers.tolist())) == 50


def test_generate_unique_random_numbers_keeps_acceptance_order():
    numbers = generate_unique_random_numbers(8, max_value=100, min_value=0, seed=5)
    rng = np.random.default_rng(5)
    expected = []
    while len(expected) < 8:
        candidate = int(rng.integers(0, 100))
        if candidate not in expected:
            expected.append(candidate)
    assert numbers.tolist() == expected


@pytest.mark.parametrize("count", [0, -3])
def test_generate_unique_random_numbers_rejects_non_positive_count(count):
    with pytest.raises(InvalidArgumentError):
        generate_unique_random_numbers(count, max_value=10, min_value=0)


def test_generate_unique_random_numbers_rejects_too_small_range():
    with pytest.raises(InvalidArgumentError):
        generate_unique_random_numbers(20, max_value=10, min_value=0)


def test_generate_unique_random_numbers_rejects_reversed_range():
    with pytest.raises(InvalidArgumentError):
        generate_unique_random_numbers(5, max_value=0, min_value=10)


def test_generate_unique_random_numbers_accepts_negative_seed():
    first = generate_unique_random_numbers(3, max_value=10, min_value=0, seed=-1)
    second = generate_unique_random_numbers(3, max_value=10, min_value=0, seed=-1)
    assert first.tolist() == second.tolist()
    assert len(set(first.tolist())) == 3
    assert all(0 <= n < 10 for n in first.tolist())
