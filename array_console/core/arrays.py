"""Array manipulation: strided cropping and unique random number generation."""
import time
import logging
from typing import Sequence, Union, List

import numpy as np

from array_console.core import input_validation

logger = logging.getLogger(__name__)

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)


def crop(array: Union[np.ndarray, Sequence], start: int, end: int,
         skip_by: int=1) -> Union[np.ndarray, List]:
    """Return the items of `array[start:end]` whose index is a multiple of `skip_by`.

    Parameters
    ----------
    array : numpy array or sequence
        Items to crop; left unmodified
    start : int
        First index to consider
    end : int
        Index to stop at (exclusive)
    skip_by : int, default 1
        Stride, tested against the absolute index ``i % skip_by == 0``,
        not against the offset from `start`

    Returns
    -------
    numpy array
        If `array` is a numpy array, with the same dtype
    list
        Otherwise

    Raises
    ------
    InvalidArgumentError
        * If not ``0 <= start <= end <= len(array)``
        * If `skip_by` is not positive

    Notes
    -----
    * The result holds exactly ``(end - start) // skip_by`` items. The length
      is truncated, so when ``end - start`` is not a multiple of `skip_by`
      a trailing matching item can be dropped.

    Examples
    --------
    >>> crop(list(range(10)), 2, 7, 2)
    [2, 4]
    >>> crop(list(range(10)), 1, 9, 3)
    [3, 6]
    """
    input_validation.ensure_valid_range(array, start, end)
    input_validation.ensure_positive(skip_by, 'skip_by')

    length = (end - start) // skip_by
    cropped = [array[i] for i in range(start, end) if i % skip_by == 0][:length]
    if isinstance(array, np.ndarray):
        return np.array(cropped, dtype=array.dtype).reshape((length,) + array.shape[1:])
    return cropped


def _time_seed() -> int:
    return time.time_ns() & 0xFFFFFFFF


def generate_unique_random_numbers(count: int, max_value: int=INT32_MAX, min_value: int=INT32_MIN,
                                   seed: int=None) -> np.ndarray:
    """Generate `count` distinct random integers in the range [min_value, max_value).

    Parameters
    ----------
    count : int
        Amount of numbers to produce
    max_value : int, default INT32_MAX
        Exclusive upper bound
    min_value : int, default INT32_MIN
        Inclusive lower bound
    seed : int, default None
        Seed of the random source; if None a seed is derived from the current
        time, so runs are not reproducible

    Returns
    -------
    numpy array of int64
        Numbers in the order they were accepted (not sorted)

    Raises
    ------
    InvalidArgumentError
        * If `count` is not positive
        * If ``abs(max_value - min_value) < count``
        * If `max_value` is smaller than `min_value`

    Notes
    -----
    * Rejection sampling: each candidate is checked against the numbers
      accepted so far with a linear scan and redrawn if already present.
      This is quick while `count` is small relative to the range and
      degrades sharply as `count` approaches it.
    * The same `seed` and arguments always give the same numbers.
    * Any integer seed is accepted; it is reduced to its low 64 bits, so a
      negative seed is as reproducible as a positive one.
    """
    input_validation.ensure_producible_count(count, min_value, max_value)
    seed_ = seed if seed is not None else _time_seed()
    prng = np.random.default_rng(seed_ & 0xFFFFFFFFFFFFFFFF)

    numbers = np.zeros(count, dtype=np.int64)
    rejected = 0
    i = 0
    while i < count:
        candidate = int(prng.integers(min_value, max_value))
        if candidate in numbers[:i]:
            rejected += 1
            continue
        numbers[i] = candidate
        i += 1
    logger.debug('Generated %d unique numbers in [%d, %d) with seed %d (%d draws rejected).',
                 count, min_value, max_value, seed_, rejected)
    return numbers
