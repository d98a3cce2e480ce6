"""Provides argument validation for the array console operations.

Notable Contents
----------------
InvalidArgumentError : Class, Subclass of ValueError
    Core exception raised anywhere a caller breaks an operation's contract
Functions with names that start with 'ensure'
    Raise `InvalidArgumentError` if the contract is broken, else return None

Notes
-----
* Only programming-contract violations are checked here. Malformed text or
  an exhausted input stream is never an error, see `core.readers`.
"""
from typing import Sized


class InvalidArgumentError(ValueError):
    """Base exception raised when an argument breaks an operation's contract."""
    def __init__(self, value: object, reason: str):
        super().__init__(f'\'{value}\' is invalid - {reason}')
        self.value = value
        self.reason = reason


def ensure_not_none(value: object, name: str) -> None:
    """Valid if value is not None."""
    if value is None:
        raise InvalidArgumentError(value, f'`{name}` cannot be None.')


def ensure_positive(value: int, name: str) -> None:
    """Valid if value is an integer greater than zero."""
    if value <= 0:
        raise InvalidArgumentError(value, f'`{name}` must be positive.')


def ensure_non_negative(value: int, name: str) -> None:
    """Valid if value is an integer greater than or equal to zero."""
    if value < 0:
        raise InvalidArgumentError(value, f'`{name}` cannot be negative.')


def ensure_valid_range(items: Sized, start: int, end: int) -> None:
    """Valid if `start` and `end` bound a (possibly empty) slice of items.

    Raises
    ------
    InvalidArgumentError
        * If `start` is negative
        * If `start` is greater than `end`
        * If `end` is greater than the number of items

    Examples
    --------
    >>> ensure_valid_range([1, 2, 3], 0, 3)
    >>> ensure_valid_range([1, 2, 3], 2, 1)
    Traceback (most recent call last):
        ...
    array_console.core.input_validation.InvalidArgumentError: '(2, 1)' is invalid - `start` cannot exceed `end`.
    """
    if start < 0:
        raise InvalidArgumentError((start, end), '`start` cannot be negative.')
    if start > end:
        raise InvalidArgumentError((start, end), '`start` cannot exceed `end`.')
    if end > len(items):
        raise InvalidArgumentError((start, end), f'`end` cannot exceed the length {len(items)}.')


def ensure_producible_count(count: int, min_value: int, max_value: int) -> None:
    """Valid if `count` distinct integers fit in the range [min_value, max_value).

    Raises
    ------
    InvalidArgumentError
        * If `count` is not positive
        * If the absolute width of the range is smaller than `count`
        * If `max_value` is smaller than `min_value`

    Notes
    -----
    * The width check is made on ``abs(max_value - min_value)``, so a reversed
      range passes it; the final check catches that case, which the random
      source cannot draw from either.
    """
    ensure_positive(count, 'count')
    if abs(max_value - min_value) < count:
        raise InvalidArgumentError(count, f'it is not possible to produce {count} unique '
                                          f'numbers between {min_value} and {max_value}.')
    if max_value < min_value:
        raise InvalidArgumentError((min_value, max_value),
                                   '`max_value` cannot be smaller than `min_value`.')
