"""Parsing of single lines of text into fixed-width numeric values.

Notable Contents
----------------
NumericKind : namedtuple
    Name, buffer dtype, accepted grammar and conversion function of a kind
NUMERIC_KINDS : Mapping of string to NumericKind
    Every supported kind, keyed by name ('int8', ..., 'float64', 'decimal')
ParsedValue : namedtuple
    Explicit parse result, holding the value and whether parsing succeeded
parse_numeric : (string, NumericKind or string) -> ParsedValue
    Workhorse function used by the bulk readers

Notes
-----
* The grammar is pinned and locale independent: an optional sign, digits, an
  optional decimal point, and (for binary floats only) an optional exponent.
  Surrounding whitespace is ignored. Thousands separators, underscores and
  more than one token per line are rejected.
* Integers falling outside the range of their kind are rejected rather than
  wrapped, and binary floats too large for their width become infinite.
"""
import re
import decimal
from collections import namedtuple
from typing import Callable, Union

import numpy as np

from array_console.core.input_validation import InvalidArgumentError

_INTEGER_PATTERN = re.compile(r'\s*[+-]?[0-9]+\s*')
_FLOAT_PATTERN = re.compile(r'\s*(?:[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
                            r'|NaN|[+-]?Infinity)\s*')
_DECIMAL_PATTERN = re.compile(r'\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)\s*')

NumericKind = namedtuple('NumericKind', 'name,dtype,pattern,convert')
ParsedValue = namedtuple('ParsedValue', 'value,is_valid')

INVALID = ParsedValue(value=None, is_valid=False)


def _integer_converter(dtype: type) -> Callable[[str], object]:
    info = np.iinfo(dtype)

    def convert(text: str) -> object:
        number = int(text)
        if not info.min <= number <= info.max:
            raise OverflowError(f'{number} does not fit in {info.dtype}.')
        return dtype(number)
    return convert


def _float_converter(dtype: type) -> Callable[[str], object]:
    def convert(text: str) -> object:
        with np.errstate(over='ignore'):
            return dtype(float(text.replace('Infinity', 'inf')))
    return convert


def _build_kinds():
    kinds = [NumericKind(np.dtype(t).name, np.dtype(t), _INTEGER_PATTERN, _integer_converter(t))
             for t in (np.int8, np.int16, np.int32, np.int64,
                       np.uint8, np.uint16, np.uint32, np.uint64)]
    kinds += [NumericKind(np.dtype(t).name, np.dtype(t), _FLOAT_PATTERN, _float_converter(t))
              for t in (np.float32, np.float64)]
    kinds.append(NumericKind('decimal', np.dtype(object), _DECIMAL_PATTERN, decimal.Decimal))
    return {kind.name: kind for kind in kinds}


NUMERIC_KINDS = _build_kinds()


def get_numeric_kind(kind: Union[str, type, np.dtype, NumericKind]) -> NumericKind:
    """Return the numeric kind matching a name, numpy dtype or scalar type.

    Raises
    ------
    InvalidArgumentError
        * If no supported kind matches, including the ``object`` dtype, which
          is ambiguous and must be requested as 'decimal' by name

    Examples
    --------
    >>> get_numeric_kind('uint16').name
    'uint16'
    >>> get_numeric_kind(np.float32).name
    'float32'
    """
    if isinstance(kind, NumericKind):
        return kind
    if isinstance(kind, str) and kind in NUMERIC_KINDS:
        return NUMERIC_KINDS[kind]
    if kind is decimal.Decimal:
        return NUMERIC_KINDS['decimal']
    try:
        name = np.dtype(kind).name
    except TypeError:
        name = None
    if name is None or name == 'object' or name not in NUMERIC_KINDS:
        raise InvalidArgumentError(kind, f'kind must be one of {tuple(NUMERIC_KINDS)}.')
    return NUMERIC_KINDS[name]


def parse_numeric(text: str, kind: Union[str, NumericKind]) -> ParsedValue:
    """Parse one line of text as a value of the given numeric kind.

    Parameters
    ----------
    text : string or None
        Line to parse, with or without its line terminator. None stands for
        an exhausted stream and is never valid
    kind : string or NumericKind
        Kind to parse to, as accepted by `get_numeric_kind`

    Returns
    -------
    ParsedValue
        * (value, True) if the whole line is a single well-formed value that
          fits in the kind
        * `INVALID` otherwise

    Examples
    --------
    >>> int(parse_numeric(' -42\\n', 'int8').value)
    -42
    >>> parse_numeric('300', 'uint8').is_valid
    False
    >>> parse_numeric('1,000', 'float64').is_valid
    False
    """
    kind_ = get_numeric_kind(kind)
    if text is None or not kind_.pattern.fullmatch(text):
        return INVALID
    try:
        return ParsedValue(value=kind_.convert(text.strip()), is_valid=True)
    except (ValueError, OverflowError, decimal.InvalidOperation):
        return INVALID
