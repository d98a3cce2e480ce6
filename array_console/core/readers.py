"""Bulk readers filling typed buffers from line-oriented text input.

Notes
-----
* A reader never raises for bad input. Malformed text, a value out of range
  for the buffer's kind, an exhausted, closed or undecodable stream, or an
  `OSError` all end the read early, and the number of filled slots is
  returned instead. Callers compare that count to ``end - start`` to tell a
  full read from a partial one.
* Out-of-range indices are a caller error and raise `InvalidArgumentError`
  before anything is read.
"""
import logging
from typing import MutableSequence, Tuple, Union

import numpy as np

from array_console.core import input_validation
from array_console.core.numeric_parsing import (NumericKind, ParsedValue, INVALID,
                                                get_numeric_kind, parse_numeric)
from array_console.utils.streams import ConsoleStreams, resolve_streams

logger = logging.getLogger(__name__)

CHAR_SIZE = 2  # bytes per character of the raw byte reader (UTF-16 code unit)


def _infer_kind(buffer: MutableSequence, kind: Union[str, type, NumericKind, None]) -> NumericKind:
    if kind is not None:
        return get_numeric_kind(kind)
    if not isinstance(buffer, np.ndarray):
        raise input_validation.InvalidArgumentError(
            type(buffer).__name__, '`kind` must be given when the buffer is not a numpy array.')
    return get_numeric_kind(buffer.dtype)


def _read_line(streams: ConsoleStreams) -> Union[str, None]:
    """Return next line of input, or None if exhausted or unreadable."""
    try:
        line = streams.input.readline()
    except (OSError, ValueError) as e:
        # ValueError covers undecodable bytes and a closed stream
        logger.debug('Input stream failed during read - %s', e)
        return None
    return line if line else None


def _next_value(streams: ConsoleStreams, kind: NumericKind) -> ParsedValue:
    line = _read_line(streams)
    return parse_numeric(line, kind) if line is not None else INVALID


def read_into(buffer: MutableSequence, start: int, end: int,
              kind: Union[str, type, NumericKind]=None, streams: ConsoleStreams=None) -> int:
    """Fill `buffer[start:end]` with one number parsed per line of input.

    Parameters
    ----------
    buffer : numpy array or mutable sequence
        Buffer to fill in place
    start : int
        First index to fill
    end : int
        Index to stop filling at (exclusive)
    kind : string, numpy dtype, or NumericKind, default None
        Numeric kind to parse each line as; inferred from the dtype of numpy
        buffers if None, and required otherwise (eg 'decimal' for a list)
    streams : ConsoleStreams, default None
        Streams to read from, the process-wide default if None

    Returns
    -------
    int
        Number of slots filled, always a prefix ``buffer[start:start + n]``.
        Slots after the first failed line keep their previous values

    Raises
    ------
    InvalidArgumentError
        * If not ``0 <= start <= end <= len(buffer)``
        * If `kind` is not given and cannot be inferred

    Examples
    --------
    >>> import io
    >>> streams = ConsoleStreams(input=io.StringIO('7\\n8\\nnine\\n10\\n'))
    >>> buffer = np.zeros(5, dtype=np.int32)
    >>> read_into(buffer, 1, 5, streams=streams)
    2
    >>> buffer.tolist()
    [0, 7, 8, 0, 0]
    """
    input_validation.ensure_valid_range(buffer, start, end)
    kind_ = _infer_kind(buffer, kind)
    streams_ = resolve_streams(streams)

    items_read = 0
    for i in range(start, end):
        parsed = _next_value(streams_, kind_)
        if not parsed.is_valid:
            logger.debug('Stopped reading %s values at index %d (%d of %d read).',
                         kind_.name, i, items_read, end - start)
            break
        buffer[i] = parsed.value
        items_read += 1
    return items_read


def read_array(count: int, kind: Union[str, type, NumericKind],
               streams: ConsoleStreams=None) -> Tuple[np.ndarray, int]:
    """Allocate a zeroed array of `count` items of `kind` and fill it from input.

    Returns
    -------
    tuple of (numpy array, int)
        The array, and the number of leading items actually read

    See Also
    --------
    * `read_into` for the parsing and early-termination rules
    """
    input_validation.ensure_non_negative(count, 'count')
    kind_ = get_numeric_kind(kind)
    if kind_.name == 'decimal':
        buffer = np.array([kind_.convert('0')] * count, dtype=object)
    else:
        buffer = np.zeros(count, dtype=kind_.dtype)
    return buffer, read_into(buffer, 0, count, kind=kind_, streams=streams)


def read_bytes(n: int, streams: ConsoleStreams=None) -> bytes:
    """Read `n` bytes worth of characters from input.

    Parameters
    ----------
    n : int
        Number of bytes to return
    streams : ConsoleStreams, default None
        Streams to read from, the process-wide default if None

    Returns
    -------
    bytes
        Exactly `n` bytes: the UTF-16-LE storage of up to ``n // CHAR_SIZE``
        code units read, with zero bytes filling whatever the characters did
        not cover (an odd `n`, or fewer characters left in the stream)

    Raises
    ------
    InvalidArgumentError
        * If `n` is negative

    Notes
    -----
    * Characters are read one at a time and counted in UTF-16 code units, so
      a character outside the Basic Multilingual Plane counts twice. If only
      one code unit is left when such a character is read, its high surrogate
      is kept and its low surrogate is lost.

    Examples
    --------
    >>> import io
    >>> read_bytes(5, ConsoleStreams(input=io.StringIO('AB')))
    b'A\\x00B\\x00\\x00'
    """
    input_validation.ensure_non_negative(n, 'n')
    streams_ = resolve_streams(streams)
    units_wanted = n // CHAR_SIZE
    chars = []
    units_read = 0
    while units_read < units_wanted:
        char = streams_.input.read(1)
        if not char:
            break
        chars.append(char)
        units_read += 2 if ord(char) > 0xFFFF else 1
    data = ''.join(chars).encode('utf-16-le', errors='surrogatepass')[:n]
    if len(data) < n:
        logger.debug('Zero-filling %d of %d requested bytes.', n - len(data), n)
    return data.ljust(n, b'\x00')
