"""The client layer for array_console - essentially the 'official' project API.

In short, this module binds the core operations to a single set of streams,
so a caller can construct one `ArrayConsole` and stop passing `streams`
around.

Notes
-----
Unlike their 'core' counterparts, which default to the process-wide streams
on every call, methods of `ArrayConsole` always use the streams the instance
was built with. Two instances over different streams never observe each
other's reads or writes.
"""
from typing import Any, Iterable, Mapping, MutableSequence, Sequence, TextIO, Tuple, Union

import numpy as np

from array_console.core import arrays, readers, writers
from array_console.utils.streams import ConsoleStreams, resolve_streams


class ArrayConsole(object):

    """Console extensions that read and write collections.

    Parameters
    ----------
    streams : ConsoleStreams, default None
        Streams to bind to, the process-wide default if None

    Examples
    --------
    >>> import io
    >>> console = ArrayConsole(ConsoleStreams(input=io.StringIO('1.5\\n2.5\\n'),
    ...                                       output=io.StringIO()))
    >>> values, items_read = console.read_array(2, 'float64')
    >>> console.dump_array(values)
    >>> console.output.getvalue()
    '[1.5, 2.5]\\n'
    """

    def __init__(self, streams: ConsoleStreams=None):
        self.streams = resolve_streams(streams)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.streams)

    @property
    def input(self) -> TextIO:
        """Stream lines are read from; replaceable."""
        return self.streams.input

    @input.setter
    def input(self, reader: TextIO) -> None:
        """Replace the input stream; None raises `InvalidArgumentError`."""
        self.streams.input = reader

    @property
    def output(self) -> TextIO:
        """Stream results are written to."""
        return self.streams.output

    @property
    def error(self) -> TextIO:
        """Stream error dumps are written to."""
        return self.streams.error

    # ------------------------------------------- readers ------------------------------------------
    def read_into(self, buffer: MutableSequence, start: int, end: int, kind=None) -> int:
        """Fill `buffer[start:end]` from input, one number per line.

        Returns
        -------
        int
            Number of slots filled before the first unusable line

        See Also
        --------
        * `array_console.core.readers.read_into`
        """
        return readers.read_into(buffer, start, end, kind=kind, streams=self.streams)

    def read_array(self, count: int, kind) -> Tuple[np.ndarray, int]:
        """Return a new array of `count` items of `kind`, and how many were read.

        See Also
        --------
        * `array_console.core.readers.read_array`
        """
        return readers.read_array(count, kind, streams=self.streams)

    def read_bytes(self, n: int) -> bytes:
        """Return exactly `n` bytes of UTF-16-LE character storage, zero-filled."""
        return readers.read_bytes(n, streams=self.streams)

    # ------------------------------------------- writers ------------------------------------------
    def write_enumerable(self, item_format: str, items: Iterable[Any]) -> None:
        """Write each item on its own line with `item_format`."""
        writers.write_enumerable(item_format, items, streams=self.streams)

    def dump_array(self, items: Iterable[Any]) -> None:
        """Write items as '[e0, e1, ..., en]'."""
        writers.dump_array(items, streams=self.streams)

    def dump_dictionary(self, mapping: Mapping[Any, Any]) -> None:
        """Write mapping as a brace delimited block, one "key":value entry per line."""
        writers.dump_dictionary(mapping, streams=self.streams)

    def dump_error(self, error: BaseException, to_stdout: bool=False,
                   to_debug_or_trace: bool=False) -> None:
        """Write the exception's traceback to the error stream, and optionally elsewhere.

        See Also
        --------
        * `array_console.core.writers.dump_error` for the `to_stdout` and
          `to_debug_or_trace` sinks
        """
        writers.dump_error(error, to_stdout, to_debug_or_trace, streams=self.streams)

    # ------------------------------------ stream-free helpers -------------------------------------
    @staticmethod
    def crop(array: Union[np.ndarray, Sequence], start: int, end: int, skip_by: int=1):
        """See `array_console.core.arrays.crop`."""
        return arrays.crop(array, start, end, skip_by)

    @staticmethod
    def generate_unique_random_numbers(count: int, max_value: int=arrays.INT32_MAX,
                                       min_value: int=arrays.INT32_MIN,
                                       seed: int=None) -> np.ndarray:
        """See `array_console.core.arrays.generate_unique_random_numbers`."""
        return arrays.generate_unique_random_numbers(count, max_value, min_value, seed)
