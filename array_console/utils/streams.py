"""Stream accessors for standard input, output and error.

Every operation in `array_console.core` reads and writes through a
`ConsoleStreams` object, given explicitly or defaulting to the process-wide
one returned by `get_default_streams`.

Notes
-----
* Output and error are fixed when a `ConsoleStreams` is created. For the
  process-wide default that happens on first access, capturing whatever
  `sys.stdout` and `sys.stderr` are at that moment.
* Input stays replaceable. Replacing the input of the process-wide default
  also replaces `sys.stdin`, so any other code reading standard input sees
  the same stream.
* No locking is done - sharing one `ConsoleStreams` between threads without
  external synchronization interleaves reads and writes unpredictably.
"""
import sys
from typing import TextIO

from array_console.core.input_validation import ensure_not_none


class ConsoleStreams(object):

    """I/O context of input, output and error text streams.

    Parameters
    ----------
    input : text stream, default None
        Stream to read lines from, `sys.stdin` if None
    output : text stream, default None
        Stream to write results to, `sys.stdout` if None
    error : text stream, default None
        Stream to write error dumps to, `sys.stderr` if None
    redirect_stdin : boolean, default False
        * If True, input is read from and written to `sys.stdin` itself,
          so that replacing it affects the whole process
        * If False, input is private to this object

    Examples
    --------
    >>> import io
    >>> streams = ConsoleStreams(input=io.StringIO('1\\n'), output=io.StringIO())
    >>> streams.input.readline()
    '1\\n'
    """

    def __init__(self, input: TextIO=None, output: TextIO=None, error: TextIO=None,
                 redirect_stdin: bool=False):
        self._redirect_stdin = redirect_stdin
        self._output = output if output is not None else sys.stdout
        self._error = error if error is not None else sys.stderr
        self._input = None
        if input is not None:
            self.input = input
        elif not redirect_stdin:
            self._input = sys.stdin

    def __repr__(self):
        return '{}(input={!r}, output={!r}, error={!r})'.format(
            self.__class__.__name__, self.input, self.output, self.error)

    @property
    def input(self) -> TextIO:
        return sys.stdin if self._redirect_stdin else self._input

    @input.setter
    def input(self, reader: TextIO) -> None:
        ensure_not_none(reader, 'input')
        if self._redirect_stdin:
            sys.stdin = reader
        else:
            self._input = reader

    @property
    def output(self) -> TextIO:
        return self._output

    @property
    def error(self) -> TextIO:
        return self._error


_default_streams = None


def get_default_streams() -> ConsoleStreams:
    """Return the process-wide streams, creating them on first access."""
    global _default_streams
    if _default_streams is None:
        _default_streams = ConsoleStreams(redirect_stdin=True)
    return _default_streams


def resolve_streams(streams: ConsoleStreams=None) -> ConsoleStreams:
    """Return given streams, or the process-wide default if None."""
    return streams if streams is not None else get_default_streams()


def get_input() -> TextIO:
    return get_default_streams().input


def set_input(reader: TextIO) -> None:
    """Replace standard input for the library and the rest of the process."""
    get_default_streams().input = reader


def get_output() -> TextIO:
    return get_default_streams().output


def get_error() -> TextIO:
    return get_default_streams().error
