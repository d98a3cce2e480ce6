"""Writers formatting sequences, mappings and exceptions to the console streams.

Notes
-----
* All writers are line oriented and terminate their last line with '\\n'.
* The dictionary dump is JSON-like but not strict JSON - only string values
  are quoted, every other value is written via `str`.
"""
import logging
import traceback
from typing import Any, Callable, Iterable, Mapping

from array_console.utils.streams import ConsoleStreams, resolve_streams

logger = logging.getLogger(__name__)

TRACE_LOGGER_NAME = 'array_console.trace'

trace_logger = logging.getLogger(TRACE_LOGGER_NAME)


def write_enumerable(item_format: str, items: Iterable[Any], streams: ConsoleStreams=None) -> None:
    """Write each item on its own line, formatted with `item_format`.

    Parameters
    ----------
    item_format : string
        Format string with a single positional placeholder, such as '{}' or
        '{:>8.2f}'
    items : iterable
        Items to write, in iteration order
    streams : ConsoleStreams, default None
        Streams to write to, the process-wide default if None
    """
    output = resolve_streams(streams).output
    for item in items:
        output.write(item_format.format(item) + '\n')


def dump_array(items: Iterable[Any], streams: ConsoleStreams=None) -> None:
    """Write items as '[e0, e1, ..., en]' on a single line.

    Examples
    --------
    >>> import io
    >>> streams = ConsoleStreams(output=io.StringIO())
    >>> dump_array([1, 2, 3], streams)
    >>> streams.output.getvalue()
    '[1, 2, 3]\\n'
    """
    output = resolve_streams(streams).output
    output.write('[' + ', '.join(str(item) for item in items) + ']\n')


def _format_value(value: Any) -> str:
    return '"{}"'.format(value) if isinstance(value, str) else str(value)


def dump_dictionary(mapping: Mapping[Any, Any], streams: ConsoleStreams=None) -> None:
    """Write mapping as a brace delimited block with one "key":value entry per line.

    Entries are written in the mapping's iteration order (insertion order for
    a dict), tab indented, with a comma after every entry but the last.

    Examples
    --------
    >>> import io
    >>> streams = ConsoleStreams(output=io.StringIO())
    >>> dump_dictionary({'a': 1, 'b': 'x'}, streams)
    >>> streams.output.getvalue()
    '{\\n\\t"a":1,\\n\\t"b":"x"\\n}\\n'
    """
    output = resolve_streams(streams).output
    entries = ['\t"{}":{}'.format(key, _format_value(value)) for key, value in mapping.items()]
    output.write('{\n')
    if entries:
        output.write(',\n'.join(entries) + '\n')
    output.write('}\n')


def dump_error(error: BaseException, to_stdout: bool=False, to_debug_or_trace: bool=False,
               streams: ConsoleStreams=None) -> None:
    """Write the full description of an exception to standard error.

    Parameters
    ----------
    error : exception
        Exception to dump, with its traceback if it has been raised
    to_stdout : boolean, default False
        If True, also write the description to standard output
    to_debug_or_trace : boolean, default False
        If True, also log the description to the 'array_console.trace'
        logger, provided that logger is enabled for DEBUG records
    streams : ConsoleStreams, default None
        Streams to write to, the process-wide default if None

    Notes
    -----
    * Nothing is raised from here - failures of the streams themselves are
      reported through `logging` and otherwise ignored, since this is where
      errors go rather than where they come from.
    * Each sink is written independently, so a broken output stream does not
      keep the description from reaching the error stream.
    """
    description = _describe_error(error)
    streams_ = resolve_streams(streams)
    if to_stdout:
        _write_quietly(streams_.output.write, description, 'output')
    if to_debug_or_trace and trace_logger.isEnabledFor(logging.DEBUG):
        _write_quietly(trace_logger.debug, description.rstrip('\n'), 'trace')
    _write_quietly(streams_.error.write, description, 'error')


def _describe_error(error: BaseException) -> str:
    """Return traceback text of error, or just its type name if that cannot be built."""
    try:
        return ''.join(traceback.format_exception(type(error), error, error.__traceback__))
    except Exception:
        logger.exception('Failed to format %s.', type(error).__name__)
        return type(error).__name__ + '\n'


def _write_quietly(write: Callable[[str], Any], text: str, sink_name: str) -> None:
    """Write text with the given callable, logging instead of raising on failure."""
    try:
        write(text)
    except Exception:
        logger.exception('Failed to dump error description to %s.', sink_name)
