"""Establish imports and start the execution timer for array_console.

Let user know if any core dependencies or array_console packages are missing,
the import checking also allows us to catch import errors early on, rather
than upon use of specific modules

Notes
-----
* `EXECUTION_TIMER` is started exactly once, when the package is first
  imported, and is never stopped or reset here
* The library installs only a `logging.NullHandler`; applications configure
  handlers themselves
"""
import logging

__version__ = '0.1.0'
__all__ = ('array_console.utils', 'array_console.core', 'array_console.interface')

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _run_initial_setup(debug_mode: bool=False) -> None:
    """Ensure successful imports and configure the trace sink.

    All imports are done inside this functions, as to avoid polluting package
    namespace

    Notes
    -----
    * Perform the following checks and setups:
        * Check that the core dependency (numpy) is present
        * Check that every array_console package imports
        * If `debug_mode`=True, enable DEBUG records on the trace logger used
          by `dump_error(..., to_debug_or_trace=True)`
    """
    import importlib

    unsuccessful_imports = []
    for name in ('numpy',) + __all__:
        try:
            importlib.import_module(name)
        except ImportError:
            unsuccessful_imports.append(name)
    if unsuccessful_imports:
        raise ImportError(f'Failed to import modules - {tuple(unsuccessful_imports)}.')

    if debug_mode:
        from array_console.core.writers import TRACE_LOGGER_NAME
        logging.getLogger(TRACE_LOGGER_NAME).setLevel(logging.DEBUG)


# run initial setup, start the timer, and import public APIs
_run_initial_setup(debug_mode=False)

from array_console.utils.timing import ExecutionTimer
EXECUTION_TIMER = ExecutionTimer().start()

from array_console.core.input_validation import InvalidArgumentError
from array_console.core.numeric_parsing import NUMERIC_KINDS, ParsedValue, parse_numeric
from array_console.core.readers import CHAR_SIZE, read_into, read_array, read_bytes
from array_console.core.writers import (TRACE_LOGGER_NAME, write_enumerable, dump_array,
                                        dump_dictionary, dump_error)
from array_console.core.arrays import INT32_MIN, INT32_MAX, crop, generate_unique_random_numbers
from array_console.utils.streams import (ConsoleStreams, get_default_streams, get_input,
                                         set_input, get_output, get_error)
from array_console.interface import ArrayConsole
