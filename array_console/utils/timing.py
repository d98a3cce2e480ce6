"""Process-wide execution timer."""
import time


class ExecutionTimer(object):

    """Stopwatch measuring execution time from the moment it is started.

    The timer is started once and never stopped or reset; it can only be
    queried.

    Attributes
    ----------
    is_running : boolean
        True once `start` has been called
    """

    def __init__(self):
        self._started_at = None

    def __repr__(self):
        return '{}(elapsed={:.6f}s)'.format(self.__class__.__name__, self.elapsed)

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> 'ExecutionTimer':
        """Start the timer if not already running; later calls do nothing."""
        if self._started_at is None:
            self._started_at = time.perf_counter()
        return self

    @property
    def elapsed(self) -> float:
        """Seconds since the timer was started, 0.0 if never started."""
        if self._started_at is None:
            return 0.0
        return time.perf_counter() - self._started_at

    @property
    def elapsed_milliseconds(self) -> int:
        return int(self.elapsed * 1000)
