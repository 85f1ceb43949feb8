"""Logging helpers for long-running normal form computations.
"""

import logging
import time
from typing import Optional


class DeltaTimeFormatter(logging.Formatter):
    """Adds an attribute `delta` to each :class:`.logging.LogRecord`, which
    is the time of the record relative to a reference time, formatted as
    ``h:mm:ss.mmm``. The reference time is reset at the beginning of each
    normal form computation.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo.delta')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time() - 62.5)
    >>> logger.warning('distributing')  # doctest: +ELLIPSIS
    0:01:02.5...: distributing
    """

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt, datefmt)
        self._reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        record.delta = self.format_delta(record.created - self._reference_time)
        return super().format(record)

    @staticmethod
    def format_delta(seconds: float) -> str:
        """Format a nonnegative timespan given in `seconds`. Negative
        timespans, which can arise from clock adjustments, count as 0.

        >>> DeltaTimeFormatter.format_delta(3723.25)
        '1:02:03.250'
        >>> DeltaTimeFormatter.format_delta(-1.0)
        '0:00:00.000'
        """
        minutes, seconds = divmod(max(seconds, 0.0), 60)
        hours, minutes = divmod(int(minutes), 60)
        return f'{hours}:{minutes:02}:{seconds:06.3f}'

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._reference_time = reference_time


class ProgressRate:
    """Decides whether a periodic progress message is due. Only messages
    guarded by :meth:`due` are throttled. The first message after
    :meth:`restart` is always due.

    >>> progress = ProgressRate()
    >>> progress.restart(3600.0)
    >>> [progress.due() for _ in range(3)]
    [True, False, False]
    >>> progress.restart(0.0)
    >>> [progress.due() for _ in range(3)]
    [True, True, True]
    """

    def __init__(self, rate: float = 0.0) -> None:
        self.restart(rate)

    def due(self) -> bool:
        """Whether at least :attr:`rate` seconds have passed since the last
        time a message was due. If so, the current time is remembered.
        """
        t = time.time()
        if self._last_log is None or t - self._last_log >= self.rate:
            self._last_log = t
            return True
        return False

    def restart(self, rate: float) -> None:
        """Set the minimal timespan between two due messages to `rate`
        seconds and forget about earlier messages.
        """
        self.rate = rate
        self._last_log: Optional[float] = None


class Timer:
    """Measures the wall time in seconds since creation or the last
    :meth:`reset`.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
