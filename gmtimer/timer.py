"""Stopwatch timers that report elapsed time to the terminal or a log file."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from types import TracebackType
from typing import TextIO

from gmtimer.output import log_output, std_output

DEFAULT_FORMAT = "[{time}] ({label}) {duration} seconds."
DEFAULT_LOG_FILE = os.path.join(".", "timer.log")


class ManualTimer:
    """A timer started and stopped by explicit calls.

    The report is emitted by :meth:`report`, or automatically when a ``with``
    block around the timer ends. ``mode`` is ``"std"`` (green line on the
    terminal) or ``"log"`` (appended to ``dst``, or ``./timer.log`` when
    ``dst`` is ``"none"``); any other mode reports nothing.
    """

    def __init__(
        self,
        label: str = "timer",
        mode: str = "std",
        fmt: str = DEFAULT_FORMAT,
        dst: str = "none",
        precision: int = 6,
        *,
        stream: TextIO | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.label = label
        self.mode = mode
        self.fmt = fmt
        self.dst = dst
        self.precision = precision
        self.stream = stream
        self._clock = clock
        self._start_ns = 0
        self._end_ns = 0

    def start(self) -> None:
        """Record the starting instant."""
        self._start_ns = self._clock()

    def end(self) -> None:
        """Record the finishing instant."""
        self._end_ns = self._clock()

    def duration_us(self) -> int:
        """Whole microseconds between start and end, truncated toward zero."""
        elapsed = self._end_ns - self._start_ns
        if elapsed >= 0:
            return elapsed // 1000
        return -((-elapsed) // 1000)

    def report(self) -> str | None:
        """Emit the report according to the mode and return the line written."""
        duration = self.duration_us()
        if self.mode == "std":
            return std_output(
                self.label, duration, self.precision, self.fmt, self.stream
            )
        if self.mode == "log":
            target = DEFAULT_LOG_FILE if self.dst == "none" else self.dst
            return log_output(self.label, duration, self.precision, target, self.fmt)
        return None

    def __enter__(self) -> ManualTimer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.report()
        return False


class AutoTimer(ManualTimer):
    """A timer that measures the ``with`` block it guards and then reports."""

    def __init__(
        self,
        label: str = "timer",
        mode: str = "std",
        fmt: str = DEFAULT_FORMAT,
        dst: str = "none",
        precision: int = 6,
        *,
        stream: TextIO | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        super().__init__(
            label, mode, fmt, dst, precision, stream=stream, clock=clock
        )
        self.start()

    def __enter__(self) -> AutoTimer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.end()
        self.report()
        return False