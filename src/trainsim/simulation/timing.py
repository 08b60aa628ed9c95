"""Timing utilities for the benchmark harness."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field


def _format_seconds(seconds: float) -> str:
    whole = int(seconds)
    nanos = round((seconds - whole) * 1e9)
    if nanos >= 1_000_000_000:
        whole += 1
        nanos -= 1_000_000_000
    return f"{whole}.{nanos:09d}"


@dataclass
class Timing:
    """Minimum, maximum and total of the durations passed to ``update``.

    When more than one duration has been recorded ``str()`` shows min, max,
    average and total; otherwise only the total.
    """

    min: float = float("inf")
    max: float = 0.0
    total: float = 0.0
    count: int = 0

    def update(self, seconds: float) -> None:
        """Record one duration in seconds."""
        if seconds < self.min:
            self.min = seconds
        if seconds > self.max:
            self.max = seconds
        self.total += seconds
        self.count += 1

    @property
    def avg(self) -> float:
        return self.total / self.count if self.count else 0.0

    def __str__(self) -> str:
        if self.count > 1:
            return (
                f"min: {_format_seconds(self.min)}\n"
                f"max: {_format_seconds(self.max)}\n"
                f"avg: {_format_seconds(self.avg)}\n"
                f"tot: {_format_seconds(self.total)}"
            )
        return f"total: {_format_seconds(self.total)}"


@dataclass
class LogTimer:
    """Signals when at least ``interval`` seconds have passed since the last signal."""

    interval: float = 10.0
    clock: Callable[[], float] = time.monotonic
    last: float = field(init=False)

    def __post_init__(self):
        self.last = self.clock()

    def update(self) -> bool:
        """Return True (and restart the interval) once it has elapsed."""
        now = self.clock()
        if now - self.last >= self.interval:
            self.last = now
            return True
        return False
