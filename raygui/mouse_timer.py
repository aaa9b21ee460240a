"""Timing of mouse clicks to tell quick clicks from drags."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

QUICK_CLICK_MS = 300
_NS_PER_MS = 1_000_000


@dataclass
class MouseTimer:
    """Measures how long a mouse button was held down.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    clock: Callable[[], int] = field(default=time.monotonic_ns, repr=False)
    started: bool = False
    last_click_duration: int = 0
    _start_ns: int = field(default=0, repr=False)

    def was_quick_click(self) -> bool:
        """True if the last click lasted less than 300 ms."""
        return self.last_click_duration < QUICK_CLICK_MS

    def was_started(self) -> bool:
        """True while the timer is running."""
        return self.started

    def start(self) -> None:
        """Start timing, unless already started."""
        if not self.started:
            self._start_ns = self.clock()
            self.started = True

    def end(self) -> None:
        """Stop timing and record the click duration in milliseconds."""
        self.last_click_duration = self.duration_ms()
        self.started = False

    def duration_ms(self) -> int:
        """Milliseconds elapsed since the timer was started."""
        return (self.clock() - self._start_ns) // _NS_PER_MS