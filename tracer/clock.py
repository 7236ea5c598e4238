"""
Trace Clock - elapsed time prefix for trace lines
"""

import time
from typing import Callable, Tuple


class TraceClock:
    """
    Monotonic clock measuring time since the last reset.
    
    Args:
        now_ns: Monotonic time source in nanoseconds
    """
    
    def __init__(self, now_ns: Callable[[], int] = time.monotonic_ns):
        self._now_ns = now_ns
        self._base_ns = now_ns()
    
    def reset(self) -> None:
        """Capture "now" as the new epoch."""
        self._base_ns = self._now_ns()
    
    def elapsed_us(self) -> int:
        """Microseconds elapsed since the epoch."""
        return (self._now_ns() - self._base_ns) // 1000
    
    def split(self) -> Tuple[bool, int, int]:
        """Elapsed time as (negative, whole seconds, microsecond remainder)."""
        t = self.elapsed_us()
        sec, usec = divmod(abs(t), 1_000_000)
        return t < 0, sec, usec
    
    def format(self) -> str:
        negative, sec, usec = self.split()
        sign = "-" if negative else ""
        return f"t={sign}{sec}.{usec:06d}"
