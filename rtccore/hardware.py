"""Process CPU usage sampling."""

from __future__ import annotations

import os
import time
from typing import Callable, Optional, Tuple

__all__ = ["HardwareInfo"]

# A sample is (elapsed wall time, system CPU time, user CPU time), in seconds.
Sample = Tuple[float, float, float]


def _default_clock() -> Sample:
    times = os.times()
    return time.monotonic(), times.system, times.user


class HardwareInfo:
    """Tracks CPU time used by this process between successive readings."""

    def __init__(
        self,
        cores: Optional[int] = None,
        clock: Optional[Callable[[], Sample]] = None,
    ) -> None:
        if cores is None:
            cores = os.cpu_count() or 1
        if cores < 1:
            raise ValueError(f"core count must be positive: {cores}")
        self._cores = cores
        self._clock = clock or _default_clock
        self._last_wall, self._last_system, self._last_user = self._clock()

    def cpu_usage(self) -> float:
        """Percentage of total CPU capacity used since the previous reading.

        Returns -1.0 when the clocks did not advance or went backwards.
        """
        wall, system, user = self._clock()
        if wall <= self._last_wall or system < self._last_system or user < self._last_user:
            percent = -1.0
        else:
            used = (system - self._last_system) + (user - self._last_user)
            percent = used / (wall - self._last_wall) / self._cores * 100
        self._last_wall, self._last_system, self._last_user = wall, system, user
        return percent

    def core_count(self) -> int:
        """Number of processors the usage is spread over."""
        return self._cores