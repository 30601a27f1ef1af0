import threading
from typing import Iterable

import pytest

from snowflake_id import Clock


class SteppingClock(Clock):
    """Returns the given readings in order, then repeats the last one.

    build() takes the first reading for its base time check.
    """

    def __init__(self, readings: Iterable[int]) -> None:
        self._readings = list(readings)
        self._index = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            reading = self._readings[min(self._index, len(self._readings) - 1)]
            self._index += 1
            return reading


@pytest.fixture
def stepping_clock():
    return SteppingClock
