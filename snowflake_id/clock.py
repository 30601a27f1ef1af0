import abc
import time


class Clock(abc.ABC):
    """Milliseconds since the UTC epoch. Must be thread safe."""

    @abc.abstractmethod
    def now(self) -> int:
        pass


class SystemClock(Clock):
    def now(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock(Clock):
    def __init__(self, millis: int) -> None:
        self.millis = millis

    def now(self) -> int:
        return self.millis

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.millis})"
