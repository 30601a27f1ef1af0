from __future__ import annotations

import logging
import threading
from typing import Tuple, Union

from snowflake_id.builder import ABSENT, SnowflakeBuilder, SnowflakeConfig, _Absent
from snowflake_id.clock import Clock
from snowflake_id.codec import MAX_ELAPSED, DecodedId, decode, encode
from snowflake_id.errors import SequenceExhausted, TimeLimitExceeded


class Snowflake:
    """Generates unique, roughly time-ordered 64-bit ids.

    Sequence numbers go to threads in lock acquisition order, not call order.
    A clock that goes backwards keeps ids at the last timestamp seen.
    """

    def __init__(self, config: SnowflakeConfig) -> None:
        self.config = config

        self._lock = threading.Lock()
        self._last_timestamp = config.base_time
        self._sequence = 0
        self._clock_regressed = False
        self._logger = logging.getLogger(
            f"{self.__class__.__name__} ({config.instance_id})"
        )

    @staticmethod
    def builder(
        base_time: Union[int, _Absent] = ABSENT,
        instance_id: Union[int, _Absent] = ABSENT,
    ) -> SnowflakeBuilder:
        return SnowflakeBuilder(base_time=base_time, instance_id=instance_id)

    @property
    def instance_id(self) -> int:
        return self.config.instance_id

    @property
    def base_time(self) -> int:
        return self.config.base_time

    @property
    def id_bits(self) -> int:
        return self.config.id_bits

    @property
    def sequence_bits(self) -> int:
        return self.config.sequence_bits

    @property
    def max_sequence(self) -> int:
        return self.config.max_sequence

    @property
    def clock(self) -> Clock:
        return self.config.clock

    def generate(self) -> int:
        now = self.clock.now()
        elapsed = now - self.base_time
        if elapsed > MAX_ELAPSED:
            raise TimeLimitExceeded(elapsed)
        timestamp, sequence = self._next_sequence(now)
        if sequence > self.max_sequence:
            raise SequenceExhausted(self.max_sequence)
        return encode(
            timestamp - self.base_time,
            sequence,
            self.instance_id,
            self.id_bits,
            self.sequence_bits,
        )

    def decode(self, id_: int) -> DecodedId:
        return decode(id_, self.id_bits, self.sequence_bits)

    def timestamp_of(self, id_: int) -> int:
        """Returns the time (ms since the UTC epoch) at which ``id_`` was issued."""
        return self.base_time + self.decode(id_).elapsed

    def _next_sequence(self, now: int) -> Tuple[int, int]:
        with self._lock:
            if self._last_timestamp < now:
                self._last_timestamp = now
                self._sequence = 0
                self._clock_regressed = False
            elif self._last_timestamp > now and not self._clock_regressed:
                self._clock_regressed = True
                self._logger.warning(
                    f"clock moved backwards from {self._last_timestamp} to {now}. keep issuing ids at {self._last_timestamp}"
                )
            timestamp = self._last_timestamp
            sequence = self._sequence
            self._sequence += 1
        return timestamp, sequence

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_time={self.base_time}, instance_id={self.instance_id}, "
            f"id_bits={self.id_bits}, sequence_bits={self.sequence_bits})"
        )
