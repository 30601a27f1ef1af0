from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from snowflake_id.clock import Clock, SystemClock
from snowflake_id.codec import SEQUENCE_AND_ID_BITS
from snowflake_id.errors import ConfigurationError, MissingRequiredField

if TYPE_CHECKING:
    from snowflake_id.generator import Snowflake

DEFAULT_ID_BITS = 16
DEFAULT_SEQUENCE_BITS = 6

_logger = logging.getLogger(__name__)


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


# Marks a required option that has not been provided. Distinct from None.
ABSENT = _Absent()


@dataclass(frozen=True)
class SnowflakeConfig:
    base_time: int
    instance_id: int
    id_bits: int
    sequence_bits: int
    clock: Clock = field(compare=False)

    @property
    def max_sequence(self) -> int:
        return (1 << self.sequence_bits) - 1


class SnowflakeBuilder:
    """Collects generator options and validates them on build."""

    def __init__(
        self,
        base_time: Union[int, _Absent] = ABSENT,
        instance_id: Union[int, _Absent] = ABSENT,
    ) -> None:
        self.base_time = base_time
        self.instance_id = instance_id
        self.id_bits = DEFAULT_ID_BITS
        self.sequence_bits = DEFAULT_SEQUENCE_BITS
        self.clock: Clock = SystemClock()

    def with_base_time(self, base_time: int) -> SnowflakeBuilder:
        self.base_time = base_time
        return self

    def with_instance_id(self, instance_id: int) -> SnowflakeBuilder:
        self.instance_id = instance_id
        return self

    def with_id_bits(self, id_bits: int) -> SnowflakeBuilder:
        self.id_bits = id_bits
        return self

    def with_sequence_bits(self, sequence_bits: int) -> SnowflakeBuilder:
        self.sequence_bits = sequence_bits
        return self

    def with_clock(self, clock: Clock) -> SnowflakeBuilder:
        self.clock = clock
        return self

    def build_config(self) -> SnowflakeConfig:
        if self.base_time is ABSENT:
            raise MissingRequiredField("base_time", "baseTime must be set")
        if self.instance_id is ABSENT:
            raise MissingRequiredField("instance_id", "id must be set")

        fields = {
            "baseTime": self.base_time,
            "id": self.instance_id,
            "idBits": self.id_bits,
            "sequenceBits": self.sequence_bits,
        }
        for name, value in fields.items():
            _check_integer(value, name)
        if not callable(getattr(self.clock, "now", None)):
            raise ConfigurationError("clock must provide now()")
        for name, value in fields.items():
            _check_non_negative(value, name)

        if self.clock.now() < self.base_time:
            raise ConfigurationError("baseTime is in the future")

        if self.id_bits + self.sequence_bits != SEQUENCE_AND_ID_BITS:
            raise ConfigurationError(
                f"sequence and id bits must sum to {SEQUENCE_AND_ID_BITS}"
            )
        self._check_instance_id()

        return SnowflakeConfig(
            base_time=self.base_time,
            instance_id=self.instance_id,
            id_bits=self.id_bits,
            sequence_bits=self.sequence_bits,
            clock=self.clock,
        )

    def build(self) -> Snowflake:
        from snowflake_id.generator import Snowflake

        config = self.build_config()
        _logger.debug(
            f"build snowflake (instance_id={config.instance_id}, id_bits={config.id_bits}, sequence_bits={config.sequence_bits})"
        )
        return Snowflake(config)

    def _check_instance_id(self) -> None:
        if self.id_bits == 0:
            if self.instance_id != 0:
                raise ConfigurationError("id must be 0 if idBits is 0")
        elif self.instance_id >= (1 << self.id_bits):
            raise ConfigurationError(
                f"id {self.instance_id} exceeds max possible value for {self.id_bits} id bits"
            )


def _check_integer(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative")
