from typing import Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from snowflake_id.builder import (
    ABSENT,
    DEFAULT_ID_BITS,
    DEFAULT_SEQUENCE_BITS,
    SnowflakeBuilder,
)
from snowflake_id.clock import Clock


class Settings(BaseSettings):
    """Generator options read from ``SNOWFLAKE_*`` environment variables or YAML.

    Only types are checked here. Range checks are left to the builder so that
    settings and code paths fail with the same errors.
    """

    model_config = SettingsConfigDict(env_prefix="SNOWFLAKE_")

    base_time: Optional[int] = None
    instance_id: Optional[int] = None
    id_bits: int = DEFAULT_ID_BITS
    sequence_bits: int = DEFAULT_SEQUENCE_BITS

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "Settings":
        with open(yaml_path) as f:
            data = yaml.load(f, Loader=yaml.FullLoader)
            return cls(**(data or {}))

    def to_builder(self, clock: Optional[Clock] = None) -> SnowflakeBuilder:
        builder = SnowflakeBuilder(
            base_time=ABSENT if self.base_time is None else self.base_time,
            instance_id=ABSENT if self.instance_id is None else self.instance_id,
        )
        builder.with_id_bits(self.id_bits).with_sequence_bits(self.sequence_bits)
        if clock is not None:
            builder.with_clock(clock)
        return builder
