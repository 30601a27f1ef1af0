from snowflake_id.builder import ABSENT, SnowflakeBuilder, SnowflakeConfig
from snowflake_id.clock import Clock, FixedClock, SystemClock
from snowflake_id.codec import MAX_ELAPSED, DecodedId, decode, encode
from snowflake_id.config import Settings
from snowflake_id.errors import (
    ConfigurationError,
    GenerationError,
    MissingRequiredField,
    SequenceExhausted,
    SnowflakeError,
    TimeLimitExceeded,
)
from snowflake_id.generator import Snowflake

__all__ = [
    "ABSENT",
    "Clock",
    "ConfigurationError",
    "DecodedId",
    "FixedClock",
    "GenerationError",
    "MAX_ELAPSED",
    "MissingRequiredField",
    "SequenceExhausted",
    "Settings",
    "Snowflake",
    "SnowflakeBuilder",
    "SnowflakeConfig",
    "SnowflakeError",
    "SystemClock",
    "TimeLimitExceeded",
    "decode",
    "encode",
]
