class SnowflakeError(Exception):
    pass


class ConfigurationError(SnowflakeError, ValueError):
    pass


class MissingRequiredField(ConfigurationError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class GenerationError(SnowflakeError, RuntimeError):
    pass


class TimeLimitExceeded(GenerationError):
    def __init__(self, elapsed: int) -> None:
        super().__init__("Exceeded the time limit")
        self.elapsed = elapsed


class SequenceExhausted(GenerationError):
    """Clears on the next millisecond. Never retried here."""

    def __init__(self, max_sequence: int) -> None:
        super().__init__(f"Exceeded max sequence {max_sequence}")
        self.max_sequence = max_sequence
