"""Temperature range validation."""

from dataclasses import dataclass

from ..config import DEFAULT_MAX_TEMP, DEFAULT_MIN_TEMP


@dataclass(frozen=True)
class TemperatureValidator:
    """Inclusive bounds a reading must fall within to be accepted."""

    min: float = DEFAULT_MIN_TEMP
    max: float = DEFAULT_MAX_TEMP

    def is_valid(self, temperature: float) -> bool:
        # NaN fails both comparisons, so it is never valid
        return self.min <= temperature <= self.max
