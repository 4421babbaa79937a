"""Temperature logger: validate readings and report their count and average."""

from .app import DailyTempsApp, EntryOutcome, LoopState
from .statistics import TemperatureStatistics
from .validator import TemperatureValidator

__all__ = [
    "DailyTempsApp",
    "EntryOutcome",
    "LoopState",
    "TemperatureStatistics",
    "TemperatureValidator",
]
