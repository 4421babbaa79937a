"""Read-validate-accumulate loop for the temperature logger."""

import logging
from enum import Enum

from rich.console import Console

from ..config import (
    AVERAGE_MSG,
    DEFAULT_UNIT,
    INVALID_NUMBER_MSG,
    OUT_OF_RANGE_MSG,
    QUIT_SENTINEL,
    TEMP_PROMPT,
    TOTAL_MSG,
)
from ..output import emit, emit_notice
from ..parsing import format_bound, parse_float
from ..sources import LineSource, iter_lines
from .statistics import TemperatureStatistics
from .validator import TemperatureValidator

logger = logging.getLogger(__name__)


class LoopState(Enum):
    READING = "reading"
    DONE = "done"


class EntryOutcome(Enum):
    """What happened to a single line of input."""

    ACCEPTED = "accepted"
    PARSE_FAIL = "parse_fail"
    RANGE_FAIL = "range_fail"
    QUIT = "quit"


def is_quit(line: str | None) -> bool:
    """End of input counts as a quit, same as typing the sentinel."""
    return line is None or line.lower() == QUIT_SENTINEL


class DailyTempsApp:
    """
    Coordinates reading, validating and accumulating temperatures.

    Usage:
        app = DailyTempsApp(ConsoleLineSource(console), TemperatureValidator(),
                            TemperatureStatistics(), console)
        app.run()
    """

    def __init__(
        self,
        source: LineSource,
        validator: TemperatureValidator,
        stats: TemperatureStatistics,
        console: Console,
        unit: str = DEFAULT_UNIT,
    ):
        self.source = source
        self.validator = validator
        self.stats = stats
        self.console = console
        self.unit = unit
        self.state = LoopState.READING

    def process_line(self, line: str | None) -> EntryOutcome:
        """Apply one line of input to the statistics and report any rejection."""
        if is_quit(line):
            return EntryOutcome.QUIT

        temperature = parse_float(line)
        if temperature is None:
            logger.debug("Rejected unparseable entry %r", line)
            emit_notice(self.console, INVALID_NUMBER_MSG, "red")
            return EntryOutcome.PARSE_FAIL

        if not self.validator.is_valid(temperature):
            logger.debug("Rejected out-of-range entry %s", temperature)
            emit_notice(self.console, self.range_message(), "red")
            return EntryOutcome.RANGE_FAIL

        self.stats.add_temperature(temperature)
        logger.debug("Accepted %s (count=%d)", temperature, self.stats.count)
        return EntryOutcome.ACCEPTED

    def range_message(self) -> str:
        return OUT_OF_RANGE_MSG.format(
            min=format_bound(self.validator.min),
            max=format_bound(self.validator.max),
            unit=self.unit,
        )

    def run(self) -> TemperatureStatistics:
        """Loop until the user quits or input runs out, then print the report."""
        self.state = LoopState.READING
        for line in iter_lines(self.source, TEMP_PROMPT):
            if self.process_line(line) is EntryOutcome.QUIT:
                break
        self.state = LoopState.DONE

        self.report()
        return self.stats

    def report(self) -> None:
        emit(self.console)
        emit(self.console, TOTAL_MSG.format(count=self.stats.count))
        emit(self.console, AVERAGE_MSG.format(average=self.stats.average))
