"""Running statistics over accepted temperatures."""


class TemperatureStatistics:
    """
    Running sum and count of accepted readings.

    Callers validate before adding; nothing here rejects a value.
    """

    def __init__(self):
        self._sum = 0.0
        self._count = 0

    def add_temperature(self, temperature: float) -> None:
        self._sum += temperature
        self._count += 1

    @property
    def count(self) -> int:
        return self._count

    @property
    def average(self) -> float:
        # NaN on empty input to avoid zero division
        return self._sum / self._count if self._count else float("nan")
