"""Forecast data models."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time


@dataclass(frozen=True)
class ForecastPoint:
    """Energy estimate for one calendar day; unset date means no poll yet."""

    observation_date: date | None = None
    energy_kwh: float = 0.0

    @property
    def timestamp(self) -> float | None:
        """Midnight UTC of the observation date as epoch seconds."""
        if self.observation_date is None:
            return None
        return datetime.combine(self.observation_date, time.min, tzinfo=UTC).timestamp()


@dataclass(frozen=True)
class ForecastSnapshot:
    """Today and tomorrow as published together by one poll."""

    today: ForecastPoint = field(default_factory=ForecastPoint)
    tomorrow: ForecastPoint = field(default_factory=ForecastPoint)
