"""Forecast fetcher: polls forecast.solar and updates the forecast store."""

import logging
import math
from datetime import date, datetime
from numbers import Real

from exporter.config.schema import PlaneConfig
from exporter.ingest.errors import DateParseError, ForecastError, UnexpectedShapeError
from exporter.ingest.forecast_solar_client import ForecastSolarClient
from exporter.metrics.store import ForecastStore
from exporter.models.forecast import ForecastPoint

logger = logging.getLogger(__name__)

WATT_HOURS_PER_KWH = 1000.0
MAX_FORECAST_DAYS = 2  # today, tomorrow


class ForecastFetcher:
    def __init__(self, client: ForecastSolarClient, store: ForecastStore, plane: PlaneConfig):
        self.client = client
        self.store = store
        self.plane = plane

    def poll_once(self) -> bool:
        """Run one poll cycle. Returns True if the store was updated.

        Any ForecastError is logged and leaves the store untouched, so
        scrapes keep serving the last good values.
        """
        try:
            raw = self.client.get_estimate(self.plane)
            points = extract_forecast_points(raw)
        except ForecastError as e:
            logger.error("Forecast poll failed (%s): %s", type(e).__name__, e)
            return False

        if not points:
            logger.warning("Forecast response contained no daily entries")
            return True

        snapshot = self.store.update(points)
        logger.info(
            "Forecast updated: today=%s %.3f kWh, tomorrow=%s %.3f kWh",
            snapshot.today.observation_date, snapshot.today.energy_kwh,
            snapshot.tomorrow.observation_date, snapshot.tomorrow.energy_kwh,
        )
        return True


def extract_forecast_points(raw: dict) -> list[ForecastPoint]:
    """Pick today's and tomorrow's totals out of an estimate response.

    Keys of ``result.watt_hours_day`` are sorted; the first is taken as
    today and the second as tomorrow. More than two entries is rejected
    rather than truncated. The whole payload is validated before anything
    is returned, so a failure never yields a partial result.
    """
    if not isinstance(raw, dict):
        raise UnexpectedShapeError(f"expected a JSON object, got {type(raw).__name__}")
    result = raw.get("result")
    if not isinstance(result, dict):
        raise UnexpectedShapeError("response has no 'result' object")
    daily = result.get("watt_hours_day")
    if not isinstance(daily, dict):
        raise UnexpectedShapeError("response has no 'result.watt_hours_day' object")

    if len(daily) > MAX_FORECAST_DAYS:
        raise UnexpectedShapeError(
            f"unexpected entry: got {len(daily)} days, expected at most {MAX_FORECAST_DAYS}"
        )

    points: list[ForecastPoint] = []
    for key in sorted(daily):
        points.append(
            ForecastPoint(
                observation_date=_parse_date(key),
                energy_kwh=_to_kwh(key, daily[key]),
            )
        )
    return points


def _to_kwh(key: str, watt_hours) -> float:
    """Convert a watt-hour total to a finite, non-negative kWh value."""
    if isinstance(watt_hours, bool) or not isinstance(watt_hours, Real):
        raise UnexpectedShapeError(f"invalid watt-hours for {key}: {watt_hours!r}")
    try:
        kwh = watt_hours / WATT_HOURS_PER_KWH
    except OverflowError:
        raise UnexpectedShapeError(f"watt-hours for {key} out of range") from None
    if not math.isfinite(kwh) or kwh < 0:
        raise UnexpectedShapeError(f"invalid watt-hours for {key}: {watt_hours!r}")
    return kwh


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise DateParseError(f"cannot parse forecast date {value!r}: {e}") from e
