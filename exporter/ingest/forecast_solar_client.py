"""forecast.solar estimate API client."""

import logging
from decimal import Decimal

import httpx

from exporter.config.schema import FORECAST_SOLAR_BASE_URL, PlaneConfig
from exporter.ingest.errors import DecodeError, FetchNetworkError, UpstreamStatusError
from exporter.version import user_agent as default_user_agent

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ForecastSolarClient:
    def __init__(
        self,
        base_url: str = FORECAST_SOLAR_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = default_user_agent(),
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def estimate_url(self, plane: PlaneConfig) -> str:
        return (
            f"{self.base_url}/estimate/"
            f"{_fmt(plane.latitude)}/{_fmt(plane.longitude)}/"
            f"{_fmt(plane.declination)}/{_fmt(plane.azimuth)}/{_fmt(plane.kwp)}"
        )

    def get_estimate(self, plane: PlaneConfig) -> dict:
        """Fetch the production estimate for one plane.

        Makes exactly one request; retrying is left to the poll loop.
        Raises FetchNetworkError, UpstreamStatusError or DecodeError.
        """
        url = self.estimate_url(plane)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            raise FetchNetworkError(f"request to {url} failed: {e}") from e

        if resp.status_code != 200:
            raise UpstreamStatusError(resp.status_code, resp.reason_phrase)

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"invalid JSON from {url}: {e}") from e

        logger.debug("Fetched estimate from %s", url)
        return data


def _fmt(value: float) -> str:
    """Render a path parameter as a plain decimal.

    Whole numbers lose their ``.0``; small values never use an exponent.
    """
    if value == 0:
        return "0"
    return format(Decimal(repr(float(value))).normalize(), "f")
