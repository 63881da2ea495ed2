"""Errors raised while fetching and decoding a forecast.

Every one of them abandons the current poll cycle; none is fatal.
"""


class ForecastError(Exception):
    """Base class for per-cycle forecast failures."""


class FetchNetworkError(ForecastError):
    pass


class UpstreamStatusError(ForecastError):
    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"upstream returned {status_code} {reason}".rstrip())


class DecodeError(ForecastError):
    pass


class DateParseError(ForecastError):
    pass


class UnexpectedShapeError(ForecastError):
    pass
