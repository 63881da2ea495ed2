"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

FORECAST_SOLAR_BASE_URL = "https://api.forecast.solar"
DEFAULT_LISTEN_ADDRESS = ":9111"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class PlaneConfig(BaseModel):
    """Location and orientation of the solar plane being forecast."""

    model_config = {"extra": "forbid"}

    latitude: float = Field(default=54.9, ge=-90.0, le=90.0)
    longitude: float = Field(default=25.3, ge=-180.0, le=180.0)
    declination: float = Field(default=45.0, ge=0.0, le=90.0)  # 0 = horizontal, 90 = vertical
    azimuth: float = Field(default=0.0, ge=-90.0, le=90.0)  # West = 90, South = 0, East = -90
    kwp: float = Field(default=10.0, gt=0.0)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = FORECAST_SOLAR_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=60.0)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {value!r}")
        return value.rstrip("/")


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    listen_address: str = DEFAULT_LISTEN_ADDRESS

    @field_validator("listen_address")
    @classmethod
    def _check_listen_address(cls, value: str) -> str:
        parse_listen_address(value)
        return value

    @property
    def host(self) -> str:
        return parse_listen_address(self.listen_address)[0]

    @property
    def port(self) -> int:
        return parse_listen_address(self.listen_address)[1]


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    poll_interval_seconds: int = Field(default=3600, ge=1)
    log_level: LogLevel = LogLevel.INFO


class ExporterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    plane: PlaneConfig = PlaneConfig()
    api: ApiConfig = ApiConfig()
    server: ServerConfig = ServerConfig()
    ops: OpsConfig = OpsConfig()


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host (``":9111"``) binds every interface. IPv6 hosts are
    given in brackets, e.g. ``"[::1]:9111"``.
    """
    host, sep, port_str = address.rpartition(":")
    if not sep:
        raise ValueError(f"listen address must be host:port, got {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"invalid port in listen address {address!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"port out of range in listen address {address!r}")
    return host or "0.0.0.0", port
