"""Tests for Pydantic config schema validation."""

import pytest
from pydantic import ValidationError

from exporter.config.schema import (
    ApiConfig,
    OpsConfig,
    PlaneConfig,
    ServerConfig,
    parse_listen_address,
)


class TestPlaneConfig:
    def test_defaults_match_classic_flags(self):
        plane = PlaneConfig()
        assert plane.latitude == 54.9
        assert plane.longitude == 25.3
        assert plane.declination == 45
        assert plane.azimuth == 0
        assert plane.kwp == 10

    @pytest.mark.parametrize(
        "field,value",
        [
            ("declination", -1),
            ("declination", 91),
            ("azimuth", -91),
            ("azimuth", 91),
            ("kwp", 0),
            ("latitude", 90.5),
            ("longitude", -181),
        ],
    )
    def test_out_of_range_rejected(self, field: str, value: float):
        with pytest.raises(ValidationError):
            PlaneConfig(**{field: value})

    def test_bounds_inclusive(self):
        plane = PlaneConfig(declination=90, azimuth=-90)
        assert plane.declination == 90
        assert plane.azimuth == -90

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            PlaneConfig(tilt=30)


class TestApiConfig:
    def test_trailing_slash_stripped(self):
        assert ApiConfig(base_url="https://example.com/").base_url == "https://example.com"

    def test_non_http_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(base_url="ftp://example.com")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=0)


class TestServerConfig:
    def test_default_binds_all_interfaces(self):
        server = ServerConfig()
        assert server.host == "0.0.0.0"
        assert server.port == 9111

    def test_invalid_address_rejected(self):
        with pytest.raises(ValidationError):
            ServerConfig(listen_address="localhost")


class TestParseListenAddress:
    @pytest.mark.parametrize(
        "address,expected",
        [
            (":9111", ("0.0.0.0", 9111)),
            ("127.0.0.1:8080", ("127.0.0.1", 8080)),
            ("[::1]:9111", ("::1", 9111)),
        ],
    )
    def test_valid(self, address: str, expected: tuple[str, int]):
        assert parse_listen_address(address) == expected

    @pytest.mark.parametrize("address", ["9111", ":http", ":0", ":70000"])
    def test_invalid(self, address: str):
        with pytest.raises(ValueError):
            parse_listen_address(address)


class TestOpsConfig:
    def test_poll_interval_minimum(self):
        with pytest.raises(ValidationError):
            OpsConfig(poll_interval_seconds=0)

    def test_log_level_enum(self):
        assert OpsConfig(log_level="DEBUG").log_level.value == "DEBUG"
        with pytest.raises(ValidationError):
            OpsConfig(log_level="LOUD")

