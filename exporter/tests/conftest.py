"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from exporter.config.schema import ExporterConfig, PlaneConfig
from exporter.metrics.store import ForecastStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> ExporterConfig:
    return ExporterConfig()


@pytest.fixture
def plane() -> PlaneConfig:
    return PlaneConfig(latitude=54.9, longitude=25.3, declination=45, azimuth=0, kwp=10)


@pytest.fixture
def store() -> ForecastStore:
    return ForecastStore()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "plane": {"latitude": 52.52, "longitude": 13.4, "kwp": 6.5},
        "ops": {"poll_interval_seconds": 900},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def estimate_payload() -> dict:
    with open(FIXTURE_DIR / "forecast_solar_estimate.json") as f:
        return json.load(f)
