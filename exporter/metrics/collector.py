"""Prometheus collectors for the forecast gauges and build info."""

import platform
from collections.abc import Iterator

from prometheus_client import CollectorRegistry, GCCollector, PlatformCollector, ProcessCollector
from prometheus_client.core import GaugeMetricFamily, Metric

from exporter.metrics.store import ForecastStore
from exporter.models.forecast import ForecastPoint
from exporter.version import EXPORTER_NAME, VERSION

TODAY_METRIC = "forecast_solar_today"
TOMORROW_METRIC = "forecast_solar_tomorrow"

_FORECAST_METRICS = (
    (TODAY_METRIC, "Solar harvest forecast for today in kWh", "today"),
    (TOMORROW_METRIC, "Solar harvest forecast for tomorrow in kWh", "tomorrow"),
)


class ForecastCollector:
    """Exposes the stored forecast as gauges stamped with the forecast date."""

    def __init__(self, store: ForecastStore):
        self.store = store

    def describe(self) -> Iterator[Metric]:
        for name, documentation, _ in _FORECAST_METRICS:
            yield GaugeMetricFamily(name, documentation)

    def collect(self) -> Iterator[Metric]:
        snapshot = self.store.snapshot()
        for name, documentation, attr in _FORECAST_METRICS:
            yield _gauge(name, documentation, getattr(snapshot, attr))


class BuildInfoCollector:
    def __init__(self, name: str = EXPORTER_NAME, version: str = VERSION):
        self.metric_name = f"{name}_build_info"
        self.version = version

    def describe(self) -> Iterator[Metric]:
        yield GaugeMetricFamily(self.metric_name, self._documentation())

    def collect(self) -> Iterator[Metric]:
        info = GaugeMetricFamily(
            self.metric_name,
            self._documentation(),
            labels=["version", "pythonversion", "implementation"],
        )
        info.add_metric(
            [self.version, platform.python_version(), platform.python_implementation()],
            1,
        )
        yield info

    def _documentation(self) -> str:
        return (
            "A metric with a constant '1' value labeled by version and python "
            "version from which the exporter was built."
        )


def build_registry(store: ForecastStore, runtime_metrics: bool = True) -> CollectorRegistry:
    """Create a registry holding every metric served on /metrics."""
    registry = CollectorRegistry(auto_describe=True)
    registry.register(ForecastCollector(store))
    registry.register(BuildInfoCollector())
    if runtime_metrics:
        ProcessCollector(registry=registry)
        PlatformCollector(registry=registry)
        GCCollector(registry=registry)
    return registry


def _gauge(name: str, documentation: str, point: ForecastPoint) -> GaugeMetricFamily:
    gauge = GaugeMetricFamily(name, documentation, labels=[])
    # An unset date (no successful poll yet) is exposed without a timestamp.
    gauge.add_metric([], point.energy_kwh, timestamp=point.timestamp)
    return gauge
