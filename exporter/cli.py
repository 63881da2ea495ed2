"""CLI entry point for the forecast.solar exporter."""

import argparse
import logging

import yaml
from pydantic import ValidationError

from exporter.config.loader import apply_overrides, load_config
from exporter.config.schema import ExporterConfig
from exporter.daemon import PollDaemon
from exporter.ingest.forecast_fetcher import ForecastFetcher
from exporter.ingest.forecast_solar_client import ForecastSolarClient
from exporter.metrics.collector import build_registry
from exporter.metrics.store import ForecastStore
from exporter.server import create_app, serve
from exporter.version import EXPORTER_NAME, version_banner

STOP_TIMEOUT = 15.0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog=EXPORTER_NAME,
        description="Prometheus exporter for forecast.solar production estimates",
    )
    parser.add_argument("--config", default=None, help="Optional config YAML path")
    parser.add_argument(
        "--listen-address", help="The address to listen on for HTTP requests (default :9111)"
    )
    parser.add_argument("--latitude", type=float, help="Latitude of your location")
    parser.add_argument("--longitude", type=float, help="Longitude of your location")
    parser.add_argument(
        "--declination", type=float,
        help="Solar plane declination, 0 = horizontal, 90 = vertical",
    )
    parser.add_argument(
        "--az", type=float, help="Solar plane azimuth, West = 90, South = 0, East = -90"
    )
    parser.add_argument(
        "--kWp", dest="kwp", type=float, help="Solar plane max. peak power in kilo watt"
    )
    parser.add_argument(
        "--poll-interval", type=int, help="Interval in seconds between polls (default 3600)"
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level"
    )
    parser.add_argument(
        "--version", action="store_true", help="Print version information and exit."
    )

    args = parser.parse_args(argv)

    if args.version:
        print(version_banner())
        return 0

    try:
        config = apply_overrides(
            load_config(args.config),
            {
                "server.listen_address": args.listen_address,
                "plane.latitude": args.latitude,
                "plane.longitude": args.longitude,
                "plane.declination": args.declination,
                "plane.azimuth": args.az,
                "plane.kwp": args.kwp,
                "ops.poll_interval_seconds": args.poll_interval,
                "ops.log_level": args.log_level,
            },
        )
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=config.ops.log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    return run(config)


def run(config: ExporterConfig) -> int:
    """Wire the components together and serve until shutdown."""
    logger = logging.getLogger(__name__)
    logger.info("Starting %s", version_banner())

    store = ForecastStore()
    client = ForecastSolarClient(
        base_url=config.api.base_url, timeout=config.api.timeout_seconds
    )
    fetcher = ForecastFetcher(client, store, config.plane)
    daemon = PollDaemon(fetcher, interval=config.ops.poll_interval_seconds)
    app = create_app(build_registry(store))

    daemon.start()
    try:
        serve(app, config.server, log_level=config.ops.log_level.value)
    finally:
        daemon.stop(timeout=STOP_TIMEOUT)
    return 0
