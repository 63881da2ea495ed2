"""Exporter name, version and build banner."""

import platform

EXPORTER_NAME = "forecast_solar_exporter"
VERSION = "0.1.0"


def version_banner() -> str:
    return (
        f"{EXPORTER_NAME}, version {VERSION} "
        f"(python: {platform.python_version()}, "
        f"implementation: {platform.python_implementation()})"
    )


def user_agent() -> str:
    return f"{EXPORTER_NAME}/{VERSION}"
