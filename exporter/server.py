"""Metrics HTTP server: FastAPI app exposing the registry on /metrics."""

import logging

import uvicorn
from fastapi import FastAPI, Request, Response
from prometheus_client import CollectorRegistry
from prometheus_client.exposition import choose_encoder

from exporter.config.schema import ServerConfig
from exporter.version import VERSION

logger = logging.getLogger(__name__)

METRICS_PATH = "/metrics"


def create_app(registry: CollectorRegistry) -> FastAPI:
    app = FastAPI(
        title="Forecast.Solar Exporter",
        version=VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get(METRICS_PATH)
    def metrics(request: Request) -> Response:
        """Collect every registered metric and render it for the scraper."""
        encoder, content_type = choose_encoder(request.headers.get("accept", ""))
        return Response(content=encoder(registry), media_type=content_type)

    return app


def serve(app: FastAPI, server: ServerConfig, log_level: str = "info") -> None:
    """Run the app until uvicorn receives SIGINT/SIGTERM."""
    logger.info("Listening on %s (%s)", server.listen_address, METRICS_PATH)
    uvicorn.run(app, host=server.host, port=server.port, log_level=log_level.lower())
