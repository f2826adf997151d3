"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from runway_gateway.api.middleware import MetricsMiddleware, RequestIDMiddleware
from runway_gateway.api.v1 import forecast, scenario
from runway_gateway.config import settings
from runway_gateway.infrastructure.observability.logging import setup_logging

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Runway Gateway",
        description="Monte Carlo cash runway forecasts and what-if spend scenarios",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(forecast.router, prefix="/v1", tags=["forecasts"])
    app.include_router(scenario.router, prefix="/v1", tags=["scenarios"])

    return app


app = create_app()
