"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from aevium.interface.api.routes import claims, health
from aevium.util.di.container import create_container, setup_di
from aevium.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    container: AsyncContainer | None = None, instrument: bool = True
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this.

    Args:
        container: DI container; production container when omitted
        instrument: Attach Logfire instrumentation
    """
    if instrument:
        instrument_httpx()

    app_instance = FastAPI(
        title="Aevium Partner API",
        description="Receiving side of signed Aevium invitation claims",
        version="0.1.0",
    )

    if instrument:
        instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(claims.router)

    return app_instance
