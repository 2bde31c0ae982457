"""FastAPI application."""

from fastapi import FastAPI

from topfive.interface.api.routes import health, sections, votes
from topfive.util.di.container import create_container, setup_di
from topfive.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Top Five API",
        description="Vote on links in a section and list the five best",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(sections.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
