"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from drug_browser import __version__
from drug_browser.api.errors import ApiError, api_error_handler
from drug_browser.api.routes import router
from drug_browser.config import Settings, get_settings
from drug_browser.constants import SECURITY_HEADERS
from drug_browser.data_sources.fda import DrugsFDAClient
from drug_browser.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    app.state.fda_client = DrugsFDAClient(
        api_key=settings.openfda_api_key, base_url=settings.openfda_drugsfda_url
    )
    logger.info("drug-browser %s started", __version__)
    try:
        yield
    finally:
        await app.state.fda_client.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: CORS, security headers, error handler, routes."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Drug Browser API",
        description="Browse and inspect drugs@FDA application records",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response

    app.add_exception_handler(ApiError, api_error_handler)
    app.include_router(router)
    return app


app = create_app()
