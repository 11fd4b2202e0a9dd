"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from getnet_extract.api.routes import extracts, health
from getnet_extract.core.config import AppSettings
from getnet_extract.core.logging_setup import configure_logging
from getnet_extract.core.protocols import IFileStore
from getnet_extract.persistence import create_file_store
from getnet_extract.services.reader import ExtractReader


def create_app(
    settings: AppSettings | None = None,
    file_store: IFileStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``file_store`` defaults to the S3 store built from ``settings``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings)
        store = file_store or create_file_store(app_settings)
        app.state.settings = app_settings
        app.state.reader = ExtractReader.from_settings(app_settings, store)
        yield

    app = FastAPI(
        title="Getnet Extract Decoder",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(extracts.router, prefix="/extracts")
    return app
