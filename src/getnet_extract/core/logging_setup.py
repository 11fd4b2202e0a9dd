"""Process-wide logging set-up driven by AppSettings.log_level."""

from __future__ import annotations

import logging

from getnet_extract.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure the root logger once for the API or CLI entrypoint."""
    if settings is None:
        settings = AppSettings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logging.getLogger("getnet_extract").setLevel(settings.log_level.upper())
