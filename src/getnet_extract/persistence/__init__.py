"""Pluggable extract storage behind the IFileStore protocol."""

from __future__ import annotations

from getnet_extract.core.config import AppSettings
from getnet_extract.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings | None = None) -> S3FileStore:
    """Create the S3 file store from application settings."""
    if settings is None:
        settings = AppSettings()

    return S3FileStore(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
    )
