"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

DatePolicy = Literal["lenient", "strict"]


class S3Config(BaseSettings):
    """S3 extract storage configuration."""

    model_config = {"env_prefix": "GETNET_S3_"}

    bucket: str = "getnet-extracts"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    prefix: str = "getnet/"


class DecoderConfig(BaseSettings):
    """Extract decoding behaviour."""

    model_config = {"env_prefix": "GETNET_DECODER_"}

    date_policy: DatePolicy = "lenient"
    encoding: str = "latin-1"  # single-byte so offsets stay byte offsets


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "GETNET_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    s3: S3Config = S3Config()
    decoder: DecoderConfig = DecoderConfig()
