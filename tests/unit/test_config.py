"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from getnet_extract.core.config import AppSettings, DecoderConfig, S3Config


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.decoder.date_policy == "lenient"
    assert settings.s3.prefix == "getnet/"


def test_decoder_config_defaults():
    config = DecoderConfig()
    assert config.encoding == "latin-1"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GETNET_S3_BUCKET", "acme-extracts")
    monkeypatch.setenv("GETNET_DECODER_DATE_POLICY", "strict")
    assert S3Config().bucket == "acme-extracts"
    assert DecoderConfig().date_policy == "strict"
