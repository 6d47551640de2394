"""Tests for the startup CORS guard."""

import pytest

from src.product_app.api.http.app import check_cors
from src.product_app.runtime.config.config_data import AppConfig, ConfigData, CORSConfig


def _config(environment: str, allow_credentials: bool) -> ConfigData:
    return ConfigData(
        app=AppConfig(
            environment=environment,
            cors=CORSConfig(origins=["*"], allow_credentials=allow_credentials),
        )
    )


def test_wildcard_with_credentials_rejected_in_production():
    with pytest.raises(RuntimeError, match="CORS misconfigured"):
        check_cors(_config("production", allow_credentials=True))


def test_wildcard_without_credentials_allowed_in_production():
    check_cors(_config("production", allow_credentials=False))


def test_wildcard_with_credentials_allowed_outside_production():
    check_cors(_config("development", allow_credentials=True))
