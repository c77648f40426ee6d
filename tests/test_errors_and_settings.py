"""Tests for the status table and settings resolution."""

import pytest

from rfp_gateway.core.errors import (
    ConfigurationError,
    GatewayError,
    QuotaExhaustedError,
    RateLimitError,
    ResponseFormatError,
    UpstreamError,
    ValidationError,
    error_for_upstream_status,
    status_for,
)
from rfp_gateway.core.settings import Settings


@pytest.mark.parametrize(
    "exc,status",
    [
        (ConfigurationError(), 500),
        (ValidationError(), 500),
        (RateLimitError(), 429),
        (QuotaExhaustedError(), 402),
        (UpstreamError(), 500),
        (ResponseFormatError(), 500),
        (GatewayError(), 500),
    ],
)
def test_status_table(exc, status):
    assert status_for(exc) == status


@pytest.mark.parametrize(
    "code,cls",
    [(429, RateLimitError), (402, QuotaExhaustedError), (400, UpstreamError), (500, UpstreamError)],
)
def test_upstream_status_mapping(code, cls):
    assert type(error_for_upstream_status(code)) is cls


def test_legacy_key_env_name(monkeypatch):
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv("LOVABLE_API_KEY", "from-legacy-env")
    assert Settings().LLM_API_KEY == "from-legacy-env"


def test_defaults_from_config_yaml():
    settings = Settings()
    assert settings.llm_provider == "gateway"
    assert settings.llm_model == "google/gemini-2.5-flash"
    assert settings.company_name == "FMEG Solutions Inc."
    assert settings.max_upload_mb == 10
