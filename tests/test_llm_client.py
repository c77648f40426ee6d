"""Tests for the upstream LLM clients and their error mapping."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from conftest import completion_body, make_gateway
from rfp_gateway.core.errors import (
    ConfigurationError,
    QuotaExhaustedError,
    RateLimitError,
    UpstreamError,
)
from rfp_gateway.services.llm_client import GeminiLLM, LLMConfig, build_llm


class TestGatewayLLM:
    def test_sends_two_message_prompt_with_bearer_key(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion_body("A summary"))

        out = make_gateway(handler).complete("system text", "user text")

        assert out == "A summary"
        assert seen["url"] == "https://gateway.test/v1/chat/completions"
        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["model"] == "google/gemini-2.5-flash"
        assert seen["body"]["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]
        assert "temperature" not in seen["body"]

    def test_429_is_rate_limit_without_retry(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(429, json={"error": {"message": "slow down"}})

        with pytest.raises(RateLimitError) as exc:
            make_gateway(handler).complete("s", "u")

        assert len(calls) == 1
        assert "Rate limit exceeded" in str(exc.value)

    def test_402_is_quota_exhausted(self):
        handler = lambda request: httpx.Response(402, json={"error": {"message": "pay up"}})
        with pytest.raises(QuotaExhaustedError) as exc:
            make_gateway(handler).complete("s", "u")
        assert "credits exhausted" in str(exc.value)

    @pytest.mark.parametrize("status", [400, 401, 500, 503])
    def test_other_status_is_upstream_error(self, status):
        handler = lambda request: httpx.Response(status, json={"error": {"message": "nope"}})
        with pytest.raises(UpstreamError) as exc:
            make_gateway(handler).complete("s", "u")
        assert str(status) in str(exc.value)

    def test_connection_failure_is_upstream_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamError):
            make_gateway(handler).complete("s", "u")

    def test_empty_completion_is_upstream_error(self):
        handler = lambda request: httpx.Response(200, json=completion_body(""))
        with pytest.raises(UpstreamError):
            make_gateway(handler).complete("s", "u")

    def test_html_page_with_200_is_upstream_error(self):
        handler = lambda request: httpx.Response(
            200, text="<html><body>Down for maintenance</body></html>", headers={"content-type": "text/html"}
        )
        with pytest.raises(UpstreamError):
            make_gateway(handler).complete("s", "u")

    @pytest.mark.parametrize(
        "body",
        [
            {"id": "chatcmpl-test", "object": "chat.completion", "created": 0, "model": "m"},
            {"id": "chatcmpl-test", "object": "chat.completion", "created": 0, "model": "m",
             "choices": [{"index": 0, "message": None, "finish_reason": "stop"}]},
        ],
    )
    def test_missing_choices_or_message_is_upstream_error(self, body):
        handler = lambda request: httpx.Response(200, json=body)
        with pytest.raises(UpstreamError):
            make_gateway(handler).complete("s", "u")


class TestGeminiLLM:
    def test_strips_gateway_prefix_and_returns_text(self):
        client = MagicMock()
        client.models.generate_content.return_value = MagicMock(text="Gemini says hi")

        llm = GeminiLLM(api_key="g-key", model="google/gemini-2.5-flash", client=client)

        assert llm.complete("sys", "usr") == "Gemini says hi"
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "usr"

    def test_resource_exhausted_maps_to_rate_limit(self):
        from google.genai import errors

        client = MagicMock()
        client.models.generate_content.side_effect = errors.ClientError(
            429, {"error": {"code": 429, "message": "Resource exhausted", "status": "RESOURCE_EXHAUSTED"}}
        )
        llm = GeminiLLM(api_key="g-key", model="gemini-2.5-flash", client=client)

        with pytest.raises(RateLimitError):
            llm.complete("sys", "usr")


class TestBuildLLM:
    def test_missing_gateway_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            build_llm(LLMConfig(provider="gateway", model="m", base_url="https://x/v1", api_key=None))

    def test_missing_gemini_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            build_llm(LLMConfig(provider="gemini", model="m", gemini_api_key=""))

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError):
            build_llm(LLMConfig(provider="carrier-pigeon", model="m", api_key="k"))
