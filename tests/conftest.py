"""Shared fixtures for the RFP gateway test suite."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from rfp_gateway.core.settings import Settings, get_settings
from rfp_gateway.dependencies import get_llm
from rfp_gateway.main import app
from rfp_gateway.services.llm_client import GatewayLLM


class FakeLLM:
    """Stands in for the upstream model: returns canned replies in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, system, user):
        self.calls.append({"system": system, "user": user})
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


def completion_body(content):
    """Minimal OpenAI-style chat completion envelope."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "google/gemini-2.5-flash",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def make_gateway(handler):
    """Real GatewayLLM whose HTTP traffic goes to ``handler``."""
    return GatewayLLM(
        api_key="test-key",
        base_url="https://gateway.test/v1",
        model="google/gemini-2.5-flash",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def sample_matches():
    return [
        {
            "sku": "REF-4STAR-350",
            "name": "4-Star Double Door Refrigerator 350L",
            "matchScore": 72,
            "matchReason": "Double door",
            "gapAnalysis": "4-star, not 5-star",
            "recommended": False,
        },
        {
            "sku": "REF-5STAR-450",
            "name": "5-Star Frost-Free Refrigerator 450L",
            "matchScore": 95,
            "matchReason": "5-star energy rating",
            "gapAnalysis": "None",
            "recommended": True,
        },
    ]


@pytest.fixture
def sample_matches_json(sample_matches):
    return json.dumps(sample_matches)


@pytest.fixture
def gateway_settings():
    return Settings(LLM_API_KEY="test-key")


@pytest.fixture
def api(gateway_settings):
    """TestClient with settings pinned; callers set the LLM via ``use_llm``."""
    app.dependency_overrides[get_settings] = lambda: gateway_settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def use_llm(api):
    def _use(llm):
        app.dependency_overrides[get_llm] = lambda: llm
        return llm
    return _use
