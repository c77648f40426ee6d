from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from rfp_gateway.core.errors import (
    ConfigurationError,
    UpstreamError,
    error_for_upstream_status,
)

logger = logging.getLogger(__name__)


class ChatLLM(Protocol):
    def complete(self, system: str, user: str) -> str:
        ...


@dataclass
class LLMConfig:
    provider: str
    model: str
    base_url: str = ""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout: float = 60.0
    api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None


class GatewayLLM:
    """OpenAI-compatible chat-completions endpoint (the default AI gateway)."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: float = 60.0,
        http_client: Any = None,
    ):
        from openai import OpenAI

        # max_retries=0: rate-limit and quota errors go straight back to the caller
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def complete(self, system: str, user: str) -> str:
        import openai

        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens

        try:
            resp = self.client.chat.completions.create(**kwargs)
        except openai.APIStatusError as e:
            logger.error("AI gateway error: %s %s", e.status_code, e.response.text)
            raise error_for_upstream_status(e.status_code) from e
        except openai.APIConnectionError as e:
            logger.error("AI gateway unreachable: %s: %s", type(e).__name__, e)
            raise UpstreamError(f"AI gateway unreachable: {type(e).__name__}") from e
        except openai.APIError as e:
            logger.error("AI gateway sent an unreadable response: %s", e)
            raise UpstreamError("AI gateway returned an unreadable response") from e

        # A non-JSON 200 (e.g. an HTML maintenance page) comes back as a bare string
        choices = getattr(resp, "choices", None)
        if isinstance(resp, str) or not choices:
            logger.error("AI gateway returned no choices: %r", str(resp)[:200])
            raise UpstreamError("AI gateway returned no choices")
        message = choices[0].message
        content = message.content if message is not None else None
        if not content or not content.strip():
            raise UpstreamError("AI gateway returned an empty completion")
        return content


class GeminiLLM:
    """Direct Google Gemini access through google-genai."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        client: Any = None,
    ):
        from google import genai
        from google.genai import types

        self._types = types
        self.client = client or genai.Client(api_key=api_key)
        # Gateway-style ids ("google/gemini-2.5-flash") name the same model
        self.model = model.split("/", 1)[-1]
        self.temperature = temperature
        self.max_tokens = max_tokens

    def complete(self, system: str, user: str) -> str:
        from google.genai import errors

        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=user,
                config=self._types.GenerateContentConfig(
                    system_instruction=[system],
                    temperature=self.temperature,
                    max_output_tokens=self.max_tokens,
                ),
            )
        except errors.APIError as e:
            logger.error("Gemini API error: %s %s", e.code, e.message)
            # Gemini reports exhausted quota as 429 RESOURCE_EXHAUSTED
            raise error_for_upstream_status(e.code) from e

        txt = resp.text or ""
        if not txt.strip():
            raise UpstreamError("Gemini returned an empty completion")
        return txt


def build_llm(cfg: LLMConfig) -> ChatLLM:
    provider = (cfg.provider or "").lower().strip()

    if provider == "gateway":
        if not cfg.api_key:
            raise ConfigurationError("LLM_API_KEY is not configured")
        return GatewayLLM(
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
            timeout=cfg.timeout,
        )

    if provider == "gemini":
        if not cfg.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")
        return GeminiLLM(
            api_key=cfg.gemini_api_key,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ConfigurationError(f"Unsupported llm provider: {cfg.provider}. Use provider: gateway or gemini")


def llm_config_from_settings(settings) -> LLMConfig:
    return LLMConfig(
        provider=settings.llm_provider,
        model=settings.llm_model,
        base_url=settings.llm_base_url,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout_seconds,
        api_key=settings.LLM_API_KEY,
        gemini_api_key=settings.GEMINI_API_KEY,
    )
