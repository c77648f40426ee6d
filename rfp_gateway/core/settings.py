from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_yaml_config() -> dict:
    root = Path(__file__).resolve().parents[2]  # project root
    cfg_path = root / "config.yaml"
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # LLM
    llm_provider: str = "gateway"
    llm_model: str = "google/gemini-2.5-flash"
    llm_base_url: str = "https://ai.gateway.lovable.dev/v1"
    llm_temperature: Optional[float] = None
    llm_max_tokens: Optional[int] = None
    llm_timeout_seconds: float = 60.0

    # API keys (optional here; checked when a request needs them)
    LLM_API_KEY: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("LLM_API_KEY", "LOVABLE_API_KEY")
    )
    GEMINI_API_KEY: Optional[str] = None

    # Proposal
    company_name: str = "FMEG Solutions Inc."

    # Intake
    max_upload_mb: int = 10

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self, **kwargs):
        cfg = _load_yaml_config()
        llm = (cfg.get("llm") or {})
        proposal = (cfg.get("proposal") or {})
        intake = (cfg.get("intake") or {})
        logging_cfg = (cfg.get("logging") or {})

        yaml_values = {
            "llm_provider": llm.get("provider"),
            "llm_model": llm.get("model"),
            "llm_base_url": llm.get("base_url"),
            "llm_temperature": llm.get("temperature"),
            "llm_max_tokens": llm.get("max_tokens"),
            "llm_timeout_seconds": llm.get("timeout_seconds"),
            "company_name": proposal.get("company_name"),
            "max_upload_mb": intake.get("max_upload_mb"),
            "log_level": logging_cfg.get("level"),
            "log_format": logging_cfg.get("format"),
        }
        for key, value in yaml_values.items():
            if value is not None:
                kwargs.setdefault(key, value)

        super().__init__(**kwargs)


def get_settings() -> Settings:
    """Resolved per request so credentials are read at invocation time."""
    return Settings()
