from __future__ import annotations

import logging

from rfp_gateway.core.errors import ValidationError
from rfp_gateway.services.llm_client import ChatLLM
from rfp_gateway.services.prompts import summarize_prompt

logger = logging.getLogger(__name__)


class RFPSummarizer:
    def __init__(self, llm: ChatLLM):
        self.llm = llm

    def summarize(self, title: str, content: str) -> str:
        if not (title or "").strip() or not (content or "").strip():
            raise ValidationError("RFP title and content are required")

        logger.info("Processing RFP summarization for: %s", title)
        system, user = summarize_prompt(title, content)
        summary = self.llm.complete(system, user)
        logger.info("RFP summarization completed successfully")
        return summary
