from __future__ import annotations

import logging
from typing import Optional

from rfp_gateway.core.errors import ValidationError
from rfp_gateway.schemas.requests import MatchedProduct, PricingLine
from rfp_gateway.services.llm_client import ChatLLM
from rfp_gateway.services.prompts import proposal_prompt

logger = logging.getLogger(__name__)


class ProposalWriter:
    def __init__(self, llm: ChatLLM, default_company: str):
        self.llm = llm
        self.default_company = default_company

    def generate(
        self,
        summary: str,
        matched_products: list[MatchedProduct],
        pricing: list[PricingLine],
        company_name: Optional[str] = None,
    ) -> str:
        if not (summary or "").strip():
            raise ValidationError("RFP summary is required")
        if not matched_products:
            raise ValidationError("At least one matched product is required")

        company = (company_name or "").strip() or self.default_company
        logger.info("Generating proposal for %d matched products", len(matched_products))

        system, user = proposal_prompt(
            company_name=company,
            summary=summary,
            matched_products=[p.model_dump(by_alias=True) for p in matched_products],
            pricing=[line.model_dump(by_alias=True) for line in pricing],
        )
        proposal = self.llm.complete(system, user)
        logger.info("Proposal generation completed successfully")
        return proposal
