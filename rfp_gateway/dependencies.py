from __future__ import annotations

from fastapi import Depends

from rfp_gateway.core.settings import Settings, get_settings
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.services.catalog import FMEG_CATALOG
from rfp_gateway.services.llm_client import ChatLLM, build_llm, llm_config_from_settings
from rfp_gateway.services.matcher import ProductMatcher
from rfp_gateway.services.proposal_writer import ProposalWriter
from rfp_gateway.services.summarizer import RFPSummarizer


def get_catalog() -> tuple[CatalogEntry, ...]:
    return FMEG_CATALOG


def get_llm(settings: Settings = Depends(get_settings)) -> ChatLLM:
    # Raises ConfigurationError before any network call when the key is missing
    return build_llm(llm_config_from_settings(settings))


def get_summarizer(llm: ChatLLM = Depends(get_llm)) -> RFPSummarizer:
    return RFPSummarizer(llm)


def get_matcher(
    llm: ChatLLM = Depends(get_llm),
    catalog: tuple[CatalogEntry, ...] = Depends(get_catalog),
) -> ProductMatcher:
    return ProductMatcher(llm, catalog)


def get_proposal_writer(
    llm: ChatLLM = Depends(get_llm),
    settings: Settings = Depends(get_settings),
) -> ProposalWriter:
    return ProposalWriter(llm, default_company=settings.company_name)
