from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.requests import CamelModel


class ErrorResponse(BaseModel):
    error: str


class SummarizeResponse(BaseModel):
    summary: str


class MatchResult(CamelModel):
    """One catalog product the model judged relevant to the requirements."""

    model_config = ConfigDict(extra="ignore")

    sku: str
    name: str
    match_score: int = Field(ge=0, le=100)
    match_reason: str = ""
    gap_analysis: str = ""
    recommended: bool = False


class MatchStats(CamelModel):
    excellent: int = 0
    good: int = 0
    average_score: int = 0


class MatchResponse(CamelModel):
    matches: list[MatchResult]
    catalog: list[CatalogEntry]
    stats: MatchStats


class ProposalResponse(BaseModel):
    proposal: str


class ExtractResponse(CamelModel):
    extracted_text: str
    file_type: str
    characters: int


class PricedItem(CamelModel):
    sku: str
    product: str
    quantity: int
    unit_price: float
    total: float


class PricedTest(CamelModel):
    test: str
    cost: float


class LineItem(CamelModel):
    label: str
    cost: float


class QuoteResponse(CamelModel):
    items: list[PricedItem]
    tests: list[PricedTest]
    product_subtotal: float
    test_subtotal: float
    grand_total: float
    line_items: list[LineItem]


class WorkflowResponse(CamelModel):
    summary: str
    matches: list[MatchResult]
    pricing: QuoteResponse
    proposal: str


class HealthResponse(BaseModel):
    status: str
