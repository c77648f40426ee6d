from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

# Required text: surrounding whitespace is stripped and blank is rejected
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummarizeRequest(CamelModel):
    content: RequiredText = Field(validation_alias=AliasChoices("content", "rfpContent"))
    title: RequiredText = Field(validation_alias=AliasChoices("title", "rfpTitle"))


class MatchRequest(CamelModel):
    requirements: RequiredText
    # Advisory only: forwarded to the model as matching strictness, never range-checked or used to filter.
    sensitivity: float = 0.7


class MatchedProduct(CamelModel):
    name: RequiredText
    sku: RequiredText
    quantity: int = Field(default=1, ge=0)
    unit_price: float = Field(default=0.0, ge=0.0)
    total: Optional[float] = Field(default=None, ge=0.0)

    @model_validator(mode="after")
    def _fill_total(self) -> "MatchedProduct":
        if self.total is None:
            self.total = round(self.quantity * self.unit_price, 2)
        return self


class PricingLine(CamelModel):
    label: RequiredText = Field(validation_alias=AliasChoices("label", "item"))
    cost: float = Field(ge=0.0)


class ProposalRequest(CamelModel):
    summary: RequiredText = Field(validation_alias=AliasChoices("summary", "rfpSummary"))
    matched_products: list[MatchedProduct] = Field(min_length=1)
    pricing: list[PricingLine] = Field(default_factory=list)
    company_name: Optional[str] = None


class QuoteItem(CamelModel):
    sku: RequiredText
    name: Optional[str] = None
    quantity: int = Field(default=1, ge=0)
    unit_price: Optional[float] = Field(default=None, ge=0.0)


class ComplianceTest(CamelModel):
    test: RequiredText = Field(validation_alias=AliasChoices("test", "label"))
    cost: float = Field(ge=0.0)


class QuoteRequest(CamelModel):
    items: list[QuoteItem] = Field(min_length=1)
    tests: Optional[list[ComplianceTest]] = None


class WorkflowRequest(CamelModel):
    content: RequiredText = Field(validation_alias=AliasChoices("content", "rfpContent"))
    title: RequiredText = Field(validation_alias=AliasChoices("title", "rfpTitle"))
    sensitivity: float = 0.7
    company_name: Optional[str] = None
