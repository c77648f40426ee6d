from __future__ import annotations

import logging
from typing import Any, List, Optional, TypedDict

from langgraph.graph import END, StateGraph

from rfp_gateway.core.errors import ValidationError
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.requests import MatchedProduct, PricingLine, QuoteItem
from rfp_gateway.schemas.responses import MatchResult, QuoteResponse
from rfp_gateway.services.matcher import ProductMatcher
from rfp_gateway.services.pricing import build_quote
from rfp_gateway.services.proposal_writer import ProposalWriter
from rfp_gateway.services.summarizer import RFPSummarizer

logger = logging.getLogger(__name__)


class RFPState(TypedDict, total=False):
    title: str
    content: str
    sensitivity: float
    company_name: Optional[str]

    summary: str
    matches: List[MatchResult]
    quote: QuoteResponse
    proposal: str


def _items_to_price(matches: list[MatchResult]) -> list[MatchResult]:
    # Price what the model recommended; fall back to every match
    recommended = [m for m in matches if m.recommended]
    return recommended or matches


def build_graph(
    summarizer: RFPSummarizer,
    matcher: ProductMatcher,
    writer: ProposalWriter,
    catalog: tuple[CatalogEntry, ...],
):
    """Compile summarize -> match -> price -> propose. Errors propagate unchanged."""

    def node_summarize(state: RFPState) -> RFPState:
        summary = summarizer.summarize(state["title"], state["content"])
        return {**state, "summary": summary}

    def node_match(state: RFPState) -> RFPState:
        matches = matcher.match(state["summary"], state.get("sensitivity", 0.7))
        return {**state, "matches": matches}

    def node_price(state: RFPState) -> RFPState:
        selected = _items_to_price(state.get("matches", []))
        items = [QuoteItem(sku=m.sku, name=m.name) for m in selected]
        return {**state, "quote": build_quote(items, catalog)}

    def node_propose(state: RFPState) -> RFPState:
        quote = state["quote"]
        if not quote.items:
            raise ValidationError("No catalog products matched the RFP requirements")

        products = [
            MatchedProduct(name=i.product, sku=i.sku, quantity=i.quantity, unit_price=i.unit_price, total=i.total)
            for i in quote.items
        ]
        pricing = [PricingLine(label=li.label, cost=li.cost) for li in quote.line_items]
        proposal = writer.generate(state["summary"], products, pricing, state.get("company_name"))
        return {**state, "proposal": proposal}

    g = StateGraph(RFPState)

    g.add_node("summarize", node_summarize)
    g.add_node("match", node_match)
    # Node names must not collide with state keys ("quote", "proposal")
    g.add_node("price", node_price)
    g.add_node("propose", node_propose)

    g.set_entry_point("summarize")
    g.add_edge("summarize", "match")
    g.add_edge("match", "price")
    g.add_edge("price", "propose")
    g.add_edge("propose", END)

    return g.compile()


def run_workflow(graph: Any, title: str, content: str, sensitivity: float, company_name: Optional[str]) -> RFPState:
    logger.info("Running RFP workflow for: %s", title)
    out = graph.invoke(
        {"title": title, "content": content, "sensitivity": sensitivity, "company_name": company_name}
    )
    logger.info("RFP workflow completed with %d matches", len(out.get("matches", [])))
    return out
