from __future__ import annotations

from fastapi import APIRouter, Depends

from rfp_gateway.agents.graph import build_graph, run_workflow
from rfp_gateway.dependencies import get_catalog, get_matcher, get_proposal_writer, get_summarizer
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.requests import WorkflowRequest
from rfp_gateway.schemas.responses import WorkflowResponse
from rfp_gateway.services.matcher import ProductMatcher
from rfp_gateway.services.proposal_writer import ProposalWriter
from rfp_gateway.services.summarizer import RFPSummarizer

router = APIRouter(tags=["workflow"])


@router.post("/workflow", response_model=WorkflowResponse)
def workflow(
    payload: WorkflowRequest,
    summarizer: RFPSummarizer = Depends(get_summarizer),
    matcher: ProductMatcher = Depends(get_matcher),
    writer: ProposalWriter = Depends(get_proposal_writer),
    catalog: tuple[CatalogEntry, ...] = Depends(get_catalog),
):
    graph = build_graph(summarizer, matcher, writer, catalog)
    out = run_workflow(graph, payload.title, payload.content, payload.sensitivity, payload.company_name)
    return WorkflowResponse(
        summary=out["summary"],
        matches=out["matches"],
        pricing=out["quote"],
        proposal=out["proposal"],
    )
