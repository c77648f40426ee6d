from __future__ import annotations

from fastapi import APIRouter, Depends

from rfp_gateway.dependencies import get_proposal_writer
from rfp_gateway.schemas.requests import ProposalRequest
from rfp_gateway.schemas.responses import ProposalResponse
from rfp_gateway.services.proposal_writer import ProposalWriter

router = APIRouter(tags=["proposal"])


@router.post("/generate-proposal", response_model=ProposalResponse)
def generate_proposal(payload: ProposalRequest, writer: ProposalWriter = Depends(get_proposal_writer)):
    proposal = writer.generate(
        payload.summary,
        payload.matched_products,
        payload.pricing,
        payload.company_name,
    )
    return ProposalResponse(proposal=proposal)
