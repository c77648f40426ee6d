from __future__ import annotations

from fastapi import APIRouter, Depends

from rfp_gateway.dependencies import get_summarizer
from rfp_gateway.schemas.requests import SummarizeRequest
from rfp_gateway.schemas.responses import SummarizeResponse
from rfp_gateway.services.summarizer import RFPSummarizer

router = APIRouter(tags=["summarize"])


@router.post("/rfp-summarize", response_model=SummarizeResponse)
@router.post("/summarize", response_model=SummarizeResponse)
def summarize(payload: SummarizeRequest, summarizer: RFPSummarizer = Depends(get_summarizer)):
    return SummarizeResponse(summary=summarizer.summarize(payload.title, payload.content))
