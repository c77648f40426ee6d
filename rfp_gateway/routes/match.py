from __future__ import annotations

import pandas as pd
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from pydantic import BaseModel

from rfp_gateway.dependencies import get_matcher
from rfp_gateway.schemas.requests import MatchRequest
from rfp_gateway.schemas.responses import MatchResponse, MatchResult
from rfp_gateway.services.matcher import ProductMatcher, match_stats

router = APIRouter(tags=["match"])

EXPORT_COLUMNS = ["SKU", "Product", "Match Score", "Reason", "Gap Analysis", "Recommended"]


class MatchExportRequest(BaseModel):
    matches: list[MatchResult]


@router.post("/product-match", response_model=MatchResponse)
@router.post("/match", response_model=MatchResponse)
def match_products(payload: MatchRequest, matcher: ProductMatcher = Depends(get_matcher)):
    matches = matcher.match(payload.requirements, payload.sensitivity)
    return MatchResponse(matches=matches, catalog=list(matcher.catalog), stats=match_stats(matches))


@router.post("/product-match/export")
def export_matches(payload: MatchExportRequest):
    """CSV download of a match table."""
    rows = [
        [m.sku, m.name, m.match_score, m.match_reason, m.gap_analysis, m.recommended]
        for m in payload.matches
    ]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    return Response(
        content=df.to_csv(index=False),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="product-matches.csv"'},
    )
