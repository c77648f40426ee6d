from __future__ import annotations

from fastapi import APIRouter, Depends

from rfp_gateway.dependencies import get_catalog
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.requests import QuoteRequest
from rfp_gateway.schemas.responses import QuoteResponse
from rfp_gateway.services.pricing import build_quote

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post("/quote", response_model=QuoteResponse)
def quote(payload: QuoteRequest, catalog: tuple[CatalogEntry, ...] = Depends(get_catalog)):
    return build_quote(payload.items, catalog, payload.tests)
