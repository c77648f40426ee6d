from __future__ import annotations

from fastapi import APIRouter, Depends

from rfp_gateway.dependencies import get_catalog
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.get("/catalog", response_model=list[CatalogEntry])
def list_catalog(catalog: tuple[CatalogEntry, ...] = Depends(get_catalog)):
    return list(catalog)
