from __future__ import annotations
from fastapi import APIRouter
from rfp_gateway.routes.extract import router as extract_router
from rfp_gateway.routes.health import router as health_router
from rfp_gateway.routes.match import router as match_router
from rfp_gateway.routes.pricing import router as pricing_router
from rfp_gateway.routes.proposal import router as proposal_router
from rfp_gateway.routes.summarize import router as summarize_router
from rfp_gateway.routes.workflow import router as workflow_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(extract_router)
router.include_router(summarize_router)
router.include_router(match_router)
router.include_router(pricing_router)
router.include_router(proposal_router)
router.include_router(workflow_router)
