"""API v1 router aggregator."""

from fastapi import APIRouter

from tubesummary.api.v1.summaries import router as summaries_router

router = APIRouter(prefix="/api/v1")
router.include_router(summaries_router)
