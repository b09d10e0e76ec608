"""Summary API endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query

from tubesummary.api.dependencies import SettingsDep, SummaryRepoDep, VideoSummaryDep
from tubesummary.api.v1.schemas import (
    ErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    SummaryListResponse,
    SummaryResponse,
)

router = APIRouter(tags=["summaries"])


@router.post(
    "/summarize-video",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarize_video(
    request: SummarizeRequest,
    service: VideoSummaryDep,
) -> SummarizeResponse:
    """Summarize a YouTube video and store the result."""
    record = await service.summarize_video(request.video_url)

    return SummarizeResponse(
        summary=record.summary,
        video_title=record.video_title,
        id=record.id,
        created_at=record.created_at,
    )


@router.get("/summaries", response_model=SummaryListResponse)
async def list_summaries(
    summary_repo: SummaryRepoDep,
    settings: SettingsDep,
    limit: int | None = Query(None, ge=1, le=100),
) -> SummaryListResponse:
    """List recent summaries, newest first."""
    limit = limit or settings.recent_summaries_limit
    records = await summary_repo.list_recent(limit=limit)

    return SummaryListResponse(
        summaries=[SummaryResponse.model_validate(r) for r in records],
        limit=limit,
    )


@router.get("/summaries/{summary_id}", response_model=SummaryResponse)
async def get_summary(
    summary_id: str,
    summary_repo: SummaryRepoDep,
) -> SummaryResponse:
    """Get a single summary by ID, as used by share links."""
    try:
        record_id = UUID(summary_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Summary not found") from None

    record = await summary_repo.get_by_id(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Summary not found")
    return SummaryResponse.model_validate(record)
