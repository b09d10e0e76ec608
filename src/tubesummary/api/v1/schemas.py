"""Pydantic schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SummarizeRequest(BaseModel):
    """Request schema for summarizing a video."""

    model_config = ConfigDict(populate_by_name=True)

    video_url: str | None = Field(default=None, alias="videoUrl")


class SummarizeResponse(BaseModel):
    """Response schema for a freshly generated summary."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    video_title: str | None = Field(alias="videoTitle")
    id: UUID
    created_at: datetime


class SummaryResponse(BaseModel):
    """Response schema for a stored summary."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    video_url: str
    video_title: str | None
    summary: str
    created_at: datetime


class SummaryListResponse(BaseModel):
    """Response schema for the recent summaries list."""

    summaries: list[SummaryResponse]
    limit: int


class ErrorResponse(BaseModel):
    """Response schema for failed requests."""

    error: str
