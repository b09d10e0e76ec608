"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tubesummary.config import Settings, get_settings
from tubesummary.infrastructure.database import get_session
from tubesummary.infrastructure.youtube_client import YouTubeClient
from tubesummary.repositories.summary_repo import SummaryRepository
from tubesummary.services.summarizer import SummarizerService
from tubesummary.services.title import TitleResolver
from tubesummary.services.transcript import TranscriptResolver
from tubesummary.services.video_summary import VideoSummaryService

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_summary_repository(
    session: SessionDep,
) -> AsyncGenerator[SummaryRepository, None]:
    """Provide SummaryRepository instance."""
    yield SummaryRepository(session)


async def get_youtube_client(
    settings: SettingsDep,
) -> AsyncGenerator[YouTubeClient, None]:
    """Provide a YouTubeClient that is closed after the request."""
    client = YouTubeClient(
        base_url=settings.youtube_base_url,
        oembed_url=settings.oembed_url,
        timeout_seconds=settings.http_timeout_seconds,
    )
    try:
        yield client
    finally:
        await client.close()


@lru_cache
def get_summarizer() -> SummarizerService:
    """Provide the process-wide SummarizerService, configured once."""
    settings = get_settings()
    return SummarizerService(
        api_key=settings.ai_gateway_api_key,
        base_url=settings.ai_gateway_base_url,
        model=settings.summarization_model,
        temperature=settings.summarization_temperature,
        max_tokens=settings.summarization_max_tokens,
        timeout_seconds=settings.http_timeout_seconds,
    )


SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]
YouTubeClientDep = Annotated[YouTubeClient, Depends(get_youtube_client)]
SummarizerDep = Annotated[SummarizerService, Depends(get_summarizer)]


def get_video_summary_service(
    summary_repo: SummaryRepoDep,
    youtube_client: YouTubeClientDep,
    summarizer: SummarizerDep,
) -> VideoSummaryService:
    """Provide VideoSummaryService instance."""
    return VideoSummaryService(
        summary_repo=summary_repo,
        title_resolver=TitleResolver(youtube_client),
        transcript_resolver=TranscriptResolver(youtube_client),
        summarizer=summarizer,
    )


VideoSummaryDep = Annotated[VideoSummaryService, Depends(get_video_summary_service)]
