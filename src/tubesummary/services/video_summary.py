"""Video summary service - orchestrates resolving, summarizing and storing."""

import logging

from tubesummary.domain.errors import InvalidInputError, PersistenceError
from tubesummary.domain.summary import SummaryRecord
from tubesummary.domain.video import extract_video_id
from tubesummary.repositories.summary_repo import SummaryRepository
from tubesummary.services.summarizer import SummarizerService
from tubesummary.services.title import TitleResolver
from tubesummary.services.transcript import TranscriptResolver

logger = logging.getLogger(__name__)


class VideoSummaryService:
    """Turns a YouTube URL into a stored summary record.

    Title and transcript lookups degrade silently. Summarizer and store
    failures propagate, and nothing is stored unless both succeed.
    """

    def __init__(
        self,
        summary_repo: SummaryRepository,
        title_resolver: TitleResolver,
        transcript_resolver: TranscriptResolver,
        summarizer: SummarizerService,
    ) -> None:
        self.summary_repo = summary_repo
        self.title_resolver = title_resolver
        self.transcript_resolver = transcript_resolver
        self.summarizer = summarizer

    async def summarize_video(self, video_url: str | None) -> SummaryRecord:
        """Summarize a video and persist the result.

        Args:
            video_url: YouTube URL or bare video ID as submitted

        Returns:
            The newly created summary record

        Raises:
            InvalidInputError: If the URL is missing or has no video ID
            UpstreamSummarizationError: If the completion call fails
            PersistenceError: If the record cannot be stored
        """
        if not video_url:
            raise InvalidInputError("Video URL is required")

        logger.info(f"Processing video: {video_url}")

        video_id = extract_video_id(video_url)
        if video_id is None:
            raise InvalidInputError("Invalid YouTube URL")

        logger.info(f"Extracted video ID: {video_id}")

        video_title = await self.title_resolver.resolve(video_id)
        logger.info(f"Video title: {video_title}")

        transcript = await self.transcript_resolver.resolve(video_id)
        if transcript is not None:
            logger.info(f"Transcript fetched, length: {len(transcript)}")

        summary = await self.summarizer.summarize(transcript, video_title, video_url)
        logger.info(f"Summary generated, length: {len(summary)}")

        try:
            record = await self.summary_repo.create(
                video_url=video_url,
                video_title=video_title,
                summary=summary,
            )
        except PersistenceError as e:
            logger.error(f"Database error: {e}")
            raise

        logger.info(f"Summary saved to database: {record.id}")
        return record
