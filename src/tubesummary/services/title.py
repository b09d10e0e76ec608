"""Best-effort video title lookup via oEmbed."""

import logging

from tubesummary.infrastructure.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "Unknown Video"


class TitleResolver:
    """Resolves a human-readable video title, falling back to a placeholder."""

    def __init__(self, client: YouTubeClient) -> None:
        self.client = client

    async def resolve(self, video_id: str) -> str:
        """Get the video title, or UNKNOWN_TITLE on any failure."""
        try:
            data = await self.client.get_oembed(video_id)
        except Exception as e:
            logger.error(f"Error fetching video title for {video_id}: {e}")
            return UNKNOWN_TITLE

        if not data:
            return UNKNOWN_TITLE

        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            logger.warning(f"oEmbed response for {video_id} has no title")
            return UNKNOWN_TITLE
        return title
