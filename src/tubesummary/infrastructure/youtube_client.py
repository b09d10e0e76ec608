"""Async client for public YouTube pages, caption tracks and oEmbed lookups."""

import logging
from typing import Any

import aiohttp
from aiohttp import ClientTimeout

from tubesummary.domain.video import watch_url

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    ),
}


class YouTubeClient:
    """Async client for the unauthenticated YouTube endpoints we scrape.

    Every call is a single attempt. Failures are logged and reported as None
    so callers can degrade instead of aborting.
    """

    def __init__(
        self,
        base_url: str = "https://www.youtube.com",
        oembed_url: str = "https://noembed.com/embed",
        timeout_seconds: int = 15,
    ) -> None:
        """Initialize YouTube client.

        Args:
            base_url: YouTube site base URL
            oembed_url: oEmbed lookup endpoint used for titles
            timeout_seconds: Total timeout for each request in seconds
        """
        self.base_url = base_url
        self.oembed_url = oembed_url
        self.timeout = ClientTimeout(total=timeout_seconds)
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=DEFAULT_HEADERS
            )
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _fetch(
        self,
        url: str,
        params: dict[str, str] | None = None,
        as_json: bool = False,
    ) -> Any | None:
        """Fetch a URL once.

        Args:
            url: URL to fetch
            params: Optional query parameters
            as_json: Decode the body as JSON instead of returning text

        Returns:
            Body text, decoded JSON, or None if the request failed
        """
        session = await self._get_session()

        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    logger.error(f"HTTP {response.status} for {url}")
                    return None
                if as_json:
                    # Caption and oEmbed endpoints do not always send a JSON content type
                    return await response.json(content_type=None)
                return await response.text()
        except TimeoutError:
            logger.warning(f"Timeout fetching {url}")
        except aiohttp.ClientError as e:
            logger.warning(f"Client error fetching {url}: {e}")
        except ValueError as e:
            logger.warning(f"Invalid JSON from {url}: {e}")
        return None

    async def get_watch_page(self, video_id: str) -> str | None:
        """Get the HTML of a video's watch page.

        Args:
            video_id: YouTube video ID

        Returns:
            Page HTML or None
        """
        return await self._fetch(watch_url(video_id, self.base_url))

    async def get_caption_payload(self, caption_url: str) -> dict[str, Any] | None:
        """Get a caption track in JSON form.

        Args:
            caption_url: Caption track URL taken from the watch page

        Returns:
            Decoded caption payload or None
        """
        data = await self._fetch(caption_url, as_json=True)
        if data is not None and not isinstance(data, dict):
            logger.warning(f"Unexpected caption payload type: {type(data)}")
            return None
        return data

    async def get_oembed(self, video_id: str) -> dict[str, Any] | None:
        """Get oEmbed metadata for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Decoded oEmbed document or None
        """
        data = await self._fetch(
            self.oembed_url,
            params={"url": watch_url(video_id, self.base_url)},
            as_json=True,
        )
        if data is not None and not isinstance(data, dict):
            return None
        return data
