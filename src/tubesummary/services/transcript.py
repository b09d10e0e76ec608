"""Best-effort transcript acquisition from a video's public watch page.

The watch page embeds the player response as JSON inside a script tag. The
object under its ``"captions":`` key lists the caption tracks, each with a
``baseUrl`` that serves timed caption events. None of this is a documented
API, so every step degrades to "no transcript" instead of raising.
"""

import json
import logging
import re
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from tubesummary.infrastructure.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

CAPTIONS_MARKER = re.compile(r'"captions"\s*:\s*(?=\{)')
CAPTION_TRACKS_KEY = "captionTracks"

_decoder = json.JSONDecoder()


def _caption_tracks(manifest: dict[str, Any]) -> list[Any]:
    """Return the caption track list of a manifest, or an empty list."""
    renderer = manifest.get("playerCaptionsTracklistRenderer")
    if isinstance(renderer, dict):
        tracks = renderer.get(CAPTION_TRACKS_KEY)
    else:
        tracks = manifest.get(CAPTION_TRACKS_KEY)
    return tracks if isinstance(tracks, list) else []


def extract_caption_manifest(page_html: str) -> dict[str, Any] | None:
    """Locate and decode the caption manifest embedded in a watch page.

    Each ``"captions":`` occurrence is decoded as exactly one JSON object
    starting at its opening brace, so trailing script text never reaches the
    decoder. The first occurrence that lists caption tracks wins.

    Args:
        page_html: Raw watch page HTML

    Returns:
        Decoded manifest or None if no usable manifest is present
    """
    if CAPTION_TRACKS_KEY not in page_html:
        return None

    for match in CAPTIONS_MARKER.finditer(page_html):
        try:
            manifest, _ = _decoder.raw_decode(page_html, match.end())
        except ValueError as e:
            logger.debug(f"Skipping undecodable captions fragment: {e}")
            continue
        if isinstance(manifest, dict) and _caption_tracks(manifest):
            return manifest

    return None


def first_caption_url(manifest: dict[str, Any]) -> str | None:
    """Return the fetch URL of the first caption track, if it has one."""
    tracks = _caption_tracks(manifest)
    if not tracks or not isinstance(tracks[0], dict):
        return None
    url = tracks[0].get("baseUrl")
    return url if isinstance(url, str) and url else None


def with_json_format(caption_url: str) -> str:
    """Ask the caption endpoint for JSON events unless a format is already set."""
    query = urlsplit(caption_url).query
    if any(key == "fmt" for key, _ in parse_qsl(query, keep_blank_values=True)):
        return caption_url
    separator = "&" if query else "?"
    return f"{caption_url}{separator}fmt=json3"


def flatten_caption_events(payload: dict[str, Any]) -> str | None:
    """Flatten timed caption events into a single transcript string.

    Events without segments are dropped. Segment texts within an event are
    concatenated as-is, events are joined with one space, and newlines become
    spaces.

    Returns:
        Transcript text, or None if there is nothing to flatten
    """
    events = payload.get("events")
    if not isinstance(events, list) or not events:
        return None

    lines = [
        "".join(
            seg.get("utf8", "") for seg in event["segs"] if isinstance(seg, dict)
        )
        for event in events
        if isinstance(event, dict) and event.get("segs")
    ]
    transcript = " ".join(lines).replace("\n", " ").strip()
    return transcript or None


class TranscriptResolver:
    """Resolves a plain-text transcript for a video, or None."""

    def __init__(self, client: YouTubeClient) -> None:
        """Initialize resolver with a YouTube client."""
        self.client = client

    async def resolve(self, video_id: str) -> str | None:
        """Get the flattened transcript of a video's first caption track.

        Missing captions, private or blocked videos, HTTP failures and page
        format changes all yield None.
        """
        try:
            return await self._resolve(video_id)
        except Exception as e:
            logger.error(f"Error resolving transcript for {video_id}: {e}")
            return None

    async def _resolve(self, video_id: str) -> str | None:
        page_html = await self.client.get_watch_page(video_id)
        if page_html is None:
            logger.warning(f"Failed to fetch watch page for {video_id}")
            return None

        manifest = extract_caption_manifest(page_html)
        if manifest is None:
            logger.warning(f"No captions found in watch page for {video_id}")
            return None

        caption_url = first_caption_url(manifest)
        if caption_url is None:
            logger.warning(f"No caption track URL for {video_id}")
            return None

        payload = await self.client.get_caption_payload(with_json_format(caption_url))
        if payload is None:
            logger.warning(f"Failed to fetch caption track for {video_id}")
            return None

        transcript = flatten_caption_events(payload)
        if transcript is None:
            logger.warning(f"No caption events found for {video_id}")
        return transcript
