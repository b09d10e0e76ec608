"""YouTube video identifier helpers."""

import re

# First match wins: URL forms, then a bare ID.
_URL_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?(?:[^#\n]*?&)?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"
)
_BARE_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")


def extract_video_id(url: str) -> str | None:
    """Extract a YouTube video ID from a URL or a bare 11-character ID.

    Recognizes ``youtube.com/watch?v=ID``, ``youtu.be/ID`` and
    ``youtube.com/embed/ID``. The captured ID ends at ``&``, ``?``, ``#``
    or a newline.

    Returns:
        The video ID, or None if nothing matches
    """
    if not url:
        return None

    match = _URL_PATTERN.search(url)
    if match:
        return match.group(1)

    if _BARE_ID_PATTERN.fullmatch(url):
        return url

    return None


def watch_url(video_id: str, base_url: str = "https://www.youtube.com") -> str:
    """Build the canonical watch page URL for a video."""
    return f"{base_url.rstrip('/')}/watch?v={video_id}"
