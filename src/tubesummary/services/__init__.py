"""Services that turn a YouTube URL into a stored summary."""

from tubesummary.services.summarizer import SummarizerService
from tubesummary.services.title import UNKNOWN_TITLE, TitleResolver
from tubesummary.services.transcript import TranscriptResolver
from tubesummary.services.video_summary import VideoSummaryService

__all__ = [
    "SummarizerService",
    "TitleResolver",
    "TranscriptResolver",
    "UNKNOWN_TITLE",
    "VideoSummaryService",
]
