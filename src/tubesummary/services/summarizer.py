"""Video summarization service backed by an OpenAI-compatible chat completions gateway."""

import logging

import openai
from openai import AsyncOpenAI

from tubesummary.domain.errors import UpstreamSummarizationError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are a helpful assistant that creates clear, concise summaries of video "
    "content. Provide well-structured summaries with key points and main ideas."
)

SUMMARIZATION_PROMPT = """Please summarize the following video transcript.

Video Title: {title}

Transcript: {transcript}

Provide a comprehensive summary that includes:
1. Main topic and purpose
2. Key points discussed
3. Important takeaways
4. Any actionable insights

Keep the summary clear and well-organized."""

# Sent in place of a transcript so the model admits it has not seen the video.
FALLBACK_TRANSCRIPT = """TRANSCRIPT NOT AVAILABLE.

The captions for this YouTube video could not be fetched. You do NOT know the exact content of the video.

Based ONLY on the title and URL, do the following:
1. Clearly tell the user that the transcript is not available.
2. Explain what this likely means (no subtitles or restricted video).
3. If the title suggests a topic, give a very high-level, generic description of what such a video might cover.
4. Warn the user that this is just a guess.

Video URL: {video_url}"""


def fallback_transcript(video_url: str) -> str:
    """Build the placeholder transcript used when captions are unavailable."""
    return FALLBACK_TRANSCRIPT.format(video_url=video_url)


def build_messages(transcript: str, title: str) -> list[dict[str, str]]:
    """Build the chat messages for a summarization request."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": SUMMARIZATION_PROMPT.format(title=title, transcript=transcript),
        },
    ]


class SummarizerService:
    """Service for generating AI summaries of video transcripts."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        timeout_seconds: float = 15,
    ) -> None:
        """Initialize the summarizer.

        Retries are disabled: a failed completion fails the request.
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = AsyncOpenAI(
            api_key=api_key or "not-configured",
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def summarize(
        self,
        transcript: str | None,
        title: str,
        video_url: str,
    ) -> str:
        """Generate a summary for a video.

        Args:
            transcript: Flattened transcript, or None if captions were unavailable
            title: Video title
            video_url: Original video URL, embedded in the fallback prompt

        Returns:
            Generated summary text

        Raises:
            UpstreamSummarizationError: If the gateway is not configured, fails,
                or returns no message content
        """
        if not self.api_key:
            logger.error("AI gateway API key not configured")
            raise UpstreamSummarizationError("AI gateway API key not configured")

        if transcript is None:
            logger.info("No transcript available, using fallback instructions")
            transcript = fallback_transcript(video_url)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(transcript, title),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            logger.error(f"AI gateway error: {e.status_code} {e.message}")
            raise UpstreamSummarizationError(
                f"AI gateway error: {e.status_code}", status_code=e.status_code
            ) from e
        except openai.APIError as e:
            logger.error(f"AI gateway request failed: {e}")
            raise UpstreamSummarizationError(f"AI gateway request failed: {e}") from e

        if not response.choices or response.choices[0].message is None:
            logger.error(f"AI gateway returned no choices for model {self.model}")
            raise UpstreamSummarizationError("AI gateway returned no choices")

        content = response.choices[0].message.content
        if not content:
            logger.error(f"AI gateway returned an empty message for model {self.model}")
            raise UpstreamSummarizationError("AI gateway returned an empty summary")

        return content
