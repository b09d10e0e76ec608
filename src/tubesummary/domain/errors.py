"""Domain exceptions raised by the summarization pipeline."""


class InvalidInputError(Exception):
    """The submitted video URL is missing or has no recognizable video ID."""


class UpstreamSummarizationError(Exception):
    """The completion endpoint failed or returned an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PersistenceError(Exception):
    """A summary record could not be written to the store."""
