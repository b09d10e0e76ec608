"""Summary record domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from tubesummary.infrastructure.models import SummaryModel


@dataclass(frozen=True)
class SummaryRecord:
    """A persisted AI-generated video summary. Immutable once created."""

    id: UUID
    video_url: str
    video_title: str | None
    summary: str
    created_at: datetime

    @classmethod
    def from_model(cls, model: "SummaryModel") -> "SummaryRecord":
        """Create SummaryRecord from its ORM row."""
        return cls(
            id=model.id,
            video_url=model.video_url,
            video_title=model.video_title,
            summary=model.summary,
            created_at=model.created_at,
        )
