"""Summary repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tubesummary.domain.errors import PersistenceError
from tubesummary.domain.summary import SummaryRecord
from tubesummary.infrastructure.models import SummaryModel


class SummaryRepository:
    """Repository for the append-only summaries table.

    Records are only ever inserted and read; there is no update or delete path.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(
        self,
        video_url: str,
        video_title: str | None,
        summary: str,
    ) -> SummaryRecord:
        """Insert a new summary and return it with its store-assigned fields.

        The row is committed before returning.

        Raises:
            PersistenceError: If the insert or commit fails
        """
        model = SummaryModel(
            video_url=video_url,
            video_title=video_title,
            summary=summary,
        )
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"Failed to insert summary: {e}") from e

        return SummaryRecord.from_model(model)

    async def get_by_id(self, summary_id: UUID) -> SummaryRecord | None:
        """Get a summary by its ID."""
        stmt = select(SummaryModel).where(SummaryModel.id == summary_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return SummaryRecord.from_model(model) if model else None

    async def list_recent(self, limit: int = 20) -> list[SummaryRecord]:
        """List the most recent summaries, newest first."""
        stmt = (
            select(SummaryModel)
            .order_by(SummaryModel.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [SummaryRecord.from_model(m) for m in result.scalars().all()]
