"""Unit tests for SummaryRecord domain entity."""

import dataclasses
import uuid
from datetime import UTC, datetime

import pytest

from tubesummary.domain.summary import SummaryRecord
from tubesummary.infrastructure.models import SummaryModel


class TestSummaryRecord:
    """Tests for SummaryRecord."""

    def test_from_model(self):
        model = SummaryModel(
            id=uuid.uuid4(),
            video_url="https://youtu.be/dQw4w9WgXcQ",
            video_title=None,
            summary="A summary",
            created_at=datetime(2026, 10, 18, tzinfo=UTC),
        )

        record = SummaryRecord.from_model(model)

        assert record.id == model.id
        assert record.video_url == model.video_url
        assert record.video_title is None
        assert record.summary == "A summary"
        assert record.created_at == model.created_at

    def test_is_immutable(self):
        record = SummaryRecord(
            id=uuid.uuid4(),
            video_url="dQw4w9WgXcQ",
            video_title="T",
            summary="S",
            created_at=datetime(2026, 10, 18, tzinfo=UTC),
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.summary = "changed"  # type: ignore[misc]
