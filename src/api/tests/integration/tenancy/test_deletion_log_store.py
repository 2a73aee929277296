"""Integration tests for DeletionLogRepository.

These tests require PostgreSQL to be running. They verify that deletion
records survive the round trip through the migrated delete_user_log table.
"""

from datetime import UTC, datetime, timedelta

import pytest

from tenancy.domain.value_objects import DeletionLogRecord
from tenancy.infrastructure.deletion_log_repository import DeletionLogRepository

pytestmark = pytest.mark.integration


def _record(tenant_id: str, user_id: str, email: str, deleted_at: datetime):
    return DeletionLogRecord(
        tenant_id=tenant_id,
        user_id=user_id,
        email=email,
        deleted_at=deleted_at,
    )


class TestDeletionLogRoundTrip:
    """Tests for append and list_by_tenant."""

    @pytest.mark.asyncio
    async def test_appended_record_is_listed_for_its_tenant(
        self, session_factory, clean_deletion_logs
    ):
        """Should store exactly one record with a timezone-aware timestamp."""
        called_at = datetime.now(UTC)

        async with session_factory() as session:
            stored = await DeletionLogRepository(session).append(
                _record("t-1", "u-1", "gone@example.com", datetime.now(UTC))
            )

        assert stored.id is not None

        async with session_factory() as session:
            records = await DeletionLogRepository(session).list_by_tenant("t-1")

        assert len(records) == 1
        record = records[0]
        assert record.id == stored.id
        assert (record.tenant_id, record.user_id, record.email) == (
            "t-1",
            "u-1",
            "gone@example.com",
        )
        assert record.deleted_at.tzinfo is not None
        assert record.deleted_at >= called_at

    @pytest.mark.asyncio
    async def test_appends_get_distinct_ids(self, session_factory, clean_deletion_logs):
        now = datetime.now(UTC)

        async with session_factory() as session:
            first = await DeletionLogRepository(session).append(
                _record("t-1", "u-1", "a@example.com", now)
            )
        async with session_factory() as session:
            second = await DeletionLogRepository(session).append(
                _record("t-1", "u-2", "b@example.com", now)
            )

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_lists_only_the_requested_tenant_oldest_first(
        self, session_factory, clean_deletion_logs
    ):
        now = datetime.now(UTC)
        async with session_factory() as session:
            repository = DeletionLogRepository(session)
            await repository.append(_record("t-1", "u-late", "late@example.com", now))
        async with session_factory() as session:
            repository = DeletionLogRepository(session)
            await repository.append(
                _record("t-1", "u-early", "early@example.com", now - timedelta(hours=1))
            )
        async with session_factory() as session:
            repository = DeletionLogRepository(session)
            await repository.append(_record("t-2", "u-other", "other@example.com", now))

        async with session_factory() as session:
            records = await DeletionLogRepository(session).list_by_tenant("t-1")

        assert [r.user_id for r in records] == ["u-early", "u-late"]

    @pytest.mark.asyncio
    async def test_unknown_tenant_has_no_records(
        self, session_factory, clean_deletion_logs
    ):
        async with session_factory() as session:
            records = await DeletionLogRepository(session).list_by_tenant("t-none")

        assert records == []
