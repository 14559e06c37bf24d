"""Unit tests for InMemoryRedeemedClaimRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from aevium.persistence.repository.inmemory import InMemoryRedeemedClaimRepository

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestInMemoryRedeemedClaimRepository:
    """Tests for the in-memory replay record."""

    @pytest.mark.asyncio
    async def test_add_once(self):
        repository = InMemoryRedeemedClaimRepository()

        assert await repository.add("acme", "deadbeef", NOW)
        assert not await repository.add("acme", "deadbeef", NOW)
        assert await repository.contains("acme", "deadbeef")

    @pytest.mark.asyncio
    async def test_salts_scoped_to_partner(self):
        """The same salt under another partner is a different claim."""
        repository = InMemoryRedeemedClaimRepository()
        await repository.add("acme", "deadbeef", NOW)

        assert not await repository.contains("globex", "deadbeef")
        assert await repository.add("globex", "deadbeef", NOW)

    @pytest.mark.asyncio
    async def test_purge_expired(self):
        repository = InMemoryRedeemedClaimRepository()
        await repository.add("acme", "old", NOW - timedelta(minutes=1))
        await repository.add("acme", "current", NOW + timedelta(minutes=1))

        removed = await repository.purge_expired(NOW)

        assert removed == 1
        assert not await repository.contains("acme", "old")
        assert await repository.contains("acme", "current")
