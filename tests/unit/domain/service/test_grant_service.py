"""Unit tests for GrantService."""

from datetime import datetime, timedelta, timezone

import pytest

from aevium.domain.error import NotFoundError, ValidationError
from aevium.domain.service import BenefitLedgerClient, GrantService
from aevium.domain.value import GrantId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

START = datetime(2025, 1, 1, tzinfo=timezone.utc)
END = START + timedelta(days=30)


class TestCreateGrant:
    """Tests for create_grant method."""

    @pytest.mark.asyncio
    async def test_create_grant_success(self, unit_env):
        """Creating a grant should send it to the ledger."""
        # Arrange
        grant_service = await unit_env.get(GrantService)
        ledger = await unit_env.get(BenefitLedgerClient)

        # Act
        grant = await grant_service.create_grant("lk_001", START, END, "reading", "gold")

        # Assert
        assert grant.date_period_start == START
        assert grant.date_period_end == END
        assert grant.uid in ledger.grants
        assert ledger.requests[0].learner_key == "lk_001"
        assert ledger.requests[0].program == "reading"
        assert ledger.requests[0].level == "gold"

    @pytest.mark.asyncio
    async def test_empty_period_raises_error(self, unit_env):
        """The period must end after it starts."""
        grant_service = await unit_env.get(GrantService)

        with pytest.raises(ValidationError, match="period"):
            await grant_service.create_grant("lk_001", END, START, "reading", "gold")

    @pytest.mark.asyncio
    async def test_missing_program_raises_error(self, unit_env):
        grant_service = await unit_env.get(GrantService)

        with pytest.raises(ValidationError, match="Program and level"):
            await grant_service.create_grant("lk_001", START, END, "", "gold")

    @pytest.mark.asyncio
    async def test_empty_learner_key_raises_error(self, unit_env):
        grant_service = await unit_env.get(GrantService)
        ledger = await unit_env.get(BenefitLedgerClient)

        with pytest.raises(ValidationError):
            await grant_service.create_grant("", START, END, "reading", "gold")

        assert ledger.requests == []


class TestGetGrant:
    """Tests for get_grant method."""

    @pytest.mark.asyncio
    async def test_get_created_grant(self, unit_env):
        grant_service = await unit_env.get(GrantService)
        created = await grant_service.create_grant(
            "lk_001", START, END, "reading", "gold"
        )

        fetched = await grant_service.get_grant(created.uid)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_unknown_grant_raises_error(self, unit_env):
        grant_service = await unit_env.get(GrantService)

        with pytest.raises(NotFoundError):
            await grant_service.get_grant(GrantId("missing"))
