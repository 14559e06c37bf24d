"""Test configuration and fixtures."""

from datetime import datetime

import pytest

from aevium.domain.model import InvitationClaim
from aevium.domain.service import ClaimEncoder, ClaimSigner
from aevium.util.clock import FixedClock
from aevium.util.entropy import FixedEntropySource
from tests.di import TEST_NOW  # also registers the mock providers


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at 2025-01-01T00:00:00Z."""
    return FixedClock(TEST_NOW)

@pytest.fixture
def encoder(clock) -> ClaimEncoder:
    return ClaimEncoder(clock)

@pytest.fixture
def signer(encoder, clock) -> ClaimSigner:
    return ClaimSigner(encoder, clock, FixedEntropySource())

@pytest.fixture
def acme_claim() -> InvitationClaim:
    """The documented reference claim."""
    return InvitationClaim(
        partner="acme",
        learner_key="lk_001",
        salt="deadbeef",
        expires_at=datetime(2025, 1, 1, 0, 15, 0),
        fields={"code": "ABC123"},
    )
