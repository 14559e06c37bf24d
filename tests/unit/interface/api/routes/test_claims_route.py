"""Tests for the invitation claim endpoint."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from aevium.domain.service import ClaimEncoder, ClaimSigner
from aevium.interface.api.app import create_app
from aevium.util.clock import FixedClock
from aevium.util.entropy import FixedEntropySource
from tests.di import TEST_NOW, TEST_SECRET, build_test_container


@pytest.fixture
def client():
    """Create test client backed by the mock container."""
    app = create_app(container=build_test_container(with_fastapi=True), instrument=False)
    return TestClient(app)


def _signed_query(salt: str = "deadbeef", issued_at=TEST_NOW, secret=TEST_SECRET, **kw):
    clock = FixedClock(issued_at)
    signer = ClaimSigner(ClaimEncoder(clock), clock, FixedEntropySource())
    claim = signer.new_claim("acme", "lk_001", fields={"code": "ABC123"}, salt=salt, **kw)
    return signer.sign(claim, secret).root


class TestRedeemInvitationClaim:
    """Tests for GET /invitation-claim/."""

    def test_valid_claim(self, client):
        """A valid claim should be redeemed."""
        response = client.get(f"/invitation-claim/?{_signed_query()}")

        assert response.status_code == 200
        data = response.json()
        assert data["partner"] == "acme"
        assert data["learner_key"] == "lk_001"
        assert data["fields"] == {"code": "ABC123"}

    def test_replayed_claim(self, client):
        """The same link cannot be used twice."""
        url = f"/invitation-claim/?{_signed_query()}"
        client.get(url)

        response = client.get(url)

        assert response.status_code == 409

    def test_tampered_claim(self, client):
        query = _signed_query().replace("lk_001", "lk_999")

        response = client.get(f"/invitation-claim/?{query}")

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid invitation claim"

    def test_wrong_secret(self, client):
        response = client.get(f"/invitation-claim/?{_signed_query(secret='other')}")

        assert response.status_code == 401

    def test_expired_claim(self, client):
        """A claim issued an hour ago for 15 minutes has expired."""
        query = _signed_query(issued_at=TEST_NOW - timedelta(hours=1))

        response = client.get(f"/invitation-claim/?{query}")

        assert response.status_code == 410

    def test_missing_claim(self, client):
        response = client.get("/invitation-claim/")

        assert response.status_code == 400


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
