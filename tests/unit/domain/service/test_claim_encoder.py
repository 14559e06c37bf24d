"""Unit tests for ClaimEncoder."""

from datetime import datetime, timedelta, timezone

import pytest

from aevium.domain.error import InvalidClaimError
from aevium.domain.model import InvitationClaim
from aevium.domain.service import ClaimEncoder, format_expiry, parse_expiry
from aevium.util.clock import FixedClock

REFERENCE_CANONICAL = (
    "partner=acme&learner_key=lk_001&salt=deadbeef"
    "&date_expires=2025-01-01T00:15:00&field_code=ABC123"
)


class TestEncode:
    """Tests for encode method."""

    def test_reference_claim(self, encoder, acme_claim):
        """The reference claim should encode to the documented string."""
        assert encoder.encode(acme_claim) == REFERENCE_CANONICAL

    def test_fields_sorted_regardless_of_insertion_order(self, encoder, acme_claim):
        """Field order should not depend on how the mapping was built."""
        forward = acme_claim.model_copy(
            update={"fields": {"alpha": "1", "beta": "2", "gamma": "3"}}
        )
        backward = acme_claim.model_copy(
            update={"fields": {"gamma": "3", "beta": "2", "alpha": "1"}}
        )

        encoded = encoder.encode(forward)

        assert encoded == encoder.encode(backward)
        assert encoded.endswith("&field_alpha=1&field_beta=2&field_gamma=3")

    def test_encoding_is_repeatable(self, encoder, acme_claim):
        """Encoding the same claim twice should give identical bytes."""
        assert encoder.encode(acme_claim) == encoder.encode(acme_claim)

    def test_no_extra_fields(self, encoder, acme_claim):
        """A claim without fields should end at date_expires."""
        claim = acme_claim.model_copy(update={"fields": {}})

        assert encoder.encode(claim) == (
            "partner=acme&learner_key=lk_001&salt=deadbeef"
            "&date_expires=2025-01-01T00:15:00"
        )

    def test_values_are_not_url_encoded(self, encoder, acme_claim):
        """Values should be emitted verbatim."""
        claim = acme_claim.model_copy(update={"fields": {"note": "a b/c"}})

        assert encoder.encode(claim).endswith("&field_note=a b/c")

    def test_expiry_truncated_to_seconds(self, encoder, acme_claim):
        """Sub-second precision should be dropped."""
        claim = InvitationClaim(
            partner="acme",
            learner_key="lk_001",
            salt="deadbeef",
            expires_at=datetime(2025, 1, 1, 0, 15, 0, 987654),
        )

        assert "&date_expires=2025-01-01T00:15:00" in encoder.encode(claim)

    def test_expiry_converted_to_utc(self, encoder):
        """Aware expiries in other zones should be rendered in UTC."""
        plus_two = timezone(timedelta(hours=2))
        claim = InvitationClaim(
            partner="acme",
            learner_key="lk_001",
            salt="deadbeef",
            expires_at=datetime(2025, 1, 1, 2, 15, 0, tzinfo=plus_two),
        )

        assert "&date_expires=2025-01-01T00:15:00" in encoder.encode(claim)


class TestEncodeValidation:
    """Tests for claim validation during encode."""

    def test_empty_partner_raises_error(self, encoder, acme_claim):
        """An empty partner should be rejected."""
        claim = acme_claim.model_copy(update={"partner": ""})

        with pytest.raises(InvalidClaimError, match="Partner"):
            encoder.encode(claim)

    def test_empty_learner_key_raises_error(self, encoder, acme_claim):
        """An empty learner key should be rejected."""
        claim = acme_claim.model_copy(update={"learner_key": ""})

        with pytest.raises(InvalidClaimError, match="Learner key"):
            encoder.encode(claim)

    @pytest.mark.parametrize(
        "name", ["partner", "learner_key", "salt", "date_expires", "signature"]
    )
    def test_reserved_field_name_raises_error(self, encoder, acme_claim, name):
        """Fields must not reuse reserved parameter names."""
        claim = acme_claim.model_copy(update={"fields": {name: "x"}})

        with pytest.raises(InvalidClaimError, match=name):
            encoder.encode(claim)

    def test_past_expiry_raises_error(self, encoder, acme_claim, clock):
        """A claim that already expired cannot be encoded."""
        clock.advance(3600)

        with pytest.raises(InvalidClaimError, match="future"):
            encoder.encode(acme_claim)

    def test_expiry_equal_to_now_raises_error(self, acme_claim):
        """Expiry must be strictly after the current time."""
        encoder = ClaimEncoder(FixedClock(datetime(2025, 1, 1, 0, 15, 0)))

        with pytest.raises(InvalidClaimError):
            encoder.encode(acme_claim)

    def test_canonicalize_skips_validation(self):
        """canonicalize should build the string without checking time."""
        canonical = ClaimEncoder.canonicalize(
            "acme", "lk_001", "deadbeef", "2000-01-01T00:00:00", {"code": "ABC123"}
        )

        assert canonical == (
            "partner=acme&learner_key=lk_001&salt=deadbeef"
            "&date_expires=2000-01-01T00:00:00&field_code=ABC123"
        )


class TestExpiryFormat:
    """Tests for format_expiry and parse_expiry."""

    def test_format_naive_datetime(self):
        assert format_expiry(datetime(2025, 6, 30, 23, 59, 59)) == "2025-06-30T23:59:59"

    def test_parse_returns_aware_utc(self):
        parsed = parse_expiry("2025-06-30T23:59:59")

        assert parsed == datetime(2025, 6, 30, 23, 59, 59, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value", ["", "2025-06-30", "2025-06-30T23:59:59Z", "2025-06-30T23:59:59.5"]
    )
    def test_parse_rejects_other_formats(self, value):
        with pytest.raises(InvalidClaimError):
            parse_expiry(value)
