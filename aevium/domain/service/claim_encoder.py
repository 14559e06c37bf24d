"""Canonical encoding of invitation claims.

The canonical string is what gets signed, so signer and verifier must agree
on it byte for byte:

    partner=<partner>&learner_key=<key>&salt=<salt>&date_expires=<YYYY-MM-DDTHH:MM:SS>[&field_<key>=<value>]*

Extra fields are emitted sorted by key so the result does not depend on the
order in which the mapping was populated. Values are not URL-encoded; a value
containing ``&`` or ``=`` will not survive parsing on the receiving side.
"""

from collections.abc import Mapping
from datetime import datetime, timezone

from aevium.domain.error import InvalidClaimError
from aevium.domain.model.claim import InvitationClaim
from aevium.domain.value.constants import (
    DATE_EXPIRES_FORMAT,
    DATE_EXPIRES_PARAM,
    FIELD_PREFIX,
    LEARNER_KEY_PARAM,
    PARTNER_PARAM,
    RESERVED_NAMES,
    SALT_PARAM,
)
from aevium.util.clock import Clock

from .base import Service


def format_expiry(expires_at: datetime) -> str:
    """Render an expiry as UTC ISO-8601 truncated to the second."""
    if expires_at.tzinfo is not None:
        expires_at = expires_at.astimezone(timezone.utc)
    return expires_at.strftime(DATE_EXPIRES_FORMAT)


def parse_expiry(date_expires: str) -> datetime:
    """Parse a ``date_expires`` value into an aware UTC datetime.

    Raises:
        InvalidClaimError: If the value is not in YYYY-MM-DDTHH:MM:SS form
    """
    try:
        parsed = datetime.strptime(date_expires, DATE_EXPIRES_FORMAT)
    except ValueError:
        raise InvalidClaimError(f"Invalid date_expires: {date_expires!r}")
    return parsed.replace(tzinfo=timezone.utc)


class ClaimEncoder(Service):
    """Builds the canonical string for an invitation claim."""

    def __init__(self, clock: Clock) -> None:
        """Initialize claim encoder.

        Args:
            clock: Time source used to reject claims that already expired
        """
        self.clock = clock

    def encode(self, claim: InvitationClaim) -> str:
        """Validate a claim and return its canonical string.

        Args:
            claim: Claim to encode

        Returns:
            Canonical string, ready to be signed

        Raises:
            InvalidClaimError: If partner or learner key is empty, a field
                reuses a reserved name, or the expiry is not in the future
        """
        if not claim.partner:
            raise InvalidClaimError("Partner must not be empty")
        if not claim.learner_key:
            raise InvalidClaimError("Learner key must not be empty")

        reserved = sorted(RESERVED_NAMES.intersection(claim.fields))
        if reserved:
            raise InvalidClaimError(
                f"Field names collide with reserved parameters: {', '.join(reserved)}"
            )

        if claim.expires_at <= self.clock.now():
            raise InvalidClaimError("Expiration date must be in the future")

        return self.canonicalize(
            claim.partner,
            claim.learner_key,
            claim.salt,
            format_expiry(claim.expires_at),
            claim.fields,
        )

    @staticmethod
    def canonicalize(
        partner: str,
        learner_key: str,
        salt: str,
        date_expires: str,
        fields: Mapping[str, str],
    ) -> str:
        """Join claim parameters in canonical order.

        Pure string building with no validation; the verifier uses it to
        rebuild the signed bytes from whatever values it received.
        """
        params = [
            f"{PARTNER_PARAM}={partner}",
            f"{LEARNER_KEY_PARAM}={learner_key}",
            f"{SALT_PARAM}={salt}",
            f"{DATE_EXPIRES_PARAM}={date_expires}",
        ]
        params.extend(f"{FIELD_PREFIX}{key}={fields[key]}" for key in sorted(fields))
        return "&".join(params)
