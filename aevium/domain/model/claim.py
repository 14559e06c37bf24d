"""Invitation claim entity.

A claim authenticates a request to enroll a specific learner under a specific
partner. It is built fresh for every invitation link, signed once, and
consumed once by the receiving side.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from aevium.domain.model.common import DomainModel


class InvitationClaim(DomainModel):
    """Invitation claim - the set of fields covered by the signature.

    Business rules (enforced when the claim is encoded for signing):
    - partner and learner_key must be non-empty
    - expires_at must be strictly in the future at signing time
    - fields must not reuse a reserved parameter name
    """

    partner: str
    learner_key: str  # Opaque, never PII
    salt: str  # Single-use entropy
    expires_at: datetime  # UTC, whole seconds
    fields: dict[str, str] = Field(default_factory=dict)  # Natural-key attributes

    @field_validator("expires_at")
    @classmethod
    def normalize_expires_at(cls, v: datetime) -> datetime:
        """Convert to UTC and drop sub-second precision.

        Naive datetimes are taken to be UTC already.
        """
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        else:
            v = v.astimezone(timezone.utc)
        return v.replace(microsecond=0)
