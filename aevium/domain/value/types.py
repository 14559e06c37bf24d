"""Domain value objects for invitation claims."""

import re

from pydantic import field_validator

from aevium.domain.value.common import RootValueObject

_HEX_SIGNATURE = re.compile(r"^[0-9a-f]{64}$")


class LearnerKey(RootValueObject[str]):
    """Opaque per-learner identifier.

    Unique and stable within the partner's system. It may be visible to
    learners and Aevium staff and must not contain identifying information.
    """

    @field_validator("root")
    @classmethod
    def validate_learner_key(cls, v: str) -> str:
        """Validate learner key is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Learner key must be 1-255 characters")
        return v

class Signature(RootValueObject[str]):
    """Lower-case hex HMAC-SHA256 digest."""

    @field_validator("root")
    @classmethod
    def validate_signature(cls, v: str) -> str:
        """Validate 64 lower-case hex characters."""
        if not _HEX_SIGNATURE.match(v):
            raise ValueError("Signature must be 64 lower-case hex characters")
        return v

class SignedClaim(RootValueObject[str]):
    """Canonical claim string followed by ``&signature=<hex>``.

    Ready to be appended to a URL as its query string.
    """

    @property
    def canonical(self) -> str:
        """The signed portion of the token."""
        canonical, _, _ = self.root.rpartition("&signature=")
        return canonical

    @property
    def signature(self) -> Signature:
        """The signature carried by the token."""
        _, _, signature = self.root.rpartition("&signature=")
        return Signature(signature)
