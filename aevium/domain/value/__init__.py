"""Domain value objects."""

from aevium.domain.value.identifiers import GrantId
from aevium.domain.value.types import LearnerKey, Signature, SignedClaim

__all__ = [
    # Identifiers
    "GrantId",
    # Types
    "LearnerKey",
    "Signature",
    "SignedClaim",
]
