"""Domain model entities."""

from aevium.domain.model.claim import InvitationClaim
from aevium.domain.model.grant import BenefitGrant, BenefitGrantRequest

__all__ = [
    "BenefitGrant",
    "BenefitGrantRequest",
    "InvitationClaim",
]
