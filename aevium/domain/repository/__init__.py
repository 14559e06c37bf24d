"""Domain repository interfaces."""

from .redeemed_claim import RedeemedClaimRepository

__all__ = ["RedeemedClaimRepository"]
