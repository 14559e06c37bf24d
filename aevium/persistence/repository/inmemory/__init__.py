"""In-memory repository implementations."""

from .redeemed_claim import InMemoryRedeemedClaimRepository

__all__ = ["InMemoryRedeemedClaimRepository"]
