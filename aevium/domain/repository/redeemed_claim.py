"""Redeemed claim repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime


class RedeemedClaimRepository(ABC):
    """Record of claims already redeemed, keyed by partner and salt.

    Signing is stateless, so replay prevention lives on the receiving side.
    Entries only need to outlive the claim they guard.
    """

    @abstractmethod
    async def add(self, partner: str, salt: str, expires_at: datetime) -> bool:
        """Record a redemption.

        Args:
            partner: Partner the claim is scoped to
            salt: The claim's single-use salt
            expires_at: When the claim stops being valid anyway

        Returns:
            True if newly recorded, False if it was already redeemed
        """
        pass

    @abstractmethod
    async def contains(self, partner: str, salt: str) -> bool:
        """Check whether a claim has been redeemed."""
        pass

    @abstractmethod
    async def purge_expired(self, now: datetime) -> int:
        """Drop entries whose claims have expired.

        Returns:
            Number of entries removed
        """
        pass
