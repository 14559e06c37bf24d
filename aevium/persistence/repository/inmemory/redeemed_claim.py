"""In-memory redeemed claim repository.

Holds state for the life of the process only; a multi-instance deployment
needs a shared store behind the same interface.
"""

import asyncio
from datetime import datetime

from aevium.domain.repository.redeemed_claim import RedeemedClaimRepository


class InMemoryRedeemedClaimRepository(RedeemedClaimRepository):
    """In-memory implementation of RedeemedClaimRepository."""

    def __init__(self) -> None:
        self._redeemed: dict[tuple[str, str], datetime] = {}
        self._lock = asyncio.Lock()

    async def add(self, partner: str, salt: str, expires_at: datetime) -> bool:
        """Record a redemption unless already present."""
        async with self._lock:
            key = (partner, salt)
            if key in self._redeemed:
                return False
            self._redeemed[key] = expires_at
            return True

    async def contains(self, partner: str, salt: str) -> bool:
        """Check whether a claim has been redeemed."""
        return (partner, salt) in self._redeemed

    async def purge_expired(self, now: datetime) -> int:
        """Drop entries whose claims have expired."""
        async with self._lock:
            expired = [key for key, expires in self._redeemed.items() if expires < now]
            for key in expired:
                del self._redeemed[key]
            return len(expired)
