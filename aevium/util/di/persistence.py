"""Persistence DI providers."""

from dishka import Scope, provide

from aevium.domain.repository import RedeemedClaimRepository
from aevium.persistence.repository.inmemory import InMemoryRedeemedClaimRepository
from aevium.util.di.base import ProviderBase


class ProdPersistenceProvider(ProviderBase):
    """Persistence provider - concrete, no mocks needed.

    The redeemed claim record is APP-scoped: it must outlive the request
    that redeemed a claim to reject later replays.
    """

    @provide(scope=Scope.APP)
    def get_redeemed_claim_repository(self) -> RedeemedClaimRepository:
        """Provide in-memory redeemed claim repository."""
        return InMemoryRedeemedClaimRepository()
