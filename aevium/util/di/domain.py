"""Domain layer DI providers."""

from dishka import Scope, provide

from aevium.domain.service import (
    BenefitLedgerClient,
    ClaimEncoder,
    ClaimSigner,
    GrantService,
)
from aevium.util.clock import Clock
from aevium.util.di.base import ProviderBase
from aevium.util.entropy import EntropySource


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Claim services hold no mutable state; they are request-scoped only to
    share the lifecycle of the use cases built on them.
    """

    scope = Scope.REQUEST

    @provide
    def get_claim_encoder(self, clock: Clock) -> ClaimEncoder:
        """Provide canonical claim encoder."""
        return ClaimEncoder(clock=clock)

    @provide
    def get_claim_signer(
        self, encoder: ClaimEncoder, clock: Clock, entropy: EntropySource
    ) -> ClaimSigner:
        """Provide claim signing domain service."""
        return ClaimSigner(encoder=encoder, clock=clock, entropy=entropy)

    @provide
    def get_grant_service(self, ledger_client: BenefitLedgerClient) -> GrantService:
        """Provide grant domain service."""
        return GrantService(ledger_client=ledger_client)
