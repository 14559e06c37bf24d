"""Application layer DI providers."""

from dishka import Scope, provide

from aevium.application.usecase.claim import (
    GenerateSubscribeLinkUseCase,
    RedeemClaimUseCase,
)
from aevium.application.usecase.grant import CreateGrantUseCase, GetGrantUseCase
from aevium.config import InvitationSettings, LedgerSettings
from aevium.domain.repository import RedeemedClaimRepository
from aevium.domain.service import ClaimSigner, GrantService
from aevium.util.clock import Clock
from aevium.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Claim use cases
    @provide(scope=Scope.REQUEST)
    def get_generate_subscribe_link_use_case(
        self, claim_signer: ClaimSigner, invitation_settings: InvitationSettings
    ) -> GenerateSubscribeLinkUseCase:
        """Provide generate subscribe link use case."""
        return GenerateSubscribeLinkUseCase(
            claim_signer=claim_signer, invitation_settings=invitation_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_redeem_claim_use_case(
        self,
        claim_signer: ClaimSigner,
        redeemed_claim_repository: RedeemedClaimRepository,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> RedeemClaimUseCase:
        """Provide redeem claim use case."""
        return RedeemClaimUseCase(
            claim_signer=claim_signer,
            redeemed_claim_repository=redeemed_claim_repository,
            invitation_settings=invitation_settings,
            clock=clock,
        )

    # Grant use cases
    @provide(scope=Scope.REQUEST)
    def get_create_grant_use_case(
        self, grant_service: GrantService, ledger_settings: LedgerSettings, clock: Clock
    ) -> CreateGrantUseCase:
        """Provide create grant use case."""
        return CreateGrantUseCase(
            grant_service=grant_service, ledger_settings=ledger_settings, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_get_grant_use_case(self, grant_service: GrantService) -> GetGrantUseCase:
        """Provide get grant use case."""
        return GetGrantUseCase(grant_service=grant_service)
