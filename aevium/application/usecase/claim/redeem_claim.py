"""Redeem claim use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from aevium.application.usecase.base import BaseUseCase
from aevium.config import InvitationSettings
from aevium.domain.error import ClaimReplayError
from aevium.domain.repository import RedeemedClaimRepository
from aevium.domain.service import ClaimSigner
from aevium.util.clock import Clock


class RedeemClaimRequest(BaseModel):
    """Redeem claim request."""

    token: str


class RedeemClaimResponse(BaseModel):
    """Redeem claim response."""

    partner: str
    learner_key: str
    fields: dict[str, str]
    expires_at: datetime


class RedeemClaimUseCase(BaseUseCase):
    """Use case for accepting an invitation claim on the receiving side.

    Verifies the token and consumes it: a claim can be redeemed once.
    """

    def __init__(
        self,
        claim_signer: ClaimSigner,
        redeemed_claim_repository: RedeemedClaimRepository,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> None:
        """Initialize redeem claim use case.

        Args:
            claim_signer: Claim verification domain service
            redeemed_claim_repository: Record of consumed claims
            invitation_settings: Configured secret
            clock: Time source
        """
        self.claim_signer = claim_signer
        self.redeemed_claim_repository = redeemed_claim_repository
        self.invitation_settings = invitation_settings
        self.clock = clock

    async def execute(self, request: RedeemClaimRequest) -> RedeemClaimResponse:
        """Verify and consume a signed claim.

        Args:
            request: Request carrying the token (the link's query string)

        Returns:
            The authenticated claim

        Raises:
            SignatureMismatchError: If the token was altered or forged
            ClaimExpiredError: If the claim is past its expiry
            ClaimReplayError: If the claim was already redeemed
        """
        with logfire.span("redeem_claim.execute"):
            secret = self.invitation_settings.secret
            now = self.clock.now()
            claim = self.claim_signer.verify(
                request.token, secret.get_secret_value() if secret else "", now=now
            )

            await self.redeemed_claim_repository.purge_expired(now)
            added = await self.redeemed_claim_repository.add(
                claim.partner, claim.salt, claim.expires_at
            )
            if not added:
                logfire.warn("Claim replayed", partner=claim.partner)
                raise ClaimReplayError(claim.partner)

            logfire.info("Claim redeemed", partner=claim.partner)
            return RedeemClaimResponse(
                partner=claim.partner,
                learner_key=claim.learner_key,
                fields=claim.fields,
                expires_at=claim.expires_at,
            )
