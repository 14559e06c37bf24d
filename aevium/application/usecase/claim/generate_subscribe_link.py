"""Generate subscribe link use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from aevium.application.usecase.base import BaseUseCase
from aevium.config import InvitationSettings
from aevium.domain.service import ClaimSigner


class GenerateSubscribeLinkRequest(BaseModel):
    """Generate subscribe link request.

    Omitted partner and fields fall back to the configured invitation.
    """

    learner_key: str
    partner: str | None = None
    fields: dict[str, str] | None = None
    salt: str | None = None
    expires_at: datetime | None = None


class GenerateSubscribeLinkResponse(BaseModel):
    """Generate subscribe link response."""

    link: str
    partner: str
    expires_at: datetime


class GenerateSubscribeLinkUseCase(BaseUseCase):
    """Use case for directing a learner to the Aevium subscription flow.

    The link carries a signed claim, so Aevium can authenticate the learner
    without calling back into the partner's systems.
    """

    def __init__(
        self, claim_signer: ClaimSigner, invitation_settings: InvitationSettings
    ) -> None:
        """Initialize generate subscribe link use case.

        Args:
            claim_signer: Claim signing domain service
            invitation_settings: Configured partner, fields and secret
        """
        self.claim_signer = claim_signer
        self.invitation_settings = invitation_settings

    async def execute(
        self, request: GenerateSubscribeLinkRequest
    ) -> GenerateSubscribeLinkResponse:
        """Build a signed subscribe link.

        Args:
            request: Learner and optional claim overrides

        Returns:
            Link and the moment it stops working

        Raises:
            InvalidSecretError: If no invitation secret is configured
            InvalidClaimError: If the claim fails validation
        """
        settings = self.invitation_settings
        partner = request.partner or settings.partner
        fields = settings.fields if request.fields is None else request.fields

        with logfire.span("generate_subscribe_link.execute", partner=partner):
            claim = self.claim_signer.new_claim(
                partner,
                request.learner_key,
                fields=fields,
                salt=request.salt,
                expires_at=request.expires_at,
                duration_seconds=settings.claim_duration_seconds,
            )
            secret = settings.secret.get_secret_value() if settings.secret else ""
            link = self.claim_signer.link_for(settings.base_url, claim, secret)

            return GenerateSubscribeLinkResponse(
                link=link,
                partner=claim.partner,
                expires_at=claim.expires_at,
            )
