"""Invitation claim use cases."""

from aevium.application.usecase.claim.generate_subscribe_link import (
    GenerateSubscribeLinkRequest,
    GenerateSubscribeLinkResponse,
    GenerateSubscribeLinkUseCase,
)
from aevium.application.usecase.claim.redeem_claim import (
    RedeemClaimRequest,
    RedeemClaimResponse,
    RedeemClaimUseCase,
)

__all__ = [
    "GenerateSubscribeLinkRequest",
    "GenerateSubscribeLinkResponse",
    "GenerateSubscribeLinkUseCase",
    "RedeemClaimRequest",
    "RedeemClaimResponse",
    "RedeemClaimUseCase",
]
