"""Invitation claim routes.

The subscribe link points here; its query string is the signed claim.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from aevium.application.usecase.claim import (
    RedeemClaimRequest,
    RedeemClaimResponse,
    RedeemClaimUseCase,
)
from aevium.domain.error import (
    ClaimExpiredError,
    ClaimReplayError,
    InvalidClaimError,
    InvalidSecretError,
    SignatureMismatchError,
)
from aevium.domain.value.constants import CLAIM_PATH

router = APIRouter(tags=["claims"], route_class=DishkaRoute)


@router.get(CLAIM_PATH, response_model=RedeemClaimResponse)
async def redeem_invitation_claim(
    request: Request,
    redeem_claim_use_case: FromDishka[RedeemClaimUseCase],
) -> RedeemClaimResponse:
    """Redeem the signed claim carried in the query string.

    The raw query string is verified as received; it is never re-encoded.

    Raises:
        HTTPException: 401 if the claim was tampered with, 409 if already
            redeemed, 410 if expired, 400 if malformed
    """
    token = request.url.query
    if not token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing invitation claim",
        )

    try:
        return await redeem_claim_use_case.execute(RedeemClaimRequest(token=token))
    except SignatureMismatchError:
        logfire.warn(
            "Rejected invitation claim with invalid signature",
            client_host=request.client.host if request.client else None,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid invitation claim",
        )
    except ClaimReplayError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Invitation claim has already been used",
        )
    except ClaimExpiredError:
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="Invitation claim has expired; request a new link",
        )
    except InvalidClaimError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except InvalidSecretError:
        logfire.error("Invitation secret is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Invitation claims are not configured",
        )
