"""Domain services."""

from .base import Service
from .claim_encoder import ClaimEncoder, format_expiry, parse_expiry
from .claim_signer import ClaimSigner
from .grant_service import BenefitLedgerClient, GrantService

__all__ = [
    "BenefitLedgerClient",
    "ClaimEncoder",
    "ClaimSigner",
    "GrantService",
    "Service",
    "format_expiry",
    "parse_expiry",
]
