"""Benefit ledger adapter."""

from .client import MockBenefitLedgerClient, RealBenefitLedgerClient

__all__ = ["MockBenefitLedgerClient", "RealBenefitLedgerClient"]
