"""Mock benefit ledger providers for testing."""

from dishka import Scope, provide

from aevium.adapter.ledger.client import MockBenefitLedgerClient
from aevium.domain.service import BenefitLedgerClient
from aevium.util.di.infrastructure.ledger import LedgerProvider


class MockLedgerProvider(LedgerProvider):
    """Mock ledger provider using the in-memory ledger client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_ledger_client(self) -> BenefitLedgerClient:
        """Provide mock benefit ledger client."""
        return MockBenefitLedgerClient()
