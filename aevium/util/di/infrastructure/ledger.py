"""Benefit ledger infrastructure providers."""

from dishka import Scope, provide

from aevium.adapter.ledger.client import RealBenefitLedgerClient
from aevium.config import LedgerSettings
from aevium.domain.service import BenefitLedgerClient
from aevium.util.di.base import ProviderBase
from aevium.util.error import ConfigurationError


class LedgerProvider(ProviderBase):
    """Benefit ledger component base."""

    __mock_component__ = "ledger"


class ProdLedgerProvider(LedgerProvider):
    """Production benefit ledger provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_ledger_client(self, ledger_settings: LedgerSettings) -> BenefitLedgerClient:
        """Provide benefit ledger HTTP client.

        Raises:
            ConfigurationError: If the ledger API key is not configured
        """
        if not ledger_settings.api_key:
            raise ConfigurationError("Benefit ledger API key must be configured")

        return RealBenefitLedgerClient(
            base_url=ledger_settings.base_url,
            api_key=ledger_settings.api_key.get_secret_value(),
            timeout=ledger_settings.timeout,
        )
