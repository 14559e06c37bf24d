"""Core DI providers: settings and sources of time and randomness."""

from dishka import Scope, provide

from aevium.config import InvitationSettings, LedgerSettings, Settings
from aevium.util.clock import Clock, SystemClock
from aevium.util.di.base import ProviderBase
from aevium.util.entropy import EntropySource, SystemEntropySource


class ConfigProvider(ProviderBase):
    """Config component base.

    Mockable so tests can pin the secret, the clock and the salt source.
    """

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitation

    @provide(scope=Scope.APP)
    def provide_ledger_settings(self, settings: Settings) -> LedgerSettings:
        """Provide benefit ledger settings."""
        return settings.ledger

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        """Provide wall clock."""
        return SystemClock()

    @provide(scope=Scope.APP)
    def provide_entropy(self) -> EntropySource:
        """Provide OS randomness."""
        return SystemEntropySource()
