"""Mock config providers for testing."""

from datetime import datetime, timezone

from dishka import Scope, provide
from pydantic import SecretStr

from aevium.config import InvitationSettings, LedgerSettings, Settings
from aevium.util.clock import Clock, FixedClock
from aevium.util.di.core import ConfigProvider
from aevium.util.entropy import EntropySource, FixedEntropySource

TEST_SECRET = "s3cr3t"
TEST_NOW = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


class MockConfigProvider(ConfigProvider):
    """Mock config provider with a pinned secret, clock and salt source."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide test settings."""
        return Settings(
            environment="test",
            invitation=InvitationSettings(
                base_url="https://aevium.test",
                partner="acme",
                secret=SecretStr(TEST_SECRET),
                fields={"code": "ABC123"},
            ),
            ledger=LedgerSettings(
                base_url="https://aevium.test",
                api_key=SecretStr("test-api-key"),
                default_program="reading",
                default_program_level="gold",
            ),
        )

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
        """Provide a clock frozen at TEST_NOW."""
        return FixedClock(TEST_NOW)

    @provide(scope=Scope.APP)
    def provide_entropy(self) -> EntropySource:
        """Provide deterministic randomness."""
        return FixedEntropySource()
