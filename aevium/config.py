"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aevium.domain.value.constants import CLAIM_DURATION_SECONDS


class InvitationSettings(BaseModel):
    """Invitation claim configuration."""

    # The URL at which the target Aevium environment is hosted.
    # Must not include a trailing slash.
    base_url: str = "https://aeviumeducation.com"

    # Human-readable partner identifier; learner keys and invitations are
    # scoped to it
    partner: str = "example-partner"

    # Shared secret used to sign claims. Never exposed outside partner systems.
    secret: SecretStr | None = None

    # Natural-key fields identifying the invitation (e.g. {"code": "ABC123"})
    fields: dict[str, str] = {}

    claim_duration_seconds: int = CLAIM_DURATION_SECONDS

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Reject a trailing slash; links are built by plain concatenation."""
        if v.endswith("/"):
            raise ValueError("Invitation base URL must not end with a slash")
        return v


class LedgerSettings(BaseModel):
    """Benefit ledger API configuration."""

    base_url: str = "https://aeviumeducation.com"
    api_key: SecretStr | None = None
    timeout: float = 30.0

    # Program and level used when a grant request omits them.
    # Request these values from your Aevium representative.
    default_program: str | None = None
    default_program_level: str | None = None


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values come from environment variables and an optional .env file.
    Nested settings use a double underscore:

        INVITATION__PARTNER=acme
        INVITATION__SECRET=...
        INVITATION__FIELDS='{"code": "ABC123"}'
        LEDGER__BASE_URL=https://staging.aeviumeducation.com
        LEDGER__API_KEY=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    invitation: InvitationSettings = InvitationSettings()
    ledger: LedgerSettings = LedgerSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
