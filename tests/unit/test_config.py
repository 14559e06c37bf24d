"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from aevium.config import InvitationSettings, Settings


class TestInvitationSettings:
    def test_defaults(self):
        settings = InvitationSettings()

        assert settings.claim_duration_seconds == 900
        assert settings.base_url == "https://aeviumeducation.com"
        assert settings.secret is None

    def test_trailing_slash_rejected(self):
        with pytest.raises(ValidationError):
            InvitationSettings(base_url="https://aeviumeducation.com/")


class TestSettings:
    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("INVITATION__PARTNER", "acme")
        monkeypatch.setenv("INVITATION__SECRET", "s3cr3t")
        monkeypatch.setenv("LEDGER__DEFAULT_PROGRAM", "reading")

        settings = Settings()

        assert settings.invitation.partner == "acme"
        assert settings.invitation.secret.get_secret_value() == "s3cr3t"
        assert settings.ledger.default_program == "reading"

    def test_secret_hidden_in_repr(self, monkeypatch):
        monkeypatch.setenv("INVITATION__SECRET", "s3cr3t")

        assert "s3cr3t" not in repr(Settings())
