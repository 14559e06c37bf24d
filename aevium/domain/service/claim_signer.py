"""Invitation claim signing and verification.

A signed claim is the canonical string followed by ``&signature=<hex>``, where
the signature is HMAC-SHA256 over the canonical string keyed with the
invitation secret. The secret is a capability: it never reaches logs, error
messages or the token itself.
"""

import hashlib
import hmac
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone

import logfire

from aevium.domain.error import (
    ClaimExpiredError,
    InvalidSecretError,
    SignatureMismatchError,
)
from aevium.domain.model.claim import InvitationClaim
from aevium.domain.value import SignedClaim
from aevium.domain.value.constants import (
    CLAIM_DURATION_SECONDS,
    CLAIM_PATH,
    DATE_EXPIRES_PARAM,
    FIELD_PREFIX,
    LEARNER_KEY_PARAM,
    PARTNER_PARAM,
    SALT_BYTES,
    SALT_PARAM,
    SIGNATURE_PARAM,
)
from aevium.util.clock import Clock
from aevium.util.entropy import EntropySource

from .base import Service
from .claim_encoder import ClaimEncoder, parse_expiry

_FIXED_PARAMS = (PARTNER_PARAM, LEARNER_KEY_PARAM, SALT_PARAM, DATE_EXPIRES_PARAM)


def _digest(secret: str, message: str) -> str:
    return hmac.new(
        secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def _redact(value: str) -> str:
    return value[:4] + "..."


class ClaimSigner(Service):
    """Domain service for signing and verifying invitation claims."""

    def __init__(
        self, encoder: ClaimEncoder, clock: Clock, entropy: EntropySource
    ) -> None:
        """Initialize claim signer.

        Args:
            encoder: Canonical claim encoder
            clock: Time source for default expiries and verification
            entropy: Randomness source for default salts
        """
        self.encoder = encoder
        self.clock = clock
        self.entropy = entropy

    def sign(self, claim: InvitationClaim, secret: str) -> SignedClaim:
        """Sign a claim.

        Args:
            claim: Claim to sign
            secret: Invitation secret shared with the verifier

        Returns:
            Canonical string with its signature appended

        Raises:
            InvalidSecretError: If the secret is empty
            InvalidClaimError: If the claim fails validation
        """
        with logfire.span(
            "claim_signer.sign", partner=claim.partner, salt=_redact(claim.salt)
        ):
            if not secret:
                raise InvalidSecretError()

            canonical = self.encoder.encode(claim)
            signature = _digest(secret, canonical)

            logfire.info(
                "Claim signed",
                partner=claim.partner,
                expires_at=claim.expires_at.isoformat(),
                field_count=len(claim.fields),
            )
            return SignedClaim(f"{canonical}&{SIGNATURE_PARAM}={signature}")

    def new_claim(
        self,
        partner: str,
        learner_key: str,
        fields: Mapping[str, str] | None = None,
        salt: str | None = None,
        expires_at: datetime | None = None,
        duration_seconds: int = CLAIM_DURATION_SECONDS,
    ) -> InvitationClaim:
        """Build a claim, filling in a fresh salt and default expiry.

        Args:
            partner: Partner identifier
            learner_key: Opaque learner identifier
            fields: Natural-key invitation fields
            salt: One-time value; random hex when omitted
            expires_at: Expiry; now plus ``duration_seconds`` when omitted
            duration_seconds: Claim lifetime used for the default expiry

        Returns:
            Unsigned claim
        """
        if salt is None:
            salt = self.entropy.token_hex(SALT_BYTES)
        if expires_at is None:
            expires_at = self.clock.now() + timedelta(seconds=duration_seconds)

        return InvitationClaim(
            partner=partner,
            learner_key=learner_key,
            salt=salt,
            expires_at=expires_at,
            fields=dict(fields or {}),
        )

    def build_link(
        self,
        base_url: str,
        partner: str,
        learner_key: str,
        secret: str,
        fields: Mapping[str, str] | None = None,
        salt: str | None = None,
        expires_at: datetime | None = None,
    ) -> str:
        """Build a subscribe link carrying a signed claim.

        The URL format is:
            {base_url}/invitation-claim/?partner=...&learner_key=...&salt=...
            &date_expires=...&field_{name}=...&signature=...

        Args:
            base_url: Aevium environment URL, without a trailing slash
            partner: Partner identifier
            learner_key: Opaque learner identifier
            secret: Invitation secret
            fields: Natural-key invitation fields
            salt: One-time value; random hex when omitted
            expires_at: Expiry; 15 minutes from now when omitted

        Returns:
            Subscribe link
        """
        claim = self.new_claim(
            partner, learner_key, fields=fields, salt=salt, expires_at=expires_at
        )
        return self.link_for(base_url, claim, secret)

    def link_for(self, base_url: str, claim: InvitationClaim, secret: str) -> str:
        """Append a signed claim to ``base_url`` as the claim path query."""
        return f"{base_url}{CLAIM_PATH}?{self.sign(claim, secret)}"

    def verify(
        self, token: str, secret: str, now: datetime | None = None
    ) -> InvitationClaim:
        """Verify a signed claim and reconstruct it.

        Parameters may arrive in any order; the canonical string is rebuilt
        from their values before the signature is checked.

        Args:
            token: Signed claim (the link's query string)
            secret: Invitation secret
            now: Verification time; the clock's current time when omitted

        Returns:
            The claim that was signed

        Raises:
            InvalidSecretError: If the secret is empty
            SignatureMismatchError: If the token is malformed, altered, or
                signed with a different secret
            ClaimExpiredError: If the signature is valid but the claim expired
            InvalidClaimError: If an authentic claim carries an unreadable expiry
        """
        with logfire.span("claim_signer.verify"):
            if not secret:
                raise InvalidSecretError()

            params, fields, signature = self._parse(token)
            canonical = self.encoder.canonicalize(
                params[PARTNER_PARAM],
                params[LEARNER_KEY_PARAM],
                params[SALT_PARAM],
                params[DATE_EXPIRES_PARAM],
                fields,
            )

            expected = _digest(secret, canonical)
            if not hmac.compare_digest(
                expected.encode("ascii"), signature.encode("utf-8")
            ):
                logfire.warn(
                    "Claim signature mismatch", partner=params[PARTNER_PARAM]
                )
                raise SignatureMismatchError()

            expires_at = parse_expiry(params[DATE_EXPIRES_PARAM])
            if now is None:
                now = self.clock.now()
            elif now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            if now > expires_at:
                logfire.info(
                    "Claim expired",
                    partner=params[PARTNER_PARAM],
                    date_expires=params[DATE_EXPIRES_PARAM],
                )
                raise ClaimExpiredError(params[DATE_EXPIRES_PARAM])

            logfire.info("Claim verified", partner=params[PARTNER_PARAM])
            return InvitationClaim(
                partner=params[PARTNER_PARAM],
                learner_key=params[LEARNER_KEY_PARAM],
                salt=params[SALT_PARAM],
                expires_at=expires_at,
                fields=fields,
            )

    @staticmethod
    def _parse(token: str) -> tuple[dict[str, str], dict[str, str], str]:
        """Split a token into fixed parameters, extra fields and signature.

        A token that does not have the expected shape cannot be authenticated,
        so structural defects are reported as signature mismatches.
        """
        token = token.removeprefix("?")
        params: dict[str, str] = {}
        fields: dict[str, str] = {}
        signature: str | None = None

        for pair in token.split("&"):
            key, sep, value = pair.partition("=")
            if not sep:
                raise SignatureMismatchError("Claim is malformed")
            if key == SIGNATURE_PARAM:
                if signature is not None:
                    raise SignatureMismatchError("Claim is malformed")
                signature = value
            elif key in _FIXED_PARAMS:
                if key in params:
                    raise SignatureMismatchError("Claim is malformed")
                params[key] = value
            elif key.startswith(FIELD_PREFIX):
                name = key[len(FIELD_PREFIX) :]
                if name in fields:
                    raise SignatureMismatchError("Claim is malformed")
                fields[name] = value
            else:
                raise SignatureMismatchError("Claim is malformed")

        if signature is None or len(params) != len(_FIXED_PARAMS):
            raise SignatureMismatchError("Claim is malformed")

        return params, fields, signature
