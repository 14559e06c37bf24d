"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ClaimError(DomainError):
    """Base error for invitation claim signing and verification."""

    pass


class InvalidClaimError(ClaimError):
    """Claim is malformed, incomplete, or reuses a reserved field name.

    Caller bug; never retried.
    """

    pass


class InvalidSecretError(ClaimError):
    """Signing secret is empty or missing."""

    def __init__(self, message: str = "Invitation secret must not be empty"):
        super().__init__(message)


class VerificationError(ClaimError):
    """Base error for a signed claim that must not be honoured."""

    pass


class SignatureMismatchError(VerificationError):
    """Claim was altered or signed with a different secret."""

    def __init__(self, message: str = "Claim signature does not match"):
        super().__init__(message)


class ClaimExpiredError(VerificationError):
    """Claim signature is valid but its expiry has passed.

    The claim is legitimate but stale; the learner needs a new link.
    """

    def __init__(self, date_expires: str):
        self.date_expires = date_expires
        super().__init__(f"Claim expired at {date_expires}")


class ClaimReplayError(VerificationError):
    """Claim has already been redeemed."""

    def __init__(self, partner: str):
        self.partner = partner
        super().__init__(f"Claim for partner {partner} has already been redeemed")
