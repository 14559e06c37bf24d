"""Wire constants for invitation claims."""

# The claim is valid for 15 minutes. It needs to last long enough to be
# passed through the authentication flow.
CLAIM_DURATION_SECONDS = 60 * 15

# Bytes of randomness in a default salt (rendered as hex)
SALT_BYTES = 8

CLAIM_PATH = "/invitation-claim/"

# ISO-8601 truncated to the second, UTC, no offset suffix
DATE_EXPIRES_FORMAT = "%Y-%m-%dT%H:%M:%S"

PARTNER_PARAM = "partner"
LEARNER_KEY_PARAM = "learner_key"
SALT_PARAM = "salt"
DATE_EXPIRES_PARAM = "date_expires"
SIGNATURE_PARAM = "signature"
FIELD_PREFIX = "field_"

RESERVED_NAMES = frozenset(
    {
        PARTNER_PARAM,
        LEARNER_KEY_PARAM,
        SALT_PARAM,
        DATE_EXPIRES_PARAM,
        SIGNATURE_PARAM,
    }
)
