"""Infrastructure layer errors."""

from typing import Any


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class LedgerError(AdapterError):
    """Benefit ledger could not be reached or returned garbage."""

    pass


class LedgerResponseError(LedgerError):
    """Benefit ledger answered with a non-success status."""

    def __init__(self, status_code: int, error: Any):
        self.status_code = status_code
        self.error = error
        super().__init__(f"Benefit ledger request failed: {status_code}")
