"""Infrastructure providers."""

# Import bases
from .ledger import LedgerProvider

# Import implementations (needed for __subclasses__())
from .ledger import ProdLedgerProvider  # noqa: F401

__all__ = [
    "LedgerProvider",
    "ProdLedgerProvider",
]
