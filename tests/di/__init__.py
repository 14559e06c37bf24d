"""Mock providers for testing."""

from .config import TEST_NOW, TEST_SECRET, MockConfigProvider
from .ledger import MockLedgerProvider
from .container import build_test_container

__all__ = [
    "MockConfigProvider",
    "MockLedgerProvider",
    "TEST_NOW",
    "TEST_SECRET",
    "build_test_container",
]
