"""Injectable randomness source for salts and learner keys."""

import secrets
from abc import ABC, abstractmethod


class EntropySource(ABC):
    """Source of random bytes."""

    @abstractmethod
    def token_bytes(self, nbytes: int) -> bytes:
        """Return ``nbytes`` random bytes."""
        pass

    def token_hex(self, nbytes: int) -> str:
        """Return ``nbytes`` random bytes rendered as lower-case hex."""
        return self.token_bytes(nbytes).hex()


class SystemEntropySource(EntropySource):
    """Cryptographically secure randomness from the OS."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


class FixedEntropySource(EntropySource):
    """Deterministic source repeating a single byte value."""

    def __init__(self, byte: int = 0xAB) -> None:
        self.byte = byte

    def token_bytes(self, nbytes: int) -> bytes:
        return bytes([self.byte]) * nbytes
