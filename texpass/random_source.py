"""
texpass.random_source
Cryptographically secure randomness, passed explicitly into the pool builder
and generator so tests can swap in a scripted source.
"""

import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class SecureRandomSource:
    """Random source backed by the OS CSPRNG via the ``secrets`` module."""

    def random_byte(self) -> int:
        return secrets.token_bytes(1)[0]

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n) without modulo bias."""
        return secrets.randbelow(n)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randbelow(len(seq))]


DEFAULT_SOURCE = SecureRandomSource()
