"""
Randomness providers for passgen.

Generators never call a random module directly; they receive a RandomSource so
the CSPRNG can be swapped for a seeded generator in tests.
"""

import random
import secrets
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform integer source plus the helpers built on it."""

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        raise NotImplementedError

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def chance(self, percent: int) -> bool:
        """Return True with the given probability in percent."""
        return self.randbelow(100) < percent

    def shuffle(self, items: List[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


class SystemRandomSource(RandomSource):
    """Cryptographically secure source backed by the secrets module."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource(RandomSource):
    """Deterministic source for tests. Never use for real credentials."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


def default_random_source() -> RandomSource:
    return SystemRandomSource()
