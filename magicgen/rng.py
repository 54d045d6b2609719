"""
Seeded pseudo-random numbers.

``SeededRandom`` is a Park-Miller (minimal standard) linear congruential
generator: the same integer seed always yields the same sequence on any
platform, so a coloring page is reproducible from ``metadata.seed``.

Planners only rely on the ``RandomSource`` protocol, so a different
generator can be dropped in without touching layout code.
"""

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

from magicgen.config import RNG_MODULUS, RNG_MULTIPLIER

T = TypeVar("T")


def normalize_seed(seed: int) -> int:
    """Map any integer onto the generator's valid state range [1, 2**31 - 2].

    Zero is a fixed point of the recurrence (every draw would be identical),
    so it is remapped to 1.
    """
    state = int(seed) % RNG_MODULUS
    return state or 1


def random_seed() -> int:
    """Draw a fresh seed from numpy's global generator."""
    return int(np.random.randint(1, RNG_MODULUS))


class RandomSource(Protocol):
    """What a planner needs from a random generator."""

    @property
    def seed(self) -> int: ...

    def next(self) -> float: ...

    def between(self, lo: float, hi: float) -> float: ...

    def int_between(self, lo: int, hi: int) -> int: ...

    def pick(self, items: Sequence[T]) -> T: ...

    def weighted_pick(self, items: Sequence[T]) -> T: ...


class SeededRandom:
    """Deterministic generator: ``state = state * 16807 mod (2**31 - 1)``."""

    def __init__(self, seed: Optional[int] = None):
        self._state = normalize_seed(random_seed() if seed is None else seed)

    @property
    def seed(self) -> int:
        """Current generator state; seeding a new instance with it continues the sequence."""
        return self._state

    def next(self) -> float:
        """Next value in [0, 1)."""
        self._state = (self._state * RNG_MULTIPLIER) % RNG_MODULUS
        return (self._state - 1) / (RNG_MODULUS - 1)

    def between(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def int_between(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], both ends inclusive."""
        return int(np.floor(self.between(lo, hi + 1)))

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot pick from an empty sequence")
        return items[int(self.next() * len(items))]

    def shuffle(self, items: list) -> list:
        """Fisher-Yates shuffle in place; returns *items* for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items

    def weighted_pick(self, items: Sequence[T]) -> T:
        """Pick proportionally to each item's ``weight`` attribute.

        Items with a non-positive weight are never chosen.
        """
        candidates = [item for item in items if item.weight > 0]
        if not candidates:
            raise ValueError("weighted_pick needs at least one positive weight")
        remaining = self.next() * sum(item.weight for item in candidates)
        for item in candidates:
            remaining -= item.weight
            if remaining <= 0:
                return item
        return candidates[-1]


def has_positive_weight(items) -> bool:
    """True when ``weighted_pick`` can choose something from *items*."""
    return any(item.weight > 0 for item in items)
