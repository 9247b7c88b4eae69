from __future__ import annotations

import random
from typing import Protocol


class RandomnessPort(Protocol):
    def next_int(self, bound: int) -> int:
        """Return a uniformly distributed integer in [0, bound)."""
        ...


class RandomRandomness:
    """Production port backed by `random.Random`.

    Pass a seeded `random.Random` for reproducible runs.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random(random.SystemRandom().randint(1, 2**31 - 1))
        self._rng = rng

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError("bound must be > 0")
        return self._rng.randrange(bound)
