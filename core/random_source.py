"""
Injectable randomness.

Every random decision in the simulation goes through a RandomSource so tests
can pin outcomes. ``random.Random`` satisfies the protocol.
"""

import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def randrange(self, stop: int) -> int:
        """Return an int in [0, stop)."""
        ...


default_random: RandomSource = random.Random()
