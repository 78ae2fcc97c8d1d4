"""Injectable randomness for confidence jitter."""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can draw an inclusive random integer.

    ``random.Random`` satisfies this structurally.
    """

    def randint(self, a: int, b: int) -> int: ...


def create_random_source(seed: int | None = None) -> random.Random:
    """Create a dedicated generator, never the module-level one.

    Args:
        seed: Seed for reproducible draws. ``None`` seeds from the OS.

    Returns:
        A fresh ``random.Random`` instance.
    """
    return random.Random(seed)
