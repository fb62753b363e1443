from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class DRNG:
    """Deterministic Random Number Generator wrapper."""

    def __init__(self, seed: int):
        self.g = np.random.Generator(np.random.PCG64(seed))

    def next_float(self) -> float:
        """Return a random float in [0, 1)."""
        return float(self.g.random())

    def next_int(self, lo: int, hi: int) -> int:
        """Return a random integer in [lo, hi], both ends inclusive."""
        return int(self.g.integers(lo, hi + 1))

    def bernoulli(self, p: float) -> bool:
        """Return True with probability p."""
        return bool(self.g.random() < p)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("choice from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of items."""
        order = self.g.permutation(len(items))
        return [items[int(i)] for i in order]
