# robaczki/sim/rng.py
import random

class Rng:
    """Thin wrapper over random.Random; pass one around to make a run reproducible."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

# shared default for callers that don't care about reproducibility
RNG = Rng()
