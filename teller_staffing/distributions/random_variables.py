"""
Random variable generators for the teller staffing simulation.
All samplers draw from an injected numpy Generator so runs are reproducible.
"""

import numpy as np
from typing import Callable, List, Optional, Union

SeedLike = Union[None, int, np.random.SeedSequence]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Create a seedable random source."""
    return np.random.default_rng(seed)


def spawn_rngs(seed: SeedLike, count: int) -> List[np.random.Generator]:
    """Create independent random sources derived from a single seed."""
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in seed.spawn(count)]


def uniform_integer(low: int, high: int, rng: np.random.Generator) -> int:
    """Generate an integer uniformly from [low, high], both ends included."""
    return int(rng.integers(low, high, endpoint=True))


def uniform_integer_distribution(low: int, high: int,
                                 rng: Optional[np.random.Generator] = None) -> Callable[[], int]:
    """Create a uniform integer distribution function."""
    if rng is None:
        rng = make_rng()
    return lambda: uniform_integer(low, high, rng)


def deterministic_distribution(value: int) -> Callable[[], int]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def sequence_distribution(values: List[int]) -> Callable[[], int]:
    """
    Create a distribution that replays a fixed list of values.

    Useful to reproduce a known arrival pattern. Raises StopIteration
    once the values are exhausted.
    """
    iterator = iter(values)
    return lambda: next(iterator)
