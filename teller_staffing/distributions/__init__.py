"""Random variable distributions for the teller staffing simulation."""

from .random_variables import (
    make_rng,
    spawn_rngs,
    uniform_integer,
    uniform_integer_distribution,
    deterministic_distribution,
    sequence_distribution,
)

__all__ = [
    'make_rng',
    'spawn_rngs',
    'uniform_integer',
    'uniform_integer_distribution',
    'deterministic_distribution',
    'sequence_distribution',
]
