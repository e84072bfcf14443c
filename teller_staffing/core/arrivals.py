"""Customer arrival generation for one simulation run."""

from typing import Callable, List, Optional

import numpy as np

from teller_staffing.core.base import ConfigurationError, Customer
from teller_staffing.core.validators import validate_arrival_parameters
from teller_staffing.distributions.random_variables import uniform_integer_distribution


def generate_from_distributions(window_seconds: int,
                                interarrival_distribution: Callable[[], int],
                                service_distribution: Callable[[], int]) -> List[Customer]:
    """
    Build the arrival sequence of one peak window.

    The clock starts at 0 and advances by one inter-arrival interval per
    customer. Generation stops at the first arrival that would fall on or
    after ``window_seconds``.
    """
    customers: List[Customer] = []
    clock = 0

    while True:
        interval = interarrival_distribution()
        if interval <= 0:
            raise ConfigurationError(f"Inter-arrival interval must be > 0, got {interval}")
        clock += interval
        if clock >= window_seconds:
            break
        customers.append(Customer(
            customer_id=len(customers) + 1,
            arrival_time=clock,
            service_duration=service_distribution()
        ))

    return customers


def generate_arrivals(window_seconds: int,
                      min_interarrival: int,
                      max_interarrival: int,
                      min_service: int,
                      max_service: int,
                      rng: np.random.Generator) -> List[Customer]:
    """Generate customers with uniform inter-arrival and service times."""
    validate_arrival_parameters(window_seconds, min_interarrival, max_interarrival,
                                min_service, max_service)
    return generate_from_distributions(
        window_seconds,
        uniform_integer_distribution(min_interarrival, max_interarrival, rng),
        uniform_integer_distribution(min_service, max_service, rng)
    )


class ArrivalGenerator:
    """Arrival parameters bound once, sampled on every call to generate()."""

    def __init__(self,
                 window_seconds: int = 7200,
                 min_interarrival: int = 5,
                 max_interarrival: int = 50,
                 min_service: int = 30,
                 max_service: int = 120):
        validate_arrival_parameters(window_seconds, min_interarrival, max_interarrival,
                                    min_service, max_service)
        self.window_seconds = window_seconds
        self.min_interarrival = min_interarrival
        self.max_interarrival = max_interarrival
        self.min_service = min_service
        self.max_service = max_service

    @classmethod
    def from_config(cls, config) -> 'ArrivalGenerator':
        return cls(
            window_seconds=config.window_seconds,
            min_interarrival=config.min_interarrival,
            max_interarrival=config.max_interarrival,
            min_service=config.min_service,
            max_service=config.max_service
        )

    def generate(self, rng: Optional[np.random.Generator] = None) -> List[Customer]:
        if rng is None:
            rng = np.random.default_rng()
        return generate_arrivals(self.window_seconds,
                                 self.min_interarrival, self.max_interarrival,
                                 self.min_service, self.max_service,
                                 rng)
