"""Base classes for the teller staffing simulation."""

from dataclasses import dataclass, asdict
from typing import Dict, Optional


DEFAULT_MAX_WAIT_ALLOWED = 2 * 60


class TellerStaffingError(Exception):
    """Base class for all errors raised by the simulator."""


class ConfigurationError(TellerStaffingError, ValueError):
    """Raised when simulation parameters are invalid."""


class InvariantViolation(TellerStaffingError, RuntimeError):
    """Raised when the scheduling state becomes inconsistent."""


class EmptyPoolError(InvariantViolation):
    """Raised when a teller is requested from an empty pool."""


@dataclass
class Customer:
    """Represents a customer arriving at the bank."""
    customer_id: int
    arrival_time: int
    service_duration: int
    service_start: Optional[int] = None
    service_end: Optional[int] = None
    teller_id: Optional[int] = None

    @property
    def is_assigned(self) -> bool:
        return self.teller_id is not None

    def assign(self, teller_id: int, service_start: int) -> None:
        """Record the teller and service interval. May only happen once."""
        if self.is_assigned:
            raise InvariantViolation(
                f"Customer {self.customer_id} already assigned to teller {self.teller_id}"
            )
        if service_start < self.arrival_time:
            raise InvariantViolation(
                f"Customer {self.customer_id} cannot start service at {service_start} "
                f"before arriving at {self.arrival_time}"
            )
        self.teller_id = teller_id
        self.service_start = service_start
        self.service_end = service_start + self.service_duration

    def wait_time(self) -> int:
        """Time spent in queue before service."""
        self._require_assigned()
        return self.service_start - self.arrival_time

    def total_time(self) -> int:
        """Time spent in the bank, queue plus service."""
        self._require_assigned()
        return self.service_end - self.arrival_time

    def _require_assigned(self) -> None:
        if not self.is_assigned:
            raise InvariantViolation(f"Customer {self.customer_id} has not been assigned a teller")

    def fresh_copy(self) -> 'Customer':
        """Unassigned copy, used to replay an arrival sequence."""
        return Customer(
            customer_id=self.customer_id,
            arrival_time=self.arrival_time,
            service_duration=self.service_duration
        )


@dataclass
class Teller:
    """A service position able to serve one customer at a time."""
    teller_id: int
    next_available: int = 0
    customers_served: int = 0
    busy_time: int = 0

    def serve(self, customer: Customer) -> None:
        """Take the customer as soon as both are ready and advance the free time."""
        start = max(customer.arrival_time, self.next_available)
        customer.assign(self.teller_id, start)
        self.occupy_until(customer.service_end)
        self.customers_served += 1
        self.busy_time += customer.service_duration

    def occupy_until(self, time: int) -> None:
        if time < self.next_available:
            raise InvariantViolation(
                f"Teller {self.teller_id} free time cannot move back "
                f"from {self.next_available} to {time}"
            )
        self.next_available = time


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one simulation run for a fixed teller count."""
    teller_count: int
    customers_served: int = 0
    max_wait: int = 0
    max_service: int = 0
    mean_total: float = 0.0
    mean_wait: float = 0.0
    goal_met: bool = False
    max_wait_allowed: int = DEFAULT_MAX_WAIT_ALLOWED
    utilization: float = 0.0

    @classmethod
    def empty(cls, teller_count: int, max_wait_allowed: int = DEFAULT_MAX_WAIT_ALLOWED) -> 'SimulationResult':
        """Result of a run without arrivals. Never meets the goal."""
        return cls(teller_count=teller_count, max_wait_allowed=max_wait_allowed)

    @property
    def max_wait_minutes(self) -> float:
        return self.max_wait / 60.0

    def as_dict(self) -> Dict:
        return asdict(self)
