"""Summary statistics for assigned customers."""

from typing import List, Sequence

import numpy as np

from teller_staffing.core.base import (
    DEFAULT_MAX_WAIT_ALLOWED,
    Customer,
    InvariantViolation,
    SimulationResult,
)


def wait_times(customers: Sequence[Customer]) -> List[int]:
    return [customer.wait_time() for customer in customers]


def total_times(customers: Sequence[Customer]) -> List[int]:
    return [customer.total_time() for customer in customers]


def utilization(teller_count: int, customers: Sequence[Customer]) -> float:
    """Fraction of the served period during which tellers were busy."""
    if teller_count <= 0 or not customers:
        return 0.0
    makespan = max(customer.service_end for customer in customers)
    if makespan <= 0:
        return 0.0
    busy = sum(customer.service_duration for customer in customers)
    return busy / (teller_count * makespan)


def summarize(teller_count: int,
              customers: Sequence[Customer],
              max_wait_allowed: int = DEFAULT_MAX_WAIT_ALLOWED) -> SimulationResult:
    """
    Reduce assigned customers to a SimulationResult.

    An empty run has all statistics at zero and does not meet the goal.
    Unassigned customers raise InvariantViolation.
    """
    if not customers:
        return SimulationResult.empty(teller_count, max_wait_allowed)

    unassigned = [customer.customer_id for customer in customers if not customer.is_assigned]
    if unassigned:
        raise InvariantViolation(f"Customers without a teller: {unassigned}")

    waits = wait_times(customers)
    totals = total_times(customers)
    max_wait = max(waits)

    return SimulationResult(
        teller_count=teller_count,
        customers_served=len(customers),
        max_wait=max_wait,
        max_service=max(customer.service_duration for customer in customers),
        mean_total=float(np.mean(totals)),
        mean_wait=float(np.mean(waits)),
        goal_met=max_wait <= max_wait_allowed,
        max_wait_allowed=max_wait_allowed,
        utilization=utilization(teller_count, customers)
    )
