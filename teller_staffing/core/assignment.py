"""Greedy earliest-free teller assignment."""

import logging
from typing import List, Sequence

from teller_staffing.core.base import Customer, InvariantViolation, Teller
from teller_staffing.core.pool import TellerPool
from teller_staffing.core.validators import require_int_at_least

logger = logging.getLogger(__name__)


class AssignmentEngine:
    """Single shared FIFO queue feeding several identical tellers.

    Each customer, in arrival order, goes to whichever teller becomes free
    first. A fresh pool is built for every run.
    """

    def __init__(self, teller_count: int):
        require_int_at_least("teller_count", teller_count, 1)
        self.teller_count = teller_count
        # per-teller counters of the last run
        self.tellers: List[Teller] = []

    def run(self, customers: Sequence[Customer]) -> List[Customer]:
        """Assign every customer to a teller and return them in arrival order."""
        pool = TellerPool(self.teller_count)
        last_arrival = None

        for customer in customers:
            if last_arrival is not None and customer.arrival_time < last_arrival:
                raise InvariantViolation(
                    f"Customer {customer.customer_id} arrives at {customer.arrival_time}, "
                    f"before previous arrival at {last_arrival}"
                )
            last_arrival = customer.arrival_time

            teller = pool.take_earliest()
            teller.serve(customer)
            pool.release(teller)

        if len(pool) != self.teller_count:
            raise InvariantViolation(
                f"Pool holds {len(pool)} tellers, expected {self.teller_count}"
            )

        self.tellers = pool.tellers()
        logger.debug("Assigned %d customers to %d tellers", len(customers), self.teller_count)
        return list(customers)


def assign_customers(customers: Sequence[Customer], teller_count: int) -> List[Customer]:
    """Run the engine once for a teller count."""
    return AssignmentEngine(teller_count).run(customers)
