"""Search for the smallest teller count meeting the wait goal."""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from teller_staffing.config import SimulationConfig
from teller_staffing.core import (
    ArrivalGenerator,
    AssignmentEngine,
    ConfigurationError,
    Customer,
    SimulationResult,
    summarize,
)
from teller_staffing.distributions import make_rng, spawn_rngs

logger = logging.getLogger(__name__)

FIXED = 'fixed'
REGENERATE = 'regenerate'
ARRIVAL_POLICIES = (FIXED, REGENERATE)


@dataclass
class StaffingReport:
    """Results of one search, ordered by teller count."""
    results: List[SimulationResult]
    minimum_tellers: Optional[int]
    arrival_policy: str = FIXED
    seed: Optional[int] = None
    arrivals: Dict[int, List[Customer]] = field(default_factory=dict, repr=False)

    @property
    def goal_reached(self) -> bool:
        return self.minimum_tellers is not None

    def result_for(self, teller_count: int) -> SimulationResult:
        for result in self.results:
            if result.teller_count == teller_count:
                return result
        raise KeyError(teller_count)

    def as_dict(self) -> Dict:
        return {
            'arrival_policy': self.arrival_policy,
            'seed': self.seed,
            'minimum_tellers': self.minimum_tellers,
            'results': [result.as_dict() for result in self.results]
        }


def minimum_sufficient(results: Sequence[SimulationResult]) -> Optional[int]:
    """Smallest teller count whose run met the goal, or None."""
    sufficient = [result.teller_count for result in results if result.goal_met]
    return min(sufficient) if sufficient else None


def simulate_teller_count(config: SimulationConfig,
                          teller_count: int,
                          customers: Sequence[Customer]) -> Tuple[SimulationResult, List[Customer]]:
    """Replay an arrival sequence with a given number of tellers."""
    engine = AssignmentEngine(teller_count)
    assigned = engine.run([customer.fresh_copy() for customer in customers])
    result = summarize(teller_count, assigned, config.max_wait_allowed)
    logger.debug("%d teller(s): %d customers, max wait %ds",
                 teller_count, result.customers_served, result.max_wait)
    return result, assigned


def _run_count(args: Tuple[SimulationConfig, int, List[Customer]]) -> SimulationResult:
    config, teller_count, customers = args
    result, _ = simulate_teller_count(config, teller_count, customers)
    return result


class StaffingSearch:
    """Runs the assignment engine over a range of teller counts."""

    def __init__(self,
                 config: Optional[SimulationConfig] = None,
                 arrival_policy: str = FIXED,
                 max_workers: Optional[int] = None):
        if arrival_policy not in ARRIVAL_POLICIES:
            raise ConfigurationError(
                f"Unknown arrival policy: {arrival_policy!r} "
                f"(expected one of {', '.join(ARRIVAL_POLICIES)})"
            )
        self.config = config or SimulationConfig()
        self.arrival_policy = arrival_policy
        self.max_workers = max_workers
        self.generator = ArrivalGenerator.from_config(self.config)

    def arrivals_for(self, seed: Optional[int] = None) -> Dict[int, List[Customer]]:
        """
        Arrival sequence used for each teller count.

        With the fixed policy every count shares one sequence. With the
        regenerate policy each count gets its own stream spawned from the
        seed, so the outcome does not depend on execution order.
        """
        counts = list(self.config.teller_counts)
        if self.arrival_policy == FIXED:
            customers = self.generator.generate(make_rng(seed))
            return {count: customers for count in counts}

        rngs = spawn_rngs(seed, len(counts))
        return {count: self.generator.generate(rng) for count, rng in zip(counts, rngs)}

    def run(self, seed: Optional[int] = None) -> StaffingReport:
        """Simulate every teller count and pick the smallest sufficient one."""
        arrivals = self.arrivals_for(seed)
        jobs = [(self.config, count, customers) for count, customers in arrivals.items()]

        if self.max_workers is not None and self.max_workers > 1 and len(jobs) > 1:
            with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(_run_count, jobs))
        else:
            results = [_run_count(job) for job in jobs]

        minimum = minimum_sufficient(results)
        if minimum is None:
            logger.info("No teller count in %d..%d meets the %ds wait goal",
                        self.config.min_tellers, self.config.max_tellers,
                        self.config.max_wait_allowed)
        else:
            logger.info("%d teller(s) meet the %ds wait goal", minimum,
                        self.config.max_wait_allowed)

        return StaffingReport(
            results=results,
            minimum_tellers=minimum,
            arrival_policy=self.arrival_policy,
            seed=seed,
            arrivals=arrivals
        )

    def simulate_count(self, report: StaffingReport,
                       teller_count: int) -> Tuple[SimulationResult, List[Customer]]:
        """Re-run one count of a report to obtain its per-customer detail."""
        return simulate_teller_count(self.config, teller_count, report.arrivals[teller_count])


def find_minimum_sufficient(config: Optional[SimulationConfig] = None,
                            seed: Optional[int] = None,
                            arrival_policy: str = FIXED,
                            max_workers: Optional[int] = None) -> StaffingReport:
    """Run a staffing search with the given parameters."""
    search = StaffingSearch(config, arrival_policy=arrival_policy, max_workers=max_workers)
    return search.run(seed)
