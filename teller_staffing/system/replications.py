"""Repeated staffing searches over independent seeds."""

from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy import stats

from teller_staffing.config import SimulationConfig
from teller_staffing.core.validators import require_int_at_least
from teller_staffing.system.staffing_search import FIXED, StaffingReport, StaffingSearch


def replicate_search(config: Optional[SimulationConfig] = None,
                     replications: int = 10,
                     base_seed: int = 42,
                     arrival_policy: str = FIXED,
                     max_workers: Optional[int] = None) -> List[StaffingReport]:
    """Run the search once per seed ``base_seed + i``."""
    require_int_at_least("replications", replications, 1)
    search = StaffingSearch(config, arrival_policy=arrival_policy, max_workers=max_workers)
    return [search.run(base_seed + i) for i in range(replications)]


def confidence_interval(values: Sequence[float], confidence: float = 0.95) -> tuple:
    """Student-t confidence interval of the mean."""
    mean = float(np.mean(values))
    if len(values) < 2 or np.std(values) == 0:
        return (mean, mean)
    low, high = stats.t.interval(confidence, len(values) - 1,
                                 loc=mean, scale=stats.sem(values))
    return (float(low), float(high))


def summarize_replications(reports: Sequence[StaffingReport]) -> Dict:
    """Compute per teller count statistics across replications."""
    summary = {
        'replications': len(reports),
        'arrival_policy': reports[0].arrival_policy if reports else FIXED,
        'minimum_tellers': {},
        'tellers': {}
    }
    if not reports:
        return summary

    minima = [report.minimum_tellers for report in reports]
    found = [m for m in minima if m is not None]
    summary['minimum_tellers'] = {
        'found': len(found),
        'mean': float(np.mean(found)) if found else None,
        'max': int(np.max(found)) if found else None,
        'counts': {int(m): found.count(m) for m in sorted(set(found))}
    }

    for result in reports[0].results:
        count = result.teller_count
        runs = [report.result_for(count) for report in reports]
        max_waits = [r.max_wait for r in runs]
        mean_waits = [r.mean_wait for r in runs]
        summary['tellers'][count] = {
            'max_wait': {
                'mean': float(np.mean(max_waits)),
                'std': float(np.std(max_waits)),
                'min': int(np.min(max_waits)),
                'max': int(np.max(max_waits)),
                'ci95': confidence_interval(max_waits)
            },
            'mean_wait': {
                'mean': float(np.mean(mean_waits)),
                'std': float(np.std(mean_waits))
            },
            'goal_met_fraction': sum(r.goal_met for r in runs) / len(runs)
        }

    return summary
