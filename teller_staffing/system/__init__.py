"""Staffing search built on the core simulation components."""

from .staffing_search import (
    ARRIVAL_POLICIES,
    FIXED,
    REGENERATE,
    StaffingReport,
    StaffingSearch,
    find_minimum_sufficient,
    minimum_sufficient,
    simulate_teller_count,
)
from .replications import replicate_search, summarize_replications, confidence_interval

__all__ = [
    'ARRIVAL_POLICIES',
    'FIXED',
    'REGENERATE',
    'StaffingReport',
    'StaffingSearch',
    'find_minimum_sufficient',
    'minimum_sufficient',
    'simulate_teller_count',
    'replicate_search',
    'summarize_replications',
    'confidence_interval',
]
