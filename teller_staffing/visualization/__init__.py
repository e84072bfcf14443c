"""Visualization utilities for teller staffing results."""

from .plotting import (
    plot_staffing_curve,
    plot_teller_timeline,
    plot_wait_distribution,
    plot_replication_summary
)

__all__ = [
    'plot_staffing_curve',
    'plot_teller_timeline',
    'plot_wait_distribution',
    'plot_replication_summary'
]
