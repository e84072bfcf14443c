"""
Visualization utilities for teller staffing results.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Dict, List, Optional, Sequence
import seaborn as sns

from teller_staffing.core.base import Customer


def plot_staffing_curve(report, title: str = "Teller Staffing Search"):
    """Plot maximum and mean wait against the number of tellers."""
    sns.set_theme(style="whitegrid")
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 6))
    fig.suptitle(title, fontsize=16)

    counts = [r.teller_count for r in report.results]
    max_waits = [r.max_wait for r in report.results]
    mean_waits = [r.mean_wait for r in report.results]
    colors = ['tab:green' if r.goal_met else 'tab:red' for r in report.results]
    threshold = report.results[0].max_wait_allowed if report.results else 0

    # Plot 1: Maximum wait per teller count
    ax1.bar(counts, max_waits, color=colors)
    ax1.axhline(threshold, color='black', linestyle='--',
                label=f'Goal ({threshold}s)')
    if report.minimum_tellers is not None:
        ax1.axvline(report.minimum_tellers, color='tab:blue', linestyle=':',
                    label=f'Recommended: {report.minimum_tellers}')
    ax1.set_xlabel('Number of Tellers')
    ax1.set_ylabel('Maximum Wait (seconds)')
    ax1.set_title('Maximum Wait')
    ax1.set_xticks(counts)
    ax1.legend()

    # Plot 2: Mean wait and mean time in bank
    ax2.plot(counts, mean_waits, marker='o', label='Mean Wait')
    ax2.plot(counts, [r.mean_total for r in report.results], marker='s',
             label='Mean Time in Bank')
    ax2.set_xlabel('Number of Tellers')
    ax2.set_ylabel('Seconds')
    ax2.set_title('Average Times')
    ax2.set_xticks(counts)
    ax2.legend()

    plt.tight_layout()
    return fig


def plot_teller_timeline(customers: Sequence[Customer],
                         title: str = "Teller Timeline"):
    """Gantt chart of service intervals for each teller."""
    fig, ax = plt.subplots(figsize=(14, 6))

    teller_ids = sorted({c.teller_id for c in customers if c.teller_id is not None})
    palette = sns.color_palette("husl", max(len(teller_ids), 1))

    for i, teller_id in enumerate(teller_ids):
        served = [c for c in customers if c.teller_id == teller_id]
        ax.broken_barh([(c.service_start, c.service_duration) for c in served],
                       (teller_id - 0.4, 0.8),
                       facecolors=palette[i], edgecolor='white')

    ax.set_yticks(teller_ids)
    ax.set_yticklabels([f'Teller {t}' for t in teller_ids])
    ax.set_xlabel('Time (seconds)')
    ax.set_title(title)
    ax.grid(True, axis='x', alpha=0.3)

    return fig


def plot_wait_distribution(customers: Sequence[Customer],
                           max_wait_allowed: Optional[int] = None,
                           title: str = "Wait Time Distribution"):
    """Histogram of customer waits."""
    fig, ax = plt.subplots(figsize=(10, 6))

    waits = np.array([c.wait_time() for c in customers])
    if waits.size:
        sns.histplot(waits, bins=30, ax=ax)
    else:
        ax.text(0.5, 0.5, 'No Customers',
                ha='center', va='center', transform=ax.transAxes)

    if max_wait_allowed is not None:
        ax.axvline(max_wait_allowed, color='red', linestyle='--', label='Goal')
        ax.legend()

    ax.set_xlabel('Wait (seconds)')
    ax.set_ylabel('Customers')
    ax.set_title(title)

    return fig


def plot_replication_summary(summary: Dict, title: str = "Maximum Wait Across Replications"):
    """Mean maximum wait per teller count with 95% confidence intervals."""
    fig, ax = plt.subplots(figsize=(10, 6))

    counts: List[int] = sorted(summary['tellers'])
    means = [summary['tellers'][c]['max_wait']['mean'] for c in counts]
    lows = [means[i] - summary['tellers'][c]['max_wait']['ci95'][0] for i, c in enumerate(counts)]
    highs = [summary['tellers'][c]['max_wait']['ci95'][1] - means[i] for i, c in enumerate(counts)]

    ax.errorbar(counts, means, yerr=[lows, highs], fmt='o-', capsize=4)
    ax.set_xlabel('Number of Tellers')
    ax.set_ylabel('Maximum Wait (seconds)')
    ax.set_title(f"{title} (n={summary['replications']})")
    ax.set_xticks(counts)
    ax.grid(True, alpha=0.3)

    return fig
