#!/usr/bin/env python3
"""Command-line interface for the teller staffing search."""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

import pandas as pd

from teller_staffing.config import SimulationConfig
from teller_staffing.core import Customer, SimulationResult, TellerStaffingError
from teller_staffing.system import (
    ARRIVAL_POLICIES,
    FIXED,
    StaffingReport,
    StaffingSearch,
    replicate_search,
    summarize_replications,
)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Defaults, then the JSON config file, then command-line overrides."""
    config = SimulationConfig.from_json(args.config) if args.config else SimulationConfig()
    return config.replace(
        min_tellers=args.min_tellers,
        max_tellers=args.max_tellers,
        window_seconds=args.window,
        max_wait_allowed=args.max_wait
    )


def results_frame(results: Sequence[SimulationResult]) -> pd.DataFrame:
    return pd.DataFrame([result.as_dict() for result in results])


def customers_frame(customers: Sequence[Customer]) -> pd.DataFrame:
    return pd.DataFrame([{
        'customer': c.customer_id,
        'teller': c.teller_id,
        'arrival': c.arrival_time,
        'start': c.service_start,
        'end': c.service_end,
        'service': c.service_duration,
        'wait': c.wait_time(),
        'total': c.total_time()
    } for c in customers])


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def format_result(result: SimulationResult) -> List[str]:
    return [
        f"SIMULATION WITH {result.teller_count} TELLER(S):",
        f"  Customers Served: {result.customers_served}",
        f"  Maximum Wait: {result.max_wait} seconds ({result.max_wait / 60.0:.1f} minutes)",
        f"  Maximum Service Time: {result.max_service} seconds "
        f"({result.max_service / 60.0:.1f} minutes)",
        f"  Mean Time in Bank: {result.mean_total:.1f} seconds "
        f"({result.mean_total / 60.0:.1f} minutes)",
        f"  Mean Wait: {result.mean_wait:.1f} seconds ({result.mean_wait / 60.0:.1f} minutes)",
        f"  Met {result.max_wait_allowed / 60.0:g} min wait goal? "
        f"{'YES' if result.goal_met else 'NO'}",
    ]


def recommendation(report: StaffingReport, config: SimulationConfig) -> str:
    if report.minimum_tellers is None:
        return (f"*** No teller count in {config.min_tellers}..{config.max_tellers} "
                f"meets the goal ***")
    return (f"*** RECOMMENDATION: {report.minimum_tellers} teller(s) are enough "
            f"to meet the goal ***")


def print_results(report: StaffingReport, config: SimulationConfig) -> None:
    """Print the search results to console."""
    print("=== BANK TELLER STAFFING SIMULATION ===")
    print(f"Peak window: {config.window_seconds / 3600.0:g} hours")
    print(f"Goal: maximum wait of {config.max_wait_allowed / 60.0:g} minutes")
    print(f"Arrival policy: {report.arrival_policy}")
    print("=======================================\n")

    for result in report.results:
        print("\n".join(format_result(result)))
        print("---------------------------------------\n")

    print(recommendation(report, config))


def print_replications(summary: Dict) -> None:
    """Print statistics across replications."""
    print("\n=== Replication Summary ===")
    print(f"Replications: {summary['replications']}")
    print(f"Arrival policy: {summary['arrival_policy']}")

    minimum = summary['minimum_tellers']
    print(f"Goal reached in {minimum['found']} replication(s)")
    if minimum['found']:
        print(f"  Mean minimum tellers: {minimum['mean']:.2f} (worst case {minimum['max']})")

    print("\nMaximum wait per teller count:")
    for count, stats in summary['tellers'].items():
        max_wait = stats['max_wait']
        low, high = max_wait['ci95']
        print(f"  {count:>2} teller(s): {max_wait['mean']:.1f}s (±{max_wait['std']:.1f}) "
              f"95% CI [{low:.1f}, {high:.1f}], goal met "
              f"{stats['goal_met_fraction'] * 100:.0f}%")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Find the minimum number of bank tellers meeting a wait goal')

    # Simulation parameters
    parser.add_argument('-s', '--seed', type=int, default=42,
                       help='Random seed (default: 42)')
    parser.add_argument('--min-tellers', type=int,
                       help='Smallest teller count to try (default: 1)')
    parser.add_argument('--max-tellers', type=int,
                       help='Largest teller count to try (default: 10)')
    parser.add_argument('--window', type=int,
                       help='Peak window in seconds (default: 7200)')
    parser.add_argument('--max-wait', type=int,
                       help='Maximum allowed wait in seconds (default: 120)')
    parser.add_argument('--config', type=str,
                       help='JSON file with simulation parameters')
    parser.add_argument('--policy', choices=ARRIVAL_POLICIES, default=FIXED,
                       help='Reuse one arrival sequence or draw one per count (default: fixed)')
    parser.add_argument('-j', '--jobs', type=int,
                       help='Worker processes for the teller counts')
    parser.add_argument('-r', '--replications', type=int, default=1,
                       help='Number of replications (default: 1)')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                       help='Output file for results (JSON)')
    parser.add_argument('--csv', type=str,
                       help='Output file for per teller count results (CSV)')
    parser.add_argument('-p', '--plot', action='store_true',
                       help='Show plots')
    parser.add_argument('--plot-file', type=str,
                       help='Save staffing plot to file')
    parser.add_argument('--timeline-file', type=str,
                       help='Save teller timeline of the recommended count to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                       help='Show per-customer detail for the recommended count')
    parser.add_argument('-q', '--quiet', action='store_true',
                       help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Enable debug logging')

    return parser.parse_args(argv)


def write_outputs(args: argparse.Namespace,
                  config: SimulationConfig,
                  search: StaffingSearch,
                  report: StaffingReport,
                  summary: Optional[Dict]) -> None:
    """Print, export and plot the results as requested on the command line."""
    if not args.quiet:
        print_results(report, config)
        if summary is not None:
            print_replications(summary)

    detail_count = report.minimum_tellers or config.max_tellers
    detail = None
    if args.detailed or args.timeline_file:
        _, detail = search.simulate_count(report, detail_count)

    if args.detailed and not args.quiet:
        print(f"\nCustomers with {detail_count} teller(s):")
        print(customers_frame(detail).to_string(index=False))

    if args.output:
        output = {'config': config.as_dict(), 'search': report.as_dict()}
        if summary is not None:
            output['replications'] = summary
        save_results(output, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.csv:
        results_frame(report.results).to_csv(args.csv, index=False)
        if not args.quiet:
            print(f"CSV saved to: {args.csv}")

    if args.plot or args.plot_file or args.timeline_file:
        import matplotlib.pyplot as plt
        from teller_staffing.visualization import (
            plot_replication_summary,
            plot_staffing_curve,
            plot_teller_timeline,
        )

        fig = plot_staffing_curve(report)
        if args.plot_file:
            fig.savefig(args.plot_file, dpi=300, bbox_inches='tight')
            if not args.quiet:
                print(f"Plot saved to: {args.plot_file}")

        if args.timeline_file:
            timeline = plot_teller_timeline(
                detail, title=f"Teller Timeline ({detail_count} tellers)")
            timeline.savefig(args.timeline_file, dpi=300, bbox_inches='tight')
            if not args.quiet:
                print(f"Timeline saved to: {args.timeline_file}")

        if args.plot:
            if summary is not None:
                plot_replication_summary(summary)
            plt.show()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s %(message)s')

    try:
        config = build_config(args)
        search = StaffingSearch(config, arrival_policy=args.policy, max_workers=args.jobs)
        report = search.run(args.seed)

        summary = None
        if args.replications > 1:
            # the first replication is the search above
            reports = [report] + replicate_search(config, args.replications - 1, args.seed + 1,
                                                  arrival_policy=args.policy,
                                                  max_workers=args.jobs)
            summary = summarize_replications(reports)

        write_outputs(args, config, search, report, summary)
    except (TellerStaffingError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
