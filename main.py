"""Main entry point for the line balancer."""

import argparse
import json
import logging
import sys
from pathlib import Path

from models import BalancerConfig, LineBalancingError, LineProblem
from solvers import LineBalancer
from solution import SearchTrace
from output_generator import generate_outputs

DEFAULT_CONFIG = "config/line_balancing.json"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Balance an assembly line into workstations.")
    parser.add_argument("steps_file", nargs="?",
                        help="Excel, CSV or JSON file with one row per process step")
    parser.add_argument("--config", default=DEFAULT_CONFIG,
                        help=f"Balancer config JSON (default: {DEFAULT_CONFIG})")
    parser.add_argument("--output-dir", default=None,
                        help="Write CSV/JSON/text outputs under this directory")
    parser.add_argument("--json", action="store_true",
                        help="Print the result record as JSON instead of the summary")
    parser.add_argument("--trace", action="store_true",
                        help="Log search events at debug level")
    return parser.parse_args(argv)


def load_config(config_path: str) -> BalancerConfig:
    if Path(config_path).exists():
        return BalancerConfig.load_from_file(config_path)
    print(f"Config not found at {config_path}, using defaults")
    return BalancerConfig()


def main(argv=None):
    """Main function to run the line balancer."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.trace else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config)

    if not args.steps_file:
        print("No step file given, running with sample data for demonstration...")
        return run_with_sample_data(config, args)

    if not Path(args.steps_file).exists():
        print(f"Step file not found: {args.steps_file}")
        return 1

    try:
        problem = LineProblem.load_from_files(args.steps_file)
    except (LineBalancingError, ValueError) as exc:
        print(f"Could not load steps: {exc}")
        return 1

    return solve_and_report(problem, config, args, args.steps_file)


def solve_and_report(problem: LineProblem, config: BalancerConfig, args, data_file: str) -> int:
    if not args.json:
        print("=" * 60)
        print("ASSEMBLY LINE BALANCER")
        print("=" * 60)
        print(f"\nProblem loaded: {problem}")
        print(f"  - Steps: {problem.num_steps()}")
        print(f"  - Levels: {problem.get_levels()}")
        print(f"  - Total work content: {problem.total_work_seconds():.2f} s")
        print(f"\nBalancer config: {config}")

    balancer = LineBalancer(config)
    trace = SearchTrace(record_candidates=False) if args.trace else None

    try:
        partition = balancer.balance(problem, trace=trace)
    except LineBalancingError as exc:
        print(f"Balancing failed: {exc}")
        return 1

    if args.json:
        print(json.dumps(partition.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(partition.summary())
        print(f"\nPartition valid: {partition.is_valid(problem)}")

    if args.output_dir:
        generate_outputs(partition, problem, data_file, args.output_dir)

    return 0


def run_with_sample_data(config: BalancerConfig, args) -> int:
    """Run balancer with sample data for demonstration."""
    import pandas as pd

    sample_data = {
        'id': ['S01', 'S02', 'S03', 'S04', 'S05', 'S06', 'S07', 'S08'],
        'name': ['Load housing', 'Press bearing', 'Fit shaft', 'Install gasket',
                 'Torque cover', 'Leak test', 'Label', 'Pack'],
        'level': [1, 2, 2, 3, 3, 4, 5, 5],
        'durationSeconds': [18, 25, 20, 12, 30, 45, 8, 15],
        'sequenceIndex': [0, 0, 1, 0, 1, 0, 0, 1],
    }
    df = pd.DataFrame(sample_data)
    problem = LineProblem.load_from_dataframe(df)
    return solve_and_report(problem, config, args, "sample_steps")


if __name__ == "__main__":
    sys.exit(main())
