"""Run a scripted dispatch scenario from a YAML file."""

import argparse
import sys

from .config import SimulationConfig, load_simulation_config
from .simulation import DispatchSimulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elvdispatch-run", description=__doc__)
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to a simulation YAML file (default: 5 floors, 2 elevators, no calls)",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print broker and runner traces")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print("--- Loading Configuration ---")
    try:
        config = load_simulation_config(args.config) if args.config else SimulationConfig()
    except (FileNotFoundError, ValueError, KeyError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    print(f"Floors: {config.building.num_floors}, Elevators: {config.elevator.num_elevators}, "
          f"Calls: {len(config.scenario.calls)}")

    print("\n--- Simulation Start ---")
    simulation = DispatchSimulation(config, verbose=not args.quiet)
    statistics = simulation.run()
    print("\n--- Simulation End ---")

    statistics.print_summary()
    for call, reason in simulation.rejected_calls:
        print(f"Rejected {call.type} call at floor {call.floor}: {reason}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
