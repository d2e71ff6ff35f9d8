#!/usr/bin/env python3
"""
Example: Load a schedule specification, build it, and print accruals.

Usage:
    python examples/run_schedule.py [spec.json] [--notional N] [--rate R] [--verbose]
"""

import sys
from pathlib import Path
import argparse
import logging
import traceback

from bizdates.products.schema import (
    load_schedule_spec,
    build_schedule,
    print_schedule_summary,
)
from bizdates.reporting import generate_accrual_report


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Build a payment schedule from a JSON specification"
    )
    parser.add_argument(
        "spec",
        type=str,
        nargs="?",
        default=str(Path(__file__).parent / "quarterly_bond.json"),
        help="Path to JSON schedule specification"
    )
    parser.add_argument(
        "--notional", "-n",
        type=float,
        default=1_000_000.0,
        help="Notional for accrued interest"
    )
    parser.add_argument(
        "--rate", "-r",
        type=float,
        default=0.05,
        help="Simple annual rate (default: 0.05)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the accrual report as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed output"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    spec_path = Path(args.spec)

    try:
        spec = load_schedule_spec(spec_path)
        if not args.json:
            print_schedule_summary(spec)

        schedule = build_schedule(spec)
        report = generate_accrual_report(schedule, args.notional, args.rate)

        if args.json:
            print(report.to_json())
        else:
            report.print_summary()

        return 0

    except FileNotFoundError as e:
        print(f"\nERROR: {e}")
        return 1

    except Exception as e:
        print(f"\nERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
