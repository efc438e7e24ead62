#!/usr/bin/env python3
"""
Compute classification metrics from confusion-matrix counts.

Usage:
    python scripts/compute_metrics.py --tp 85 --tn 92 --fp 15 --fn 8
    python scripts/compute_metrics.py --tp 50 --tn 20 --fp 0 --fn 30 --json
    python scripts/compute_metrics.py --examples
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from confmetrics.core.config import CalculatorConfig
from confmetrics.core.errors import MetricsError
from confmetrics.core.types import ConfusionCounts
from confmetrics.metrics.calculator import MetricsCalculator
from confmetrics.metrics.reporter import Reporter

logger = logging.getLogger(__name__)

EXAMPLES = {
    "arbitrary": ConfusionCounts(tp=85, tn=92, fp=15, fn=8),
    "no_false_pos": ConfusionCounts(tp=50, tn=20, fp=0, fn=30),
    "empty": ConfusionCounts(tp=0, tn=0, fp=0, fn=0),
}


def run_examples(calculator: MetricsCalculator, reporter: Reporter) -> int:
    """Run the demonstration matrices and print each result."""
    results = calculator.compute_many(EXAMPLES)

    for name, result in results.items():
        reporter.print_summary(result, EXAMPLES[name], title=f"EXAMPLE: {name}")

    if results:
        reporter.compare(results)

    return 0


def run_single(
    calculator: MetricsCalculator,
    reporter: Reporter,
    counts: ConfusionCounts,
    as_json: bool,
) -> int:
    """Compute one matrix. Returns the process exit code."""
    try:
        result = calculator.compute_counts(counts)
    except MetricsError as e:
        logger.error(f"Could not compute metrics: {e}")
        return 1

    if as_json:
        print(json.dumps(reporter.generate_report_dict(result, counts), indent=2))
    else:
        reporter.print_summary(result, counts)

    return 0


def main(argv=None) -> int:
    config = CalculatorConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Compute binary classification metrics"
    )
    parser.add_argument("--tp", type=float, default=0, help="True positives")
    parser.add_argument("--tn", type=float, default=0, help="True negatives")
    parser.add_argument("--fp", type=float, default=0, help="False positives")
    parser.add_argument("--fn", type=float, default=0, help="False negatives")
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Run the built-in example matrices"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Accept negative counts"
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=config.decimals,
        help="Decimal places to print"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    validate = False if args.no_validate else config.validate_counts
    calculator = MetricsCalculator(validate_counts=validate, config=config)
    reporter = Reporter(decimals=args.decimals)

    if args.examples:
        return run_examples(calculator, reporter)

    counts = ConfusionCounts(tp=args.tp, tn=args.tn, fp=args.fp, fn=args.fn)
    return run_single(calculator, reporter, counts, args.json)


if __name__ == "__main__":
    sys.exit(main())
