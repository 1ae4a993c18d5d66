"""
Command line entry point.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from hostcheck.config import settings
from hostcheck.errors import ConfigurationError
from hostcheck.logger import logger
from hostcheck.schemas.check_result import ScoreReport
from hostcheck.services.check_runner import CheckRunner


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostcheck",
        description=f"{settings.APP_NAME}: score this host against a check configuration."
    )
    parser.add_argument("config", help="TOML file with [[check]] tables")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=settings.VERBOSE,
        help="trace every condition evaluation"
    )
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    return parser


def _print_summary(report: ScoreReport):
    for result in report.results:
        mark = "PASS" if result.passed else "FAIL"
        print(f"[{mark}] {result.message} ({result.points} pts)")
        for hint in result.hints:
            print(f"       hint: {hint}")
    print(
        f"{report.passed_count}/{len(report.results)} checks passed, "
        f"{report.earned_points}/{report.total_points} points"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    
    runner = CheckRunner.with_verbosity(args.verbose)
    try:
        report = runner.run(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        _print_summary(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
