"""Command line entry point running the exercise suites."""

import argparse
import datetime
import logging
import sys

from algo_exercises.harness import catalog, reports, suite_runner
from algo_exercises.harness.config import HarnessConfig

EXIT_ALL_PASSED = 0
EXIT_FAILURES = 1
EXIT_BAD_ARGUMENTS = 2


def build_parser():
    parser = argparse.ArgumentParser(description="Run the recorded test cases of the algorithm exercises.")
    parser.add_argument(
        "--exercise", type=str, nargs="*", help="Names of the exercises to run. Runs every exercise if omitted.", default=None
    )
    parser.add_argument("--list", action="store_true", help="List the known exercises and exit.")
    parser.add_argument("--isolated", action="store_true", help="Run each test case in a child Python process.")
    parser.add_argument(
        "--timeout", type=float, help="Wall-clock limit per test case in seconds (isolated runs only).", default=None
    )
    parser.add_argument(
        "--max_memory_mb", type=int, help="Memory limit per test case in MB (isolated runs only).", default=None
    )
    parser.add_argument(
        "--max_cpu_seconds", type=int, help="CPU time limit per test case in seconds (isolated runs only).", default=None
    )
    parser.add_argument("--max_workers", type=int, help="Number of test cases run concurrently.", default=1)
    parser.add_argument(
        "--float_tolerance", type=float, help="Absolute tolerance for float results.", default=None
    )
    parser.add_argument("--output_dir", type=str, help="Directory where the reports are written.", default=None)
    parser.add_argument(
        "--log_level",
        type=str,
        help="Logging level.",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--no_progress", action="store_true", help="Hide the progress bar.")
    return parser


def config_from_args(args):
    """
    Builds the harness configuration from parsed command line arguments.

    Raises:
        ValueError: If an argument value is out of range.
    """
    init_args = {
        "max_workers": args.max_workers,
        "isolated": args.isolated,
        "show_progress": not args.no_progress,
        "output_dir": args.output_dir,
    }
    if args.timeout is not None:
        init_args["timeout"] = datetime.timedelta(seconds=args.timeout)
    if args.max_memory_mb is not None:
        init_args["max_memory_bytes"] = args.max_memory_mb * 1024 * 1024
    if args.max_cpu_seconds is not None:
        init_args["max_cpu_seconds"] = args.max_cpu_seconds
    if args.float_tolerance is not None:
        init_args["float_tolerance"] = args.float_tolerance
    return HarnessConfig(**init_args)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.list:
        for name, suite in catalog.EXERCISE_SUITES.items():
            print(f"{name} ({suite.difficulty}, {len(suite.cases)} cases)")
        return EXIT_ALL_PASSED

    try:
        config = config_from_args(args)
        suites = catalog.select_suites(args.exercise)
    except ValueError as e:
        logging.error(str(e))
        return EXIT_BAD_ARGUMENTS

    results = suite_runner.run_suites(suites, config)
    summary = reports.summarize(results)
    print(reports.format_summary(summary))

    if config.output_dir:
        results_file, summary_file = reports.write_report(results, config.output_dir)
        logging.info(f"Saved case results in {results_file} and the summary in {summary_file}.")

    if summary["totals"]["failed"]:
        return EXIT_FAILURES
    return EXIT_ALL_PASSED


if __name__ == "__main__":
    sys.exit(main())
