"""Runs exercise suites and collects one result row per test case.

Cases share no state, so they are submitted to a thread pool and may finish
in any order; the returned DataFrame keeps catalog order regardless.
"""

import concurrent.futures
import logging

from collections.abc import Sequence
from typing import Any

import pandas as pd
from tqdm.auto import tqdm

from algo_exercises.core.job_runner.command_runners import base as command_runners_base
from algo_exercises.core.job_runner.command_runners import subprocess_runner
from algo_exercises.harness import evaluator
from algo_exercises.harness.catalog import ExerciseSuite
from algo_exercises.harness.config import HarnessConfig
from algo_exercises.harness.test_case import ExerciseTestCase
from algo_exercises.harness.test_case_result import FailureKind, TestCaseResult

log = logging.getLogger("suite_runner")

EXERCISE_COLUMN = "exercise"
DIFFICULTY_COLUMN = "difficulty"
CASE_INDEX_COLUMN = "case_index"
DESCRIPTION_COLUMN = "description"
INPUTS_COLUMN = "inputs"
EXPECTED_COLUMN = "expected"
ACTUAL_COLUMN = "actual"
PASSED_COLUMN = "passed"
FAILURE_KIND_COLUMN = "failure_kind"
ERROR_MESSAGE_COLUMN = "error_message"
ELAPSED_MS_COLUMN = "elapsed_ms"

RESULT_COLUMNS = [
    EXERCISE_COLUMN,
    DIFFICULTY_COLUMN,
    CASE_INDEX_COLUMN,
    DESCRIPTION_COLUMN,
    INPUTS_COLUMN,
    EXPECTED_COLUMN,
    ACTUAL_COLUMN,
    PASSED_COLUMN,
    FAILURE_KIND_COLUMN,
    ERROR_MESSAGE_COLUMN,
    ELAPSED_MS_COLUMN,
]


def _format_inputs(inputs: tuple[Any, ...]) -> str:
    return ", ".join(repr(arg) for arg in inputs)


def _run_case(
    suite: ExerciseSuite,
    test_case: ExerciseTestCase,
    config: HarnessConfig,
    runner: command_runners_base.CommandRunner | None,
) -> TestCaseResult:
    """Runs a single test case, recording harness errors as a failure."""
    try:
        if runner is None:
            return evaluator.evaluate_test_case(
                suite.function, test_case,
                float_tolerance=config.float_tolerance)
        return evaluator.evaluate_test_case_isolated(
            suite.function, test_case, runner,
            timeout=test_case.timeout or config.timeout,
            float_tolerance=config.float_tolerance)
    except Exception as e:
        return TestCaseResult(
            passed=False,
            error_message=f"Error during test case evaluation: {str(e)}",
            failure_kind=FailureKind.FAILED_TO_RUN)


def _to_row(suite: ExerciseSuite, case_index: int,
            test_case: ExerciseTestCase,
            result: TestCaseResult) -> dict[str, Any]:
    returned = result.failure_kind in (FailureKind.NONE, FailureKind.MISMATCH)
    return {
        EXERCISE_COLUMN: suite.name,
        DIFFICULTY_COLUMN: suite.difficulty,
        CASE_INDEX_COLUMN: case_index,
        DESCRIPTION_COLUMN: test_case.description,
        INPUTS_COLUMN: _format_inputs(test_case.inputs),
        EXPECTED_COLUMN: test_case.expectation,
        ACTUAL_COLUMN: repr(result.actual_output) if returned else "",
        PASSED_COLUMN: result.passed,
        FAILURE_KIND_COLUMN: result.failure_kind.value,
        ERROR_MESSAGE_COLUMN: result.error_message,
        ELAPSED_MS_COLUMN: result.elapsed_ms,
    }


def make_runner(
        config: HarnessConfig) -> command_runners_base.CommandRunner | None:
    """Returns the command runner for isolated runs, None for in-process."""
    if not config.isolated:
        if config.timeout is not None or not config.sandbox_config.is_empty:
            log.warning("timeout, memory and CPU limits are only enforced for "
                        "isolated runs and will be ignored.")
        return None
    return subprocess_runner.SubprocessCommandRunner(
        preexec_fn=config.sandbox_config.to_preexec_fn())


def run_suites(
    suites: Sequence[ExerciseSuite],
    config: HarnessConfig | None = None,
    runner: command_runners_base.CommandRunner | None = None,
) -> pd.DataFrame:
    """Runs every test case of the given suites.

    Args:
        suites: The suites to run.
        config: The harness configuration. Defaults to HarnessConfig().
        runner: Command runner for isolated runs. If None, one is built
            from the config when config.isolated is set.

    Returns:
        A DataFrame with one row per test case and the columns listed in
        RESULT_COLUMNS, in suite order then case order.
    """
    config = config or HarnessConfig()
    if runner is None:
        runner = make_runner(config)

    tasks = [(suite, index, test_case)
             for suite in suites
             for index, test_case in enumerate(suite.cases)]
    log.info("Running %d test cases from %d exercises%s.", len(tasks),
             len(suites), " in isolated processes" if runner else "")

    if not tasks:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    max_workers = min(config.max_workers, len(tasks))
    rows: list[dict[str, Any]] = []

    with concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers) as executor:
        futures = [
            executor.submit(_run_case, suite, test_case, config, runner)
            for suite, _, test_case in tasks
        ]

        # Iterate in the same order as the test cases
        for (suite, index, test_case), future in tqdm(
                zip(tasks, futures), total=len(tasks),
                desc="Running exercise test cases",
                disable=not config.show_progress):
            result = future.result()
            log.debug("%s case %d: passed=%s", suite.name, index,
                      result.passed)
            if not result.passed:
                log.warning("%s case %d failed with input (%s): %s",
                            suite.name, index,
                            _format_inputs(test_case.inputs),
                            result.error_message)
            rows.append(_to_row(suite, index, test_case, result))

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
