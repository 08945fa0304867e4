"""Defines utilities to evaluate exercise test cases.

A case is evaluated either in-process, by calling the function directly, or
isolated, by running the call in a child interpreter through a command
runner. Isolation is what allows a wall-clock timeout to stop a call that
never returns.
"""

import copy
import datetime
import time

from collections.abc import Callable, Sequence
from typing import Any, cast

from algo_exercises.core.job_runner import job_runner
from algo_exercises.core.job_runner.command_runners import base as command_runners_base
from algo_exercises.core.job_runner.jobs import exercise_function_job
from algo_exercises.harness import comparison
from algo_exercises.harness import test_case as test_case_lib
from algo_exercises.harness.test_case_result import FailureKind, TestCaseResult


def _judge(
    test_case: test_case_lib.ExerciseTestCase,
    actual_output: Any,
    exception_class_names: Sequence[str] | None,
    exception_msg: str | None,
    elapsed_ms: float,
    float_tolerance: float,
) -> TestCaseResult:
    """Decides whether the outcome of one call satisfies the test case."""
    expected_exception = test_case.expected_exception

    if exception_class_names:
        if (expected_exception is not None
                and expected_exception.__name__ in exception_class_names):
            return TestCaseResult(passed=True, elapsed_ms=elapsed_ms)
        return TestCaseResult(
            passed=False,
            error_message=(f"Raised exception {exception_class_names[0]}: "
                           f"{exception_msg}"),
            failure_kind=FailureKind.EXCEPTION,
            elapsed_ms=elapsed_ms)

    if expected_exception is not None:
        return TestCaseResult(
            passed=False,
            error_message=(f"Expected exception {expected_exception.__name__}"
                           f", but got: {actual_output!r}"),
            actual_output=actual_output,
            failure_kind=FailureKind.MISMATCH,
            elapsed_ms=elapsed_ms)

    if test_case.validator is not None:
        try:
            valid = bool(test_case.validator(actual_output))
        except Exception as e:
            return TestCaseResult(
                passed=False,
                error_message=(f"Validator raised exception "
                               f"{e.__class__.__name__}: {e}"),
                actual_output=actual_output,
                failure_kind=FailureKind.EXCEPTION,
                elapsed_ms=elapsed_ms)
        if valid:
            return TestCaseResult(passed=True, actual_output=actual_output,
                                  elapsed_ms=elapsed_ms)
        return TestCaseResult(
            passed=False,
            error_message=(f"Output {actual_output!r} rejected by validator "
                           f"{getattr(test_case.validator, '__name__', '')}"),
            actual_output=actual_output,
            failure_kind=FailureKind.MISMATCH,
            elapsed_ms=elapsed_ms)

    tolerance = (test_case.tolerance if test_case.tolerance is not None
                 else float_tolerance)
    if comparison.outputs_match(actual_output, test_case.expected_output,
                                tolerance):
        return TestCaseResult(passed=True, actual_output=actual_output,
                              elapsed_ms=elapsed_ms)

    return TestCaseResult(
        passed=False,
        error_message=(f"Expected output: {test_case.expected_output!r}, "
                       f"but got: {actual_output!r}"),
        actual_output=actual_output,
        failure_kind=FailureKind.MISMATCH,
        elapsed_ms=elapsed_ms)


def evaluate_test_case(
    function: Callable[..., Any],
    test_case: test_case_lib.ExerciseTestCase,
    float_tolerance: float = comparison.DEFAULT_FLOAT_TOLERANCE,
) -> TestCaseResult:
    """Evaluates a test case by calling the function in this process.

    Args:
        function: The exercise function.
        test_case: The test case to evaluate.
        float_tolerance: Tolerance for floats when the case has none.

    Returns:
        A TestCaseResult indicating whether the test case passed.
    """
    inputs = copy.deepcopy(test_case.inputs)

    started = time.perf_counter()
    try:
        actual_output = function(*inputs)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - started) * 1000
        return _judge(test_case,
                      actual_output=None,
                      exception_class_names=[
                          cls.__name__ for cls in type(e).__mro__],
                      exception_msg=str(e),
                      elapsed_ms=elapsed_ms,
                      float_tolerance=float_tolerance)
    elapsed_ms = (time.perf_counter() - started) * 1000

    return _judge(test_case,
                  actual_output=actual_output,
                  exception_class_names=None,
                  exception_msg=None,
                  elapsed_ms=elapsed_ms,
                  float_tolerance=float_tolerance)


def evaluate_test_case_isolated(
    function: Callable[..., Any],
    test_case: test_case_lib.ExerciseTestCase,
    runner: command_runners_base.CommandRunner,
    timeout: datetime.timedelta | None = None,
    float_tolerance: float = comparison.DEFAULT_FLOAT_TOLERANCE,
) -> TestCaseResult:
    """Evaluates a test case by calling the function in a child process.

    Args:
        function: The exercise function. It must be defined at module level
            of an importable module.
        test_case: The test case to evaluate.
        runner: The command runner to use for executing the job.
        timeout: An optional wall-clock limit for the call.
        float_tolerance: Tolerance for floats when the case has none.

    Returns:
        A TestCaseResult indicating whether the test case passed.

    Raises:
        ValueError: If the function cannot be imported by name or the runner
            reports an unknown status.
    """
    job = exercise_function_job.ExerciseFunctionJob.for_function(
        function, test_case.inputs)

    result: job_runner.JobExecutionResult = job_runner.run_job(
        job=job, command_runner=runner, timeout=timeout)
    elapsed_ms = result.elapsed.total_seconds() * 1000

    if result.runner_status == command_runners_base.CommandStatus.COMPLETED:
        job_result = cast(exercise_function_job.ExerciseFunctionJobResult,
                          result.job_result)
        return _judge(test_case,
                      actual_output=job_result.return_value,
                      exception_class_names=job_result.exception_class_names,
                      exception_msg=job_result.exception_msg,
                      elapsed_ms=elapsed_ms,
                      float_tolerance=float_tolerance)
    elif result.runner_status == command_runners_base.CommandStatus.TIMEOUT:
        assert timeout is not None
        return TestCaseResult(
            passed=False,
            error_message=("Code execution timed out after "
                           f"{timeout.total_seconds()} seconds."),
            failure_kind=FailureKind.TIMEOUT,
            elapsed_ms=elapsed_ms)
    elif result.runner_status == command_runners_base.CommandStatus.FAILED_TO_RUN:
        return TestCaseResult(
            passed=False,
            error_message=(
                f"Code execution failed to run: {result.error_message}"),
            failure_kind=FailureKind.FAILED_TO_RUN,
            elapsed_ms=elapsed_ms)
    else:
        raise ValueError(f"Unknown runner status: {result.runner_status}")
