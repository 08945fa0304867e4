from .catalog import EXERCISE_SUITES, ExerciseSuite, select_suites
from .config import HarnessConfig
from .evaluator import evaluate_test_case, evaluate_test_case_isolated
from .reports import format_summary, summarize, write_report
from .suite_runner import run_suites
from .test_case import ExerciseTestCase
from .test_case_result import FailureKind, TestCaseResult

__all__ = [
    "EXERCISE_SUITES",
    "ExerciseSuite",
    "select_suites",
    "HarnessConfig",
    "evaluate_test_case",
    "evaluate_test_case_isolated",
    "format_summary",
    "summarize",
    "write_report",
    "run_suites",
    "ExerciseTestCase",
    "FailureKind",
    "TestCaseResult",
]
