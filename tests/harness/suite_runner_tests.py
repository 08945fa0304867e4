import datetime
import unittest

from algo_exercises import exercises
from algo_exercises.core.job_runner.command_runners import base as command_runners_base
from algo_exercises.harness import catalog
from algo_exercises.harness import suite_runner
from algo_exercises.harness.config import HarnessConfig
from algo_exercises.harness.test_case import ExerciseTestCase


def _broken_fibonacci_suite() -> catalog.ExerciseSuite:
    return catalog.ExerciseSuite("fibonacci", exercises.fibonacci, (
        ExerciseTestCase(inputs=(10,), expected_output=55),
        ExerciseTestCase(inputs=(10,), expected_output=56),
        ExerciseTestCase(inputs=(-1,), expected_output=0),
        ExerciseTestCase(inputs=(1,), expected_output=1),
    ))


class TimingOutCommandRunner(command_runners_base.CommandRunner):
    """A fake command runner recording the timeout of every run."""

    def __init__(self):
        self.timeouts = []

    def run(self, command, stdin=None, timeout=None):
        self.timeouts.append(timeout)
        return command_runners_base.CommandResult(
            returncode=-1, status=command_runners_base.CommandStatus.TIMEOUT)


class RunSuitesTest(unittest.TestCase):
    """Tests for run_suites."""

    def setUp(self):
        self.config = HarnessConfig(show_progress=False)

    def test_one_row_per_case_in_order(self):
        suites = catalog.select_suites(["fibonacci", "factorial"])
        results = suite_runner.run_suites(suites, self.config)

        expected_rows = sum(len(suite.cases) for suite in suites)
        self.assertEqual(len(results), expected_rows)
        self.assertEqual(list(results.columns), suite_runner.RESULT_COLUMNS)
        fibonacci_rows = results[results["exercise"] == "fibonacci"]
        self.assertEqual(list(fibonacci_rows["case_index"]),
                         list(range(len(suites[0].cases))))
        self.assertTrue(results["passed"].all())

    def test_failures_do_not_stop_the_run(self):
        results = suite_runner.run_suites([_broken_fibonacci_suite()],
                                          self.config)

        self.assertEqual(list(results["passed"]), [True, False, False, True])
        self.assertEqual(list(results["failure_kind"]),
                         ["none", "mismatch", "exception", "none"])
        self.assertEqual(results.loc[1, "inputs"], "10")
        self.assertEqual(results.loc[1, "expected"], "56")
        self.assertEqual(results.loc[1, "actual"], "55")
        self.assertEqual(results.loc[2, "actual"], "")

    def test_parallel_run_matches_sequential_run(self):
        suites = catalog.select_suites()
        sequential = suite_runner.run_suites(suites, self.config)
        parallel = suite_runner.run_suites(
            suites, HarnessConfig(max_workers=8, show_progress=False))

        columns = ["exercise", "case_index", "passed", "actual"]
        self.assertTrue(sequential[columns].equals(parallel[columns]))

    def test_isolated_run(self):
        config = HarnessConfig(isolated=True, max_workers=4,
                               timeout=datetime.timedelta(seconds=30),
                               show_progress=False)
        results = suite_runner.run_suites(
            catalog.select_suites(["is_prime", "dijkstra"]), config)

        self.assertTrue(results["passed"].all(),
                        msg=results["error_message"].tolist())

    def test_harness_errors_are_recorded_per_case(self):
        def local_function(n):
            return n

        suite = catalog.ExerciseSuite("local", local_function, (
            ExerciseTestCase(inputs=(1,), expected_output=1),
        ))
        config = HarnessConfig(isolated=True, show_progress=False)
        results = suite_runner.run_suites([suite], config)

        self.assertFalse(results.loc[0, "passed"])
        self.assertEqual(results.loc[0, "failure_kind"], "failed_to_run")
        self.assertIn("Error during test case evaluation",
                      results.loc[0, "error_message"])

    def test_case_timeout_overrides_run_timeout(self):
        suite = catalog.ExerciseSuite("fibonacci", exercises.fibonacci, (
            ExerciseTestCase(inputs=(10,), expected_output=55,
                             timeout=datetime.timedelta(seconds=0.25)),
            ExerciseTestCase(inputs=(20,), expected_output=6765),
        ))
        config = HarnessConfig(isolated=True,
                               timeout=datetime.timedelta(seconds=5),
                               show_progress=False)
        runner = TimingOutCommandRunner()
        results = suite_runner.run_suites([suite], config, runner=runner)

        self.assertEqual(runner.timeouts, [datetime.timedelta(seconds=0.25),
                                           datetime.timedelta(seconds=5)])
        self.assertEqual(list(results["failure_kind"]), ["timeout", "timeout"])
        self.assertIn("after 0.25 seconds", results.loc[0, "error_message"])
        self.assertIn("after 5.0 seconds", results.loc[1, "error_message"])

    def test_no_suites(self):
        results = suite_runner.run_suites([], self.config)

        self.assertTrue(results.empty)
        self.assertEqual(list(results.columns), suite_runner.RESULT_COLUMNS)


class MakeRunnerTest(unittest.TestCase):
    """Tests for make_runner."""

    def test_in_process_has_no_runner(self):
        self.assertIsNone(suite_runner.make_runner(HarnessConfig()))

    def test_limits_without_isolation_log_a_warning(self):
        config = HarnessConfig(timeout=datetime.timedelta(seconds=1))
        with self.assertLogs("suite_runner", level="WARNING"):
            self.assertIsNone(suite_runner.make_runner(config))

    def test_cpu_limit_without_isolation_logs_a_warning(self):
        config = HarnessConfig(max_cpu_seconds=1)
        with self.assertLogs("suite_runner", level="WARNING"):
            self.assertIsNone(suite_runner.make_runner(config))

    def test_isolated_has_a_runner(self):
        self.assertIsNotNone(
            suite_runner.make_runner(HarnessConfig(isolated=True)))


if __name__ == "__main__":
    unittest.main()
