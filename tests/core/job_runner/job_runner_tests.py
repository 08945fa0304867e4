import dataclasses
import datetime
import unittest

from algo_exercises.core.job_runner.command_runners import base as command_runners_base
from algo_exercises.core.job_runner import job_runner


class FakeCommandRunner(command_runners_base.CommandRunner):
    """A fake command runner for testing run_job."""

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int = 0,
        status: command_runners_base.CommandStatus = command_runners_base.
        CommandStatus.COMPLETED,
        elapsed: datetime.timedelta = datetime.timedelta(milliseconds=5),
    ):
        self._stdout = stdout
        self._stderr = stderr
        self._returncode = returncode
        self._status = status
        self._elapsed = elapsed
        self.last_command = None
        self.last_stdin = None
        self.last_timeout = None

    def run(self,
            command: list[str],
            stdin: bytes | None = None,
            timeout=None):
        self.last_command = command
        self.last_stdin = stdin
        self.last_timeout = timeout
        return command_runners_base.CommandResult(
            stdout=self._stdout,
            stderr=self._stderr,
            returncode=self._returncode,
            status=self._status,
            elapsed=self._elapsed,
        )


@dataclasses.dataclass
class DummyJob(job_runner.Job):
    """A minimal job implementation for testing run_job."""

    def get_command(self) -> list[str]:
        return ["dummy_command"]

    def serialize_input(self) -> bytes:
        return b"dummy input"

    def deserialize_result(self, stdout: bytes, stderr: bytes, retcode: int):
        if not stdout:
            raise ValueError(f"No output, exit code {retcode}")
        return stdout.decode("utf-8")


class TestRunJob(unittest.TestCase):
    """Unit tests for the run_job function."""

    def test_run_job_success(self):
        fake_runner = FakeCommandRunner(stdout=b"success")
        job = DummyJob()
        timeout = datetime.timedelta(seconds=3)
        result: job_runner.JobExecutionResult = job_runner.run_job(
            job, fake_runner, timeout=timeout)

        self.assertEqual(result.job_result, "success")
        self.assertEqual(result.runner_status,
                         command_runners_base.CommandStatus.COMPLETED)
        self.assertEqual(result.elapsed, datetime.timedelta(milliseconds=5))
        self.assertEqual(result.error_message, "")
        self.assertEqual(fake_runner.last_command, job.get_command())
        self.assertEqual(fake_runner.last_stdin, b"dummy input")
        self.assertEqual(fake_runner.last_timeout, timeout)

    def test_run_job_timeout(self):
        fake_runner = FakeCommandRunner(
            stdout=b"",
            stderr=b"timeout",
            returncode=-1,
            status=command_runners_base.CommandStatus.TIMEOUT,
        )
        result = job_runner.run_job(DummyJob(), fake_runner)

        self.assertEqual(result.runner_status,
                         command_runners_base.CommandStatus.TIMEOUT)
        self.assertIsNone(result.job_result)
        self.assertEqual(result.error_message, "timeout")

    def test_run_job_failure(self):
        fake_runner = FakeCommandRunner(
            stdout=b"",
            stderr=b"error occurred",
            returncode=-1,
            status=command_runners_base.CommandStatus.FAILED_TO_RUN,
        )
        result = job_runner.run_job(DummyJob(), fake_runner)

        self.assertEqual(result.runner_status,
                         command_runners_base.CommandStatus.FAILED_TO_RUN)
        self.assertIsNone(result.job_result)
        self.assertEqual(result.error_message, "error occurred")

    def test_unreadable_output_is_failed_to_run(self):
        fake_runner = FakeCommandRunner(stdout=b"",
                                        stderr=b"MemoryError",
                                        returncode=1)
        result = job_runner.run_job(DummyJob(), fake_runner)

        self.assertEqual(result.runner_status,
                         command_runners_base.CommandStatus.FAILED_TO_RUN)
        self.assertIsNone(result.job_result)
        self.assertEqual(result.error_message,
                         "No output, exit code 1\nMemoryError")


if __name__ == "__main__":
    unittest.main()
