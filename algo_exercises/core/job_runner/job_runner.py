"""Defines jobs and the function that runs them through a command runner.

A job knows the command line that executes it, how to serialize the input
that command reads from stdin, and how to turn the process output back into
a result object.
"""

import abc
import dataclasses
import datetime

from typing import Any

from algo_exercises.core.job_runner.command_runners import base as command_runners_base


class Job(abc.ABC):
    """A unit of work executed in a child process."""

    @abc.abstractmethod
    def get_command(self) -> list[str]:
        """Returns the command line that executes the job."""

    @abc.abstractmethod
    def serialize_input(self) -> bytes:
        """Returns the bytes written to the command standard input."""

    @abc.abstractmethod
    def deserialize_result(self, stdout: bytes, stderr: bytes,
                           retcode: int) -> Any:
        """Builds the job result from the process output.

        Args:
            stdout: The standard output of the process.
            stderr: The standard error of the process.
            retcode: The exit code of the process.

        Raises:
            ValueError: If the output cannot be interpreted.
        """


@dataclasses.dataclass(frozen=True)
class JobExecutionResult:
    """Result of a job execution.

    Attributes:
        job_result: The deserialized job result. None unless the command
            completed and its output could be deserialized.
        runner_status: How the command execution ended.
        elapsed: Wall-clock time spent in the child process.
        error_message: Why there is no job_result, if there is none.
    """
    job_result: Any
    runner_status: command_runners_base.CommandStatus
    elapsed: datetime.timedelta = datetime.timedelta(0)
    error_message: str = ""


def run_job(job: Job,
            command_runner: command_runners_base.CommandRunner,
            timeout: datetime.timedelta | None = None) -> JobExecutionResult:
    """Runs a job using the specified command runner.

    A completed command whose output cannot be deserialized, for example a
    child killed by a resource limit, is reported as FAILED_TO_RUN.

    Args:
        job: The job to execute.
        command_runner: The command runner to use for execution.
        timeout: Optional wall-clock limit for the job.

    Returns:
        The result of the job execution.
    """
    command_result = command_runner.run(command=job.get_command(),
                                        stdin=job.serialize_input(),
                                        timeout=timeout)

    if command_result.status != command_runners_base.CommandStatus.COMPLETED:
        return JobExecutionResult(job_result=None,
                                  runner_status=command_result.status,
                                  elapsed=command_result.elapsed,
                                  error_message=command_result.stderr_text)

    try:
        job_result = job.deserialize_result(stdout=command_result.stdout,
                                            stderr=command_result.stderr,
                                            retcode=command_result.returncode)
    except ValueError as e:
        message = str(e)
        if command_result.stderr:
            message += "\n" + command_result.stderr_text
        return JobExecutionResult(
            job_result=None,
            runner_status=command_runners_base.CommandStatus.FAILED_TO_RUN,
            elapsed=command_result.elapsed,
            error_message=message)

    return JobExecutionResult(job_result=job_result,
                              runner_status=command_result.status,
                              elapsed=command_result.elapsed)
