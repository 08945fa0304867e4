"""Defines a command runner backed by the subprocess module."""

import datetime
import logging
import subprocess
import time

from typing import Callable, TypeAlias

from algo_exercises.core.job_runner.command_runners import base

_PreexecFn: TypeAlias = Callable[[], None]

log = logging.getLogger("subprocess_runner")


class SubprocessCommandRunner(base.CommandRunner):
    """Runs each command in a fresh child process.

    A preexec_fn, usually built by SandboxConfig.to_preexec_fn, is applied in
    the child before the command starts.
    """

    def __init__(self, preexec_fn: _PreexecFn | None = None) -> None:
        self._preexec_fn = preexec_fn

    def run(
        self,
        command: list[str],
        stdin: bytes | None = None,
        timeout: datetime.timedelta | None = None,
    ) -> base.CommandResult:
        started = time.perf_counter()

        def elapsed() -> datetime.timedelta:
            return datetime.timedelta(seconds=time.perf_counter() - started)

        try:
            completed = subprocess.run(
                command,
                input=stdin,
                capture_output=True,
                timeout=timeout.total_seconds() if timeout else None,
                check=False,
                preexec_fn=self._preexec_fn,
            )
        except subprocess.TimeoutExpired as e:
            log.debug("Command timed out after %s", timeout)
            return base.CommandResult(
                stdout=e.stdout or b"",
                stderr=e.stderr or str(e).encode("utf-8"),
                returncode=-1,
                status=base.CommandStatus.TIMEOUT,
                elapsed=elapsed(),
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("Command failed to start: %s", e)
            return base.CommandResult(
                stdout=b"",
                stderr=str(e).encode("utf-8"),
                returncode=-1,
                status=base.CommandStatus.FAILED_TO_RUN,
                elapsed=elapsed(),
            )

        return base.CommandResult(
            stdout=completed.stdout,
            stderr=completed.stderr,
            returncode=completed.returncode,
            status=base.CommandStatus.COMPLETED,
            elapsed=elapsed(),
        )
