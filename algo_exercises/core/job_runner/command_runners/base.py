"""Defines the interface for running a child process command."""

import dataclasses
import datetime

from enum import Enum
from typing import Protocol


class CommandStatus(Enum):
    """How a command execution ended."""
    COMPLETED = "completed"
    FAILED_TO_RUN = "failed_to_run"
    TIMEOUT = "timeout"


@dataclasses.dataclass(frozen=True)
class CommandResult:
    """Result of running a command.

    Attributes:
        stdout: Raw standard output of the process.
        stderr: Raw standard error of the process.
        returncode: Exit code of the process, -1 if it never finished.
        status: How the execution ended.
        elapsed: Wall-clock time spent waiting for the process.
    """
    stdout: bytes = b""
    stderr: bytes = b""
    returncode: int = 0
    status: CommandStatus = CommandStatus.COMPLETED
    elapsed: datetime.timedelta = datetime.timedelta(0)

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class CommandRunner(Protocol):
    """Runs a command line and reports how it ended."""

    def run(
        self,
        command: list[str],
        stdin: bytes | None = None,
        timeout: datetime.timedelta | None = None,
    ) -> CommandResult:
        """Executes a command and returns the result.

        Args:
            command: The command line, e.g. [sys.executable, '-c', '...'].
            stdin: Optional bytes written to the process standard input.
            timeout: Wall-clock limit. A process still running after it is
                killed and reported with CommandStatus.TIMEOUT.

        Returns:
            The result of the command execution.
        """
        ...
