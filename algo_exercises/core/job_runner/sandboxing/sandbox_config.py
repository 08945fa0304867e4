"""Resource limits for child processes running exercise cases.

SandboxConfig produces a preexec_fn for subprocess so that a runaway case,
for example unbounded recursion, is stopped by the kernel instead of
exhausting the host.

Typical usage:

    config = SandboxConfig(max_memory_bytes=256 * 1024**2, max_cpu_seconds=5)
    runner = SubprocessCommandRunner(preexec_fn=config.to_preexec_fn())
"""

import dataclasses
import os
import resource
import sys

from collections.abc import Callable


@dataclasses.dataclass(frozen=True)
class SandboxConfig:
    """Limits applied to the child process before it starts.

    Attributes:
        max_memory_bytes: Address space limit in bytes.
        max_cpu_seconds: CPU time limit in seconds.
    """
    max_memory_bytes: int | None = None
    max_cpu_seconds: int | None = None

    def __post_init__(self) -> None:
        for name in ("max_memory_bytes", "max_cpu_seconds"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive. Got {value}.")

    @property
    def is_empty(self) -> bool:
        return self.max_memory_bytes is None and self.max_cpu_seconds is None

    def to_preexec_fn(self) -> Callable[[], None] | None:
        """Returns a callable for subprocess.Popen(preexec_fn=...).

        Returns None when no limit is configured.

        Raises:
            NotImplementedError: If limits are configured on a platform
                without POSIX resource limits.
        """
        if self.is_empty:
            return None

        if not (sys.platform.startswith("linux")
                or sys.platform.startswith("darwin")):
            raise NotImplementedError(
                f"Resource limiting not implemented for platform: "
                f"{sys.platform}")

        def preexec_fn() -> None:
            try:
                if self.max_memory_bytes is not None:
                    resource.setrlimit(
                        resource.RLIMIT_AS,
                        (self.max_memory_bytes, self.max_memory_bytes))
                if self.max_cpu_seconds is not None:
                    resource.setrlimit(
                        resource.RLIMIT_CPU,
                        (self.max_cpu_seconds, self.max_cpu_seconds))
            except Exception as e:
                _die(f"Sandbox failed to apply resource limits: {str(e)}")

        return preexec_fn


def _die(msg: str) -> None:
    """Write message to stderr and exit immediately.

    WARNING: Only safe to use in subprocess preexec_fn.
    """
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()
    os._exit(1)
