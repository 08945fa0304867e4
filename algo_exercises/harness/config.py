"""Provides the configuration of a harness run."""

import dataclasses
import datetime

from algo_exercises.core.job_runner.sandboxing.sandbox_config import SandboxConfig
from algo_exercises.harness.comparison import DEFAULT_FLOAT_TOLERANCE


@dataclasses.dataclass
class HarnessConfig:
    """
    Configuration of a harness run.

    Attributes:
        float_tolerance (float): Absolute tolerance for float comparisons of cases that do not set their own.
        max_workers (int): Number of threads running cases concurrently.
        isolated (bool): Run each case in a child interpreter instead of in this process.
        timeout (datetime.timedelta): Wall-clock limit per case. Only enforced when isolated.
        max_memory_bytes (int): Address space limit per case. Only enforced when isolated.
        max_cpu_seconds (int): CPU time limit per case in seconds. Only enforced when isolated.
        show_progress (bool): Show a progress bar while cases run.
        output_dir (str): Directory where reports are written. Nothing is written if None.
    """

    float_tolerance: float = DEFAULT_FLOAT_TOLERANCE
    max_workers: int = 1
    isolated: bool = False
    timeout: datetime.timedelta | None = None
    max_memory_bytes: int | None = None
    max_cpu_seconds: int | None = None
    show_progress: bool = True
    output_dir: str | None = None

    def __post_init__(self):
        if self.float_tolerance < 0:
            raise ValueError(f"float_tolerance must be non-negative. Got {self.float_tolerance}.")
        if self.max_workers <= 0:
            raise ValueError(f"max_workers must be a positive integer. Got {self.max_workers}.")
        if self.timeout is not None and self.timeout <= datetime.timedelta(0):
            raise ValueError(f"timeout must be positive. Got {self.timeout}.")
        if self.max_memory_bytes is not None and self.max_memory_bytes <= 0:
            raise ValueError(f"max_memory_bytes must be positive. Got {self.max_memory_bytes}.")
        if self.max_cpu_seconds is not None and self.max_cpu_seconds <= 0:
            raise ValueError(f"max_cpu_seconds must be positive. Got {self.max_cpu_seconds}.")

    @property
    def sandbox_config(self) -> SandboxConfig:
        """
        Returns the resource limits applied to isolated cases.

        Returns:
            SandboxConfig: The limits, empty when neither a memory nor a CPU limit is set.
        """
        return SandboxConfig(max_memory_bytes=self.max_memory_bytes, max_cpu_seconds=self.max_cpu_seconds)
