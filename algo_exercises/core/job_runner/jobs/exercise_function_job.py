"""Defines how to call an importable Python function in a child process.

The child imports the function by module and qualified name, so only
functions defined at module level of an importable module can be run. The
arguments and the return value must be picklable.
"""

import dataclasses
import pickle
import sys
import textwrap

from collections.abc import Callable
from typing import Any

from algo_exercises.core.job_runner import job_runner


# Reads a pickled request from stdin, calls the function and writes only the
# pickled outcome to stdout. Anything the function prints is discarded.
_FUNCTION_RUNNER_SCRIPT = textwrap.dedent("""\
import importlib
import io
import pickle
import sys
import traceback

from contextlib import redirect_stdout, redirect_stderr

request = pickle.load(sys.stdin.buffer)
for path in reversed(request["sys_path"]):
    if path not in sys.path:
        sys.path.insert(0, path)

stdout_buffer = io.StringIO()
stderr_buffer = io.StringIO()

try:
    with redirect_stdout(stdout_buffer), redirect_stderr(stderr_buffer):
        func = importlib.import_module(request["module"])
        for part in request["qualname"].split("."):
            func = getattr(func, part)
        result = func(*request["args"])
    outcome = {
        "result": result,
        "exception_class_names": None,
        "exception_msg": None,
    }
except Exception as e:
    outcome = {
        "result": None,
        "exception_class_names": [cls.__name__ for cls in type(e).__mro__],
        "exception_msg": str(e),
    }

try:
    payload = pickle.dumps(outcome)
except Exception as e:
    payload = pickle.dumps({
        "result": None,
        "exception_class_names": [cls.__name__ for cls in type(e).__mro__],
        "exception_msg": f"Pickle error: {traceback.format_exc()}",
    })
sys.stdout.buffer.write(payload)
""")

_EXPECTED_KEYS: frozenset[str] = frozenset({
    "result", "exception_class_names", "exception_msg"
})


@dataclasses.dataclass(frozen=True)
class ExerciseFunctionJobResult:
    """Outcome of calling the function in the child process.

    Attributes:
        return_value: The value returned by the function.
        exception_class_names: Names of the raised exception class and its
            bases, most derived first, or None if nothing was raised.
        exception_msg: The exception message, or None.
    """
    return_value: Any = None
    exception_class_names: tuple[str, ...] | None = None
    exception_msg: str | None = None


@dataclasses.dataclass(frozen=True)
class ExerciseFunctionJob(job_runner.Job):
    """Job calling a module-level function with the given arguments.

    Attributes:
        module: Importable module name, e.g. 'algo_exercises.exercises.easy'.
        qualname: Qualified name of the function inside the module.
        args: Positional arguments.
    """
    module: str
    qualname: str
    args: tuple[Any, ...] = ()

    @classmethod
    def for_function(cls, function: Callable[..., Any], args: tuple[Any, ...]
                     ) -> "ExerciseFunctionJob":
        """Builds a job that calls function(*args) in the child.

        Raises:
            ValueError: If the function cannot be imported by name.
        """
        qualname = function.__qualname__
        if "<locals>" in qualname or "<lambda>" in qualname:
            raise ValueError(
                f"Function {qualname} is not importable from its module.")
        return cls(module=function.__module__, qualname=qualname, args=args)

    def get_command(self) -> list[str]:
        return [sys.executable, "-c", _FUNCTION_RUNNER_SCRIPT]

    def serialize_input(self) -> bytes:
        request = {
            "module": self.module,
            "qualname": self.qualname,
            "args": self.args,
            "sys_path": [path for path in sys.path if path],
        }

        try:
            return pickle.dumps(request)
        except Exception as e:
            raise ValueError("Failed to serialize job input") from e

    def deserialize_result(
        self,
        stdout: bytes,
        stderr: bytes,
        retcode: int
    ) -> ExerciseFunctionJobResult:
        """Unpickles the outcome written by the child.

        Raises:
            ValueError: If stdout does not hold a well-formed outcome.
        """
        if not stdout:
            raise ValueError(
                f"Child process exited with code {retcode} without a result")

        try:
            outcome = pickle.loads(stdout)
        except Exception as e:
            raise ValueError(f"Failed to deserialize job result: {e}") from e

        if not isinstance(outcome, dict):
            raise ValueError(
                "Invalid result format from job runner. Expected dict "
                f"but got {type(outcome).__name__}")

        missing_keys = _EXPECTED_KEYS - outcome.keys()
        if missing_keys:
            raise ValueError(
                "Missing keys in result from job runner: "
                f"{', '.join(sorted(missing_keys))}")

        exception_class_names = outcome["exception_class_names"]
        return ExerciseFunctionJobResult(
            return_value=outcome["result"],
            exception_class_names=(tuple(exception_class_names)
                                   if exception_class_names else None),
            exception_msg=outcome["exception_msg"],
        )
