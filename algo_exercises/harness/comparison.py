"""Defines how actual and expected outputs are compared."""

import math

from typing import Any

DEFAULT_FLOAT_TOLERANCE = 1e-9


def normalize_output(output: Any) -> Any:
    """Normalizes the output for comparison.

    Recursively converts lists to tuples and normalizes dictionary keys
    and values, so a list result matches a tuple expectation.

    Args:
        output: The output to normalize.

    Returns:
        The normalized output.
    """
    if isinstance(output, (list, tuple)):
        return tuple(normalize_output(item) for item in output)
    elif isinstance(output, dict):
        return {
            normalize_output(k): normalize_output(v)
            for k, v in output.items()}

    return output


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _match(actual: Any, expected: Any, tolerance: float) -> bool:
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(actual) is type(expected) and actual == expected

    if isinstance(expected, float) and _is_real(actual):
        if math.isinf(expected) or math.isinf(actual):
            return actual == expected
        return abs(actual - expected) <= tolerance

    if isinstance(expected, tuple):
        return (isinstance(actual, tuple) and len(actual) == len(expected)
                and all(_match(a, e, tolerance)
                        for a, e in zip(actual, expected)))

    if isinstance(expected, dict):
        return (isinstance(actual, dict) and actual.keys() == expected.keys()
                and all(_match(actual[k], expected[k], tolerance)
                        for k in expected))

    return actual == expected


def outputs_match(actual: Any, expected: Any,
                  tolerance: float = DEFAULT_FLOAT_TOLERANCE) -> bool:
    """Checks whether an actual output matches the expected one.

    A result matches a float expectation, including one nested in a
    sequence or dictionary, when it differs by at most tolerance.
    Infinities only match themselves. Booleans only match booleans.
    Everything else, integers included, must be equal after normalization.

    Args:
        actual: The value returned by the exercise.
        expected: The recorded expected value.
        tolerance: Absolute tolerance for floats.

    Returns:
        True if the outputs match.
    """
    return _match(normalize_output(actual), normalize_output(expected),
                  tolerance)
