"""Defines the recorded test cases of every exercise.

Each exercise is registered as an ExerciseSuite: the function under test and
its ordered, immutable list of test cases. EXERCISE_SUITES maps the exercise
name to its suite, in the order suites are run.
"""

import dataclasses
import math

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from algo_exercises import exercises
from algo_exercises.harness.test_case import ExerciseTestCase

EASY = "easy"
MEDIUM = "medium"
HARD = "hard"


@dataclasses.dataclass(frozen=True)
class ExerciseSuite:
    """An exercise function with its recorded test cases.

    Attributes:
        name: Unique exercise name, used to select suites from the CLI.
        function: The exercise function under test.
        cases: The test cases, run in this order.
        difficulty: One of 'easy', 'medium' or 'hard'.
    """
    name: str
    function: Callable[..., Any]
    cases: tuple[ExerciseTestCase, ...]
    difficulty: str = EASY

    def __post_init__(self) -> None:
        if self.difficulty not in (EASY, MEDIUM, HARD):
            raise ValueError(f"Unknown difficulty: {self.difficulty}")


def _case(*inputs: Any, expected: Any = None, **kwargs: Any) -> ExerciseTestCase:
    return ExerciseTestCase(inputs=inputs, expected_output=expected, **kwargs)


def _is_valid_queens_board(n: int, expected_count: int) -> Callable[[Any], bool]:
    """Returns a validator checking that there are expected_count distinct valid n-queens boards."""

    def is_valid_queens_boards(boards: Any) -> bool:
        if len(boards) != expected_count:
            return False
        seen = set()
        for board in boards:
            if len(board) != n or any(len(row) != n for row in board):
                return False
            columns = [row.index("Q") for row in board if row.count("Q") == 1]
            if len(columns) != n or len(set(columns)) != n:
                return False
            if len({r - c for r, c in enumerate(columns)}) != n:
                return False
            if len({r + c for r, c in enumerate(columns)}) != n:
                return False
            seen.add(tuple(board))
        return len(seen) == len(boards)

    return is_valid_queens_boards


_SUITES: tuple[ExerciseSuite, ...] = (
    ExerciseSuite("fibonacci", exercises.fibonacci, (
        _case(0, expected=0),
        _case(1, expected=1),
        _case(5, expected=5),
        _case(10, expected=55),
        _case(-1, expected_exception=ValueError,
              description="negative input is rejected"),
    )),
    ExerciseSuite("factorial", exercises.factorial, (
        _case(0, expected=1),
        _case(5, expected=120),
        _case(7, expected=5040),
        _case(-3, expected_exception=ValueError),
    )),
    ExerciseSuite("is_prime", exercises.is_prime, (
        _case(2, expected=True),
        _case(15, expected=False),
        _case(17, expected=True),
        _case(1, expected=False, description="values below 2 are not prime"),
        _case(7919, expected=True),
    )),
    ExerciseSuite("sum_digits", exercises.sum_digits, (
        _case(0, expected=0),
        _case(123, expected=6),
        _case(1009, expected=10),
        _case(-123, expected=6, description="sign is ignored"),
    )),
    ExerciseSuite("reverse_int", exercises.reverse_int, (
        _case(123, expected=321),
        _case(-120, expected=-21),
        _case(0, expected=0),
        _case(120, expected=21, description="trailing zeros are lost"),
    )),
    ExerciseSuite("count_set_bits", exercises.count_set_bits, (
        _case(0, expected=0),
        _case(7, expected=3),
        _case(1023, expected=10),
        _case(-7, expected=3),
    )),
    ExerciseSuite("is_palindrome_number", exercises.is_palindrome_number, (
        _case(121, expected=True),
        _case(-121, expected=True, description="sign is ignored"),
        _case(123, expected=False),
        _case(0, expected=True),
    )),
    ExerciseSuite("pow2", exercises.pow2, (
        _case(0, expected=1),
        _case(5, expected=32),
        _case(10, expected=1024),
        _case(-1, expected_exception=ValueError),
    )),
    ExerciseSuite("smallest_divisor", exercises.smallest_divisor, (
        _case(2, expected=2),
        _case(15, expected=3),
        _case(17, expected=17, description="a prime is its own divisor"),
        _case(49, expected=7),
        _case(1, expected_exception=ValueError),
    )),
    ExerciseSuite("merge_sorted_arrays", exercises.merge_sorted_arrays, (
        _case([1, 3, 5], [2, 4, 6], expected=[1, 2, 3, 4, 5, 6]),
        _case([], [1, 2], expected=[1, 2]),
        _case([1, 2], [], expected=[1, 2]),
        _case([1, 1], [1], expected=[1, 1, 1]),
        _case([], [], expected=[]),
    ), difficulty=MEDIUM),
    ExerciseSuite("is_valid_parentheses", exercises.is_valid_parentheses, (
        _case("()[]{}", expected=True),
        _case("(]", expected=False),
        _case("(()", expected=False),
        _case("", expected=True),
        _case("{[]}", expected=True),
        _case(")(", expected=False),
        _case("(a)", expected_exception=ValueError,
              description="non-bracket characters are malformed input"),
    ), difficulty=MEDIUM),
    ExerciseSuite("remove_duplicates", exercises.remove_duplicates, (
        _case([1, 1, 2], expected=2),
        _case([0, 0, 1, 1, 1, 2, 2, 3, 3, 4], expected=5),
        _case([], expected=0),
        _case([7], expected=1),
    ), difficulty=MEDIUM),
    ExerciseSuite(
        "longest_increasing_subsequence",
        exercises.longest_increasing_subsequence, (
            _case([10, 9, 2, 5, 3, 7, 101, 18], expected=4),
            _case([0, 1, 0, 3, 2, 3], expected=4),
            _case([7, 7, 7, 7], expected=1),
            _case([], expected=0),
        ), difficulty=HARD),
    ExerciseSuite("word_break", exercises.word_break, (
        _case("leetcode", ["leet", "code"], expected=True),
        _case("applepenapple", ["apple", "pen"], expected=True),
        _case("catsandog", ["cats", "dog", "sand", "and", "cat"],
              expected=False),
        _case("", ["a"], expected=True),
    ), difficulty=HARD),
    ExerciseSuite(
        "find_median_sorted_arrays", exercises.find_median_sorted_arrays, (
            _case([1, 3], [2], expected=2.0),
            _case([1, 2], [3, 4], expected=2.5),
            _case([], [1], expected=1.0),
            _case([0, 0], [0, 0], expected=0.0),
            _case([2, 3, 4, 5, 6], [1], expected=3.5,
                  description="longer first operand is swapped"),
            _case([], [], expected_exception=ValueError),
        ), difficulty=HARD),
    ExerciseSuite("solve_n_queens", exercises.solve_n_queens, (
        _case(4, expected=[[".Q..", "...Q", "Q...", "..Q."],
                           ["..Q.", "Q...", "...Q", ".Q.."]]),
        _case(1, expected=[["Q"]]),
        _case(2, expected=[]),
        _case(3, expected=[]),
        _case(6, validator=_is_valid_queens_board(6, expected_count=4),
              description="all four boards are distinct valid placements"),
    ), difficulty=HARD),
    ExerciseSuite("min_distance", exercises.min_distance, (
        _case("horse", "ros", expected=3),
        _case("intention", "execution", expected=5),
        _case("", "abc", expected=3),
        _case("same", "same", expected=0),
    ), difficulty=HARD),
    ExerciseSuite("dijkstra", exercises.dijkstra, (
        _case([[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], []], 0,
              expected=[0, 3, 1, 4]),
        _case([[(1, 2)], [], []], 0, expected=[0, 2, math.inf],
              description="unreachable nodes stay at infinity"),
        _case([[]], 0, expected=[0]),
        _case([[(1, -1)], []], 0, expected_exception=ValueError),
    ), difficulty=HARD),
    ExerciseSuite("integrate", exercises.integrate, (
        _case(0.0, 2.0, 4, expected=2.75),
        _case(0.0, 1.0, 1000, expected=1 / 3, tolerance=1e-6),
        _case(1.0, 1.0, 10, expected=0.0),
        _case(0.0, 1.0, 0, expected_exception=ValueError),
    ), difficulty=HARD),
    ExerciseSuite("modpow", exercises.modpow, (
        _case(2, 10, 1000, expected=24),
        _case(3, 200, 13, expected=9),
        _case(5, 0, 7, expected=1),
        _case(7, 0, 1, expected=0),
        _case(-2, 3, 5, expected=2),
    ), difficulty=HARD),
    ExerciseSuite("sqrt_newton", exercises.sqrt_newton, (
        _case(16.0, 10, expected=4.0),
        _case(2.0, 20, expected=math.sqrt(2)),
        _case(9.0, 0, expected=4.5, description="no iterations keeps x/2"),
        _case(0.0, 5, expected=0.0),
        _case(-4.0, 5, expected=-1.0, description="negative input sentinel"),
    ), difficulty=HARD),
)

EXERCISE_SUITES: dict[str, ExerciseSuite] = {
    suite.name: suite for suite in _SUITES}


def select_suites(names: Iterable[str] | None = None) -> list[ExerciseSuite]:
    """Returns the suites to run.

    Args:
        names: Exercise names to select, in any order. None or empty selects
            every exercise.

    Returns:
        The selected suites in catalog order.

    Raises:
        ValueError: If a name is not a known exercise.
    """
    if not names:
        return list(EXERCISE_SUITES.values())

    requested: Sequence[str] = list(names)
    unknown = [name for name in requested if name not in EXERCISE_SUITES]
    if unknown:
        raise ValueError(
            f"Unknown exercise(s): {', '.join(unknown)}. "
            f"Known exercises: {', '.join(EXERCISE_SUITES)}")

    return [suite for name, suite in EXERCISE_SUITES.items()
            if name in requested]
