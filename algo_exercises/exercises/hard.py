"""Defines the hard dynamic-programming and backtracking exercises."""

import math

from collections.abc import Iterable, Sequence


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Returns the length of the longest strictly increasing subsequence.

    Uses the O(n^2) tabulation where dp[i] is the best length of a
    subsequence ending at nums[i].
    """
    if not nums:
        return 0

    dp = [1] * len(nums)
    for i in range(1, len(nums)):
        for j in range(i):
            if nums[j] < nums[i]:
                dp[i] = max(dp[i], dp[j] + 1)

    return max(dp)


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Checks whether s can be split into a sequence of dictionary words.

    Args:
        s: The string to segment.
        word_dict: The allowed words. Words may be reused.

    Returns:
        True if s is a concatenation of words from word_dict. The empty
        string is always segmentable.
    """
    words = frozenset(word_dict)

    # dp[i] is True when s[:i] can be segmented.
    dp = [False] * (len(s) + 1)
    dp[0] = True

    for i in range(1, len(s) + 1):
        for j in range(i):
            if dp[j] and s[j:i] in words:
                dp[i] = True
                break

    return dp[len(s)]


def find_median_sorted_arrays(
    nums1: Sequence[int],
    nums2: Sequence[int],
) -> float:
    """Returns the median of the union of two sorted sequences.

    Binary searches the partition index of the shorter sequence so that
    every element left of the combined partition is no greater than every
    element right of it. Missing neighbours at the edges are replaced by
    -inf and +inf.

    Args:
        nums1: A sequence sorted in non-decreasing order.
        nums2: A sequence sorted in non-decreasing order.

    Returns:
        The median as a float.

    Raises:
        ValueError: If both sequences are empty.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1

    m, n = len(nums1), len(nums2)
    total = m + n
    if total == 0:
        raise ValueError("Cannot compute the median of two empty sequences.")

    half = (total + 1) // 2
    low, high = 0, m

    while low <= high:
        i = (low + high) // 2
        j = half - i

        left1 = nums1[i - 1] if i > 0 else -math.inf
        right1 = nums1[i] if i < m else math.inf
        left2 = nums2[j - 1] if j > 0 else -math.inf
        right2 = nums2[j] if j < n else math.inf

        if left1 <= right2 and left2 <= right1:
            if total % 2 == 1:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2.0
        elif left1 > right2:
            high = i - 1
        else:
            low = i + 1

    raise ValueError("Input sequences must be sorted.")


def solve_n_queens(n: int) -> list[list[str]]:
    """Returns every placement of n non-attacking queens on an n x n board.

    Each board is a list of n row strings where 'Q' marks a queen and '.'
    an empty square. Boards are ordered by the column chosen in the first
    row, then the second row, and so on.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"Board size must be non-negative. Got {n}.")

    solutions: list[list[str]] = []
    queen_columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                ["." * col + "Q" + "." * (n - col - 1) for col in queen_columns])
            return

        for col in range(n):
            if (col in used_columns or row - col in used_diagonals
                    or row + col in used_anti_diagonals):
                continue

            queen_columns.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)

            place(row + 1)

            queen_columns.pop()
            used_columns.remove(col)
            used_diagonals.remove(row - col)
            used_anti_diagonals.remove(row + col)

    place(0)
    return solutions


def min_distance(word1: str, word2: str) -> int:
    """Returns the edit distance between two strings.

    Insertions, deletions and substitutions each cost one.
    """
    m, n = len(word1), len(word2)

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if word1[i - 1] == word2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # deletion
                    dp[i][j - 1],      # insertion
                    dp[i - 1][j - 1],  # substitution
                )

    return dp[m][n]
