import statistics
import unittest

from hypothesis import given
from hypothesis import strategies as st
from parameterized import parameterized

from algo_exercises.exercises import hard


class LongestIncreasingSubsequenceTest(unittest.TestCase):
    """Tests for longest_increasing_subsequence."""

    @parameterized.expand([
        ([10, 9, 2, 5, 3, 7, 101, 18], 4),
        ([0, 1, 0, 3, 2, 3], 4),
        ([7, 7, 7, 7], 1),
        ([5], 1),
        ([], 0),
        ([5, 4, 3, 2, 1], 1),
    ])
    def test_longest_increasing_subsequence(self, nums, expected):
        self.assertEqual(hard.longest_increasing_subsequence(nums), expected)


class WordBreakTest(unittest.TestCase):
    """Tests for word_break."""

    @parameterized.expand([
        ("leetcode", ["leet", "code"], True),
        ("applepenapple", ["apple", "pen"], True),
        ("catsandog", ["cats", "dog", "sand", "and", "cat"], False),
        ("", ["a"], True),
        ("a", [], False),
        ("aaaaaaa", ["aaaa", "aaa"], True),
    ])
    def test_word_break(self, s, word_dict, expected):
        self.assertEqual(hard.word_break(s, word_dict), expected)


class FindMedianSortedArraysTest(unittest.TestCase):
    """Tests for find_median_sorted_arrays."""

    @parameterized.expand([
        ([1, 3], [2], 2.0),
        ([1, 2], [3, 4], 2.5),
        ([], [1], 1.0),
        ([2], [], 2.0),
        ([0, 0], [0, 0], 0.0),
        ([2, 3, 4, 5, 6], [1], 3.5),
        ([-5, -1], [-3], -3.0),
    ])
    def test_find_median(self, nums1, nums2, expected):
        result = hard.find_median_sorted_arrays(nums1, nums2)

        self.assertIsInstance(result, float)
        self.assertEqual(result, expected)

    @given(st.lists(st.integers(-10**6, 10**6)),
           st.lists(st.integers(-10**6, 10**6)))
    def test_matches_median_of_union(self, nums1, nums2):
        if not nums1 and not nums2:
            return
        result = hard.find_median_sorted_arrays(sorted(nums1), sorted(nums2))
        self.assertEqual(result, statistics.median(nums1 + nums2))

    def test_both_empty_is_rejected(self):
        with self.assertRaisesRegex(ValueError, "empty"):
            hard.find_median_sorted_arrays([], [])


class SolveNQueensTest(unittest.TestCase):
    """Tests for solve_n_queens."""

    def test_four_queens(self):
        self.assertEqual(hard.solve_n_queens(4), [
            [".Q..", "...Q", "Q...", "..Q."],
            ["..Q.", "Q...", "...Q", ".Q.."],
        ])

    @parameterized.expand([
        (0, 1),
        (1, 1),
        (2, 0),
        (3, 0),
        (5, 10),
        (6, 4),
        (8, 92),
    ])
    def test_number_of_solutions(self, n, expected_count):
        self.assertEqual(len(hard.solve_n_queens(n)), expected_count)

    def test_boards_are_non_attacking(self):
        for board in hard.solve_n_queens(6):
            columns = [row.index("Q") for row in board]
            self.assertEqual(len(set(columns)), 6)
            self.assertEqual(len({r - c for r, c in enumerate(columns)}), 6)
            self.assertEqual(len({r + c for r, c in enumerate(columns)}), 6)
            self.assertTrue(all(row.count("Q") == 1 for row in board))

    def test_negative_size_is_rejected(self):
        with self.assertRaises(ValueError):
            hard.solve_n_queens(-1)


class MinDistanceTest(unittest.TestCase):
    """Tests for min_distance."""

    @parameterized.expand([
        ("horse", "ros", 3),
        ("intention", "execution", 5),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
    ])
    def test_min_distance(self, word1, word2, expected):
        self.assertEqual(hard.min_distance(word1, word2), expected)

    @given(st.text(max_size=20))
    def test_distance_from_empty_is_length(self, s):
        self.assertEqual(hard.min_distance("", s), len(s))

    @given(st.text(max_size=20))
    def test_distance_to_itself_is_zero(self, s):
        self.assertEqual(hard.min_distance(s, s), 0)


if __name__ == "__main__":
    unittest.main()
