from .easy import (
    count_set_bits,
    factorial,
    fibonacci,
    is_palindrome_number,
    is_prime,
    pow2,
    reverse_int,
    smallest_divisor,
    sum_digits,
)
from .graphs import dijkstra
from .hard import (
    find_median_sorted_arrays,
    longest_increasing_subsequence,
    min_distance,
    solve_n_queens,
    word_break,
)
from .medium import is_valid_parentheses, merge_sorted_arrays, remove_duplicates
from .numerical import integrate, modpow, sqrt_newton

__all__ = [
    "count_set_bits",
    "factorial",
    "fibonacci",
    "is_palindrome_number",
    "is_prime",
    "pow2",
    "reverse_int",
    "smallest_divisor",
    "sum_digits",
    "dijkstra",
    "find_median_sorted_arrays",
    "longest_increasing_subsequence",
    "min_distance",
    "solve_n_queens",
    "word_break",
    "is_valid_parentheses",
    "merge_sorted_arrays",
    "remove_duplicates",
    "integrate",
    "modpow",
    "sqrt_newton",
]
