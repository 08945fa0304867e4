"""Defines the medium sequence and string exercises."""

from collections.abc import Sequence
from typing import Any

_CLOSER_TO_OPENER: dict[str, str] = {")": "(", "]": "[", "}": "{"}
_OPENERS: frozenset[str] = frozenset(_CLOSER_TO_OPENER.values())


def merge_sorted_arrays(nums1: Sequence[Any], nums2: Sequence[Any]) -> list[Any]:
    """Merges two sorted sequences into a new sorted list.

    The merge is stable: on ties the element from nums1 comes first.

    Args:
        nums1: A sequence sorted in non-decreasing order.
        nums2: A sequence sorted in non-decreasing order.

    Returns:
        A new list holding every element of both inputs in sorted order.
    """
    merged: list[Any] = []
    i, j = 0, 0

    while i < len(nums1) and j < len(nums2):
        if nums1[i] <= nums2[j]:
            merged.append(nums1[i])
            i += 1
        else:
            merged.append(nums2[j])
            j += 1

    merged.extend(nums1[i:])
    merged.extend(nums2[j:])
    return merged


def is_valid_parentheses(s: str) -> bool:
    """Checks that every bracket in s is closed in the right order.

    Args:
        s: A string made only of the characters '()[]{}'.

    Returns:
        True if the brackets are balanced and properly nested. The empty
        string is valid.

    Raises:
        ValueError: If s contains a character that is not a bracket.
    """
    stack: list[str] = []

    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSER_TO_OPENER:
            if not stack or stack.pop() != _CLOSER_TO_OPENER[char]:
                return False
        else:
            raise ValueError(
                f"Unexpected character {char!r}. Only '()[]{{}}' are allowed.")

    return not stack


def remove_duplicates(nums: list[Any]) -> int:
    """Compacts a sorted list in place so each value appears once.

    Only the first k positions are meaningful afterwards, where k is the
    returned length; the rest of the list is left as is.

    Args:
        nums: A list sorted in non-decreasing order. Modified in place.

    Returns:
        The number of unique values k.
    """
    if not nums:
        return 0

    write_index = 1
    for read_index in range(1, len(nums)):
        if nums[read_index] != nums[read_index - 1]:
            nums[write_index] = nums[read_index]
            write_index += 1

    return write_index
