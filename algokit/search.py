"""Binary searches on specially arranged sorted arrays."""

from __future__ import annotations

from typing import Optional, Sequence


def single_element(values: Sequence[int]) -> int:
    """The one value of a sorted sequence that does not appear twice."""
    if not values:
        raise ValueError("values must not be empty")
    high = len(values) - 1
    if high == 0 or values[0] != values[1]:
        return values[0]
    if values[high] != values[high - 1]:
        return values[high]

    low, high = 1, high - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] != values[mid + 1] and values[mid] != values[mid - 1]:
            return values[mid]
        # Before the unique value, each pair starts at an even index.
        if (mid % 2 == 0 and values[mid] == values[mid + 1]) or (
            mid % 2 == 1 and values[mid] == values[mid - 1]
        ):
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError("no value appears exactly once")


def search_rotated(values: Sequence[int], target: int) -> Optional[int]:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[mid] >= values[left]:
            if values[left] <= target <= values[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if values[mid] <= target <= values[right]:
                left = mid + 1
            else:
                right = mid - 1
    return None