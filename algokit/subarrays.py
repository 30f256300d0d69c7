"""Subarray and element-selection problems: balanced runs, leaders, majorities, sums."""

from __future__ import annotations

from typing import Optional, Sequence

_INT_BITS = 32


def longest_balanced_binary_subarray(values: Sequence[int]) -> int:
    """Length of the longest contiguous run with as many zeros as ones.

    Zero counts as -1 and any other value as +1.
    """
    first_seen: dict[int, int] = {}
    running = 0
    longest = 0
    for index, value in enumerate(values):
        running += -1 if value == 0 else 1
        if running == 0:
            longest = max(longest, index + 1)
        elif running in first_seen:
            longest = max(longest, index - first_seen[running])
        else:
            first_seen[running] = index
    return longest


def leaders(values: Sequence[int]) -> list[int]:
    """Elements not smaller than everything to their right, in original order."""
    found: list[int] = []
    highest: Optional[int] = None
    for value in reversed(values):
        if highest is None or value >= highest:
            found.append(value)
            highest = value
    found.reverse()
    return found


def majority_candidate(values: Sequence[int]) -> int:
    """The only value that can be a majority, by Moore's voting."""
    if not values:
        raise ValueError("values must not be empty")
    candidate = values[0]
    count = 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def is_majority(values: Sequence[int], candidate: int) -> bool:
    """True if ``candidate`` occurs more than ``len(values) // 2`` times."""
    return sum(1 for value in values if value == candidate) > len(values) // 2


def majority_by_bits(values: Sequence[int]) -> Optional[int]:
    """Majority element of 32-bit integers found bit by bit, or None."""
    half = len(values) // 2
    number = 0
    for bit in range(_INT_BITS):
        if sum((value >> bit) & 1 for value in values) > half:
            number |= 1 << bit
    if number >= 1 << (_INT_BITS - 1):
        number -= 1 << _INT_BITS
    return number if is_majority(values, number) else None


def subarray_with_sum(values: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Inclusive bounds of the first run summing to ``target``, or None.

    Uses a sliding window, so the values must be positive.
    """
    start = 0
    window = 0
    for end, value in enumerate(values):
        window += value
        while window > target and start < end:
            window -= values[start]
            start += 1
        if window == target:
            return start, end
    return None


def subarray_with_sum_any(
    values: Sequence[int], target: int
) -> Optional[tuple[int, int]]:
    """Inclusive bounds of a run summing to ``target``; negatives allowed."""
    last_prefix_end: dict[int, int] = {}
    running = 0
    for index, value in enumerate(values):
        running += value
        if running == target:
            return 0, index
        if running - target in last_prefix_end:
            return last_prefix_end[running - target] + 1, index
        last_prefix_end[running] = index
    return None