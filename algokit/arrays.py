"""Array algorithms: inversions, sums, duplicates, merging and stock profits."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import pairwise
from typing import Optional, Sequence


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return list(items), 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            # Every element still waiting on the left is larger.
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_and_count(list(values))[1]


def equilibrium_point(values: Sequence[int]) -> Optional[int]:
    """First index whose left and right sums are equal, or None."""
    remaining = sum(values)
    left = 0
    for index, value in enumerate(values):
        remaining -= value
        if left == remaining:
            return index
        left += value
    return None


def _check_index_range(values: Sequence[int]) -> None:
    size = len(values)
    for value in values:
        if not 0 <= value < size:
            raise ValueError(
                f"value {value} is outside the range 0..{size - 1}"
            )


def repeated_occurrences(values: Sequence[int]) -> list[int]:
    """Each value once for every time it occurs after its first occurrence.

    The values must lie in ``0..len(values) - 1``.
    """
    _check_index_range(values)
    seen: set[int] = set()
    repeats: list[int] = []
    for value in values:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def repeating_elements(values: Sequence[int]) -> list[int]:
    """Distinct values occurring more than once, in ascending order.

    The values must lie in ``0..len(values) - 1``.
    """
    _check_index_range(values)
    counts = Counter(values)
    return [value for value in sorted(counts) if counts[value] > 1]


def missing_number(values: Sequence[int]) -> int:
    """The one number of ``1..len(values) + 1`` absent from ``values``."""
    expected = 0
    for number in range(1, len(values) + 2):
        expected ^= number
    present = 0
    for value in values:
        present ^= value
    return expected ^ present


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    best = -math.inf
    ending_here = 0
    for value in values:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return int(best)


def kth_smallest_element(values: Sequence[int], k: int) -> int:
    """The ``k``-th smallest value (1-based), found with a min-heap."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    heap = list(values)
    heapq.heapify(heap)
    for _ in range(k - 1):
        heapq.heappop(heap)
    return heap[0]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list; ties favour ``first``."""
    return list(heapq.merge(first, second))


def sort_012(values: list[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place in a single pass."""
    low = mid = 0
    high = len(values) - 1
    while mid <= high:
        value = values[mid]
        if value == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
        else:
            raise ValueError(f"expected only 0, 1 or 2, got {value}")


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none gains."""
    best = 0
    lowest = math.inf
    for price in prices:
        if price < lowest:
            lowest = price
        elif price - lowest > best:
            best = int(price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit when buying and selling any number of times."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))