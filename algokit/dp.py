"""Dynamic programming on sequences: common substrings, subsequences and LIS."""

from __future__ import annotations

from typing import Hashable, Sequence


def longest_common_substring(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Length of the longest contiguous run shared by both sequences."""
    best = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            current.append(previous[j - 1] + 1 if a == b else 0)
        best = max(best, max(current))
        previous = current
    return best


def longest_common_subsequence(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Length of the longest subsequence shared by both sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for value in values:
        best_before = max(
            (length for earlier, length in zip(values, lengths) if earlier < value),
            default=0,
        )
        lengths.append(best_before + 1)
    return max(lengths, default=0)