"""String problems: permutations and anagrams."""

from __future__ import annotations

from collections import Counter
from typing import Iterator


def permutations(text: str) -> Iterator[str]:
    """Every arrangement of ``text``, produced by swapping each character forward.

    An empty string yields nothing.
    """
    chars = list(text)
    last = len(chars) - 1

    def permute(fixed: int) -> Iterator[str]:
        if fixed == last:
            yield "".join(chars)
            return
        for index in range(fixed, last + 1):
            chars[fixed], chars[index] = chars[index], chars[fixed]
            yield from permute(fixed + 1)
            chars[fixed], chars[index] = chars[index], chars[fixed]

    if chars:
        yield from permute(0)


def is_anagram(first: str, second: str) -> bool:
    """True if ``second`` is a rearrangement of ``first``."""
    if len(first) != len(second):
        return False
    counts = Counter(first)
    counts.subtract(second)
    return not any(counts.values())