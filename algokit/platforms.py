"""Minimum number of platforms so that no train has to wait."""

from __future__ import annotations

from typing import Sequence


def _check(arrivals: Sequence[int], departures: Sequence[int]) -> None:
    if len(arrivals) != len(departures):
        raise ValueError(
            f"{len(arrivals)} arrivals but {len(departures)} departures"
        )


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Platforms needed, sweeping sorted arrival and departure times.

    A train arriving at the very time another departs needs its own platform.
    """
    _check(arrivals, departures)
    if not arrivals:
        return 0
    arrive = sorted(arrivals)
    depart = sorted(departures)
    i, j = 1, 0
    needed = most = 1
    while i < len(arrive) and j < len(depart):
        if arrive[i] <= depart[j]:
            needed += 1
            i += 1
        else:
            needed -= 1
            j += 1
        most = max(most, needed)
    return most


def min_platforms_events(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Platforms needed, from one time-ordered stream of events.

    Events at equal times keep the order in which the trains were given,
    each train's arrival before its departure.
    """
    _check(arrivals, departures)
    events: list[tuple[int, int]] = []
    for arrival, departure in zip(arrivals, departures):
        events.append((arrival, 1))
        events.append((departure, -1))
    events.sort(key=lambda event: event[0])
    needed = most = 0
    for _, change in events:
        needed += change
        most = max(most, needed)
    return most