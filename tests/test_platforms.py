import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.platforms import min_platforms, min_platforms_events


def test_empty_schedule_sweep():
    assert min_platforms([], []) == 0


def test_empty_schedule_events():
    assert min_platforms_events([], []) == 0


def test_length_mismatch_raises_sweep():
    with pytest.raises(ValueError):
        min_platforms([1, 2], [3])


def test_length_mismatch_raises_events():
    with pytest.raises(ValueError):
        min_platforms_events([1, 2], [3])


def test_single_train_sweep():
    assert min_platforms([900], [910]) == 1


def test_single_train_events():
    assert min_platforms_events([900], [910]) == 1


def _sequential(trains):
    arrivals = [10 * k for k in range(trains)]
    departures = [10 * k + 5 for k in range(trains)]
    return arrivals, departures


@given(st.integers(min_value=1, max_value=15))
def test_sequential_trains_share_one_sweep(trains):
    arrivals, departures = _sequential(trains)
    assert min_platforms(arrivals, departures) == 1


@given(st.integers(min_value=1, max_value=15))
def test_sequential_trains_share_one_events(trains):
    arrivals, departures = _sequential(trains)
    assert min_platforms_events(arrivals, departures) == 1


@given(st.integers(min_value=1, max_value=15))
def test_all_overlapping_sweep(trains):
    assert min_platforms([0] * trains, [10] * trains) == trains


@given(st.integers(min_value=1, max_value=15))
def test_all_overlapping_events(trains):
    assert min_platforms_events([0] * trains, [10] * trains) == trains


def test_touching_times_need_two_in_sweep():
    assert min_platforms([0, 5], [5, 9]) == 2


@st.composite
def distinct_schedules(draw):
    trains = draw(st.integers(min_value=1, max_value=12))
    times = draw(
        st.lists(
            st.integers(min_value=0, max_value=2400),
            min_size=2 * trains,
            max_size=2 * trains,
            unique=True,
        )
    )
    pairs = [sorted(times[2 * k : 2 * k + 2]) for k in range(trains)]
    return [p[0] for p in pairs], [p[1] for p in pairs]


@given(distinct_schedules())
def test_methods_agree_on_distinct_times(schedule):
    arrivals, departures = schedule
    result = min_platforms(arrivals, departures)
    assert result == min_platforms_events(arrivals, departures)
    assert 1 <= result <= len(arrivals)