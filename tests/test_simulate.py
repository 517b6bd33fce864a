import pytest

from jobsched.analysis import (
    compute_earliest_schedule,
    compute_slack,
    peak_staff,
    simulate,
    staffing_profile,
)
from jobsched.exceptions import ResourceExceededError, ScheduleNotComputedError

from conftest import make_graph


def summarize(events):
    return [(e.time, e.started_ids, e.finished_ids, e.staff_total) for e in events]


def test_three_task_timeline(abc_graph):
    forward = compute_earliest_schedule(abc_graph)
    events = simulate(forward.ordered_tasks, staff_limit=3, total_duration=forward.total_duration)
    assert summarize(events) == [
        (0, [1], [], 1),
        (2, [2, 3], [1], 3),
        (3, [], [3], 2),
        (5, [], [2], 0),
    ]


def test_resource_exceeded_at_shared_instant(abc_graph):
    forward = compute_earliest_schedule(abc_graph)
    with pytest.raises(ResourceExceededError) as exc:
        simulate(forward.ordered_tasks, staff_limit=2)
    assert exc.value.time == 2
    assert exc.value.demanded == 3
    assert exc.value.ceiling == 2


def test_finishing_task_vacates_before_successor_occupies():
    # 前驱在t=2结束、后继在t=2开始，同一时刻不叠加计费
    graph = make_graph([(1, "A", 2, 2, []), (2, "B", 2, 2, [1])])
    forward = compute_earliest_schedule(graph)
    events = simulate(forward.ordered_tasks, staff_limit=2)
    assert [e.staff_total for e in events] == [2, 0]
    assert events[0].time == 0
    assert events[1].time == 4


def test_zero_duration_task_is_net_zero():
    graph = make_graph([
        (1, "A", 2, 1, []),
        (2, "gate", 0, 5, [1]),
        (3, "C", 1, 1, [2]),
    ])
    forward = compute_earliest_schedule(graph)
    # gate在t=2同时开始和结束，不会把人力推高到6
    events = simulate(forward.ordered_tasks, staff_limit=1)
    assert [e.time for e in events] == [0, 3]
    assert list(staffing_profile(forward.ordered_tasks)) == [1, 1, 1, 0]


def test_staffing_profile_and_peak(diamond_graph):
    forward = compute_earliest_schedule(diamond_graph)
    profile = staffing_profile(forward.ordered_tasks, forward.total_duration)
    assert list(profile) == [1, 1, 4, 2, 2, 2, 2, 3, 3, 0]
    assert peak_staff(forward.ordered_tasks) == 4


def test_events_only_on_change(diamond_graph):
    forward = compute_earliest_schedule(diamond_graph)
    events = simulate(forward.ordered_tasks, staff_limit=10)
    totals = [e.staff_total for e in events]
    assert all(a != b for a, b in zip(totals, totals[1:]))
    assert [e.time for e in events] == [0, 2, 3, 7, 9]


def test_latest_mode_replays_with_slack(diamond_graph):
    forward = compute_earliest_schedule(diamond_graph)
    compute_slack(diamond_graph, forward.topological_order)
    events = simulate(forward.ordered_tasks, staff_limit=10, mode="latest")
    assert summarize(events) == [
        (0, [1], [], 1),
        (2, [2], [1], 2),
        (6, [3], [], 4),
        (7, [4], [2, 3], 3),
        (9, [], [4], 0),
    ]


def test_latest_mode_requires_backward_pass(diamond_graph):
    forward = compute_earliest_schedule(diamond_graph)
    with pytest.raises(ScheduleNotComputedError):
        simulate(forward.ordered_tasks, staff_limit=10, mode="latest")


def test_unknown_mode(abc_graph):
    forward = compute_earliest_schedule(abc_graph)
    with pytest.raises(ValueError):
        simulate(forward.ordered_tasks, staff_limit=10, mode="random")


def test_empty_schedule():
    assert simulate([], staff_limit=0) == []
    assert peak_staff([]) == 0
