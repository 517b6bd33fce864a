import pytest

from jobsched.exceptions import DuplicateTaskError, UnknownTaskReferenceError
from jobsched.graph import DependencyGraph
from jobsched.interfaces import TaskSpec

from conftest import make_graph


def test_successors_invert_predecessors(diamond_graph):
    assert diamond_graph.get_successors(1) == {2, 3}
    assert diamond_graph.get_successors(4) == set()
    assert diamond_graph.get_predecessors(4) == {2, 3}
    for task in diamond_graph.tasks():
        for pred_id in task.predecessor_ids:
            assert task.task_id in diamond_graph.get_successors(pred_id)


def test_sources_and_sinks(abc_graph):
    assert abc_graph.sources() == [1]
    assert abc_graph.sinks() == [2, 3]


def test_ids_with_gaps_are_allowed():
    graph = make_graph([(10, "x", 1, 1, []), (30, "y", 1, 1, [10])])
    assert graph.task_ids() == [10, 30]
    assert len(graph) == 2
    assert 30 in graph
    assert 20 not in graph


def test_unknown_predecessor_rejected():
    with pytest.raises(UnknownTaskReferenceError) as exc:
        make_graph([(1, "A", 1, 1, []), (2, "B", 1, 1, [5])])
    assert exc.value.task_id == 2
    assert exc.value.missing_id == 5


def test_duplicate_task_rejected():
    with pytest.raises(DuplicateTaskError):
        make_graph([(1, "A", 1, 1, []), (1, "B", 1, 1, [])])


def test_get_task_unknown(abc_graph):
    with pytest.raises(UnknownTaskReferenceError):
        abc_graph.get_task(99)
    with pytest.raises(UnknownTaskReferenceError):
        abc_graph.get_successors(99)


def test_dependencies(abc_graph):
    assert abc_graph.get_dependencies() == [(1, 2), (1, 3)]


def test_task_spec_rejects_negative_values():
    with pytest.raises(ValueError):
        TaskSpec(task_id=1, name="A", duration=-1, staff=0)
    with pytest.raises(ValueError):
        TaskSpec(task_id=1, name="A", duration=1, staff=-3)


def test_from_file(house_file):
    graph = DependencyGraph.from_file(house_file)
    assert len(graph) == 8
    assert graph.get_task(6).name == "Drywall"
    assert graph.get_successors(2) == {3, 4, 5}


def test_reset_schedule(abc_graph):
    task = abc_graph.get_task(2)
    task.earliest_start = 7
    task.slack = 3
    abc_graph.schedule_computed = True
    abc_graph.reset_schedule()
    assert task.earliest_start == 0
    assert task.slack == 0
    assert not abc_graph.schedule_computed
