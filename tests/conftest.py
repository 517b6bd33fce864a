import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pytest

from jobsched.graph import DependencyGraph
from jobsched.interfaces import TaskSpec

PROJECTS_DIR = Path(__file__).resolve().parents[1] / "input" / "projects"


def make_graph(rows):
    """rows: (id, name, duration, staff, [preds])"""
    return DependencyGraph(
        TaskSpec(task_id=tid, name=name, duration=d, staff=s, predecessor_ids=tuple(preds))
        for tid, name, d, s, preds in rows
    )


@pytest.fixture
def abc_graph():
    # A(2,1) -> B(3,2), A -> C(1,1)
    return make_graph([
        (1, "A", 2, 1, []),
        (2, "B", 3, 2, [1]),
        (3, "C", 1, 1, [1]),
    ])


@pytest.fixture
def diamond_graph():
    # 1 -> 2 -> 4, 1 -> 3 -> 4, 3是较短的分支
    return make_graph([
        (1, "start", 2, 1, []),
        (2, "long", 5, 2, [1]),
        (3, "short", 1, 2, [1]),
        (4, "end", 2, 3, [2, 3]),
    ])


@pytest.fixture
def house_file():
    return str(PROJECTS_DIR / "house.txt")
