import pandas as pd

from jobsched.report import ScheduleReport
from jobsched.scheduler import Scheduler


def test_dataframe(diamond_graph):
    report = ScheduleReport(Scheduler(diamond_graph).run())
    df = report.to_dataframe()
    assert list(df.index) == [1, 2, 3, 4]
    assert df.loc[3, 'slack'] == 4
    assert df.loc[3, 'latest_start'] == 6
    assert df.loc[4, 'predecessors'] == "2 3"
    assert bool(df.loc[2, 'critical'])
    assert not bool(df.loc[3, 'critical'])


def test_format_timeline(abc_graph):
    text = ScheduleReport(Scheduler(abc_graph).run()).format_timeline()
    assert "Time: 2\n\tFinished: 1\n\tStarting: 2\n\tStarting: 3\n\tCurrent staff: 3" in text
    assert text.endswith("**** Shortest possible project execution is 5 ****")


def test_format_tasks(diamond_graph):
    text = ScheduleReport(Scheduler(diamond_graph).run()).format_tasks()
    assert text.startswith("[1] start")
    assert "[3] short\n\tTime to finish: 1\n\tManpower required: 2\n\tSlack : 4\n\tLatest starting time : 6" in text


def test_save_to_csv(tmp_path, diamond_graph):
    path = tmp_path / "schedule.csv"
    ScheduleReport(Scheduler(diamond_graph).run()).save_to_csv(str(path))
    df = pd.read_csv(path, index_col='task_id')
    assert list(df['earliest_start']) == [0, 2, 2, 7]


def test_visualize_writes_image(tmp_path, house_file):
    from jobsched.graph import DependencyGraph

    path = tmp_path / "gantt.png"
    graph = DependencyGraph.from_file(house_file)
    ScheduleReport(Scheduler(graph).run()).visualize(str(path))
    assert path.exists()
    assert path.stat().st_size > 0
