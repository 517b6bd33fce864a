"""jobsched - 任务调度与关键路径分析工具。

此包对一组相互依赖的任务做CPM式分析，主要功能包括：

1. 循环检测：判断依赖图是否为DAG，并给出循环路径
2. 正向调度：计算每个任务的最早开始时间和项目最短工期
3. 执行模拟：在人力上限下逐时刻模拟执行并记录人力变化
4. 逆向计算：计算每个任务的最晚开始/完成时间和松弛时间

Typical usage example:

    from jobsched import DependencyGraph, Scheduler, SchedulerConfig

    graph = DependencyGraph.from_file("project.txt")
    scheduler = Scheduler(graph, SchedulerConfig(staff_limit=10))
    result = scheduler.run()
"""

from .graph import DependencyGraph
from .interfaces.base_task import TaskRecord, TaskSpec
from .interfaces.base_scheduler import AnalysisStatus, SchedulerConfig
from .scheduler import ScheduleResult, Scheduler
from .report import ScheduleReport
from .exceptions import (
    CycleDetectedError,
    DuplicateTaskError,
    MalformedInputError,
    ResourceExceededError,
    ScheduleNotComputedError,
    SchedulerError,
    SlackViolationError,
    UnknownTaskReferenceError
)

__version__ = "1.0.0"

__all__ = [
    # 主要组件
    "DependencyGraph",
    "TaskRecord",
    "TaskSpec",
    "AnalysisStatus",
    "SchedulerConfig",
    "ScheduleResult",
    "Scheduler",
    "ScheduleReport",

    # 异常
    "CycleDetectedError",
    "DuplicateTaskError",
    "MalformedInputError",
    "ResourceExceededError",
    "ScheduleNotComputedError",
    "SchedulerError",
    "SlackViolationError",
    "UnknownTaskReferenceError",

    # 版本信息
    "__version__"
]
