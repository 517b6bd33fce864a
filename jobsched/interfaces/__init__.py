"""核心接口定义模块。

此模块定义了系统的核心抽象接口，包括：
1. TaskSpec / TaskRecord：任务描述与调度记录
2. BaseTaskGraph：任务依赖图的抽象基类
3. BaseScheduler：调度器的抽象基类
4. SchedulerConfig：调度分析配置

Typical usage example:

    from jobsched.interfaces import BaseTaskGraph, TaskSpec

    spec = TaskSpec(task_id=1, name="design", duration=2, staff=1)
"""

from .base_task import BaseTaskGraph, TaskRecord, TaskSpec
from .base_scheduler import (
    AnalysisStatus,
    BaseScheduler,
    DEFAULT_STAFF_LIMIT,
    SchedulerConfig
)

__all__ = [
    # 任务DAG接口
    "BaseTaskGraph",
    "TaskRecord",
    "TaskSpec",

    # 调度器接口
    "AnalysisStatus",
    "BaseScheduler",
    "DEFAULT_STAFF_LIMIT",
    "SchedulerConfig"
]
