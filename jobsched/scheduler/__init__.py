"""调度器模块。

此模块提供了完整的调度分析流程：循环检测、正向调度、执行模拟
和松弛时间计算，并跟踪分析状态。

Typical usage example:

    from jobsched.scheduler import Scheduler

    result = Scheduler(graph).run()
    print(result.total_duration)
"""

from .scheduler import ScheduleResult, Scheduler

__all__ = ["ScheduleResult", "Scheduler"]
