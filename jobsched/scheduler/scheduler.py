"""调度器实现模块。

此模块按固定顺序串联各个分析步骤：
1. 循环检测（发现循环立即失败）
2. 正向调度计算最早开始时间和总工期
3. 执行模拟校验人力上限并生成事件日志
4. 逆向计算最晚时间和松弛时间

任一步骤失败都会终止本次分析，不返回部分结果。

Typical usage example:

    from jobsched.graph import DependencyGraph
    from jobsched.scheduler import Scheduler
    from jobsched.interfaces import SchedulerConfig

    graph = DependencyGraph.from_file("project.txt")
    scheduler = Scheduler(graph, SchedulerConfig(staff_limit=10))
    result = scheduler.run()
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from jobsched.analysis import (
    SimulationEvent,
    compute_earliest_schedule,
    compute_slack,
    critical_path,
    critical_tasks,
    find_cycle,
    peak_staff,
    simulate,
    verify_slack
)
from jobsched.exceptions import CycleDetectedError, ResourceExceededError
from jobsched.interfaces.base_scheduler import AnalysisStatus, BaseScheduler, SchedulerConfig
from jobsched.interfaces.base_task import BaseTaskGraph, TaskRecord

logger = logging.getLogger(__name__)

@dataclass
class ScheduleResult:
    """调度分析结果数据类"""
    graph: BaseTaskGraph  # 已写入调度字段的依赖图
    ordered_tasks: List[TaskRecord]  # 按最早开始时间排序的任务
    total_duration: int  # 项目最短工期
    events: List[SimulationEvent]  # 人力变化事件日志
    staff_limit: int  # 本次分析使用的人力上限
    peak_staff: int = 0  # 人力需求峰值
    critical_task_ids: List[int] = field(default_factory=list)  # 松弛为0的任务
    critical_path: List[int] = field(default_factory=list)  # 一条关键路径

class Scheduler(BaseScheduler):
    """调度器实现类"""

    def __init__(self, graph: BaseTaskGraph, config: Optional[SchedulerConfig] = None):
        """初始化调度器

        Args:
            graph: 任务依赖图
            config: 调度器配置
        """
        super().__init__(graph, config)

    def check_cycles(self) -> Optional[List[int]]:
        """检测循环依赖

        Returns:
            循环上的任务ID序列，无循环时返回None
        """
        cycle = find_cycle(self.graph)
        if cycle:
            logger.info(f"发现循环：{', '.join(str(tid) for tid in cycle + cycle[:1])}")
        else:
            logger.info("未发现循环")
        return cycle

    def run(self) -> ScheduleResult:
        """执行完整的调度分析

        Returns:
            调度分析结果

        Raises:
            CycleDetectedError: 依赖图存在循环
            ResourceExceededError: 人力需求超过上限
            SlackViolationError: 松弛时间校验失败
        """
        self._status = AnalysisStatus.RUNNING
        self._result = None
        try:
            cycle = self.check_cycles()
            if cycle:
                raise CycleDetectedError(cycle)

            forward = compute_earliest_schedule(self.graph)
            logger.info(
                f"正向调度完成：{len(forward.ordered_tasks)}个任务，"
                f"最短工期{forward.total_duration}"
            )

            events = simulate(
                forward.ordered_tasks,
                self.config.staff_limit,
                forward.total_duration
            )
            logger.info(f"执行模拟完成：{len(events)}次人力变化，上限{self.config.staff_limit}")

            compute_slack(self.graph, forward.topological_order)
            if self.config.verify:
                verify_slack(self.graph)

            result = ScheduleResult(
                graph=self.graph,
                ordered_tasks=forward.ordered_tasks,
                total_duration=forward.total_duration,
                events=events,
                staff_limit=self.config.staff_limit,
                peak_staff=peak_staff(forward.ordered_tasks, forward.total_duration),
                critical_task_ids=critical_tasks(self.graph),
                critical_path=critical_path(self.graph)
            )
        except CycleDetectedError:
            self._status = AnalysisStatus.CYCLIC
            raise
        except ResourceExceededError:
            self._status = AnalysisStatus.RESOURCE_EXCEEDED
            raise
        except Exception:
            self._status = AnalysisStatus.ERROR
            raise

        self._result = result
        self._status = AnalysisStatus.COMPLETED
        logger.info(f"关键路径：{result.critical_path}")
        return result
