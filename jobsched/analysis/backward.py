"""逆向松弛时间计算模块。

沿拓扑顺序的逆序计算每个任务的最晚完成时间、松弛时间和最晚开始时间，
并提供关键任务和关键路径查询。

Typical usage example:

    from jobsched.analysis import compute_earliest_schedule, compute_slack

    forward = compute_earliest_schedule(graph)
    compute_slack(graph, forward.topological_order)
"""

import logging
from typing import List, Optional, Sequence

from jobsched.exceptions import ScheduleNotComputedError, SlackViolationError
from jobsched.interfaces.base_task import BaseTaskGraph
from jobsched.analysis.forward import topological_order

logger = logging.getLogger(__name__)

def compute_slack(graph: BaseTaskGraph, order: Optional[Sequence[int]] = None) -> None:
    """计算所有任务的最晚时间和松弛时间，结果直接写入任务记录

    汇点任务必须按时完成：最晚完成时间等于最早完成时间，松弛为0。
    其余任务的最晚完成时间为所有后继最早开始时间的最小值。

    Args:
        graph: 已完成正向调度的任务依赖图
        order: 拓扑顺序，默认重新计算

    Raises:
        ScheduleNotComputedError: 尚未执行正向调度，或order与依赖图的任务不一致
        CycleDetectedError: 依赖图存在循环
    """
    if not graph.schedule_computed:
        raise ScheduleNotComputedError("请先执行正向调度计算最早开始时间")
    if order is None:
        order = topological_order(graph)
    elif len(order) != len(graph) or set(order) != set(graph.task_ids()):
        raise ScheduleNotComputedError("拓扑顺序与依赖图的任务不一致")

    for tid in reversed(order):
        task = graph.get_task(tid)
        successors = graph.get_successors(tid)
        if successors:
            task.latest_finish = min(graph.get_task(s).earliest_start for s in successors)
        else:
            task.latest_finish = task.earliest_finish
        task.slack = task.latest_finish - task.earliest_finish
        task.latest_start = task.earliest_start + task.slack

    logger.debug(f"松弛时间计算完成：{len(critical_tasks(graph))}个关键任务")

def verify_slack(graph: BaseTaskGraph) -> None:
    """校验松弛时间不会让任务与其后继重叠

    Raises:
        SlackViolationError: 松弛为负，或最晚完成时间晚于某个后继的最晚开始时间
    """
    for task in graph.tasks():
        if task.slack < 0:
            raise SlackViolationError(task.task_id)
        for succ_id in sorted(graph.get_successors(task.task_id)):
            if task.latest_finish > graph.get_task(succ_id).latest_start:
                raise SlackViolationError(task.task_id, succ_id)

def critical_tasks(graph: BaseTaskGraph) -> List[int]:
    """获取松弛时间为0的任务ID"""
    return [task.task_id for task in graph.tasks() if task.slack == 0]

def critical_path(graph: BaseTaskGraph) -> List[int]:
    """获取一条从源任务到汇点任务的关键路径

    从完成时间等于项目总工期的汇点出发，逐步回溯到完成时间恰好等于
    当前任务最早开始时间的前驱。

    Returns:
        关键路径上的任务ID序列，空图返回空列表
    """
    tasks = graph.tasks()
    if not tasks:
        return []

    total_duration = max(t.earliest_finish for t in tasks)
    current = next(
        t for t in tasks
        if t.earliest_finish == total_duration and not graph.get_successors(t.task_id)
    )
    path = [current.task_id]
    while current.predecessor_ids:
        binding = [
            graph.get_task(pid) for pid in sorted(current.predecessor_ids)
            if graph.get_task(pid).earliest_finish == current.earliest_start
        ]
        if not binding:
            break
        current = binding[0]
        path.append(current.task_id)

    return list(reversed(path))
