"""正向调度模块。

使用Kahn拓扑排序计算每个任务的最早开始时间，并按最早开始时间
输出全部任务。

Typical usage example:

    from jobsched.analysis import compute_earliest_schedule

    forward = compute_earliest_schedule(graph)
    print(forward.total_duration)
"""

import heapq
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from jobsched.exceptions import CycleDetectedError
from jobsched.interfaces.base_task import BaseTaskGraph, TaskRecord

logger = logging.getLogger(__name__)

@dataclass
class ForwardResult:
    """正向调度结果数据类"""
    ordered_tasks: List[TaskRecord]  # 按(最早开始时间, ID)升序排列
    total_duration: int  # 项目最短工期
    topological_order: List[int] = field(default_factory=list)  # 拓扑访问顺序

def _kahn(graph: BaseTaskGraph) -> Iterator[int]:
    """按Kahn算法的出队顺序逐个产出任务ID

    剩余前驱计数只存在于本次遍历中，不会写回任务记录。
    """
    remaining: Dict[int, int] = {
        tid: len(graph.get_predecessors(tid)) for tid in graph.task_ids()
    }
    queue = deque(tid for tid, count in remaining.items() if count == 0)

    while queue:
        tid = queue.popleft()
        yield tid
        for succ in sorted(graph.get_successors(tid)):
            remaining[succ] -= 1
            if remaining[succ] == 0:
                queue.append(succ)

def topological_order(graph: BaseTaskGraph) -> List[int]:
    """计算依赖图的拓扑顺序

    Args:
        graph: 任务依赖图

    Returns:
        拓扑有序的任务ID列表

    Raises:
        CycleDetectedError: 存在无法访问到的任务
    """
    order = list(_kahn(graph))
    if len(order) != len(graph):
        raise CycleDetectedError()
    return order

def compute_earliest_schedule(graph: BaseTaskGraph) -> ForwardResult:
    """计算所有任务的最早开始时间

    会先清空上一次计算留下的调度字段，重复调用结果相同。

    Args:
        graph: 任务依赖图

    Returns:
        正向调度结果

    Raises:
        CycleDetectedError: 访问到的任务数少于任务总数
    """
    graph.reset_schedule()

    heap = []
    order = []
    for tid in _kahn(graph):
        task = graph.get_task(tid)
        if task.predecessor_ids:
            task.earliest_start = max(
                graph.get_task(pred_id).earliest_finish
                for pred_id in task.predecessor_ids
            )
        else:
            task.earliest_start = 0
        heapq.heappush(heap, (task.earliest_start, tid))
        order.append(tid)

    if len(order) != len(graph):
        logger.debug(f"拓扑遍历只访问了{len(order)}/{len(graph)}个任务")
        raise CycleDetectedError()

    graph.schedule_computed = True
    ordered_tasks = [graph.get_task(heapq.heappop(heap)[1]) for _ in range(len(heap))]
    total_duration = max((t.earliest_finish for t in ordered_tasks), default=0)
    logger.debug(f"正向调度完成：{len(ordered_tasks)}个任务，总工期{total_duration}")

    return ForwardResult(
        ordered_tasks=ordered_tasks,
        total_duration=total_duration,
        topological_order=order
    )
