"""执行模拟模块。

按离散时间步从0推进到项目总工期，在任务的开始/结束时刻累加人力，
并检查任一时刻的人力需求是否超过上限。

同一时刻内先汇总所有开始(+staff)与结束(-staff)再与上限比较：
结束的任务先让出人力，同一时刻开始的后继不会与其重叠计费；
工期为0的任务在同一时刻开始并结束，净占用为0。

Typical usage example:

    from jobsched.analysis import simulate

    events = simulate(forward.ordered_tasks, staff_limit=10)
    for event in events:
        print(event.time, event.staff_total)
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from jobsched.exceptions import ResourceExceededError, ScheduleNotComputedError
from jobsched.interfaces.base_task import TaskRecord

logger = logging.getLogger(__name__)

EARLIEST = "earliest"
LATEST = "latest"
MODES = (EARLIEST, LATEST)

@dataclass
class SimulationEvent:
    """人力变化事件数据类"""
    time: int  # 时刻
    started_ids: List[int] = field(default_factory=list)  # 该时刻开始的任务ID
    finished_ids: List[int] = field(default_factory=list)  # 该时刻结束的任务ID
    staff_total: int = 0  # 该时刻之后的人力总量

def _start_of(task: TaskRecord, mode: str) -> int:
    return task.latest_start if mode == LATEST else task.earliest_start

def _check_mode(tasks: Sequence[TaskRecord], mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"未知的模拟模式：{mode}")
    if mode == LATEST:
        for task in tasks:
            if task.latest_start + task.duration != task.latest_finish:
                raise ScheduleNotComputedError(
                    f"任务{task.task_id}的最晚时间尚未计算，请先执行松弛时间计算"
                )

def _timeline(
    tasks: Sequence[TaskRecord],
    total_duration: Optional[int],
    mode: str
) -> Iterator[Tuple[int, List[int], List[int], int]]:
    """逐时刻产出(时刻, 开始的任务, 结束的任务, 人力总量)"""
    _check_mode(tasks, mode)

    starts: Dict[int, List[int]] = defaultdict(list)
    finishes: Dict[int, List[int]] = defaultdict(list)
    delta: Dict[int, int] = defaultdict(int)
    for task in tasks:
        start = _start_of(task, mode)
        starts[start].append(task.task_id)
        finishes[start + task.duration].append(task.task_id)
        delta[start] += task.staff
        delta[start + task.duration] -= task.staff

    if total_duration is None:
        total_duration = max((_start_of(t, mode) + t.duration for t in tasks), default=0)

    staff_total = 0
    for t in range(total_duration + 1):
        staff_total += delta.get(t, 0)
        yield t, starts.get(t, []), finishes.get(t, []), staff_total

def simulate(
    ordered_tasks: Sequence[TaskRecord],
    staff_limit: int,
    total_duration: Optional[int] = None,
    mode: str = EARLIEST
) -> List[SimulationEvent]:
    """模拟执行全部任务并检查人力上限

    Args:
        ordered_tasks: 按开始时间排序的任务记录
        staff_limit: 人力上限
        total_duration: 模拟终止时刻，默认取最晚的任务结束时刻
        mode: 'earliest'按最早开始时间执行，'latest'按最晚开始时间执行

    Returns:
        人力总量发生变化的事件列表

    Raises:
        ResourceExceededError: 某一时刻人力需求超过上限
        ScheduleNotComputedError: 'latest'模式下最晚时间尚未计算
    """
    events: List[SimulationEvent] = []
    previous = 0
    for t, started, finished, staff_total in _timeline(ordered_tasks, total_duration, mode):
        if staff_total > staff_limit:
            raise ResourceExceededError(t, staff_total, staff_limit)
        if staff_total != previous:
            events.append(SimulationEvent(
                time=t,
                started_ids=list(started),
                finished_ids=list(finished),
                staff_total=staff_total
            ))
            logger.debug(f"时刻{t}：开始{started}，结束{finished}，当前人力{staff_total}")
        previous = staff_total
    return events

def staffing_profile(
    ordered_tasks: Sequence[TaskRecord],
    total_duration: Optional[int] = None,
    mode: str = EARLIEST
) -> np.ndarray:
    """计算每个时刻的人力总量，不检查上限

    Returns:
        长度为total_duration + 1的整数数组
    """
    totals = [staff_total for _, _, _, staff_total in _timeline(ordered_tasks, total_duration, mode)]
    return np.array(totals, dtype=int)

def peak_staff(
    ordered_tasks: Sequence[TaskRecord],
    total_duration: Optional[int] = None,
    mode: str = EARLIEST
) -> int:
    """计算人力需求峰值"""
    profile = staffing_profile(ordered_tasks, total_duration, mode)
    return int(profile.max()) if profile.size else 0
