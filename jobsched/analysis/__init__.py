"""调度分析算法模块。

此模块提供了四个依次执行的分析步骤：
1. 循环检测：深度优先搜索找出循环依赖
2. 正向调度：Kahn拓扑排序计算最早开始时间
3. 执行模拟：逐时刻累加人力并检查上限
4. 逆向计算：沿逆拓扑顺序计算最晚时间和松弛时间

Typical usage example:

    from jobsched.analysis import find_cycle, compute_earliest_schedule, simulate, compute_slack

    if find_cycle(graph) is None:
        forward = compute_earliest_schedule(graph)
        events = simulate(forward.ordered_tasks, staff_limit=10)
        compute_slack(graph, forward.topological_order)
"""

from .cycle import find_cycle, has_cycle
from .forward import ForwardResult, compute_earliest_schedule, topological_order
from .simulate import SimulationEvent, peak_staff, simulate, staffing_profile
from .backward import compute_slack, critical_path, critical_tasks, verify_slack

__all__ = [
    "find_cycle",
    "has_cycle",
    "ForwardResult",
    "compute_earliest_schedule",
    "topological_order",
    "SimulationEvent",
    "peak_staff",
    "simulate",
    "staffing_profile",
    "compute_slack",
    "critical_path",
    "critical_tasks",
    "verify_slack"
]
