"""循环依赖检测模块。

基于深度优先搜索检测依赖图中的循环。只报告发现的第一个循环，
不枚举全部循环。

Typical usage example:

    from jobsched.analysis import find_cycle

    cycle = find_cycle(graph)
    if cycle:
        print("发现循环：", cycle)
"""

import logging
from typing import Iterator, List, Optional, Set

from jobsched.interfaces.base_task import BaseTaskGraph

logger = logging.getLogger(__name__)

def _visit(graph: BaseTaskGraph, root: int, finished: Set[int]) -> Optional[List[int]]:
    """从root出发做深度优先搜索

    Args:
        graph: 任务依赖图
        root: 起始任务ID
        finished: 已完成搜索的任务ID，会被原地更新

    Returns:
        如果发现循环，返回循环上的任务ID序列；否则返回None
    """
    path = [root]
    on_path = {root: 0}  # 任务ID -> 在path中的位置
    stack: List[Iterator[int]] = [iter(sorted(graph.get_successors(root)))]

    while stack:
        for succ in stack[-1]:
            if succ in on_path:
                return path[on_path[succ]:]
            if succ not in finished:
                on_path[succ] = len(path)
                path.append(succ)
                stack.append(iter(sorted(graph.get_successors(succ))))
                break
        else:
            # 所有后继都已搜索完毕，出栈
            node = path.pop()
            del on_path[node]
            finished.add(node)
            stack.pop()

    return None

def find_cycle(graph: BaseTaskGraph) -> Optional[List[int]]:
    """查找依赖图中的循环

    先从所有没有前驱的任务出发搜索；之后仍未访问的任务只能经由循环到达，
    再以它们为起点继续搜索，因此不存在源任务的图同样能报告出具体循环。

    Args:
        graph: 任务依赖图

    Returns:
        循环上的任务ID序列（自环长度为1），无循环时返回None
    """
    sources = graph.sources()
    if not sources and len(graph) > 0:
        logger.debug("依赖图中没有无前驱的任务，必然存在循环")

    finished: Set[int] = set()
    for root in sources + graph.task_ids():
        if root in finished:
            continue
        cycle = _visit(graph, root, finished)
        if cycle:
            logger.debug(f"发现循环：{cycle}")
            return cycle

    return None

def has_cycle(graph: BaseTaskGraph) -> bool:
    """判断依赖图中是否存在循环"""
    return find_cycle(graph) is not None
