"""任务依赖图实现模块。

此模块实现了任务依赖图的具体功能，包括：
1. 由解析得到的任务描述构建依赖图
2. 使用NetworkX库维护前驱/后继邻接关系
3. 校验前驱引用与任务ID唯一性
4. 提供任务记录查询接口

Typical usage example:

    from jobsched.graph import DependencyGraph

    graph = DependencyGraph.from_file("project.txt")
    graph.get_successors(1)
"""

from typing import Dict, Iterable, List, Set

import networkx as nx

from jobsched.exceptions import DuplicateTaskError, UnknownTaskReferenceError
from jobsched.interfaces.base_task import BaseTaskGraph, TaskRecord, TaskSpec
from jobsched.graph.parser import load_tasks_csv, parse_project_file

class DependencyGraph(BaseTaskGraph):
    """任务依赖图实现类

    构建完成后图结构不再变化，分析过程只修改TaskRecord上的调度字段。
    """

    def __init__(self, specs: Iterable[TaskSpec]):
        """初始化依赖图

        Args:
            specs: 任务描述集合

        Raises:
            DuplicateTaskError: 任务ID重复
            UnknownTaskReferenceError: 前驱任务不存在
        """
        self._graph = nx.DiGraph()
        self._tasks: Dict[int, TaskRecord] = {}

        for spec in specs:
            if spec.task_id in self._tasks:
                raise DuplicateTaskError(spec.task_id)
            self._tasks[spec.task_id] = TaskRecord(spec)
            self._graph.add_node(spec.task_id)

        # 先校验全部引用，再建边，避免NetworkX自动创建不存在的节点
        for record in self._tasks.values():
            for pred_id in record.predecessor_ids:
                if pred_id not in self._tasks:
                    raise UnknownTaskReferenceError(pred_id, record.task_id)

        # 反转前驱列表得到后继邻接表
        for record in self._tasks.values():
            for pred_id in record.predecessor_ids:
                self._graph.add_edge(pred_id, record.task_id)

        self._ids = sorted(self._tasks)

    @classmethod
    def from_file(cls, project_file: str) -> "DependencyGraph":
        """从项目文本文件构建依赖图

        Args:
            project_file: 项目文件路径

        Returns:
            依赖图对象
        """
        return cls(parse_project_file(project_file))

    @classmethod
    def from_csv(cls, task_csv: str) -> "DependencyGraph":
        """从CSV文件构建依赖图

        Args:
            task_csv: 任务CSV文件路径

        Returns:
            依赖图对象
        """
        return cls(load_tasks_csv(task_csv))

    def get_task(self, task_id: int) -> TaskRecord:
        if task_id not in self._tasks:
            raise UnknownTaskReferenceError(task_id)
        return self._tasks[task_id]

    def task_ids(self) -> List[int]:
        return list(self._ids)

    def get_predecessors(self, task_id: int) -> Set[int]:
        if task_id not in self._tasks:
            raise UnknownTaskReferenceError(task_id)
        return set(self._graph.predecessors(task_id))

    def get_successors(self, task_id: int) -> Set[int]:
        if task_id not in self._tasks:
            raise UnknownTaskReferenceError(task_id)
        return set(self._graph.successors(task_id))

    def get_dependencies(self) -> List[tuple]:
        """获取所有依赖关系

        Returns:
            依赖关系列表，每个依赖为(前驱任务ID, 后继任务ID)元组
        """
        return sorted(self._graph.edges())

    def sources(self) -> List[int]:
        return [tid for tid in self._ids if self._graph.in_degree(tid) == 0]

    def sinks(self) -> List[int]:
        return [tid for tid in self._ids if self._graph.out_degree(tid) == 0]

    def tasks(self) -> List[TaskRecord]:
        return [self._tasks[tid] for tid in self._ids]

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks
