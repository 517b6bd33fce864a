"""任务DAG接口定义。

此模块定义了任务DAG的核心抽象接口，包括：
1. TaskSpec：解析器产出的不可变任务描述
2. TaskRecord：任务描述加上调度计算得到的时间字段
3. BaseTaskGraph：依赖图的查询接口

Typical usage example:

    from jobsched.interfaces import BaseTaskGraph, TaskSpec

    class CustomGraph(BaseTaskGraph):
        def get_task(self, task_id: int) -> TaskRecord:
            # 自定义任务查询逻辑
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

@dataclass(frozen=True)
class TaskSpec:
    """任务描述数据类"""
    task_id: int  # 任务ID（正整数）
    name: str  # 显示名称
    duration: int  # 完成所需时间单位数
    staff: int  # 运行期间占用的人力
    predecessor_ids: Tuple[int, ...] = ()  # 前驱任务ID，保留输入顺序

    def __post_init__(self):
        if self.duration < 0:
            raise ValueError(f"任务{self.task_id}的工期不能为负：{self.duration}")
        if self.staff < 0:
            raise ValueError(f"任务{self.task_id}的人力需求不能为负：{self.staff}")
        # 去重但保持顺序
        object.__setattr__(
            self, "predecessor_ids", tuple(dict.fromkeys(self.predecessor_ids))
        )

@dataclass
class TaskRecord:
    """任务调度记录

    项目数据保存在spec字段中且不可修改；其余字段只由分析过程写入。
    """
    spec: TaskSpec
    earliest_start: int = 0
    latest_start: int = 0
    latest_finish: int = 0
    slack: int = 0

    @property
    def task_id(self) -> int:
        return self.spec.task_id

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def duration(self) -> int:
        return self.spec.duration

    @property
    def staff(self) -> int:
        return self.spec.staff

    @property
    def predecessor_ids(self) -> Tuple[int, ...]:
        return self.spec.predecessor_ids

    @property
    def earliest_finish(self) -> int:
        return self.earliest_start + self.duration

    def reset(self) -> None:
        """清空所有调度计算字段"""
        self.earliest_start = 0
        self.latest_start = 0
        self.latest_finish = 0
        self.slack = 0

class BaseTaskGraph(ABC):
    """任务依赖图抽象基类"""

    # 正向调度成功后置为True，清空调度字段时复位
    schedule_computed: bool = False

    @abstractmethod
    def get_task(self, task_id: int) -> TaskRecord:
        """获取任务记录

        Args:
            task_id: 任务ID

        Returns:
            任务记录对象

        Raises:
            UnknownTaskReferenceError: 任务不存在
        """
        pass

    @abstractmethod
    def task_ids(self) -> List[int]:
        """获取所有任务ID

        Returns:
            按ID升序排列的任务ID列表
        """
        pass

    @abstractmethod
    def get_predecessors(self, task_id: int) -> Set[int]:
        """获取任务的前驱任务

        Args:
            task_id: 任务ID

        Returns:
            前驱任务ID集合
        """
        pass

    @abstractmethod
    def get_successors(self, task_id: int) -> Set[int]:
        """获取任务的后继任务

        Args:
            task_id: 任务ID

        Returns:
            后继任务ID集合
        """
        pass

    def tasks(self) -> List[TaskRecord]:
        """按ID顺序获取所有任务记录"""
        return [self.get_task(tid) for tid in self.task_ids()]

    def sources(self) -> List[int]:
        """获取没有前驱的任务ID"""
        return [tid for tid in self.task_ids() if not self.get_predecessors(tid)]

    def sinks(self) -> List[int]:
        """获取没有后继的任务ID"""
        return [tid for tid in self.task_ids() if not self.get_successors(tid)]

    def reset_schedule(self) -> None:
        """清空所有任务的调度计算字段"""
        for record in self.tasks():
            record.reset()
        self.schedule_computed = False

    def __len__(self) -> int:
        return len(self.task_ids())

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self.tasks())
