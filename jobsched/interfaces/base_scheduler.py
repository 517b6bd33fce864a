"""调度器接口定义。

此模块定义了调度器的核心抽象接口，包括：
1. 配置管理：人力上限等分析参数
2. 状态跟踪：记录分析进行到哪一步、因何失败
3. 结果管理：获取完整的调度分析结果

Typical usage example:

    from jobsched.interfaces import BaseScheduler, SchedulerConfig

    class CustomScheduler(BaseScheduler):
        def run(self) -> ScheduleResult:
            # 自定义分析流程
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from jobsched.interfaces.base_task import BaseTaskGraph

DEFAULT_STAFF_LIMIT = 999

class AnalysisStatus(Enum):
    """分析状态枚举类"""
    NOT_STARTED = auto()        # 未开始
    RUNNING = auto()            # 运行中
    COMPLETED = auto()          # 分析完成
    CYCLIC = auto()             # 存在循环依赖
    RESOURCE_EXCEEDED = auto()  # 人力超限
    ERROR = auto()              # 其他错误

@dataclass
class SchedulerConfig:
    """调度器配置数据类"""
    staff_limit: int = DEFAULT_STAFF_LIMIT  # 人力上限
    verify: bool = True                     # 是否校验松弛时间
    verbose: bool = False                   # 是否输出详细日志

    def __post_init__(self):
        if self.staff_limit < 0:
            raise ValueError(f"人力上限不能为负：{self.staff_limit}")

class BaseScheduler(ABC):
    """调度器抽象基类"""

    def __init__(self, graph: BaseTaskGraph, config: Optional[SchedulerConfig] = None):
        """初始化调度器

        Args:
            graph: 任务依赖图
            config: 调度器配置
        """
        self.graph = graph
        self.config = config or SchedulerConfig()
        self._status = AnalysisStatus.NOT_STARTED
        self._result = None

    @property
    def status(self) -> AnalysisStatus:
        """获取分析状态

        Returns:
            当前分析状态
        """
        return self._status

    @property
    def result(self):
        """获取最近一次成功的分析结果

        Returns:
            分析结果对象，未完成分析时返回None
        """
        return self._result

    @abstractmethod
    def run(self):
        """执行完整的调度分析

        Returns:
            分析结果对象
        """
        pass
