"""调度异常定义模块。

此模块定义了调度分析过程中可能出现的全部异常，包括：
1. MalformedInputError：项目文件格式错误
2. UnknownTaskReferenceError：引用了不存在的任务
3. CycleDetectedError：依赖图中存在循环
4. ResourceExceededError：人力需求超过上限
5. SlackViolationError：松弛时间计算结果自相矛盾

所有异常都继承自SchedulerError，调用方可以统一捕获。
"""

from typing import List, Optional, Sequence


class SchedulerError(Exception):
    """调度分析异常基类"""

    pass


class MalformedInputError(SchedulerError, ValueError):
    """项目文件内容格式错误"""

    def __init__(self, message: str, line_no: Optional[int] = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"第{line_no}行：{message}"
        super().__init__(message)


class DuplicateTaskError(MalformedInputError):
    """任务ID重复"""

    def __init__(self, task_id: int, line_no: Optional[int] = None):
        self.task_id = task_id
        super().__init__(f"任务ID重复：{task_id}", line_no)


class UnknownTaskReferenceError(SchedulerError, KeyError):
    """任务引用了不存在的前驱任务"""

    def __init__(self, missing_id: int, task_id: Optional[int] = None):
        self.task_id = task_id
        self.missing_id = missing_id
        if task_id is None:
            message = f"任务不存在：{missing_id}"
        else:
            message = f"任务{task_id}引用了不存在的前驱任务{missing_id}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError默认会给消息加引号
        return str(self.args[0])


class CycleDetectedError(SchedulerError):
    """依赖图中存在循环，无法调度"""

    def __init__(self, path: Optional[Sequence[int]] = None):
        self.path: List[int] = list(path or [])
        if self.path:
            cycle = ", ".join(str(tid) for tid in self.path + self.path[:1])
            message = f"发现循环依赖：{cycle}"
        else:
            message = "发现循环依赖"
        super().__init__(message)


class ResourceExceededError(SchedulerError):
    """某一时刻的人力需求超过上限"""

    def __init__(self, time: int, demanded: int, ceiling: int):
        self.time = time
        self.demanded = demanded
        self.ceiling = ceiling
        super().__init__(
            f"时刻{time}的人力需求({demanded})超过上限{ceiling}"
        )


class SlackViolationError(SchedulerError):
    """松弛时间导致任务与其后继重叠"""

    def __init__(self, task_id: int, successor_id: Optional[int] = None):
        self.task_id = task_id
        self.successor_id = successor_id
        if successor_id is None:
            message = f"任务{task_id}的松弛时间为负"
        else:
            message = f"任务{task_id}的最晚完成时间晚于后继任务{successor_id}的最晚开始时间"
        super().__init__(message)


class ScheduleNotComputedError(SchedulerError):
    """前置的调度计算尚未完成"""

    pass
