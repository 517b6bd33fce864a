"""任务依赖图模块。

此模块提供了依赖图的核心功能，包括：
1. 解析项目文本文件和CSV文件
2. 构建前驱/后继邻接关系
3. 校验任务引用

Typical usage example:

    from jobsched.graph import DependencyGraph

    graph = DependencyGraph.from_file("project.txt")
    print(graph.sources(), graph.sinks())
"""

from .parser import load_tasks_csv, parse_project_file, parse_project_text, parse_task_line
from .graph import DependencyGraph

__all__ = [
    "DependencyGraph",
    "load_tasks_csv",
    "parse_project_file",
    "parse_project_text",
    "parse_task_line"
]
