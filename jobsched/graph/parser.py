"""项目文件解析模块。

项目文本格式：第一行为任务数量，空行忽略，其余每行为

    id name duration staff [pred ...] 0

各字段以空白分隔，前驱任务ID列表以0结尾。另外支持带表头
``task_id,name,duration,staff,predecessors``的CSV格式。

Typical usage example:

    from jobsched.graph import parse_project_file

    specs = parse_project_file("project.txt")
"""

import csv
import re
from typing import List, Optional

from jobsched.exceptions import DuplicateTaskError, MalformedInputError
from jobsched.interfaces.base_task import TaskSpec

END_OF_PREDECESSORS = 0

def _to_int(token: str, field: str, line_no: Optional[int]) -> int:
    try:
        return int(token)
    except (TypeError, ValueError):
        raise MalformedInputError(f"{field}不是整数：{token!r}", line_no)

def _make_spec(task_id: int, name: str, duration: int, staff: int,
               predecessor_ids: List[int], line_no: Optional[int]) -> TaskSpec:
    if task_id <= 0:
        raise MalformedInputError(f"任务ID必须为正整数：{task_id}", line_no)
    if duration < 0:
        raise MalformedInputError(f"工期不能为负：{duration}", line_no)
    if staff < 0:
        raise MalformedInputError(f"人力需求不能为负：{staff}", line_no)
    return TaskSpec(
        task_id=task_id,
        name=name,
        duration=duration,
        staff=staff,
        predecessor_ids=tuple(predecessor_ids)
    )

def parse_task_line(line: str, line_no: Optional[int] = None) -> TaskSpec:
    """解析单行任务描述

    Args:
        line: 任务行文本
        line_no: 行号，仅用于错误信息

    Returns:
        任务描述对象

    Raises:
        MalformedInputError: 行格式错误
    """
    toks = line.split()
    if len(toks) < 4:
        raise MalformedInputError(f"字段数量不足：{line.strip()!r}", line_no)

    task_id = _to_int(toks[0], "任务ID", line_no)
    name = toks[1]
    duration = _to_int(toks[2], "工期", line_no)
    staff = _to_int(toks[3], "人力需求", line_no)

    predecessor_ids = []
    for tok in toks[4:]:
        pred_id = _to_int(tok, "前驱任务ID", line_no)
        if pred_id == END_OF_PREDECESSORS:
            break
        predecessor_ids.append(pred_id)
    else:
        raise MalformedInputError("前驱任务列表缺少结束标记0", line_no)

    return _make_spec(task_id, name, duration, staff, predecessor_ids, line_no)

def parse_project_text(text: str) -> List[TaskSpec]:
    """解析项目文本

    Args:
        text: 项目文件内容

    Returns:
        任务描述列表，保持文件中的顺序

    Raises:
        MalformedInputError: 文件格式错误
    """
    lines = [(no, line) for no, line in enumerate(text.splitlines(), start=1) if line.strip()]
    if not lines:
        raise MalformedInputError("项目文件为空")

    header_no, header = lines[0]
    count = _to_int(header.strip(), "任务数量", header_no)
    if count <= 0:
        raise MalformedInputError(f"任务数量必须为正整数：{count}", header_no)

    specs: List[TaskSpec] = []
    seen = set()
    for line_no, line in lines[1:]:
        spec = parse_task_line(line, line_no)
        if spec.task_id in seen:
            raise DuplicateTaskError(spec.task_id, line_no)
        seen.add(spec.task_id)
        specs.append(spec)

    if len(specs) != count:
        raise MalformedInputError(
            f"声明的任务数量为{count}，实际读取到{len(specs)}个任务", header_no
        )
    return specs

def parse_project_file(project_file: str) -> List[TaskSpec]:
    """从文件解析项目

    Args:
        project_file: 项目文件路径

    Returns:
        任务描述列表

    Raises:
        FileNotFoundError: 文件不存在
        MalformedInputError: 文件格式错误
    """
    try:
        with open(project_file, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"项目文件不存在：{project_file}")
    return parse_project_text(text)

def load_tasks_csv(task_csv: str) -> List[TaskSpec]:
    """从CSV文件加载任务

    Args:
        task_csv: 任务CSV文件路径，包含task_id、name、duration、staff和predecessors列

    Returns:
        任务描述列表

    Raises:
        FileNotFoundError: 文件不存在
        MalformedInputError: 文件格式错误
    """
    specs: List[TaskSpec] = []
    seen = set()
    try:
        with open(task_csv, 'r', newline='', encoding='utf-8') as f:
            reader = csv.DictReader(f)
            # 表头占第1行
            for line_no, row in enumerate(reader, start=2):
                try:
                    task_id = _to_int(row['task_id'], "任务ID", line_no)
                    duration = _to_int(row['duration'], "工期", line_no)
                    staff = _to_int(row['staff'], "人力需求", line_no)
                    name = row['name'].strip()
                    raw = (row.get('predecessors') or '').strip()
                except (KeyError, AttributeError) as e:
                    raise MalformedInputError(f"缺少列：{str(e)}", line_no)

                predecessor_ids = [
                    _to_int(tok, "前驱任务ID", line_no)
                    for tok in re.split(r'[\s;]+', raw) if tok
                ]
                if task_id in seen:
                    raise DuplicateTaskError(task_id, line_no)
                seen.add(task_id)
                specs.append(_make_spec(task_id, name, duration, staff, predecessor_ids, line_no))
    except FileNotFoundError:
        raise FileNotFoundError(f"任务CSV文件不存在：{task_csv}")
    return specs
