"""调度报告模块。

此模块将调度分析结果整理为可展示的形式，包括：
1. 任务时间参数表（pandas DataFrame）
2. 人力变化时间线文本
3. 任务松弛时间文本
4. CSV导出和甘特图/人力曲线可视化

Typical usage example:

    from jobsched.report import ScheduleReport

    report = ScheduleReport(result)
    print(report.format_timeline())
    report.save_to_csv("schedule.csv")
"""

from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from jobsched.analysis import staffing_profile
from jobsched.scheduler.scheduler import ScheduleResult

COLUMNS = [
    'name', 'duration', 'staff', 'predecessors',
    'earliest_start', 'earliest_finish', 'latest_start', 'latest_finish',
    'slack', 'critical'
]

class ScheduleReport:
    """调度报告类"""

    def __init__(self, result: ScheduleResult):
        """初始化调度报告

        Args:
            result: 调度分析结果
        """
        self._result = result

    def to_dataframe(self) -> pd.DataFrame:
        """生成任务时间参数表

        Returns:
            以任务ID为索引的DataFrame
        """
        critical = set(self._result.critical_task_ids)
        rows = []
        for task in self._result.graph.tasks():
            rows.append({
                'task_id': task.task_id,
                'name': task.name,
                'duration': task.duration,
                'staff': task.staff,
                'predecessors': " ".join(str(pid) for pid in task.predecessor_ids),
                'earliest_start': task.earliest_start,
                'earliest_finish': task.earliest_finish,
                'latest_start': task.latest_start,
                'latest_finish': task.latest_finish,
                'slack': task.slack,
                'critical': task.task_id in critical
            })
        df = pd.DataFrame(rows, columns=['task_id'] + COLUMNS)
        return df.set_index('task_id')

    def format_timeline(self) -> str:
        """生成人力变化时间线文本

        Returns:
            每次人力变化的时刻、开始/结束的任务和当前人力
        """
        lines: List[str] = []
        for event in self._result.events:
            lines.append(f"Time: {event.time}")
            for tid in event.finished_ids:
                lines.append(f"\tFinished: {tid}")
            for tid in event.started_ids:
                lines.append(f"\tStarting: {tid}")
            lines.append(f"\tCurrent staff: {event.staff_total}")
            lines.append("")
        lines.append(
            f"**** Shortest possible project execution is {self._result.total_duration} ****"
        )
        return "\n".join(lines)

    def format_tasks(self) -> str:
        """生成按ID排序的任务松弛时间文本"""
        blocks = []
        for task in self._result.graph.tasks():
            blocks.append(
                f"[{task.task_id}] {task.name}\n"
                f"\tTime to finish: {task.duration}\n"
                f"\tManpower required: {task.staff}\n"
                f"\tSlack : {task.slack}\n"
                f"\tLatest starting time : {task.latest_start}"
            )
        return "\n\n".join(blocks)

    def save_to_csv(self, csv_path: str) -> None:
        """将任务时间参数表保存到CSV文件

        Args:
            csv_path: CSV文件路径
        """
        self.to_dataframe().to_csv(csv_path)

    def visualize(self, output_path: Optional[str] = None) -> None:
        """可视化调度结果

        上图为甘特图（红色表示关键任务，浅色延伸表示松弛时间），
        下图为每个时刻的人力总量及人力上限。

        Args:
            output_path: 输出图片路径，如果为None则直接显示图形
        """
        result = self._result
        tasks = result.ordered_tasks
        critical = set(result.critical_task_ids)
        profile = staffing_profile(tasks, result.total_duration)

        fig, (ax_gantt, ax_staff) = plt.subplots(
            2, 1, figsize=(12, 8), sharex=True,
            gridspec_kw={'height_ratios': [3, 1]}
        )

        # 甘特图，最早开始的任务在最上方
        y_pos = np.arange(len(tasks))
        for y, task in zip(y_pos, tasks):
            color = 'red' if task.task_id in critical else 'lightblue'
            ax_gantt.barh(y, task.duration, left=task.earliest_start, color=color, edgecolor='gray')
            if task.slack > 0:
                ax_gantt.barh(
                    y, task.slack, left=task.earliest_finish,
                    color='lightgray', alpha=0.5, hatch='//'
                )
        ax_gantt.set_yticks(y_pos)
        ax_gantt.set_yticklabels([f"[{t.task_id}] {t.name}" for t in tasks])
        ax_gantt.invert_yaxis()
        ax_gantt.set_title(f"Project Schedule (duration {result.total_duration})")
        ax_gantt.grid(True, axis='x', color='gray', linestyle='-', alpha=0.3)

        # 人力曲线
        times = np.arange(len(profile))
        ax_staff.step(times, profile, where='post', color='steelblue', label='staff')
        ax_staff.axhline(result.staff_limit, color='red', linestyle='--', label='limit')
        ax_staff.set_xlabel("Time")
        ax_staff.set_ylabel("Staff")
        ax_staff.legend(loc='upper right')
        ax_staff.grid(True, color='gray', linestyle='-', alpha=0.3)

        fig.tight_layout()

        if output_path:
            fig.savefig(output_path, bbox_inches='tight')
            plt.close(fig)
        else:
            plt.show()
