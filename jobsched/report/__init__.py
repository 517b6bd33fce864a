"""调度报告模块。

Typical usage example:

    from jobsched.report import ScheduleReport

    report = ScheduleReport(result)
    df = report.to_dataframe()
    report.visualize("gantt.png")
"""

from .report import ScheduleReport

__all__ = ["ScheduleReport"]
