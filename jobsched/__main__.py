"""jobsched项目的主入口模块。

此模块提供命令行接口，用于：
1. 加载项目文件并构建任务依赖图
2. 检测循环依赖
3. 在人力上限下模拟执行并输出时间线
4. 输出每个任务的松弛时间，并可导出CSV和甘特图

Typical usage example:

    python -m jobsched analyze project.txt --manpower 10 \
        --output schedule.csv \
        --plot gantt.png
"""

import argparse
import logging
import sys
from typing import Optional

from jobsched.exceptions import CycleDetectedError, SchedulerError
from jobsched.graph import DependencyGraph
from jobsched.interfaces.base_scheduler import DEFAULT_STAFF_LIMIT, SchedulerConfig
from jobsched.report import ScheduleReport
from jobsched.scheduler import Scheduler

logger = logging.getLogger(__name__)

def analyze(
    project_file: str,
    manpower: int = DEFAULT_STAFF_LIMIT,
    input_format: str = 'text',
    output: Optional[str] = None,
    plot: Optional[str] = None,
    verbose: bool = False
) -> int:
    """执行调度分析

    Args:
        project_file: 项目文件路径
        manpower: 人力上限
        input_format: 项目文件格式（'text'或'csv'）
        output: 任务时间参数表CSV输出路径
        plot: 甘特图输出路径
        verbose: 是否输出详细日志

    Returns:
        进程退出码，成功为0
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        # 加载项目
        logger.info(f"加载项目文件{project_file}...")
        if input_format == 'csv':
            graph = DependencyGraph.from_csv(project_file)
        else:
            graph = DependencyGraph.from_file(project_file)
        logger.info(
            f"依赖图构建完成：{len(graph)}个任务，"
            f"{len(graph.get_dependencies())}个依赖"
        )

        config = SchedulerConfig(staff_limit=manpower, verbose=verbose)
        scheduler = Scheduler(graph, config)
        try:
            result = scheduler.run()
        except CycleDetectedError as e:
            print("Cycle found.")
            if e.path:
                print(", ".join(str(tid) for tid in e.path + e.path[:1]))
            logger.error(f"分析失败：{str(e)}")
            return 1

        print("No cycles found.\n")
        report = ScheduleReport(result)
        print(report.format_timeline())
        print()
        print(report.format_tasks())

        # 保存结果
        if output:
            report.save_to_csv(output)
            logger.info(f"任务时间参数表已保存到{output}")
        if plot:
            report.visualize(plot)
            logger.info(f"甘特图已保存到{plot}")

        return 0

    except (SchedulerError, FileNotFoundError, ValueError) as e:
        logger.error(f"分析失败：{str(e)}")
        return 1

def main(argv: Optional[list] = None) -> int:
    """命令行入口函数"""
    parser = argparse.ArgumentParser(
        description="jobsched任务调度与关键路径分析工具"
    )

    # 添加子命令
    subparsers = parser.add_subparsers(
        dest='command',
        help='可用命令'
    )

    # analyze命令
    analyze_parser = subparsers.add_parser(
        'analyze',
        help='执行调度分析'
    )
    analyze_parser.add_argument(
        'project_file',
        help='项目文件路径'
    )
    analyze_parser.add_argument(
        '--manpower',
        type=int,
        default=DEFAULT_STAFF_LIMIT,
        help='人力上限'
    )
    analyze_parser.add_argument(
        '--input-format',
        choices=['text', 'csv'],
        default='text',
        help='项目文件格式'
    )
    analyze_parser.add_argument(
        '--output',
        help='任务时间参数表CSV输出路径'
    )
    analyze_parser.add_argument(
        '--plot',
        help='甘特图输出路径'
    )
    analyze_parser.add_argument(
        '--verbose',
        action='store_true',
        help='输出详细日志'
    )

    # 解析命令行参数
    args = parser.parse_args(argv)

    # 配置日志
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if args.command == 'analyze':
        return analyze(
            project_file=args.project_file,
            manpower=args.manpower,
            input_format=args.input_format,
            output=args.output,
            plot=args.plot,
            verbose=args.verbose
        )

    parser.print_help()
    return 1

if __name__ == "__main__":
    sys.exit(main())
