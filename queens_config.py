import argparse

from queens_display import parse_display_args
from queens_logging import parse_logging_args
from queens_session import parse_session_args
from queens_solver import parse_solver_args


def build_parser():
    parser = argparse.ArgumentParser(description="Search-based N-Queens: one new solution per request.")

    # 调用分布在各模块的参数解析函数
    parse_session_args(parser)
    parse_solver_args(parser)
    parse_display_args(parser)
    parse_logging_args(parser)
    return parser


def parse_args(argv=None):
    """解析所有命令行参数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 健全性检查
    if args.count < 1:
        parser.error("--count must be at least 1.")
    if args.max_nodes is not None and args.max_nodes < 1:
        parser.error("--max_nodes must be at least 1 when given.")

    return args
