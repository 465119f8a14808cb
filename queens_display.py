import sys

from queens_board import is_queen_at


def parse_display_args(parser):
    """解析与棋盘输出相关的参数"""
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="不打印棋盘，只记录日志。"
    )


def render_solution(solution, n):
    """将解可视化为棋盘字符串

    Args:
        solution: 一个解（Placement 序列，顺序不影响结果）
        n (int): 棋盘大小

    Returns:
        str: n 行，每行 n 个 'Q ' 或 'X '，行号从上到下递增，列号从左到右递增
    """
    board = []
    for row in range(1, n + 1):
        board.append(''.join('Q ' if is_queen_at(solution, row, col) else 'X ' for col in range(1, n + 1)))
    return '\n'.join(board)


def print_solution(solution, n, stream=None):
    stream = stream if stream is not None else sys.stdout
    print(render_solution(solution, n), file=stream)
