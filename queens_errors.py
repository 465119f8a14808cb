class QueensError(Exception):
    """N皇后求解过程中所有可恢复错误的基类"""


class InvalidSize(QueensError, ValueError):
    """棋盘大小非法（n < 1 或不是整数）"""

    def __init__(self, n):
        self.n = n
        super().__init__(f"棋盘大小必须是不小于 1 的整数，收到 {n!r}")


class NoSolutionFound(QueensError):
    """搜索穷尽了所有候选格子仍未放满 N 个皇后"""

    def __init__(self, n, reason="搜索空间已穷尽"):
        self.n = n
        super().__init__(f"{n} 皇后无解：{reason}")


class DuplicateSolution(QueensError):
    """排序后的解已经出现在历史记录中"""

    def __init__(self, solution):
        self.solution = solution
        super().__init__(f"该解已经返回过：{[tuple(p.square) for p in solution]}")


class SearchLimitExceeded(QueensError):
    """搜索超出节点预算或递归深度限制（与逻辑上的无解区分开）"""
