import logging
from typing import Iterator, List, Optional, Sequence

from queens_board import Board, Placement, Solution, Square
from queens_errors import NoSolutionFound, QueensError, SearchLimitExceeded

logger = logging.getLogger(__name__)


def parse_solver_args(parser):
    """解析与搜索相关的参数"""
    parser.add_argument(
        "--max_nodes",
        type=int,
        default=None,
        help="一次搜索最多尝试放置的格子数，超出后以 SearchLimitExceeded 结束。默认不限制。"
    )


def _coords(item):
    if isinstance(item, Placement):
        return item.square
    return Square(*item)


def attacks(a, b) -> bool:
    """两个格子同行、同列或同一对角线时互相攻击（同一个格子也算攻击）"""
    row1, col1 = _coords(a)
    row2, col2 = _coords(b)
    return row1 == row2 or col1 == col2 or abs(row1 - row2) == abs(col1 - col2)


def no_attack(candidate, placed: Sequence) -> bool:
    """candidate 与 placed 中任何一个皇后都不冲突时返回 True，placed 为空时恒为 True"""
    return not any(attacks(candidate, other) for other in placed)


class NQueensSolver:
    def __init__(self, board: Board, max_nodes: Optional[int] = None):
        """在给定棋盘的格子定义域上回溯搜索

        Args:
            board (Board): 已初始化的棋盘
            max_nodes (int, optional): 一次搜索最多尝试的格子数
        """
        self.board = board
        self.max_nodes = max_nodes
        self.nodes = 0

    def find_solution(self, remaining_count: int, placed_so_far: Sequence = ()) -> Solution:
        """再放置 remaining_count 个皇后，返回搜索顺序中的第一个完整放置序列

        Args:
            remaining_count (int): 还需要放置的皇后数量
            placed_so_far: 已经放置的皇后（Placement 或 (行, 列)）

        Returns:
            tuple: 按放置顺序排列的 Placement

        Raises:
            NoSolutionFound: 候选格子耗尽
            SearchLimitExceeded: 超出节点预算或递归深度
        """
        for solution in self.iter_solutions(remaining_count, placed_so_far):
            return solution
        raise NoSolutionFound(self.board.size)

    def iter_solutions(self, remaining_count: int, placed_so_far: Sequence = ()) -> Iterator[Solution]:
        """与 find_solution 相同的搜索，按搜索顺序逐个产出完整放置序列"""
        if self.board.size is None:
            raise QueensError("棋盘尚未初始化")
        if remaining_count < 0:
            raise ValueError(f"remaining_count 不能为负数：{remaining_count}")

        placed = [item if isinstance(item, Placement) else Placement(Square(*item)) for item in placed_so_far]
        self.nodes = 0
        try:
            yield from self._search(remaining_count, placed, 0)
        except RecursionError as exc:
            raise SearchLimitExceeded(f"搜索深度超出解释器递归限制（已尝试 {self.nodes} 个格子）") from exc
        logger.debug("%d 皇后搜索空间已穷尽，共尝试 %d 个格子", self.board.size, self.nodes)

    def _search(self, remaining_count: int, placed: List[Placement], start: int) -> Iterator[Solution]:
        if remaining_count == 0:
            logger.debug("找到完整放置序列，已尝试 %d 个格子", self.nodes)
            yield tuple(placed)
            return

        squares = self.board.squares
        occupied_rows = {placement.row for placement in placed}
        for index in range(start, len(squares)):
            square = squares[index]
            # 剩下的皇后只能放在当前行及以后的空行里，行号只增不减，空行不够时后面的格子也不可能
            free_rows = sum(1 for row in range(square.row, self.board.size + 1) if row not in occupied_rows)
            if free_rows < remaining_count:
                break
            if not no_attack(square, placed):
                continue

            self.nodes += 1
            if self.max_nodes is not None and self.nodes > self.max_nodes:
                raise SearchLimitExceeded(f"已尝试 {self.max_nodes} 个格子，超出搜索预算")

            placed.append(Placement(square))
            # 只向后选择格子：同一组皇后换个顺序仍是同一个解
            yield from self._search(remaining_count - 1, placed, index + 1)
            placed.pop()  # 回溯
