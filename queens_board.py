import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from kanren import Relation, fact, facts, run, var

from queens_errors import DuplicateSolution, InvalidSize

# 创建日志记录器
logger = logging.getLogger(__name__)


class Square(NamedTuple):
    """棋盘上的一个格子，行列均从 1 开始编号"""
    row: int
    col: int


class Placement(NamedTuple):
    """一个皇后占据某个格子"""
    square: Square

    @property
    def row(self) -> int:
        return self.square.row

    @property
    def col(self) -> int:
        return self.square.col


Solution = Tuple[Placement, ...]


def validate_size(n) -> int:
    """检查棋盘大小，非法时抛出 InvalidSize"""
    # bool 是 int 的子类，需要单独排除
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidSize(n)
    return n


def normalize_solution(solution: Sequence[Placement]) -> Solution:
    """按 (行, 列) 排序得到规范化的解，只用于去重比较

    Args:
        solution: 按发现顺序排列的皇后位置序列

    Returns:
        tuple: 排序后的皇后位置，对已规范化的解再次调用结果不变
    """
    return tuple(sorted(solution, key=lambda placement: (placement.row, placement.col)))


def is_queen_at(solution: Sequence[Placement], row: int, col: int) -> bool:
    """判断解中 (row, col) 处是否放置了皇后"""
    return Placement(Square(row, col)) in solution


def _solution_key(solution: Sequence[Placement]):
    # 事实库中只存放纯整数元组
    return tuple((placement.row, placement.col) for placement in solution)


class Board:
    """当前 N×N 棋盘上所有可放置的格子

    格子以事实的形式保存在实例自己的 kanren 关系中，每次初始化都会丢弃旧关系重建。
    """

    def __init__(self):
        self._relation = Relation("square")
        self._squares: Tuple[Square, ...] = ()
        self.size: Optional[int] = None

    def initialize(self, n: int) -> None:
        """为 1 <= 行, 列 <= n 的每个格子登记一条事实

        Args:
            n (int): 棋盘大小，必须不小于 1
        """
        validate_size(n)
        self._relation = Relation("square")
        facts(self._relation, *((row, col) for row in range(1, n + 1) for col in range(1, n + 1)))

        # 从事实库中取回所有格子，按行优先顺序排列作为搜索的候选顺序
        row, col = var(), var()
        found = run(0, (row, col), self._relation(row, col))
        self._squares = tuple(sorted(Square(r, c) for r, c in found))
        self.size = n
        logger.debug("棋盘初始化完成：%d x %d，共 %d 个格子", n, n, len(self._squares))

    def clear(self) -> None:
        self._relation = Relation("square")
        self._squares = ()
        self.size = None

    @property
    def squares(self) -> Tuple[Square, ...]:
        """行优先顺序（行递增，行内列递增）的全部格子"""
        return self._squares

    def __len__(self):
        return len(self._squares)

    def __contains__(self, square):
        row, col = square
        return bool(run(1, (row, col), self._relation(row, col)))


class History:
    """本次会话中已经返回过的规范化解"""

    def __init__(self):
        self._relation = Relation("solution")
        self._solutions = []

    def record(self, normalized: Sequence[Placement]) -> None:
        if self.contains(normalized):
            raise DuplicateSolution(tuple(normalized))
        fact(self._relation, _solution_key(normalized))
        self._solutions.append(tuple(normalized))

    def contains(self, normalized: Sequence[Placement]) -> bool:
        key = _solution_key(normalized)
        return bool(run(1, key, self._relation(key)))

    def clear(self) -> None:
        self._relation = Relation("solution")
        self._solutions = []

    @property
    def solutions(self) -> Tuple[Solution, ...]:
        """按记录顺序返回所有已记录的解"""
        return tuple(self._solutions)

    def __len__(self):
        return len(self._solutions)


class BoardState:
    """会话拥有的棋盘状态：格子定义域和解的历史记录"""

    def __init__(self):
        self.board = Board()
        self.history = History()

    @property
    def size(self) -> Optional[int]:
        return self.board.size

    def initialize(self, n: int) -> None:
        self.board.initialize(n)

    def reset(self, n: int) -> None:
        """清空格子和历史记录后重新初始化，可以重复调用

        Args:
            n (int): 新的棋盘大小，可以与之前相同或不同
        """
        # 先检查参数，避免非法 n 把现有状态清空
        validate_size(n)
        self.board.clear()
        self.history.clear()
        self.initialize(n)

    def record_solution(self, normalized: Sequence[Placement]) -> None:
        self.history.record(normalized)

    def contains_solution(self, normalized: Sequence[Placement]) -> bool:
        return self.history.contains(normalized)
