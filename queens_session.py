import logging
from typing import Optional, Tuple

from queens_board import BoardState, Solution, normalize_solution, validate_size
from queens_errors import DuplicateSolution, NoSolutionFound
from queens_solver import NQueensSolver

logger = logging.getLogger(__name__)

# reset:   每次请求都清空棋盘和历史记录，重复调用得到同一个解（默认）
# keep:    同一个 N 的历史记录跨请求保留，重复的解直接报 DuplicateSolution
# iterate: 同上保留历史记录，并回溯跳过已返回的解，每次给出一个新解
HISTORY_MODES = ("reset", "keep", "iterate")


def parse_session_args(parser):
    """解析与会话相关的参数"""
    parser.add_argument(
        "n",
        type=int,
        nargs="?",
        default=8,
        help="棋盘大小和皇后数量"
    )
    parser.add_argument(
        "--history_mode",
        type=str,
        default="reset",
        choices=HISTORY_MODES,
        help="历史记录策略：reset 每次请求都清空；keep 同一 N 保留历史，重复即失败；iterate 保留历史并跳过已返回的解。"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="连续请求解的次数"
    )


class Session:
    def __init__(self, history_mode: str = "reset", max_nodes: Optional[int] = None):
        """协调一次完整的“给出下一个不同的解”请求

        Args:
            history_mode (str): reset、keep 或 iterate，见 HISTORY_MODES
            max_nodes (int, optional): 传给求解器的节点预算
        """
        if history_mode not in HISTORY_MODES:
            raise ValueError(f"未知的历史记录模式：{history_mode!r}，可选 {HISTORY_MODES}")
        self.history_mode = history_mode
        self.max_nodes = max_nodes
        self.state = BoardState()

    @property
    def history(self) -> Tuple[Solution, ...]:
        return self.state.history.solutions

    def _prepare(self, n: int) -> None:
        # keep/iterate 模式下只有 N 改变才重建棋盘，这时历史记录随之清空
        if self.history_mode == "reset" or self.state.size != n:
            self.state.reset(n)

    def next_solution(self, n: int) -> Solution:
        """重置（按模式）、搜索、规范化、查重、记录

        Args:
            n (int): 棋盘大小

        Returns:
            tuple: 规范化（按行列排序）后的解

        Raises:
            InvalidSize: n < 1
            NoSolutionFound: 没有（新的）解
            DuplicateSolution: 解已经在历史记录中
        """
        validate_size(n)
        self._prepare(n)
        solver = NQueensSolver(self.state.board, max_nodes=self.max_nodes)

        if self.history_mode == "iterate":
            normalized = self._next_unseen(solver, n)
        else:
            normalized = normalize_solution(solver.find_solution(n, []))
            if self.state.contains_solution(normalized):
                logger.warning("%d 皇后的解重复：%s", n, [tuple(p.square) for p in normalized])
                raise DuplicateSolution(normalized)

        self.state.record_solution(normalized)
        logger.info("%d 皇后找到第 %d 个解（尝试 %d 个格子）", n, len(self.state.history), solver.nodes)
        return normalized

    def _next_unseen(self, solver: NQueensSolver, n: int) -> Solution:
        # 解已返回过时回溯到搜索顺序中的下一个解
        for raw in solver.iter_solutions(n, []):
            normalized = normalize_solution(raw)
            if not self.state.contains_solution(normalized):
                return normalized
        if len(self.state.history) == 0:
            raise NoSolutionFound(n)
        raise NoSolutionFound(n, reason=f"已返回全部 {len(self.state.history)} 个解")


# solve 按历史记录模式复用的会话，reset 模式每次请求本来就会清空
_sessions = {}


def clear_sessions() -> None:
    """丢弃 solve 复用的全部会话（以及其中的历史记录）"""
    _sessions.clear()


def solve(n: int, history_mode: str = "reset", max_nodes: Optional[int] = None) -> Solution:
    """主入口：同一种历史记录模式的连续调用共用一个会话

    Args:
        n (int): 棋盘大小
        history_mode (str): reset、keep 或 iterate；keep/iterate 下同一 N 的历史记录跨调用保留
        max_nodes (int, optional): 本次搜索的节点预算
    """
    if history_mode not in _sessions:
        _sessions[history_mode] = Session(history_mode=history_mode)
    session = _sessions[history_mode]
    session.max_nodes = max_nodes
    return session.next_solution(n)
