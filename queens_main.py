import logging
import sys

from queens_config import parse_args
from queens_display import print_solution
from queens_errors import QueensError
from queens_logging import setup_logging
from queens_session import Session

logger = logging.getLogger(__name__)


def main(argv=None):
    """
    程序入口：按参数连续请求 count 次新解并打印棋盘。

    返回:
        int: 全部请求成功返回 0，遇到 QueensError 返回 1
    """
    args = parse_args(argv)
    setup_logging(args)
    session = Session(history_mode=args.history_mode, max_nodes=args.max_nodes)

    for request in range(1, args.count + 1):
        try:
            solution = session.next_solution(args.n)
        except QueensError as exc:
            logger.error("第 %d 次请求失败：%s", request, exc)
            return 1

        logger.info("第 %d 次请求：%s", request, [tuple(p.square) for p in solution])
        if not args.quiet:
            print_solution(solution, args.n)
            print("\n" + "=" * (2 * args.n))
    return 0


if __name__ == "__main__":
    sys.exit(main())
