import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


def parse_logging_args(parser):
    """解析与日志相关的参数"""
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别。DEBUG 会输出每次搜索尝试的格子数。"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        default=None,
        help="额外写入的日志文件（追加模式）。默认只输出到终端。"
    )


def setup_logging(args):
    """
    配置日志记录，包括终端输出和可选的文件日志。

    参数:
        args: 命令行参数，包含日志级别和日志文件路径
    """
    level = getattr(logging, args.log_level)
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=level,
    )
    # 根记录器已有处理器时 basicConfig 不会生效，级别单独设置
    logging.getLogger().setLevel(level)
    if args.log_file:
        root = logging.getLogger()
        log_path = os.path.abspath(args.log_file)
        # 同一个文件只挂一个处理器，重复调用不会重复写入
        if any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in root.handlers):
            return
        log_file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        log_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(log_file_handler)
