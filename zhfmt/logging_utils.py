"""zhfmt.logging_utils
用途: 统一初始化日志: rich 控制台输出，外加可选的滚动日志文件。
依赖: Python 标准库 logging；第三方库 rich。
示例: ``logger = setup_logger("zhfmt", "debug", log_file="logs/zhfmt.log")``。
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["DEFAULT_LOG_LEVEL", "resolve_level", "setup_logger"]

DEFAULT_LOG_LEVEL = "warning"


def resolve_level(level: str | int) -> int:
    """把 ``"debug"`` 等级别名称转换为 logging 常量，无法识别时回退到 INFO。"""

    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def setup_logger(
    name: str = "zhfmt",
    level: str | int = DEFAULT_LOG_LEVEL,
    log_file: Optional[str | Path] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """配置指定名称的日志器并返回。

    Args:
        name: 日志器名称，子模块使用 ``zhfmt.<module>`` 自动继承。
        level: 日志级别名称或数值。
        log_file: 可选的日志文件路径，单文件 2MB，最多保留 5 个轮转。
        console: 可选的 rich 控制台，默认输出到 stderr。

    Returns:
        已完成配置的 ``logging.Logger`` 实例。
    """

    logger = logging.getLogger(name)
    logging_level = resolve_level(level)
    logger.setLevel(logging_level)

    # 重复调用时替换旧的 Handler，避免重复输出
    for handler in list(logger.handlers):
        if getattr(handler, "_zhfmt_handler", False):
            logger.removeHandler(handler)
            handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    console_handler.setLevel(logging_level)
    setattr(console_handler, "_zhfmt_handler", True)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        setattr(file_handler, "_zhfmt_handler", True)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging initialized at level %s", logging.getLevelName(logging_level))
    return logger
