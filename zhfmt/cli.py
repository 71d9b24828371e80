"""zhfmt 命令行入口，使用 argparse 解析参数并逐个处理匹配的 Markdown 文件。"""

from __future__ import annotations

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import DEFAULT_CONFIG_FILE, Config, ConfigError, load_config
from .engine import run
from .logging_utils import DEFAULT_LOG_LEVEL, setup_logger
from .report import Report

LOGGER = logging.getLogger("zhfmt.cli")

DEFAULT_PATTERN = "./**/*.md"

console = Console()


def line_col(text: str, byte_offset: int) -> Tuple[int, int]:
    """把字节偏移换算为从 1 开始的行号与列号 (按字符计)。"""

    prefix = text.encode("utf-8")[:byte_offset].decode("utf-8", errors="ignore")
    line = prefix.count("\n") + 1
    col = len(prefix) - (prefix.rfind("\n") + 1) + 1
    return line, col


def _print_report(path: Path, text: str, report: Report) -> None:
    """以表格形式按文档顺序展示诊断与解析错误。"""

    table = Table(title=escape(str(path)))
    table.add_column("位置", no_wrap=True)
    table.add_column("类型")
    table.add_column("原文")
    table.add_column("建议")

    for error in report.parse_errors:
        position = "-"
        if error.offset is not None:
            position = "%d:%d" % line_col(text, error.offset.start)
        table.add_row(position, f"[red]{escape(error.message)}[/red]", "", escape(error.label() or ""))

    for diagnostic in reversed(report.diagnostics):
        line, col = line_col(text, diagnostic.offset.start)
        table.add_row(
            f"{line}:{col}",
            escape(diagnostic.message),
            escape(repr(str(diagnostic.original))),
            escape(diagnostic.label()),
        )

    console.print(table)


def process_file(path: Path, config: Config, check: bool = False) -> bool:
    """处理单个文件，返回是否需要改写；非检查模式下直接写回。"""

    text = path.read_text(encoding="utf-8")
    report = run(text, config)
    if report.diagnostics or report.parse_errors:
        _print_report(path, text, report)
    if report.changed and not check:
        path.write_text(report.text, encoding="utf-8")
        LOGGER.info("已改写 %s (%d 处)", path, len(report.diagnostics))
    return report.changed


def _load(config_path: str | None) -> Config:
    if config_path is None and not Path(DEFAULT_CONFIG_FILE).exists():
        return Config()
    return load_config(config_path or DEFAULT_CONFIG_FILE)


def _expand(pattern: str) -> List[Path]:
    return sorted(Path(p) for p in glob.glob(pattern, recursive=True) if Path(p).is_file())


def build_parser() -> argparse.ArgumentParser:
    """构建顶级 argparse 解析器。"""

    parser = argparse.ArgumentParser(
        prog="zhfmt",
        description="中英文混排 Markdown 的标点与空格格式化工具",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default=DEFAULT_PATTERN,
        help=f"待处理文件的 glob 模式 (默认: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"配置文件路径，支持 .toml/.yaml (默认: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--check", action="store_true", help="只报告问题，不写回文件")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="日志级别")
    parser.add_argument("--log-file", default=None, help="可选的日志文件路径")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口函数，解析参数并处理文件。"""

    args = build_parser().parse_args(argv)
    setup_logger("zhfmt", args.log_level, args.log_file)

    try:
        config = _load(args.config)
    except (ConfigError, OSError) as exc:
        console.print(f"[red]无法加载配置: {escape(str(exc))}[/red]")
        return 1

    paths = _expand(args.pattern)
    if not paths:
        console.print(f"[yellow]没有匹配的文件: {escape(args.pattern)}[/yellow]")
        return 0

    exit_code = 0
    changed: List[Path] = []
    for path in paths:
        try:
            if process_file(path, config, check=args.check):
                changed.append(path)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("处理 %s 失败: %s", path, exc)
            console.print(f"[red]处理失败 {escape(str(path))}: {escape(str(exc))}[/red]")
            exit_code = 1

    if args.check and changed:
        console.print(f"[yellow]{len(changed)} 个文件需要格式化。[/yellow]")
        exit_code = 1
    elif changed:
        console.print(f"[green]已格式化 {len(changed)} 个文件。[/green]")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
