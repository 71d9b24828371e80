"""
项目: zhfmt
用途: 中英文混排文本 (Markdown) 的标点宽度与空格格式化工具。
依赖: markdown-it-py、rich、PyYAML。
示例用法:
    from zhfmt import Config, run
    report = run("中文English", Config())
    print(report.text)
"""

from __future__ import annotations

from .config import Config, ConfigError, ZhScript, load_config
from .engine import format_text, run
from .report import Report

__all__ = [
    "__version__",
    "Config",
    "ConfigError",
    "Report",
    "ZhScript",
    "format_text",
    "load_config",
    "run",
]

__version__: str = "0.1.0"
"""当前版本号。"""
