"""zhfmt.engine
用途: 串联完整流程: 解析 Markdown → 词法 → 语法树 → 规则 → 报告。
依赖: zhfmt 各核心模块。
示例: ``report = run("中文English", Config())``。
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .config import Config
from .errors import ParseError
from .ignore import collect_directives, ignore_spans
from .lexer import tokenize
from .markup import Span, markdown_events, parse_markdown
from .nodes import ParagraphNodes
from .parser import Parser
from .report import Report, build_report
from .rules import run_rules

__all__ = ["run", "format_text"]

LOGGER = logging.getLogger("zhfmt.engine")


def run(text: str, config: Optional[Config] = None) -> Report:
    """处理一段 Markdown 文本，返回改写结果与诊断。

    解析失败的段落保持原样，其错误收集在 ``Report.parse_errors`` 中。
    """

    if config is None:
        config = Config()

    tokens = parse_markdown(text)
    directives = collect_directives(tokens)
    if directives.disabled:
        LOGGER.debug("文档包含禁用指令，跳过处理")
        return Report(text=text)
    ignored = ignore_spans(text, [*directives.patterns, *config.ignores])

    events = list(markdown_events(text, tokens))
    blocks = [span for event, span in events if event.is_block]
    edges = Span(blocks[0].start, blocks[-1].end) if blocks else None

    paragraphs: List[ParagraphNodes] = []
    parse_errors: List[ParseError] = []
    for result in Parser(tokenize(events)).parse():
        if isinstance(result, ParseError):
            parse_errors.append(result)
            continue
        run_rules(result.nodes, config)
        paragraphs.append(result)

    report = build_report(text, paragraphs, config, ignored, edges)
    report.parse_errors = parse_errors
    LOGGER.debug(
        "处理完成: %d 个段落, %d 处改写, %d 个解析错误",
        len(paragraphs),
        len(report.diagnostics),
        len(parse_errors),
    )
    return report


def format_text(text: str, config: Optional[Config] = None) -> str:
    return run(text, config).text
