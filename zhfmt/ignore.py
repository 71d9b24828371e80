"""zhfmt.ignore
用途: 解析文档中的 HTML 注释指令，得到禁用标记与需要保护的字节区间。
依赖: Python 标准库 re；markdown-it-py 的块级 token。
示例: ``<!-- zhfmt ignore: \\w+\\(\\) -->`` 使所有 ``name()`` 不被改写。

``<!-- zhfmt disabled -->`` 使整篇文档保持原样；``<!-- zhfmt ignore: REGEX -->``
追加一条正则，其匹配 (或命名分组 ``ignore`` 的匹配) 区间内的改写会被丢弃。
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from markdown_it.token import Token as MdToken

from .markup import Span

__all__ = ["IGNORE_GROUP", "Directives", "collect_directives", "ignore_spans"]

LOGGER = logging.getLogger("zhfmt.ignore")

IGNORE_GROUP = "ignore"
DISABLE_HTML_RE = re.compile(r"^\s*<!--\s*zhfmt disabled\s*-->\s*$")
IGNORE_HTML_RE = re.compile(r"^\s*<!--\s*zhfmt ignore:(?P<regex>.*?)-->\s*$", re.S)


@dataclass(slots=True)
class Directives:
    disabled: bool = False
    patterns: List[str] = field(default_factory=list)


def collect_directives(tokens: Iterable[MdToken]) -> Directives:
    """扫描 ``html_block`` token，遇到禁用指令立即返回。"""

    directives = Directives()
    for token in tokens:
        if token.type != "html_block":
            continue
        if DISABLE_HTML_RE.match(token.content):
            directives.disabled = True
            return directives
        match = IGNORE_HTML_RE.match(token.content)
        if match:
            directives.patterns.append(match.group("regex").strip())
    return directives


def ignore_spans(text: str, patterns: Sequence[str]) -> List[Span]:
    """把每条正则在全文中的匹配区间转换为字节区间。无效正则记录警告后跳过。"""

    spans: List[Span] = []
    for pattern in patterns:
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            LOGGER.warning("忽略无效的正则 %r: %s", pattern, exc)
            continue
        use_group = IGNORE_GROUP in regex.groupindex
        for match in regex.finditer(text):
            start, end = match.span(IGNORE_GROUP) if use_group else match.span()
            if start < 0:
                continue
            spans.append(
                Span(len(text[:start].encode("utf-8")), len(text[:end].encode("utf-8")))
            )
    return spans
