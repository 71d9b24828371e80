"""zhfmt.report
用途: 把节点树上记录的改写按从右到左的顺序拼接回源文本，并生成诊断列表。
依赖: zhfmt.nodes、zhfmt.errors、zhfmt.char_kind。
示例: ``report = build_report(text, paragraphs, config)``。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .char_kind import is_space
from .config import Config
from .errors import CharError, Diagnostic, ParseError, SpaceError, StringError
from .markup import Span
from .nodes import (
    CharNode,
    FullwidthContent,
    GroupNode,
    HalfwidthContent,
    Node,
    OffsetValue,
    ParagraphNodes,
    Space,
)

__all__ = ["Report", "Reporter", "build_report"]


@dataclass
class Report:
    """一次运行的结果: 改写后的文本、逆文档序的诊断以及解析错误。"""

    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    parse_errors: List[ParseError] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.diagnostics)


class Reporter:
    """在源文本的 UTF-8 字节副本上应用改写。

    必须按文档逆序调用，使尚未应用的偏移始终有效。
    """

    def __init__(self, text: str, ignored: Sequence[Span] = ()) -> None:
        self._buffer = bytearray(text.encode("utf-8"))
        self._ignored = list(ignored)
        self.diagnostics: List[Diagnostic] = []

    @property
    def text(self) -> str:
        return self._buffer.decode("utf-8")

    def _accept(self, offset: Span, replacement: str) -> bool:
        if any(offset.overlaps(span) for span in self._ignored):
            return False
        self._buffer[offset.start:offset.end] = replacement.encode("utf-8")
        return True

    def report_char(self, value: OffsetValue[str]) -> None:
        if value.modified is not None and self._accept(value.offset, value.modified):
            self.diagnostics.append(CharError(value.original, value.modified, value.offset))

    def report_string(self, value: OffsetValue[str]) -> None:
        if value.modified is not None and self._accept(value.offset, value.modified):
            self.diagnostics.append(StringError(value.original, value.modified, value.offset))

    def report_space(self, value: OffsetValue[Space]) -> None:
        if value.modified is not None and self._accept(value.offset, str(value.modified)):
            self.diagnostics.append(SpaceError(value.original, value.modified, value.offset))

    def report_nodes(self, nodes: Sequence[Node]) -> None:
        for node in reversed(nodes):
            self.report_space(node.space_after)
            if isinstance(node, CharNode):
                self.report_char(node.value)
            elif isinstance(node, (HalfwidthContent, FullwidthContent)):
                self.report_string(node.value)
            elif isinstance(node, GroupNode):
                self.report_char(node.end)
                self.report_nodes(node.nodes)
                self.report_space(node.inner_space_before)
                self.report_char(node.start)


def _edge_spaces(text: str) -> tuple[str, str]:
    head = 0
    while head < len(text) and is_space(text[head]):
        head += 1
    if head == len(text):
        return text, ""
    tail = len(text)
    while is_space(text[tail - 1]):
        tail -= 1
    return text[:head], text[tail:]


def _trim_value(text: str, space: str, at_end: bool) -> OffsetValue[Space]:
    size = len(space.encode("utf-8"))
    total = len(text.encode("utf-8"))
    offset = Span(total - size, total) if at_end else Span(0, size)
    value = OffsetValue(Space.from_str(space), offset)
    value.to_be(Space.EMPTY)
    return value


def _touching_edges(
    text: str, leading: str, trailing: str, edges: Optional[Span]
) -> tuple[str, str]:
    if edges is None:
        return "", ""
    total = len(text.encode("utf-8"))
    if edges.start != len(leading.encode("utf-8")):
        leading = ""
    if edges.end != total - len(trailing.encode("utf-8")):
        trailing = ""
    return leading, trailing


def build_report(
    text: str,
    paragraphs: Iterable[ParagraphNodes],
    config: Config,
    ignored: Sequence[Span] = (),
    edges: Optional[Span] = None,
) -> Report:
    """逆序遍历段落并应用改写。

    ``trim_space`` 开启时去掉全文首尾空白，但只在空白紧贴 ``edges``
    (首个行内块的起点与最后一个行内块的终点) 时才去掉，代码块的缩进
    以及未闭合代码块末尾的空白保持不变。全文只有空白时整体清空。
    """

    reporter = Reporter(text, ignored)
    leading, trailing = _edge_spaces(text) if config.trim_space else ("", "")
    if leading != text:
        leading, trailing = _touching_edges(text, leading, trailing, edges)
    if trailing:
        reporter.report_space(_trim_value(text, trailing, at_end=True))
    for paragraph in reversed(list(paragraphs)):
        reporter.report_nodes(paragraph.nodes)
    if leading:
        reporter.report_space(_trim_value(text, leading, at_end=False))
    return Report(text=reporter.text, diagnostics=reporter.diagnostics)
