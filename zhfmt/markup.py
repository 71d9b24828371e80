"""zhfmt.markup
用途: 借助 markdown-it-py 解析 Markdown，并把行内 token 对齐回源文本，
产出带字节偏移的标记事件流 ``(MarkupEvent, Span)``。
依赖: markdown-it-py；Python 标准库 re、itertools、logging。
示例: ``for event, span in markdown_events(text): ...``。

markdown-it-py 的 token 只有行号，没有字符偏移，因此这里逐个行内 token
在段落内容中定位: 文本原样匹配，强调/链接等只覆盖其标记字符，行内代码、
转义、实体、图片与自动链接作为不透明事件整体覆盖，换行覆盖换行符及下一行
的缩进或容器前缀。这样相邻事件的区间首尾相接，不留空隙。
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from markdown_it import MarkdownIt
from markdown_it.token import Token as MdToken

__all__ = [
    "Span",
    "EventKind",
    "MarkupEvent",
    "BLOCK_TAGS",
    "parse_markdown",
    "markdown_events",
    "front_matter_lines",
]

LOGGER = logging.getLogger("zhfmt.markup")


class Span(NamedTuple):
    """源文本 UTF-8 编码中的字节区间 ``[start, end)``。"""

    start: int
    end: int

    def overlaps(self, other: "Span") -> bool:
        if self.start == self.end:
            return other.start <= self.start < other.end
        return self.start < other.end and other.start < self.end


class EventKind(Enum):
    """标记事件的类别。"""

    START = "start"
    END = "end"
    TEXT = "text"
    CODE = "code"
    HTML = "html"
    BREAK = "break"
    OPAQUE = "opaque"


# 每个行内块 (段落、标题、表格单元格) 对应一个段落。
BLOCK_TAGS = frozenset({"paragraph", "heading", "table_cell"})

_BLOCK_OPEN_TAGS = {
    "paragraph_open": "paragraph",
    "heading_open": "heading",
    "th_open": "table_cell",
    "td_open": "table_cell",
}

_WRAPPER_TAGS = {
    "em": "emphasis",
    "strong": "strong",
    "s": "strikethrough",
}

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:.*?\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.S)
_BACKTICKS_RE = re.compile(r"`+")


@dataclass(frozen=True, slots=True)
class MarkupEvent:
    """一个标记事件。``tag`` 标识起止事件的结构，``text`` 为文本或代码内容。"""

    kind: EventKind
    tag: str = ""
    text: str = ""

    @property
    def is_block(self) -> bool:
        return self.kind in (EventKind.START, EventKind.END) and self.tag in BLOCK_TAGS

    def __str__(self) -> str:
        if self.kind in (EventKind.START, EventKind.END):
            return f"{self.kind.value}:{self.tag}"
        if self.tag:
            return f"{self.kind.value}:{self.tag}"
        return self.kind.value


class _AlignmentError(ValueError):
    """行内 token 无法在源文本中定位。"""


def _make_parser() -> MarkdownIt:
    # 关闭 text_join，使转义与实体保留为独立的 text_special token。
    return MarkdownIt("commonmark").enable(["table", "strikethrough"]).disable("text_join")


_PARSER = _make_parser()


def parse_markdown(text: str) -> List[MdToken]:
    """返回 markdown-it-py 的块级 token 列表。"""

    return _PARSER.parse(text)


def front_matter_lines(text: str) -> int:
    """返回开头 front matter 占用的行数，没有则为 0。"""

    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return 0
    return match.group(0).count("\n")


class _SourceMap:
    """源文本的行起点与字节偏移索引。"""

    def __init__(self, text: str) -> None:
        self.text = text
        self.line_starts = [0] + [m.end() for m in re.finditer("\n", text)]
        self.byte_offsets = list(accumulate((len(ch.encode("utf-8")) for ch in text), initial=0))
        # 同一行可能包含多个表格单元格，记录每行已消费到的列。
        self.min_cols: Dict[int, int] = {}

    def line(self, line_no: int) -> Tuple[int, str]:
        if line_no >= len(self.line_starts):
            raise _AlignmentError(f"line {line_no} out of range")
        start = self.line_starts[line_no]
        if line_no + 1 < len(self.line_starts):
            end = self.line_starts[line_no + 1] - 1
        else:
            end = len(self.text)
        return start, self.text[start:end]

    def content_positions(self, content: str, first_line: int) -> List[int]:
        """把行内内容的每个下标映射到源文本下标，末尾附加结束位置。"""

        positions: List[int] = []
        parts = content.split("\n")
        for index, part in enumerate(parts):
            line_no = first_line + index
            line_start, line_text = self.line(line_no)
            col = line_text.find(part, self.min_cols.get(line_no, 0))
            if col < 0:
                raise _AlignmentError(f"content not found on line {line_no + 1}")
            base = line_start + col
            positions.extend(range(base, base + len(part)))
            # 换行符映射到该行内容的结尾
            positions.append(base + len(part))
            self.min_cols[line_no] = col + len(part)
        return positions

    def byte(self, index: int) -> int:
        return self.byte_offsets[index]


def _expect(content: str, pos: int, markup: str) -> int:
    if not markup or not content.startswith(markup, pos):
        raise _AlignmentError(f"expected {markup!r} at {pos}")
    return pos + len(markup)


def _skip_break(content: str, pos: int) -> int:
    while pos < len(content) and content[pos] in " \t":
        pos += 1
    if content.startswith("\\\n", pos):
        pos += 1
    pos = _expect(content, pos, "\n")
    while pos < len(content) and content[pos] in " \t":
        pos += 1
    return pos


def _skip_code_span(content: str, pos: int, markup: str) -> int:
    start = _expect(content, pos, markup)
    for match in _BACKTICKS_RE.finditer(content, start):
        if len(match.group(0)) == len(markup):
            return match.end()
    raise _AlignmentError(f"unclosed code span at {pos}")


def _skip_balanced(content: str, pos: int, opener: str, closer: str) -> int:
    """从 ``pos`` 处的开括号跳到与之匹配的闭括号之后。"""

    _expect(content, pos, opener)
    depth = 0
    quote: Optional[str] = None
    index = pos
    while index < len(content):
        ch = content[index]
        if ch == "\\":
            index += 2
            continue
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch == "<" and opener == "(" and depth == 1 and content[index - 1] == "(":
            end = content.find(">", index)
            if end < 0:
                raise _AlignmentError(f"unclosed link destination at {index}")
            index = end
        elif ch in "\"'" and opener == "(" and content[index - 1] in " \t\n":
            quote = ch
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    raise _AlignmentError(f"unbalanced {opener}{closer} at {pos}")


def _skip_link_destination(content: str, pos: int) -> int:
    if content.startswith("(", pos):
        return _skip_balanced(content, pos, "(", ")")
    if content.startswith("[", pos):
        return _skip_balanced(content, pos, "[", "]")
    return pos


def _find_close(children: Sequence[MdToken], index: int, close_type: str) -> int:
    for j in range(index + 1, len(children)):
        if children[j].type == close_type:
            return j
    raise _AlignmentError(f"missing {close_type}")


def _align_inline(content: str, children: Sequence[MdToken]) -> List[Tuple[MarkupEvent, int, int]]:
    """按顺序把行内 token 定位到 ``content`` 中，返回 ``(事件, 起, 止)`` 列表。"""

    aligned: List[Tuple[MarkupEvent, int, int]] = []
    pos = 0
    index = 0
    while index < len(children):
        child = children[index]
        kind = child.type
        if kind == "text":
            end = pos + len(child.content)
            if content[pos:end] != child.content:
                raise _AlignmentError(f"text mismatch at {pos}")
            if child.content:
                aligned.append((MarkupEvent(EventKind.TEXT, text=child.content), pos, end))
        elif kind in ("softbreak", "hardbreak"):
            end = _skip_break(content, pos)
            aligned.append((MarkupEvent(EventKind.BREAK, tag=kind), pos, end))
        elif kind == "code_inline":
            end = _skip_code_span(content, pos, child.markup)
            aligned.append((MarkupEvent(EventKind.CODE, text=child.content), pos, end))
        elif kind.endswith("_open") and kind[:-5] in _WRAPPER_TAGS:
            end = _expect(content, pos, child.markup)
            aligned.append((MarkupEvent(EventKind.START, tag=_WRAPPER_TAGS[kind[:-5]]), pos, end))
        elif kind.endswith("_close") and kind[:-6] in _WRAPPER_TAGS:
            end = _expect(content, pos, child.markup)
            aligned.append((MarkupEvent(EventKind.END, tag=_WRAPPER_TAGS[kind[:-6]]), pos, end))
        elif kind == "link_open" and child.markup in ("autolink", "linkify"):
            _expect(content, pos, "<")
            end = content.find(">", pos)
            if end < 0:
                raise _AlignmentError(f"unclosed autolink at {pos}")
            end += 1
            aligned.append((MarkupEvent(EventKind.OPAQUE, tag="autolink"), pos, end))
            index = _find_close(children, index, "link_close")
        elif kind == "link_open":
            end = _expect(content, pos, "[")
            aligned.append((MarkupEvent(EventKind.START, tag="link"), pos, end))
        elif kind == "link_close":
            end = _skip_link_destination(content, _expect(content, pos, "]"))
            aligned.append((MarkupEvent(EventKind.END, tag="link"), pos, end))
        elif kind == "image":
            _expect(content, pos, "!")
            end = _skip_link_destination(content, _skip_balanced(content, pos + 1, "[", "]"))
            aligned.append((MarkupEvent(EventKind.OPAQUE, tag="image"), pos, end))
        elif kind == "html_inline":
            end = _expect(content, pos, child.content)
            aligned.append((MarkupEvent(EventKind.HTML, text=child.content), pos, end))
        elif kind == "text_special":
            end = _expect(content, pos, child.markup)
            aligned.append((MarkupEvent(EventKind.OPAQUE, tag=child.info, text=child.content), pos, end))
        else:
            raise _AlignmentError(f"unsupported inline token {kind!r}")
        pos = end
        index += 1
    if pos != len(content):
        raise _AlignmentError(f"trailing content at {pos}")
    return aligned


def markdown_events(
    text: str, tokens: Optional[List[MdToken]] = None
) -> Iterator[Tuple[MarkupEvent, Span]]:
    """生成整篇文档的标记事件。

    每个行内块以 ``START``/``END`` 块事件包围；无法对齐的行内块记录调试日志后跳过，
    front matter 中的内容不会产出事件。
    """

    if tokens is None:
        tokens = parse_markdown(text)
    source = _SourceMap(text)
    skip_lines = front_matter_lines(text)
    block_tag = "paragraph"
    # 表格单元格的行内 token 可能没有行号，沿用最近的块级行号
    last_line = 0
    for token in tokens:
        if token.type != "inline":
            if token.map is not None:
                last_line = token.map[0]
            block_tag = _BLOCK_OPEN_TAGS.get(token.type, block_tag)
            continue
        first_line = token.map[0] if token.map is not None else last_line
        if first_line < skip_lines:
            continue
        try:
            positions = source.content_positions(token.content, first_line)
            aligned = _align_inline(token.content, token.children or [])
        except _AlignmentError as exc:
            LOGGER.debug("跳过无法对齐的行内块 (第 %d 行): %s", first_line + 1, exc)
            continue
        start = source.byte(positions[0])
        end = source.byte(positions[-1])
        yield MarkupEvent(EventKind.START, tag=block_tag), Span(start, start)
        for event, lo, hi in aligned:
            yield event, Span(source.byte(positions[lo]), source.byte(positions[hi]))
        yield MarkupEvent(EventKind.END, tag=block_tag), Span(end, end)
