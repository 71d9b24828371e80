"""段落解析与引号配对的测试。"""
from __future__ import annotations

from typing import List

from zhfmt.errors import UnclosedQuotationMark, UnexpectedEnd
from zhfmt.lexer import CharToken, EventToken, lex
from zhfmt.markup import EventKind, MarkupEvent, Span
from zhfmt.nodes import (
    CharNode,
    EventNode,
    FullwidthContent,
    GroupNode,
    HalfwidthContent,
    Node,
    ParagraphNodes,
    Space,
)
from zhfmt.parser import Parser


def _parse(text: str):
    return Parser(lex(text)).parse()


def _nodes(text: str) -> List[Node]:
    results = _parse(text)
    assert len(results) == 1
    assert isinstance(results[0], ParagraphNodes)
    return results[0].nodes


def test_content_runs_split_by_width() -> None:
    nodes = _nodes("中文English")
    assert [type(node) for node in nodes] == [FullwidthContent, HalfwidthContent]
    assert nodes[0].value.original == "中文"
    assert nodes[0].value.offset == Span(0, 6)
    assert nodes[1].value.original == "English"
    assert nodes[1].value.offset == Span(6, 13)
    assert nodes[0].space_after.offset == Span(6, 6)


def test_space_is_anchored_after_node() -> None:
    nodes = _nodes("a  b")
    assert nodes[0].space_after.original == Space("  ")
    assert nodes[0].space_after.offset == Span(1, 3)
    assert nodes[1].value.offset == Span(3, 4)


def test_chinese_quotes_form_group() -> None:
    nodes = _nodes("他说“你好”。")
    assert [type(node) for node in nodes] == [FullwidthContent, GroupNode, CharNode]
    group = nodes[1]
    assert group.start.original == "“" and group.start.offset == Span(6, 9)
    assert group.end.original == "”" and group.end.offset == Span(15, 18)
    assert [node.value.original for node in group.nodes] == ["你好"]
    assert group.offset == Span(6, 18)


def test_nested_groups() -> None:
    nodes = _nodes("「外『内』外」")
    outer = nodes[0]
    assert isinstance(outer, GroupNode)
    assert isinstance(outer.nodes[1], GroupNode)
    assert outer.nodes[1].start.original == "『"
    assert str(ParagraphNodes(nodes)) == "「外『内』外」"


def test_western_quotes_pair_symmetrically() -> None:
    nodes = _nodes('say "hi" now')
    group = nodes[1]
    assert isinstance(group, GroupNode)
    assert group.start.original == '"' and group.end.original == '"'
    assert group.has_space_after


def test_contraction_apostrophe_is_plain_char() -> None:
    nodes = _nodes("what's up")
    assert [str(node) for node in nodes] == ["what", "'", "s ", "up"]
    assert isinstance(nodes[1], CharNode)


def test_markup_becomes_event_nodes() -> None:
    nodes = _nodes("用`code`和*强调*")
    events = [node.event.kind for node in nodes if isinstance(node, EventNode)]
    assert events == [EventKind.CODE, EventKind.START, EventKind.END]


def test_unmatched_right_quote() -> None:
    assert _parse("你好”") == [UnclosedQuotationMark("”", Span(6, 9))]


def test_unclosed_left_quote_reports_opener() -> None:
    assert _parse("他说“你好") == [UnexpectedEnd(Span(6, 9))]


def test_error_stays_inside_its_paragraph() -> None:
    results = _parse("他说“你好\n\n中文")
    assert isinstance(results[0], UnexpectedEnd)
    assert isinstance(results[1], ParagraphNodes)
    assert str(results[1]) == "中文"


def test_stream_ending_inside_paragraph() -> None:
    tokens = [
        EventToken(MarkupEvent(EventKind.START, "paragraph"), Span(0, 0)),
        CharToken("a", Span(0, 1)),
    ]
    assert Parser(tokens).parse() == [UnexpectedEnd(Span(0, 0))]


def test_error_labels() -> None:
    assert UnexpectedEnd().label() is None
    assert UnclosedQuotationMark("」", Span(0, 3)).label() == "」"
    assert str(UnexpectedEnd()) == "unexpected end."
