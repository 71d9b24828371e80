"""Markdown 事件对齐与逐字符词法的测试。"""
from __future__ import annotations

from typing import List, Tuple

from zhfmt.lexer import CharToken, EventToken, lex, tokenize
from zhfmt.markup import EventKind, MarkupEvent, Span, front_matter_lines, markdown_events


def _events(text: str) -> List[Tuple[str, str, Span]]:
    return [(event.kind.value, event.tag, span) for event, span in markdown_events(text)]


def test_plain_paragraph_is_wrapped_in_block_events() -> None:
    assert _events("中文English") == [
        ("start", "paragraph", Span(0, 0)),
        ("text", "", Span(0, 13)),
        ("end", "paragraph", Span(13, 13)),
    ]


def test_emphasis_markers_cover_only_markup() -> None:
    assert _events("中文*English*") == [
        ("start", "paragraph", Span(0, 0)),
        ("text", "", Span(0, 6)),
        ("start", "emphasis", Span(6, 7)),
        ("text", "", Span(7, 14)),
        ("end", "emphasis", Span(14, 15)),
        ("end", "paragraph", Span(15, 15)),
    ]


def test_inline_code_is_one_event() -> None:
    events = list(markdown_events("用`a b`码"))
    code = [(event, span) for event, span in events if event.kind is EventKind.CODE]
    assert code == [(MarkupEvent(EventKind.CODE, text="a b"), Span(3, 8))]


def test_link_end_covers_destination() -> None:
    assert _events("[链接](http://x.y)后")[1:-1] == [
        ("start", "link", Span(0, 1)),
        ("text", "", Span(1, 7)),
        ("end", "link", Span(7, 20)),
        ("text", "", Span(20, 23)),
    ]


def test_soft_break_covers_newline() -> None:
    assert _events("甲\n乙")[1:-1] == [
        ("text", "", Span(0, 3)),
        ("break", "softbreak", Span(3, 4)),
        ("text", "", Span(4, 7)),
    ]


def test_escape_is_opaque() -> None:
    assert _events("\\*号")[1:-1] == [
        ("opaque", "escape", Span(0, 2)),
        ("text", "", Span(2, 5)),
    ]


def test_spans_are_contiguous_inside_a_block() -> None:
    text = '中文 **粗体** 和 `code`，[链接](https://a.b "t") 以及 ![图](x.png)。'
    events = list(markdown_events(text))
    assert events[0][0].kind is EventKind.START and events[-1][0].kind is EventKind.END
    inner = [span for _, span in events[1:-1]]
    assert inner[0].start == 0
    assert inner[-1].end == len(text.encode("utf-8"))
    for left, right in zip(inner, inner[1:]):
        assert left.end == right.start


def test_blocks_follow_document_order() -> None:
    text = "# 标题\n\n第一段\n\n- 列表项\n"
    tags = [event.tag for event, _ in markdown_events(text) if event.is_block and event.kind is EventKind.START]
    assert tags == ["heading", "paragraph", "paragraph"]


def test_fenced_code_blocks_produce_no_events() -> None:
    assert list(markdown_events("```\n中文English\n```\n")) == []


def test_front_matter_is_skipped() -> None:
    text = "---\ntitle: 中文English\n---\n\n正文\n"
    assert front_matter_lines(text) == 3
    texts = [event.text for event, _ in markdown_events(text) if event.kind is EventKind.TEXT]
    assert texts == ["正文"]


def test_tokenize_splits_text_by_utf8_length() -> None:
    events = [
        (MarkupEvent(EventKind.TEXT, text="a中"), Span(10, 14)),
        (MarkupEvent(EventKind.CODE, text="x"), Span(14, 17)),
    ]
    assert list(tokenize(events)) == [
        CharToken("a", Span(10, 11)),
        CharToken("中", Span(11, 14)),
        EventToken(MarkupEvent(EventKind.CODE, text="x"), Span(14, 17)),
    ]


def test_lex_yields_one_token_per_character() -> None:
    tokens = list(lex("你好"))
    chars = [token.value for token in tokens if isinstance(token, CharToken)]
    assert chars == ["你", "好"]
    assert isinstance(tokens[0], EventToken) and tokens[0].event.is_block
