"""zhfmt.lexer
用途: 把标记事件流展开为逐字符 token，非文本事件原样透传。
依赖: zhfmt.markup。
示例: ``tokens = list(lex("中文English"))``。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .markup import EventKind, MarkupEvent, Span, markdown_events

__all__ = ["CharToken", "EventToken", "Token", "tokenize", "lex"]


@dataclass(frozen=True, slots=True)
class CharToken:
    """文本事件中的单个字符及其字节区间。"""

    value: str
    span: Span


@dataclass(frozen=True, slots=True)
class EventToken:
    """透传的非文本标记事件。"""

    event: MarkupEvent
    span: Span


Token = Union[CharToken, EventToken]


def tokenize(events: Iterable[Tuple[MarkupEvent, Span]]) -> Iterator[Token]:
    """逐字符展开文本事件，偏移按 UTF-8 字节长度累加。"""

    for event, span in events:
        if event.kind is not EventKind.TEXT:
            yield EventToken(event, span)
            continue
        offset = span.start
        for ch in event.text:
            end = offset + len(ch.encode("utf-8"))
            yield CharToken(ch, Span(offset, end))
            offset = end


def lex(text: str) -> Iterator[Token]:
    return tokenize(markdown_events(text))
