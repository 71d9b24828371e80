"""zhfmt.parser
用途: 递归下降解析 token 流，按段落构建节点树并配对引号。
依赖: zhfmt.lexer、zhfmt.nodes、zhfmt.char_kind。
示例: ``paragraphs = Parser(lex(text)).parse()``。
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Union

from .char_kind import (
    CHINESE_LEFT_QUOTATION_PUNCTUATION,
    CHINESE_RIGHT_QUOTATION_PUNCTUATION,
    WESTERN_QUOTATION_PUNCTUATION,
    CharKind,
    kind,
)
from .errors import ParseError, UnclosedQuotationMark, UnexpectedEnd
from .lexer import CharToken, EventToken, Token
from .markup import EventKind, Span
from .nodes import (
    CharNode,
    EventNode,
    FullwidthContent,
    GroupNode,
    HalfwidthContent,
    Node,
    OffsetValue,
    ParagraphNodes,
    Space,
)

__all__ = ["Parser", "ParseResult"]

LOGGER = logging.getLogger("zhfmt.parser")

ParseResult = Union[ParagraphNodes, ParseError]


def _is_block_start(token: Optional[Token]) -> bool:
    return (
        isinstance(token, EventToken)
        and token.event.is_block
        and token.event.kind is EventKind.START
    )


def _is_block_end(token: Optional[Token]) -> bool:
    return (
        isinstance(token, EventToken)
        and token.event.is_block
        and token.event.kind is EventKind.END
    )


def _is_halfwidth_letter(token: Optional[Token]) -> bool:
    return isinstance(token, CharToken) and kind(token.value) is CharKind.LETTER_HALF


class Parser:
    """带前一个/当前/下一个 token 缓冲的递归下降解析器。"""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self.prev: Optional[Token] = None
        self.current: Optional[Token] = next(self._tokens, None)
        self.next: Optional[Token] = next(self._tokens, None)

    def advance(self) -> None:
        self.prev = self.current
        self.current = self.next
        self.next = next(self._tokens, None)

    def parse(self) -> List[ParseResult]:
        """逐段落解析；出错的段落以异常对象占位，不影响后续段落。"""

        results: List[ParseResult] = []
        while self.current is not None:
            token = self.current
            if not _is_block_start(token):
                self.advance()
                continue
            self.advance()
            try:
                results.append(self._parse_paragraph(token.span))
            except ParseError as exc:
                LOGGER.debug("段落解析失败 (offset=%s): %s", exc.offset, exc)
                self._skip_block()
                results.append(exc)
        return results

    def _skip_block(self) -> None:
        while self.current is not None and not _is_block_end(self.current):
            self.advance()
        if self.current is not None:
            self.advance()

    def _parse_paragraph(self, start: Span) -> ParagraphNodes:
        nodes: List[Node] = []
        while True:
            if self.current is None:
                raise UnexpectedEnd(start)
            if _is_block_end(self.current):
                self.advance()
                return ParagraphNodes(nodes)
            nodes.append(self._parse_node())

    def _is_contraction(self) -> bool:
        """当前 ``'`` 夹在两个半角字母之间，视为缩写或所有格。"""

        return (
            isinstance(self.current, CharToken)
            and self.current.value == "'"
            and _is_halfwidth_letter(self.prev)
            and _is_halfwidth_letter(self.next)
        )

    def _parse_node(self) -> Node:
        token = self.current
        if token is None or _is_block_end(token):
            raise UnexpectedEnd(token.span if token is not None else None)

        if isinstance(token, EventToken):
            self.advance()
            return EventNode(
                event=token.event,
                offset=token.span,
                space_after=self._parse_space(token.span.end),
            )

        ch = token.value
        char_kind = kind(ch)
        if char_kind in (CharKind.LETTER_HALF, CharKind.LETTER_FULL):
            return self._parse_content(char_kind)
        if ch in CHINESE_LEFT_QUOTATION_PUNCTUATION:
            index = CHINESE_LEFT_QUOTATION_PUNCTUATION.index(ch)
            return self._parse_group(CHINESE_RIGHT_QUOTATION_PUNCTUATION[index])
        if ch in CHINESE_RIGHT_QUOTATION_PUNCTUATION:
            raise UnclosedQuotationMark(ch, token.span)
        if ch in WESTERN_QUOTATION_PUNCTUATION and not self._is_contraction():
            return self._parse_group(ch)

        self.advance()
        return CharNode(
            value=OffsetValue(ch, token.span),
            space_after=self._parse_space(token.span.end),
        )

    def _parse_content(self, char_kind: CharKind) -> Node:
        start = self.current.span.start
        end = start
        chars: List[str] = []
        while isinstance(self.current, CharToken) and kind(self.current.value) is char_kind:
            chars.append(self.current.value)
            end = self.current.span.end
            self.advance()
        value = OffsetValue("".join(chars), Span(start, end))
        space_after = self._parse_space(end)
        if char_kind is CharKind.LETTER_HALF:
            return HalfwidthContent(value=value, space_after=space_after)
        return FullwidthContent(value=value, space_after=space_after)

    def _parse_group(self, closer: str) -> GroupNode:
        opener = self.current
        self.advance()
        inner_space_before = self._parse_space(opener.span.end)
        nodes: List[Node] = []
        while True:
            token = self.current
            if token is None or _is_block_end(token):
                raise UnexpectedEnd(opener.span)
            if isinstance(token, CharToken) and token.value == closer and not self._is_contraction():
                break
            nodes.append(self._parse_node())
        self.advance()
        return GroupNode(
            start=OffsetValue(opener.value, opener.span),
            inner_space_before=inner_space_before,
            nodes=nodes,
            end=OffsetValue(token.value, token.span),
            space_after=self._parse_space(token.span.end),
        )

    def _parse_space(self, anchor: int) -> OffsetValue[Space]:
        """贪婪读取空白字符，区间锚定在前一节点的结束偏移。"""

        end = anchor
        chars: List[str] = []
        while isinstance(self.current, CharToken) and kind(self.current.value) is CharKind.SPACE:
            chars.append(self.current.value)
            end = self.current.span.end
            self.advance()
        return OffsetValue(Space.from_str("".join(chars)), Span(anchor, end))
