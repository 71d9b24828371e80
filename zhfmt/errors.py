"""zhfmt.errors
用途: 定义解析错误 (异常) 与改写诊断 (数据类)。
依赖: zhfmt.nodes。
示例: ``from zhfmt.errors import ParseError, SpaceError``。

解析错误只影响所在段落；改写诊断不是失败，而是每处改写的记录。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .markup import Span
from .nodes import Space

__all__ = [
    "ParseError",
    "UnexpectedEnd",
    "UnclosedQuotationMark",
    "CharError",
    "StringError",
    "SpaceError",
    "Diagnostic",
]


class ParseError(Exception):
    """段落解析失败的基类。"""

    message = "parse error."

    def __init__(self, offset: Optional[Span] = None) -> None:
        super().__init__(self.message)
        self.offset = offset

    def label(self) -> Optional[str]:
        return None

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), self.offset))


class UnexpectedEnd(ParseError):
    """段落或引号组尚未闭合时 token 流已结束。"""

    message = "unexpected end."


class UnclosedQuotationMark(ParseError):
    """出现了没有对应左引号的右引号。"""

    message = "unclosed quotation mark."

    def __init__(self, value: str, offset: Span) -> None:
        super().__init__(offset)
        self.value = value

    def label(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True, slots=True)
class CharError:
    original: str
    modified: str
    offset: Span

    message = "char error."

    def label(self) -> str:
        return self.modified


@dataclass(frozen=True, slots=True)
class StringError:
    original: str
    modified: str
    offset: Span

    message = "string error."

    def label(self) -> str:
        return self.modified


@dataclass(frozen=True, slots=True)
class SpaceError:
    original: Space
    modified: Space
    offset: Span

    message = "space error."

    def label(self) -> str:
        if self.modified.is_empty:
            return "should be no space here"
        if self.modified == Space.ONE:
            return "should be one space here"
        return f'should be "{self.modified}"'


Diagnostic = Union[CharError, StringError, SpaceError]
