"""zhfmt.nodes
用途: 定义语法树的数据结构: 字节区间、可改写值、空白以及五种节点。
依赖: Python 标准库 dataclasses、typing。
示例: ``from zhfmt.nodes import OffsetValue, Space, Span``。

节点只由解析器创建，之后只能通过 ``OffsetValue`` 的 ``to_be``/``revert``
记录改写，原始值始终保留，便于例外规则撤销先前的改写。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, List, Optional, TypeVar, Union

from .markup import EventKind, MarkupEvent, Span

__all__ = [
    "Span",
    "OffsetValue",
    "Space",
    "CharNode",
    "HalfwidthContent",
    "FullwidthContent",
    "EventNode",
    "GroupNode",
    "Node",
    "ParagraphNodes",
]

T = TypeVar("T")


@dataclass(slots=True)
class OffsetValue(Generic[T]):
    """带源偏移的可改写值。

    ``modified`` 仅在与 ``original`` 不同时才非空；把值改回原值等价于撤销。
    """

    original: T
    offset: Span
    modified: Optional[T] = None

    @property
    def value(self) -> T:
        """有效值: 改写后的值，若未改写则为原值。"""

        return self.original if self.modified is None else self.modified

    @property
    def is_modified(self) -> bool:
        return self.modified is not None

    def to_be(self, value: T) -> None:
        self.modified = None if value == self.original else value

    def revert(self) -> None:
        self.modified = None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Space:
    """一段空白: 空、单个半角空格或原样保留的任意空白串。"""

    text: str = ""

    EMPTY: ClassVar["Space"]
    ONE: ClassVar["Space"]

    @property
    def is_empty(self) -> bool:
        return not self.text

    @classmethod
    def from_bool(cls, present: bool) -> "Space":
        return cls.ONE if present else cls.EMPTY

    @classmethod
    def from_str(cls, text: str) -> "Space":
        if not text:
            return cls.EMPTY
        if text == " ":
            return cls.ONE
        return cls(text)

    def __bool__(self) -> bool:
        return bool(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        if self.is_empty:
            return "Space.EMPTY"
        if self.text == " ":
            return "Space.ONE"
        return f"Space({self.text!r})"


Space.EMPTY = Space("")
Space.ONE = Space(" ")


@dataclass(slots=True, kw_only=True)
class _Spaced:
    """所有节点共有的尾随空白及其操作。"""

    space_after: OffsetValue[Space]

    @property
    def has_space_after(self) -> bool:
        return not self.space_after.value.is_empty

    def add_space_after(self) -> None:
        self.space_after.to_be(Space.ONE)

    def remove_space_after(self) -> None:
        self.space_after.to_be(Space.EMPTY)

    def modify_space_after(self, space: Space) -> None:
        self.space_after.to_be(space)

    def revert_space_after(self) -> None:
        self.space_after.revert()


@dataclass(slots=True, kw_only=True)
class CharNode(_Spaced):
    """单个原子字符 (标点、符号等)。"""

    value: OffsetValue[str]

    @property
    def offset(self) -> Span:
        return self.value.offset

    def __str__(self) -> str:
        return f"{self.value}{self.space_after}"


@dataclass(slots=True, kw_only=True)
class HalfwidthContent(_Spaced):
    """连续的半角文字。"""

    value: OffsetValue[str]

    @property
    def offset(self) -> Span:
        return self.value.offset

    def __str__(self) -> str:
        return f"{self.value}{self.space_after}"


@dataclass(slots=True, kw_only=True)
class FullwidthContent(_Spaced):
    """连续的全角文字。"""

    value: OffsetValue[str]

    @property
    def offset(self) -> Span:
        return self.value.offset

    def __str__(self) -> str:
        return f"{self.value}{self.space_after}"


@dataclass(slots=True, kw_only=True)
class EventNode(_Spaced):
    """不透明的标记事件，例如强调起止、行内代码或换行。"""

    event: MarkupEvent
    offset: Span

    def __str__(self) -> str:
        return f"<{self.event}>{self.space_after}"


@dataclass(slots=True, kw_only=True)
class GroupNode(_Spaced):
    """一对匹配的引号及其内部节点。"""

    start: OffsetValue[str]
    inner_space_before: OffsetValue[Space]
    nodes: List["Node"]
    end: OffsetValue[str]

    @property
    def offset(self) -> Span:
        return Span(self.start.offset.start, self.end.offset.end)

    def __str__(self) -> str:
        inner = "".join(str(node) for node in self.nodes)
        return f"{self.start}{self.inner_space_before}{inner}{self.end}{self.space_after}"


Node = Union[CharNode, HalfwidthContent, FullwidthContent, EventNode, GroupNode]


def is_char_and(node: Optional[Node], predicate: Callable[[str], bool]) -> bool:
    """节点为字符且其有效值满足 ``predicate``。"""

    return isinstance(node, CharNode) and predicate(node.value.value)


def is_content(node: Optional[Node]) -> bool:
    return isinstance(node, (HalfwidthContent, FullwidthContent))


def is_start_wrapper(node: Optional[Node]) -> bool:
    return isinstance(node, EventNode) and node.event.kind is EventKind.START


def is_end_wrapper(node: Optional[Node]) -> bool:
    return isinstance(node, EventNode) and node.event.kind is EventKind.END


def is_wrapper(node: Optional[Node]) -> bool:
    return is_start_wrapper(node) or is_end_wrapper(node)


def is_code(node: Optional[Node]) -> bool:
    return isinstance(node, EventNode) and node.event.kind is EventKind.CODE


@dataclass
class ParagraphNodes:
    """单个段落的节点列表。"""

    nodes: List[Node]

    def __str__(self) -> str:
        return "".join(str(node) for node in self.nodes)
