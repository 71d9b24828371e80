"""zhfmt.cursor
用途: 在同级节点列表上定位，提供前后邻居 (原始与可见) 查询和空白位置查找。
依赖: zhfmt.nodes、zhfmt.char_kind。
示例: ``cursor = Cursor(nodes, 3); cursor.after_visible()``。

"可见" 指跳过强调、链接等包裹标记的起止事件。两个可见节点之间的空白
由 ``space_*_holder`` 决定落在哪个节点上: 紧随前一可见节点之后的最后一个
结束标记，没有则为前一可见节点本身，这样插入的空格总在包裹标记之外。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .char_kind import is_western_punctuation
from .nodes import CharNode, HalfwidthContent, Node, is_end_wrapper, is_wrapper

__all__ = ["Cursor"]


@dataclass
class Cursor:
    nodes: List[Node]
    index: int

    @property
    def current(self) -> Node:
        return self.nodes[self.index]

    def before(self) -> Optional[Node]:
        return self.nodes[self.index - 1] if self.index > 0 else None

    def after(self) -> Optional[Node]:
        return self.nodes[self.index + 1] if self.index + 1 < len(self.nodes) else None

    def _before_visible_index(self) -> Optional[int]:
        for i in range(self.index - 1, -1, -1):
            if not is_wrapper(self.nodes[i]):
                return i
        return None

    def _after_visible_index(self) -> Optional[int]:
        for i in range(self.index + 1, len(self.nodes)):
            if not is_wrapper(self.nodes[i]):
                return i
        return None

    def before_visible(self) -> Optional[Node]:
        i = self._before_visible_index()
        return None if i is None else self.nodes[i]

    def after_visible(self) -> Optional[Node]:
        i = self._after_visible_index()
        return None if i is None else self.nodes[i]

    def _gap_holder(self, left: int, right: int) -> Node:
        holder = left
        while holder + 1 < right and is_end_wrapper(self.nodes[holder + 1]):
            holder += 1
        return self.nodes[holder]

    def space_before_holder(self) -> Optional[Node]:
        """持有 ``before_visible`` 与当前节点之间空白的节点。"""

        i = self._before_visible_index()
        if i is None:
            return None
        return self._gap_holder(i, self.index)

    def space_after_holder(self) -> Optional[Node]:
        """持有当前节点与 ``after_visible`` 之间空白的节点。"""

        i = self._after_visible_index()
        if i is None:
            return None
        return self._gap_holder(self.index, i)

    def is_halfwidth_punctuation_without_space_around(self) -> bool:
        """半角标点紧贴在两段半角文字之间，例如 ``1,000`` 或 ``a/b``。"""

        before, current, after = self.before(), self.current, self.after()
        return (
            isinstance(current, CharNode)
            and is_western_punctuation(current.value.value)
            and not current.has_space_after
            and isinstance(before, HalfwidthContent)
            and not before.has_space_after
            and isinstance(after, HalfwidthContent)
        )

    def is_successive_halfwidth_punctuation(self) -> bool:
        """与前一个或后一个原始半角标点紧挨着，例如 ``...`` 或 ``!?``。

        标点身份取原始值，空白取当前有效值，已被改为半角的全角标点不算在内。
        """

        current = self.current
        if not isinstance(current, CharNode) or not is_western_punctuation(current.value.original):
            return False
        before = self.before()
        if (
            isinstance(before, CharNode)
            and is_western_punctuation(before.value.original)
            and not before.has_space_after
        ):
            return True
        after = self.after()
        return (
            isinstance(after, CharNode)
            and is_western_punctuation(after.value.original)
            and not current.has_space_after
        )

    def match_abbr(self, abbrs: Iterable[str]) -> bool:
        """当前的点号与其前面紧贴的文字、标点能否组成配置中的缩写 (区分大小写)。"""

        targets = {abbr if abbr.endswith(".") else abbr + "." for abbr in abbrs if abbr}
        collected = "."
        for i in range(self.index - 1, -1, -1):
            node = self.nodes[i]
            if not isinstance(node, (HalfwidthContent, CharNode)):
                break
            if not node.space_after.original.is_empty:
                break
            collected = node.value.original + collected
            if collected in targets:
                return True
        return False
