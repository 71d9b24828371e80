"""zhfmt.rules.space_quotation
用途: 调整引号组内外的空白。
依赖: zhfmt.char_kind、zhfmt.cursor。
示例: ``文字“ 文字 ”文字`` -> ``文字“文字”文字``。

选项:
- ``no_space_inside_quotation``: 删除紧贴引号内侧的空白
- ``space_outside_halfwidth_quotation``: 半角引号外侧 ``True`` 一个空格，
  ``False`` 无空格，``None`` 保持原样
- ``no_space_outside_fullwidth_quotation``: 删除全角或中文引号外侧的空白

外侧只在邻居是文字、行内代码或另一个引号组时处理；两个引号组相邻时，
任意一侧为全角即按全角处理。宽度按改写后的有效引号判断。
"""
from __future__ import annotations

from typing import Optional

from ..char_kind import is_left_punctuation, is_right_punctuation, is_wide_or_chinese
from ..config import Config
from ..cursor import Cursor
from ..nodes import GroupNode, Node, Space, is_char_and, is_code, is_content


def _is_outside_neighbour(node: Optional[Node]) -> bool:
    return is_content(node) or is_code(node) or isinstance(node, GroupNode)


def _apply_outside(holder: Node, wide: bool, config: Config) -> None:
    if wide:
        if config.no_space_outside_fullwidth_quotation:
            holder.remove_space_after()
    elif config.space_outside_halfwidth_quotation is not None:
        holder.modify_space_after(Space.from_bool(config.space_outside_halfwidth_quotation))


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not isinstance(current, GroupNode):
        return

    if config.no_space_inside_quotation:
        nodes = current.nodes
        if not nodes or not is_char_and(nodes[0], is_right_punctuation):
            current.inner_space_before.to_be(Space.EMPTY)
        if nodes and not is_char_and(nodes[-1], is_left_punctuation):
            nodes[-1].remove_space_after()

    if (
        not config.no_space_outside_fullwidth_quotation
        and config.space_outside_halfwidth_quotation is None
    ):
        return

    before = cursor.before_visible()
    if _is_outside_neighbour(before):
        wide = is_wide_or_chinese(current.start.value) or (
            isinstance(before, GroupNode) and is_wide_or_chinese(before.end.value)
        )
        _apply_outside(cursor.space_before_holder(), wide, config)

    after = cursor.after_visible()
    if _is_outside_neighbour(after):
        wide = is_wide_or_chinese(current.end.value) or (
            isinstance(after, GroupNode) and is_wide_or_chinese(after.start.value)
        )
        _apply_outside(cursor.space_after_holder(), wide, config)
