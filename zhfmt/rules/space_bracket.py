"""zhfmt.rules.space_bracket
用途: 调整括号内外的空白。
依赖: zhfmt.char_kind、zhfmt.cursor。
示例: ``文字(English)文字`` -> ``文字 (English) 文字``。

选项:
- ``no_space_inside_bracket``: 删除紧贴括号内侧的空白
- ``space_outside_halfwidth_bracket``: 半角括号外侧 ``True`` 一个空格，
  ``False`` 无空格，``None`` 保持原样
- ``no_space_outside_fullwidth_bracket``: 删除全角括号外侧的空白

两侧都紧贴半角文字的半角括号 (``minute(s)``) 以及紧跟在半角文字后的空括号
(``foo()``) 不处理外侧；豁免按括号对判定，``中文(1)English`` 的两个括号都保持原样。
"""
from __future__ import annotations

from typing import List, Optional

from ..char_kind import (
    is_bracket_punctuation,
    is_left_punctuation,
    is_right_punctuation,
    is_wide_or_chinese,
)
from ..config import Config
from ..cursor import Cursor
from ..nodes import GroupNode, HalfwidthContent, Node, Space, is_char_and, is_code, is_content


def _is_left_bracket(ch: str) -> bool:
    return is_bracket_punctuation(ch) and is_left_punctuation(ch)


def _is_right_bracket(ch: str) -> bool:
    return is_bracket_punctuation(ch) and is_right_punctuation(ch)


def _is_flush_halfwidth(node: Optional[Node]) -> bool:
    return isinstance(node, HalfwidthContent) and not node.has_space_after


def _sibling(nodes: List[Node], index: int) -> Optional[Node]:
    return nodes[index] if 0 <= index < len(nodes) else None


def _is_flush_both_sides(nodes: List[Node], index: int) -> bool:
    return (
        not nodes[index].has_space_after
        and _is_flush_halfwidth(_sibling(nodes, index - 1))
        and isinstance(_sibling(nodes, index + 1), HalfwidthContent)
    )


def _is_left_exempt(nodes: List[Node], index: int) -> bool:
    if _is_flush_both_sides(nodes, index):
        return True
    return (
        not nodes[index].has_space_after
        and _is_flush_halfwidth(_sibling(nodes, index - 1))
        and is_char_and(_sibling(nodes, index + 1), _is_right_bracket)
    )


def _matching_left(nodes: List[Node], index: int) -> Optional[int]:
    depth = 0
    for i in range(index - 1, -1, -1):
        if is_char_and(nodes[i], _is_right_bracket):
            depth += 1
        elif is_char_and(nodes[i], _is_left_bracket):
            if depth == 0:
                return i
            depth -= 1
    return None


def _matching_right(nodes: List[Node], index: int) -> Optional[int]:
    depth = 0
    for i in range(index + 1, len(nodes)):
        if is_char_and(nodes[i], _is_left_bracket):
            depth += 1
        elif is_char_and(nodes[i], _is_right_bracket):
            if depth == 0:
                return i
            depth -= 1
    return None


def _is_exempt(nodes: List[Node], index: int, left: bool) -> bool:
    """豁免按括号对判定: 任一侧满足条件时左右括号一起跳过。"""

    if left:
        if _is_left_exempt(nodes, index):
            return True
        match = _matching_right(nodes, index)
        return match is not None and _is_flush_both_sides(nodes, match)
    if _is_flush_both_sides(nodes, index):
        return True
    match = _matching_left(nodes, index)
    return match is not None and _is_left_exempt(nodes, match)


def _apply_outside(holder: Node, wide: bool, config: Config) -> None:
    if wide:
        if config.no_space_outside_fullwidth_bracket:
            holder.remove_space_after()
    elif config.space_outside_halfwidth_bracket is not None:
        holder.modify_space_after(Space.from_bool(config.space_outside_halfwidth_bracket))


def _is_outside_neighbour(node: Optional[Node]) -> bool:
    return is_content(node) or is_code(node) or isinstance(node, GroupNode)


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not is_char_and(current, is_bracket_punctuation):
        return
    ch = current.value.value
    left = is_left_punctuation(ch)

    if config.no_space_inside_bracket:
        holder = cursor.space_after_holder() if left else cursor.space_before_holder()
        if holder is not None:
            holder.remove_space_after()

    if _is_exempt(cursor.nodes, cursor.index, left):
        return

    wide = is_wide_or_chinese(ch)
    if left:
        before = cursor.before_visible()
        if _is_outside_neighbour(before) or is_char_and(before, _is_right_bracket):
            _apply_outside(cursor.space_before_holder(), wide, config)
    else:
        after = cursor.after_visible()
        if _is_outside_neighbour(after) or is_char_and(after, _is_left_bracket):
            _apply_outside(cursor.space_after_holder(), wide, config)
