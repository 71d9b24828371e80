"""zhfmt.rules.space_punctuation
用途: 调整点号 (逗号、句号、冒号等) 前后的空白。
依赖: zhfmt.char_kind、zhfmt.cursor。
示例: ``文字 ，文字`` -> ``文字，文字``；``foo,bar baz`` 保持不变。

选项:
- ``no_space_before_pause_or_stop``: 删除点号前的空白
  (前面是文字、引号组、行内代码或右括号/右引号时)
- ``space_after_halfwidth_pause_or_stop``: 半角点号后 ``True`` 一个空格，
  ``False`` 无空格，``None`` 保持原样
- ``no_space_after_fullwidth_pause_or_stop``: 删除全角点号后的空白

后一类只在后面是文字、引号组、左括号或行内代码时生效。
"""
from __future__ import annotations

from ..char_kind import (
    is_left_punctuation,
    is_pause_stop_punctuation,
    is_right_punctuation,
    is_wide_or_chinese,
)
from ..config import Config
from ..cursor import Cursor
from ..nodes import GroupNode, Space, is_char_and, is_code, is_content


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not is_char_and(current, is_pause_stop_punctuation):
        return
    if cursor.is_halfwidth_punctuation_without_space_around():
        return
    if cursor.is_successive_halfwidth_punctuation():
        return

    if config.no_space_before_pause_or_stop:
        before = cursor.before_visible()
        if (
            is_content(before)
            or isinstance(before, GroupNode)
            or is_code(before)
            or is_char_and(before, is_right_punctuation)
        ):
            cursor.space_before_holder().remove_space_after()

    after = cursor.after_visible()
    if not (
        is_content(after)
        or isinstance(after, GroupNode)
        or is_code(after)
        or is_char_and(after, is_left_punctuation)
    ):
        return
    holder = cursor.space_after_holder()
    if is_wide_or_chinese(current.value.value):
        if config.no_space_after_fullwidth_pause_or_stop:
            holder.remove_space_after()
    elif config.space_after_halfwidth_pause_or_stop is not None:
        holder.modify_space_after(Space.from_bool(config.space_after_halfwidth_pause_or_stop))
