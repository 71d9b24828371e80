"""zhfmt.rules.space_code
用途: 调整行内代码两侧与文字或其他行内代码之间的空白。
依赖: zhfmt.cursor。
示例: ``文字`code`文字`` -> ``文字 `code` 文字``。

选项 ``space_outside_code``: ``True`` 一个空格，``False`` 无空格，``None`` 保持原样。
"""
from __future__ import annotations

from ..config import Config
from ..cursor import Cursor
from ..nodes import Space, is_code, is_content


def rule(cursor: Cursor, config: Config) -> None:
    if config.space_outside_code is None:
        return
    if not is_code(cursor.current):
        return
    space = Space.from_bool(config.space_outside_code)

    before = cursor.before_visible()
    if is_content(before) or is_code(before):
        cursor.space_before_holder().modify_space_after(space)

    after = cursor.after_visible()
    if is_content(after) or is_code(after):
        cursor.space_after_holder().modify_space_after(space)
