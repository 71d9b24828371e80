"""zhfmt.rules.case_zh_units
用途: 数字紧跟中文单位时撤销数字前后的空白改写，保持 ``2019年`` 而非 ``2019 年``。
依赖: zhfmt.char_kind、zhfmt.cursor。
示例: ``2019年06月26号`` 保持不变。
"""
from __future__ import annotations

from ..char_kind import is_wide
from ..config import Config
from ..cursor import Cursor
from ..nodes import FullwidthContent, HalfwidthContent


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not isinstance(current, HalfwidthContent):
        return
    if not all(ch.isnumeric() and not is_wide(ch) for ch in current.value.value):
        return

    after = cursor.after_visible()
    if not isinstance(after, FullwidthContent) or after.value.value not in config.skip_zh_units:
        return

    before_holder = cursor.space_before_holder()
    if before_holder is not None:
        before_holder.revert_space_after()
    cursor.space_after_holder().revert_space_after()
