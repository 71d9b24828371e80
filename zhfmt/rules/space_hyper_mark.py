"""zhfmt.rules.space_hyper_mark
用途: 把强调、链接等包裹标记内侧的空白移除，使空白只出现在标记之外。
依赖: zhfmt.nodes。
示例: ``[ 链接 ](url)`` -> ``[链接](url)``。

处理四种相邻关系: 起 x 起、止 x 止、起 x 非标记、非标记 x 止。
"""
from __future__ import annotations

from ..config import Config
from ..cursor import Cursor
from ..nodes import is_end_wrapper, is_start_wrapper, is_wrapper


def rule(cursor: Cursor, config: Config) -> None:
    if not config.no_space_inside_hyper_mark:
        return
    current = cursor.current
    after = cursor.after()
    if after is None:
        return
    if not is_wrapper(current) and not is_wrapper(after):
        return
    if (
        (is_start_wrapper(current) and is_start_wrapper(after))
        or (is_end_wrapper(current) and is_end_wrapper(after))
        or (is_start_wrapper(current) and not is_wrapper(after))
        or (not is_wrapper(current) and is_end_wrapper(after))
    ):
        current.remove_space_after()
