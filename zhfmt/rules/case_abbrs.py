"""zhfmt.rules.case_abbrs
用途: 撤销对缩写结尾点号的改写，例如 ``vs.``、``e.g.``。
依赖: zhfmt.cursor。
示例: ``运行时 vs. 编译器`` 中的 ``.`` 不会变成 ``。``。
"""
from __future__ import annotations

from ..config import Config
from ..cursor import Cursor
from ..nodes import CharNode, HalfwidthContent


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not isinstance(current, CharNode) or current.value.original != ".":
        return

    # 缩写中间的点号，例如 e.g 中的第一个点
    if isinstance(cursor.after(), HalfwidthContent) and current.space_after.original.is_empty:
        return

    if cursor.match_abbr(config.skip_abbrs):
        current.value.revert()
        current.revert_space_after()
