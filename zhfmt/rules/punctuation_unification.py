"""zhfmt.rules.punctuation_unification
用途: 在直角引号 (「」『』) 与弯引号 (“”‘’) 之间统一引号样式。
依赖: zhfmt.config。
示例: 简体设置下 ``「文字」`` -> ``“文字”``。
"""
from __future__ import annotations

from ..config import Config, ZhScript
from ..cursor import Cursor
from ..nodes import GroupNode

TO_SIMPLIFIED = {"「": "“", "」": "”", "『": "‘", "』": "’"}
TO_TRADITIONAL = {v: k for k, v in TO_SIMPLIFIED.items()}


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if not isinstance(current, GroupNode):
        return
    if config.unified_punctuation is ZhScript.SIMPLIFIED:
        table = TO_SIMPLIFIED
    elif config.unified_punctuation is ZhScript.TRADITIONAL:
        table = TO_TRADITIONAL
    else:
        return
    for value in (current.start, current.end):
        if value.value in table:
            value.to_be(table[value.value])
