"""zhfmt.rules
用途: 汇总全部改写规则并按固定顺序在节点树上执行。
依赖: zhfmt.cursor、zhfmt.config。
示例: ``run_rules(paragraph.nodes, Config())``。

顺序即约定: 先统一标点宽度与引号样式，再处理各类空白，最后由缩写与
中文单位两条例外规则撤销此前的改写。
"""
from __future__ import annotations

from typing import Callable, List

from ..config import Config
from ..cursor import Cursor
from ..nodes import GroupNode, Node
from . import (
    case_abbrs,
    case_zh_units,
    punctuation_unification,
    punctuation_width,
    space_bracket,
    space_code,
    space_hyper_mark,
    space_letter,
    space_punctuation,
    space_quotation,
)

__all__ = ["Rule", "RULES", "run_rules"]

Rule = Callable[[Cursor, Config], None]

RULES: List[Rule] = [
    punctuation_width.rule,
    punctuation_unification.rule,
    space_letter.rule,
    space_punctuation.rule,
    space_quotation.rule,
    space_bracket.rule,
    space_code.rule,
    space_hyper_mark.rule,
    case_abbrs.rule,
    case_zh_units.rule,
]


def run_rules(nodes: List[Node], config: Config) -> None:
    """单趟遍历: 先递归处理引号组内部，再在当前位置依次执行每条规则。"""

    for index, node in enumerate(nodes):
        if isinstance(node, GroupNode):
            run_rules(node.nodes, config)
        cursor = Cursor(nodes, index)
        for rule in RULES:
            rule(cursor, config)
