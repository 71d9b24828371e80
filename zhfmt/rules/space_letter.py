"""zhfmt.rules.space_letter
用途: 调整相邻文字之间的空白。
依赖: zhfmt.cursor。
示例: ``中文English`` -> ``中文 English``。

选项:
- ``space_between_halfwidth_content``: 半角文字之间保留一个空格
- ``no_space_between_fullwidth_content``: 全角文字之间不留空格
- ``space_between_mixedwidth_content``: 全半角之间 ``True`` 一个空格，
  ``False`` 无空格，``None`` 保持原样；全角一侧为 ``skip_zh_units`` 中的单位时跳过

空白总落在包裹标记之外，例如 ``*a*啊`` -> ``*a* 啊``。
"""
from __future__ import annotations

from ..config import Config
from ..cursor import Cursor
from ..nodes import FullwidthContent, HalfwidthContent, Space, is_content


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    after = cursor.after_visible()
    if not is_content(current) or not is_content(after):
        return
    holder = cursor.space_after_holder()

    if isinstance(current, HalfwidthContent) and isinstance(after, HalfwidthContent):
        if config.space_between_halfwidth_content:
            holder.add_space_after()
    elif isinstance(current, FullwidthContent) and isinstance(after, FullwidthContent):
        if config.no_space_between_fullwidth_content:
            holder.remove_space_after()
    else:
        if config.space_between_mixedwidth_content is None:
            return
        fullwidth = current if isinstance(current, FullwidthContent) else after
        if fullwidth.value.value in config.skip_zh_units:
            return
        holder.modify_space_after(Space.from_bool(config.space_between_mixedwidth_content))
