"""zhfmt.rules.punctuation_width
用途: 按配置把标点转换为半角或全角形式。
依赖: zhfmt.char_kind。
示例: ``你好,再见.`` -> ``你好，再见。``。

选项:
- ``halfwidth_punctuation``: 需转为半角的标点，默认 ``()``
- ``fullwidth_punctuation``: 需转为全角的标点，默认 ``，。：；？！“”‘’``

夹在半角文字之间且两侧无空格的半角标点，以及连续的半角标点，保持不变。
"""
from __future__ import annotations

from ..char_kind import is_bracket_punctuation, is_punctuation, is_single_punctuation
from ..config import Config
from ..cursor import Cursor
from ..nodes import CharNode, GroupNode, OffsetValue, is_char_and

TO_HALFWIDTH = {
    "，": ",",
    "。": ".",
    "；": ";",
    "：": ":",
    "？": "?",
    "！": "!",
    "（": "(",
    "）": ")",
    "［": "[",
    "］": "]",
    "｛": "{",
    "｝": "}",
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
}

TO_FULLWIDTH = {
    ",": "，",
    ".": "。",
    ";": "；",
    ":": "：",
    "?": "？",
    "!": "！",
    "(": "（",
    ")": "）",
    "[": "［",
    "]": "］",
    "{": "｛",
    "}": "｝",
}


def _check_char(value: OffsetValue[str], config: Config) -> None:
    half = TO_HALFWIDTH.get(value.value, value.value)
    if half in config.halfwidth_punctuation:
        value.to_be(half)
    full = TO_FULLWIDTH.get(value.value, value.value)
    if full in config.fullwidth_punctuation:
        value.to_be(full)


def _check_quotation(value: OffsetValue[str], config: Config, double: str, single: str) -> None:
    if value.value == '"' and double in config.fullwidth_punctuation:
        value.to_be(double)
    elif value.value == "'" and single in config.fullwidth_punctuation:
        value.to_be(single)
    else:
        _check_char(value, config)


def rule(cursor: Cursor, config: Config) -> None:
    current = cursor.current
    if isinstance(current, GroupNode):
        _check_quotation(current.start, config, "“", "‘")
        _check_quotation(current.end, config, "”", "’")
        return

    if not is_char_and(current, is_punctuation):
        return
    if cursor.is_halfwidth_punctuation_without_space_around():
        return
    if cursor.is_successive_halfwidth_punctuation():
        return

    assert isinstance(current, CharNode)
    ch = current.value.value
    if is_single_punctuation(ch) or is_bracket_punctuation(ch):
        _check_char(current.value, config)
