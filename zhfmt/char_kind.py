"""zhfmt.char_kind
用途: 将单个字符归类为空格、半角/全角文字或各类中西文标点。
依赖: Python 标准库 enum、functools、unicodedata。
示例: ``from zhfmt.char_kind import CharKind, kind``。
"""
from __future__ import annotations

import unicodedata
from enum import Enum
from functools import lru_cache

__all__ = [
    "CharKind",
    "kind",
    "is_wide",
    "is_letter",
    "is_space",
    "is_chinese_punctuation",
    "is_western_punctuation",
    "is_punctuation",
    "is_pause_stop_punctuation",
    "is_quotation_punctuation",
    "is_bracket_punctuation",
    "is_other_punctuation",
    "is_left_punctuation",
    "is_right_punctuation",
    "is_single_punctuation",
    "is_wide_or_chinese",
    "CHINESE_LEFT_QUOTATION_PUNCTUATION",
    "CHINESE_RIGHT_QUOTATION_PUNCTUATION",
    "WESTERN_QUOTATION_PUNCTUATION",
]

# 中文点号
CHINESE_PAUSE_STOP_PUNCTUATION = "。．，、：；！‼？⁇"

# 中文左右引号按下标一一对应，解析器依赖这一顺序配对。
CHINESE_LEFT_QUOTATION_PUNCTUATION = "「『“‘"
CHINESE_RIGHT_QUOTATION_PUNCTUATION = "」』”’"

CHINESE_LEFT_BRACKET_PUNCTUATION = "（《〈【〖〔［｛"
CHINESE_RIGHT_BRACKET_PUNCTUATION = "）》〉】〗〕］｝"

# 连字符 "-" 按中文其他标点处理。
CHINESE_OTHER_PUNCTUATION = "⸺—…⋯～-–·・‧／"

WESTERN_PAUSE_STOP_PUNCTUATION = ".,:;!?"
WESTERN_QUOTATION_PUNCTUATION = "\"'"
WESTERN_LEFT_BRACKET_PUNCTUATION = "([{"
WESTERN_RIGHT_BRACKET_PUNCTUATION = ")]}"


class CharKind(Enum):
    """字符语义类别。"""

    SPACE = "space"
    LETTER_HALF = "letter_half"
    LETTER_FULL = "letter_full"
    PUNCTUATION_CHINESE_PAUSE_STOP = "punctuation_chinese_pause_stop"
    PUNCTUATION_CHINESE_LEFT_QUOTATION = "punctuation_chinese_left_quotation"
    PUNCTUATION_CHINESE_RIGHT_QUOTATION = "punctuation_chinese_right_quotation"
    PUNCTUATION_CHINESE_LEFT_BRACKET = "punctuation_chinese_left_bracket"
    PUNCTUATION_CHINESE_RIGHT_BRACKET = "punctuation_chinese_right_bracket"
    PUNCTUATION_CHINESE_OTHER = "punctuation_chinese_other"
    PUNCTUATION_WESTERN_PAUSE_STOP = "punctuation_western_pause_stop"
    PUNCTUATION_WESTERN_QUOTATION = "punctuation_western_quotation"
    PUNCTUATION_WESTERN_LEFT_BRACKET = "punctuation_western_left_bracket"
    PUNCTUATION_WESTERN_RIGHT_BRACKET = "punctuation_western_right_bracket"
    PUNCTUATION_WESTERN_OTHER = "punctuation_western_other"
    PUNCTUATION_OTHER = "punctuation_other"
    OTHER = "other"


# 按判定顺序排列的标点表，先中文后西文。
_PUNCTUATION_TABLES = (
    (CHINESE_PAUSE_STOP_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_PAUSE_STOP),
    (CHINESE_LEFT_QUOTATION_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_LEFT_QUOTATION),
    (CHINESE_RIGHT_QUOTATION_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_RIGHT_QUOTATION),
    (CHINESE_LEFT_BRACKET_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_LEFT_BRACKET),
    (CHINESE_RIGHT_BRACKET_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_RIGHT_BRACKET),
    (CHINESE_OTHER_PUNCTUATION, CharKind.PUNCTUATION_CHINESE_OTHER),
    (WESTERN_PAUSE_STOP_PUNCTUATION, CharKind.PUNCTUATION_WESTERN_PAUSE_STOP),
    (WESTERN_QUOTATION_PUNCTUATION, CharKind.PUNCTUATION_WESTERN_QUOTATION),
    (WESTERN_LEFT_BRACKET_PUNCTUATION, CharKind.PUNCTUATION_WESTERN_LEFT_BRACKET),
    (WESTERN_RIGHT_BRACKET_PUNCTUATION, CharKind.PUNCTUATION_WESTERN_RIGHT_BRACKET),
)

_CHINESE_PUNCTUATION_KINDS = frozenset(
    {
        CharKind.PUNCTUATION_CHINESE_PAUSE_STOP,
        CharKind.PUNCTUATION_CHINESE_LEFT_QUOTATION,
        CharKind.PUNCTUATION_CHINESE_RIGHT_QUOTATION,
        CharKind.PUNCTUATION_CHINESE_LEFT_BRACKET,
        CharKind.PUNCTUATION_CHINESE_RIGHT_BRACKET,
        CharKind.PUNCTUATION_CHINESE_OTHER,
    }
)
_WESTERN_PUNCTUATION_KINDS = frozenset(
    {
        CharKind.PUNCTUATION_WESTERN_PAUSE_STOP,
        CharKind.PUNCTUATION_WESTERN_QUOTATION,
        CharKind.PUNCTUATION_WESTERN_LEFT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_RIGHT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_OTHER,
    }
)


def is_wide(ch: str) -> bool:
    """East-Asian width 为 W 或 F 时视为全角。"""

    return unicodedata.east_asian_width(ch) in ("W", "F")


@lru_cache(maxsize=4096)
def kind(ch: str) -> CharKind:
    """返回字符的语义类别。

    判定顺序: 空格分隔符 → 广义文字 (字母、数字、符号, 按宽度区分全半角)
    → 标点 (先查中文表再查西文表, 未收录的 ASCII 标点归为西文其他标点)
    → 其他。
    """

    category = unicodedata.category(ch)
    if category == "Zs":
        return CharKind.SPACE
    if category[0] in ("L", "N", "S"):
        return CharKind.LETTER_FULL if is_wide(ch) else CharKind.LETTER_HALF
    if category[0] == "P":
        for table, table_kind in _PUNCTUATION_TABLES:
            if ch in table:
                return table_kind
        if ch.isascii():
            return CharKind.PUNCTUATION_WESTERN_OTHER
        return CharKind.PUNCTUATION_OTHER
    return CharKind.OTHER


def is_letter(ch: str) -> bool:
    return kind(ch) in (CharKind.LETTER_HALF, CharKind.LETTER_FULL)


def is_space(ch: str) -> bool:
    return kind(ch) is CharKind.SPACE


def is_chinese_punctuation(ch: str) -> bool:
    return kind(ch) in _CHINESE_PUNCTUATION_KINDS


def is_western_punctuation(ch: str) -> bool:
    return kind(ch) in _WESTERN_PUNCTUATION_KINDS


def is_punctuation(ch: str) -> bool:
    return is_chinese_punctuation(ch) or is_western_punctuation(ch)


def is_pause_stop_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_PAUSE_STOP,
        CharKind.PUNCTUATION_WESTERN_PAUSE_STOP,
    )


def is_quotation_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_LEFT_QUOTATION,
        CharKind.PUNCTUATION_CHINESE_RIGHT_QUOTATION,
        CharKind.PUNCTUATION_WESTERN_QUOTATION,
    )


def is_bracket_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_LEFT_BRACKET,
        CharKind.PUNCTUATION_CHINESE_RIGHT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_LEFT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_RIGHT_BRACKET,
    )


def is_other_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_OTHER,
        CharKind.PUNCTUATION_WESTERN_OTHER,
        CharKind.PUNCTUATION_OTHER,
    )


def is_left_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_LEFT_QUOTATION,
        CharKind.PUNCTUATION_CHINESE_LEFT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_LEFT_BRACKET,
    )


def is_right_punctuation(ch: str) -> bool:
    return kind(ch) in (
        CharKind.PUNCTUATION_CHINESE_RIGHT_QUOTATION,
        CharKind.PUNCTUATION_CHINESE_RIGHT_BRACKET,
        CharKind.PUNCTUATION_WESTERN_RIGHT_BRACKET,
    )


def is_single_punctuation(ch: str) -> bool:
    """点号或其他单独出现的标点 (非引号、非括号)。"""

    return is_pause_stop_punctuation(ch) or is_other_punctuation(ch)


def is_wide_or_chinese(ch: str) -> bool:
    return is_wide(ch) or is_chinese_punctuation(ch)
