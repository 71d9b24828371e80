"""字符分类与派生谓词的单元测试。"""
from __future__ import annotations

import pytest

from zhfmt.char_kind import (
    CharKind,
    is_bracket_punctuation,
    is_left_punctuation,
    is_letter,
    is_punctuation,
    is_right_punctuation,
    is_single_punctuation,
    is_wide,
    is_wide_or_chinese,
    kind,
)


@pytest.mark.parametrize(
    ("ch", "expected"),
    [
        (" ", CharKind.SPACE),
        ("　", CharKind.SPACE),
        ("a", CharKind.LETTER_HALF),
        ("1", CharKind.LETTER_HALF),
        ("+", CharKind.LETTER_HALF),
        ("中", CharKind.LETTER_FULL),
        ("１", CharKind.LETTER_FULL),
        ("，", CharKind.PUNCTUATION_CHINESE_PAUSE_STOP),
        ("：", CharKind.PUNCTUATION_CHINESE_PAUSE_STOP),
        ("“", CharKind.PUNCTUATION_CHINESE_LEFT_QUOTATION),
        ("」", CharKind.PUNCTUATION_CHINESE_RIGHT_QUOTATION),
        ("（", CharKind.PUNCTUATION_CHINESE_LEFT_BRACKET),
        ("】", CharKind.PUNCTUATION_CHINESE_RIGHT_BRACKET),
        ("…", CharKind.PUNCTUATION_CHINESE_OTHER),
        ("-", CharKind.PUNCTUATION_CHINESE_OTHER),
        (",", CharKind.PUNCTUATION_WESTERN_PAUSE_STOP),
        ('"', CharKind.PUNCTUATION_WESTERN_QUOTATION),
        ("(", CharKind.PUNCTUATION_WESTERN_LEFT_BRACKET),
        ("]", CharKind.PUNCTUATION_WESTERN_RIGHT_BRACKET),
        ("#", CharKind.PUNCTUATION_WESTERN_OTHER),
        ("¡", CharKind.PUNCTUATION_OTHER),
        ("\n", CharKind.OTHER),
    ],
)
def test_kind(ch: str, expected: CharKind) -> None:
    assert kind(ch) is expected


def test_width_detection() -> None:
    assert is_wide("中")
    assert is_wide("，")
    assert not is_wide("a")
    # 弯引号宽度不确定，但属于中文标点
    assert not is_wide("“")
    assert is_wide_or_chinese("“")
    assert not is_wide_or_chinese('"')


def test_derived_predicates() -> None:
    assert is_letter("a") and is_letter("中")
    assert not is_letter(",")
    assert is_punctuation("，") and is_punctuation("!")
    assert not is_punctuation("+")
    assert is_left_punctuation("（") and is_left_punctuation("「")
    assert is_right_punctuation(")") and is_right_punctuation("”")
    assert is_bracket_punctuation("【") and not is_bracket_punctuation("“")
    assert is_single_punctuation("。") and is_single_punctuation("…")
    assert not is_single_punctuation("(")
    assert not is_single_punctuation('"')
