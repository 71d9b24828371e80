"""端到端测试: 默认配置下的改写结果、诊断、忽略指令与幂等性。"""
from __future__ import annotations

from dataclasses import replace

import pytest

from zhfmt import Config, format_text, run
from zhfmt.errors import CharError, SpaceError, UnexpectedEnd
from zhfmt.markup import Span
from zhfmt.nodes import Space


def _strip_spaces(text: str) -> str:
    return text.replace(" ", "")


def test_mixed_content_gets_space() -> None:
    report = run("中文English")
    assert report.text == "中文 English"
    assert report.diagnostics == [SpaceError(Space.EMPTY, Space.ONE, Span(6, 6))]
    assert report.changed


def test_diagnostics_in_reverse_document_order() -> None:
    report = run("中文English中文")
    assert [d.offset for d in report.diagnostics] == [Span(13, 13), Span(6, 6)]


def test_letters_only_input_changes_only_spaces() -> None:
    text = "中文English中文 and  更多text内容"
    report = run(text)
    assert all(isinstance(d, SpaceError) for d in report.diagnostics)
    assert _strip_spaces(report.text) == _strip_spaces(text)


def test_full_default_pipeline() -> None:
    text = "中文English混排,以及`code`和(括号)内容."
    assert format_text(text) == "中文 English 混排，以及 `code` 和 (括号) 内容。"


def test_quotation_styles_unified() -> None:
    assert format_text("他说：「你好『世界』」。") == "他说：“你好‘世界’”。"


@pytest.mark.parametrize(
    "text",
    [
        "运行时 + 编译器 vs. 只包含运行时",
        "2019年06月26号",
        "3 minite(s) left",
        "what's up",
    ],
)
def test_exceptions_keep_text(text: str) -> None:
    report = run(text)
    assert report.text == text
    assert report.diagnostics == []


@pytest.mark.parametrize(
    "text",
    [
        "中文English混排,以及`code`和(括号)内容.",
        "他说：「你好『世界』」。",
        "*强调*文本和**English**混排。",
        "[ 链接 ](https://example.com)后面",
    ],
)
def test_second_pass_is_clean(text: str) -> None:
    first = format_text(text)
    second = run(first)
    assert second.text == first
    assert second.diagnostics == []


def test_spaces_move_outside_emphasis() -> None:
    assert format_text("*强调*文本和**English**混排。") == "*强调*文本和 **English** 混排。"


def test_unclosed_quote_skips_only_its_paragraph() -> None:
    report = run("他说：“你好\n\n下一段English中文")
    assert report.text == "他说：“你好\n\n下一段 English 中文"
    assert len(report.parse_errors) == 1
    assert isinstance(report.parse_errors[0], UnexpectedEnd)


def test_trim_space() -> None:
    report = run("  中文  ")
    assert report.text == "中文"
    assert len(report.diagnostics) == 2
    assert run("   ").text == ""
    assert format_text("  中文  ", replace(Config(), trim_space=False)) == "  中文  "


def test_trim_space_keeps_leading_code_block() -> None:
    text = "    缩进代码abc\n\n正文abc"
    first = run(text)
    assert first.text == "    缩进代码abc\n\n正文 abc"
    assert [d.offset for d in first.diagnostics] == [Span(27, 27)]
    second = run(first.text)
    assert second.text == first.text
    assert second.diagnostics == []


def test_trim_space_keeps_unclosed_fence_content() -> None:
    text = "正文\n\n```\ncode   "
    report = run(text)
    assert report.text == text
    assert report.diagnostics == []


def test_ignore_directive() -> None:
    text = "<!-- zhfmt ignore: 你好,再见 -->\n\n你好,再见."
    report = run(text)
    assert report.text == "<!-- zhfmt ignore: 你好,再见 -->\n\n你好,再见。"
    assert [type(d) for d in report.diagnostics] == [CharError]


def test_ignore_named_group_from_config() -> None:
    config = replace(Config(), ignores=[r"你好(?P<ignore>,)"])
    assert format_text("你好,再见.", config) == "你好,再见。"


def test_invalid_document_regex_is_skipped() -> None:
    text = "<!-- zhfmt ignore: ([ -->\n\n中文English"
    assert format_text(text) == "<!-- zhfmt ignore: ([ -->\n\n中文 English"


def test_disabled_document() -> None:
    text = "<!-- zhfmt disabled -->\n\n你好,再见."
    report = run(text)
    assert report.text == text
    assert report.diagnostics == []


def test_front_matter_untouched() -> None:
    text = "---\ntitle: 中文English\n---\n\n中文English\n"
    assert format_text(text) == "---\ntitle: 中文English\n---\n\n中文 English\n"


def test_code_blocks_untouched() -> None:
    text = "```\n中文English\n```\n\n    缩进English\n"
    assert format_text(text) == text


def test_space_error_labels() -> None:
    assert SpaceError(Space.ONE, Space.EMPTY, Span(0, 1)).label() == "should be no space here"
    assert SpaceError(Space.EMPTY, Space.ONE, Span(0, 0)).label() == "should be one space here"
    assert SpaceError(Space.EMPTY, Space("\t"), Span(0, 0)).label() == 'should be "\t"'
