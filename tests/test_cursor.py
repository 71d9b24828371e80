"""Cursor 邻居查询、空白持有者与缩写匹配的测试。"""
from __future__ import annotations

from typing import List

from zhfmt.cursor import Cursor
from zhfmt.lexer import lex
from zhfmt.nodes import Node, is_end_wrapper, is_start_wrapper
from zhfmt.parser import Parser


def _nodes(text: str) -> List[Node]:
    return Parser(lex(text)).parse()[0].nodes


def test_visible_neighbours_skip_wrappers() -> None:
    nodes = _nodes("中文*English*")
    cursor = Cursor(nodes, 0)
    assert cursor.before() is None
    assert is_start_wrapper(cursor.after())
    assert cursor.after_visible() is nodes[2]

    cursor = Cursor(nodes, 2)
    assert is_start_wrapper(cursor.before())
    assert cursor.before_visible() is nodes[0]
    assert cursor.after_visible() is None


def test_space_holder_is_outside_closing_wrapper() -> None:
    nodes = _nodes("*中文*English")
    cursor = Cursor(nodes, 1)
    holder = cursor.space_after_holder()
    assert is_end_wrapper(holder)
    assert holder is nodes[2]
    assert Cursor(nodes, 3).space_before_holder() is nodes[2]


def test_space_holder_before_opening_wrapper() -> None:
    nodes = _nodes("中文*English*")
    assert Cursor(nodes, 0).space_after_holder() is nodes[0]
    assert Cursor(nodes, 2).space_before_holder() is nodes[0]
    assert Cursor(nodes, 2).space_after_holder() is None


def test_halfwidth_punctuation_between_letters() -> None:
    nodes = _nodes("1,000")
    assert Cursor(nodes, 1).is_halfwidth_punctuation_without_space_around()
    nodes = _nodes("1, 000")
    assert not Cursor(nodes, 1).is_halfwidth_punctuation_without_space_around()


def test_successive_halfwidth_punctuation() -> None:
    nodes = _nodes("Hi!?")
    assert Cursor(nodes, 1).is_successive_halfwidth_punctuation()
    assert Cursor(nodes, 2).is_successive_halfwidth_punctuation()
    nodes = _nodes("Hi! ok")
    assert not Cursor(nodes, 1).is_successive_halfwidth_punctuation()


def test_match_abbr() -> None:
    nodes = _nodes("e.g.")
    assert Cursor(nodes, 3).match_abbr(["e.g."])
    assert not Cursor(nodes, 3).match_abbr(["E.G."])

    nodes = _nodes("a.k.a.")
    assert Cursor(nodes, 5).match_abbr(["a.k.a"])

    nodes = _nodes("Mr. Smith")
    assert Cursor(nodes, 1).match_abbr(["Mr."])
    assert not Cursor(nodes, 1).match_abbr(["Mrs."])
