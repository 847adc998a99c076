import pytest

import sexpfmt
from sexpfmt import NIL, Atom, List
from sexpfmt.syntax import SyntaxNode


def _list(kind, *children):
    return SyntaxNode(kind, 0, 0, [SyntaxNode("(", 0, 1), *children])


def test_build_atom_uses_source_slice():
    source = b"(x)"
    assert sexpfmt.build(SyntaxNode("atom", 1, 2), source) == Atom("x")


def test_build_close_is_nil():
    assert sexpfmt.build(SyntaxNode(")", 0, 1), b")") is NIL


def test_build_list_skips_opening_delimiter():
    source = b"(x)"
    node = _list("list", SyntaxNode("atom", 1, 2), SyntaxNode(")", 2, 3))
    assert sexpfmt.build(node, source) == List((Atom("x"), NIL))


def test_build_missing_is_prefixed_with_kind():
    source = b"(x"
    node = _list("MISSING", SyntaxNode("atom", 1, 2))
    assert sexpfmt.build(node, source) == List((Atom("MISSING"), Atom("x")))


def test_build_error_is_prefixed_with_kind():
    node = _list("ERROR")
    assert sexpfmt.build(node, b"(") == List((Atom("ERROR"),))


def test_build_unknown_kind_raises():
    with pytest.raises(sexpfmt.UnknownNodeKind) as info:
        sexpfmt.build(SyntaxNode("comment", 0, 3), b";;;")
    assert info.value.kind == "comment"


def test_build_unknown_kind_in_subtree_raises():
    node = _list("list", SyntaxNode("string", 1, 3), SyntaxNode(")", 3, 4))
    with pytest.raises(sexpfmt.UnknownNodeKind):
        sexpfmt.build(node, b'("")')
