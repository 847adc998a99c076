import io

import pytest

import sexpfmt
from sexpfmt import NIL, Atom, List


@pytest.mark.parametrize(
    "source",
    [
        "source_file",
        "(source file)",
        "(source file tree)",
        "(source (file))",
        "(source (file tree))",
        "(source file: test)",
        "()",
        "(a () b)",
    ],
)
def test_short_input_is_unchanged(source):
    assert sexpfmt.parse_and_format(source) == source


def test_format_collapses_whitespace():
    assert sexpfmt.parse_and_format("(a\n   (b\tc)\n)") == "(a (b c))"


def test_format_empty_list_without_nil():
    assert sexpfmt.format(List()) == "()"


def test_format_bare_nil_is_empty():
    assert sexpfmt.format(NIL) == ""


def test_format_built_tree():
    t = List((Atom("a"), List((Atom("b"), Atom("c"))), Atom("d")))
    assert sexpfmt.format(t) == "(a (b c) d)"


def test_str_uses_default_layout():
    t = sexpfmt.parse("(source (file tree))")
    assert str(t) == "(source (file tree))"
    assert str(Atom("x")) == "x"


def test_atoms_are_rendered_verbatim():
    source = '(a.b c-d e:f g/h "q" λ 1.5e-3)'
    assert sexpfmt.parse_and_format(source) == source


def test_write_to_stream():
    out = io.StringIO()
    sexpfmt.PrettyPrinter().write(sexpfmt.parse("(a b)"), out)
    assert out.getvalue() == "(a b)"


def test_write_to_custom_sink():
    class Sink:
        def __init__(self):
            self.parts = []

        def write(self, s):
            self.parts.append(s)

    sink = Sink()
    sexpfmt.PrettyPrinter().write(sexpfmt.parse("(a (b))"), sink)
    assert "".join(sink.parts) == "(a (b))"


def test_printer_defaults():
    printer = sexpfmt.PrettyPrinter()
    assert printer.max_width == 150
    assert printer.indent_size == 1


def test_printer_is_reusable():
    printer = sexpfmt.PrettyPrinter(max_width=4)
    t = sexpfmt.parse("(a (b c))")
    assert printer.format(t) == printer.format(t)


@pytest.mark.parametrize("kwargs", [{"max_width": -1}, {"indent_size": -2}])
def test_negative_parameter_raises(kwargs):
    with pytest.raises(ValueError):
        sexpfmt.PrettyPrinter(**kwargs)


@pytest.mark.parametrize("kwargs", [{"max_width": 1.5}, {"indent_size": "2"}, {"max_width": True}])
def test_non_int_parameter_raises(kwargs):
    with pytest.raises(TypeError):
        sexpfmt.PrettyPrinter(**kwargs)


def test_str_of_built_nodes():
    assert str(List((Atom("a"), List()))) == "(a ())"
    assert str(NIL) == ""
