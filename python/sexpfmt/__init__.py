"""Pretty-printer for parenthesized s-expression text."""

from sexpfmt.errors import BuildError, ParseError, TextDecodeError, UnknownNodeKind
from sexpfmt.printer import (
    DEFAULT_INDENT_SIZE,
    DEFAULT_MAX_WIDTH,
    PrettyPrinter,
    format,
    parse_and_format,
)
from sexpfmt.tree import NIL, Atom, Expression, List, Nil, build, parse, size

__all__ = [
    "DEFAULT_INDENT_SIZE",
    "DEFAULT_MAX_WIDTH",
    "NIL",
    "Atom",
    "BuildError",
    "Expression",
    "List",
    "Nil",
    "ParseError",
    "PrettyPrinter",
    "TextDecodeError",
    "UnknownNodeKind",
    "build",
    "format",
    "parse",
    "parse_and_format",
    "size",
]
