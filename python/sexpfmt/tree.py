"""Expression tree model and the builder that produces it from concrete syntax."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from sexpfmt import syntax
from sexpfmt.errors import ParseError, TextDecodeError, UnknownNodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Atom:
    """An indivisible token, kept verbatim from the source.

    Raises:
        ValueError: If ``text`` is empty.

    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("atom text must be non-empty")


@dataclass(frozen=True)
class List:
    """An ordered sequence of expressions."""

    children: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Nil:
    """A bare closing delimiter.

    Renders as nothing but closes one level of nesting during layout.
    """


NIL = Nil()

Expression = Union[Atom, List, Nil]


def size(expression: Expression) -> int:
    """Total length of the atoms in *expression*.

    Spaces, parentheses and line breaks are not counted, so this is a lower
    bound on the rendered width.  It is recomputed on every call.
    """
    if isinstance(expression, Atom):
        return len(expression.text)
    if isinstance(expression, List):
        return sum(size(child) for child in expression.children)
    return 0


def build(node: syntax.SyntaxNode, source: bytes) -> Expression:
    """Convert the concrete *node* and its subtree into an expression.

    For ``list``, ``ERROR`` and ``MISSING`` nodes the first concrete child is
    the opening delimiter and is skipped; every later child is built, so the
    closing ``)`` of a list becomes a trailing :data:`NIL`.  Recovery nodes
    are prefixed with an atom naming their kind.

    Raises:
        TextDecodeError: If an atom's slice of *source* is not valid UTF-8.
        UnknownNodeKind: If *node* or a descendant has a kind not listed above.

    """
    kind = node.kind
    if kind == syntax.ATOM:
        try:
            return Atom(node.text(source).decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise TextDecodeError(node.start_byte, node.end_byte) from exc
    if kind == syntax.LIST or node.is_error:
        children: list[Expression] = [] if kind == syntax.LIST else [Atom(kind)]
        for child in node.children[1:]:
            children.append(build(child, source))
        return List(tuple(children))
    if kind == syntax.CLOSE:
        return NIL
    raise UnknownNodeKind(kind)


def parse(source: str | bytes | bytearray) -> Expression:
    """Parse *source* and build the expression for its first top-level node.

    Raises:
        TypeError:  If *source* is not ``str``, ``bytes`` or ``bytearray``.
        BuildError: If nothing could be parsed or the tree cannot be built
                    (see :mod:`sexpfmt.errors`).

    """
    tree = syntax.parse_syntax(source)
    top = tree.root_node.children
    if not top:
        raise ParseError("could not parse anything")
    if len(top) > 1:
        logger.debug("ignoring %d trailing top-level node(s)", len(top) - 1)
    try:
        return build(top[0], tree.source)
    except (TextDecodeError, UnknownNodeKind) as exc:
        logger.debug("build failed: %s", exc)
        raise
