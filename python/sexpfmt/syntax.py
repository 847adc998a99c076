"""Concrete syntax tree for parenthesized s-expression text.

This is the parser the tree builder consumes.  Nodes are typed by a ``kind``
tag and positioned by byte offsets into the UTF-8 source, and the tree keeps
every delimiter token, so a list ``(a b)`` has the children ``(``, ``a``,
``b`` and ``)``.  Malformed input does not raise: it is recovered into
``ERROR`` nodes that the builder turns into visible markers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sexpfmt.errors import ParseError

logger = logging.getLogger(__name__)

ROOT = "sexp"
ATOM = "atom"
LIST = "list"
ERROR = "ERROR"
MISSING = "MISSING"
OPEN = "("
CLOSE = ")"

_OPEN_BYTE = ord(OPEN)
_CLOSE_BYTE = ord(CLOSE)
_WHITESPACE = frozenset(b" \t\n\r\f\v")
_DELIMITERS = _WHITESPACE | {_OPEN_BYTE, _CLOSE_BYTE}


class SyntaxNode:
    """A typed, positioned node of the concrete tree."""

    __slots__ = ("kind", "start_byte", "end_byte", "children")

    def __init__(
        self,
        kind: str,
        start_byte: int,
        end_byte: int,
        children: list[SyntaxNode] | None = None,
    ) -> None:
        self.kind = kind
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.children: list[SyntaxNode] = children if children is not None else []

    def __repr__(self) -> str:
        return f"<SyntaxNode {self.kind} {self.start_byte}..{self.end_byte}>"

    @property
    def is_error(self) -> bool:
        """``True`` for the recovery kinds ``ERROR`` and ``MISSING``."""
        return self.kind in (ERROR, MISSING)

    def text(self, source: bytes) -> bytes:
        """Return the slice of *source* this node spans."""
        return source[self.start_byte : self.end_byte]


class SyntaxTree:
    """Result of :func:`parse_syntax`; keeps the bytes the offsets refer to."""

    __slots__ = ("source", "root_node")

    def __init__(self, source: bytes, root_node: SyntaxNode) -> None:
        self.source = source
        self.root_node = root_node


def _as_bytes(source: str | bytes | bytearray) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    raise TypeError(f"expected str, bytes or bytearray, got {type(source).__name__}")


def tokenize(source: bytes) -> Iterator[SyntaxNode]:
    """Yield the leaf tokens of *source*: delimiters and atoms, no whitespace."""
    i = 0
    n = len(source)
    while i < n:
        byte = source[i]
        if byte in _WHITESPACE:
            i += 1
        elif byte == _OPEN_BYTE:
            yield SyntaxNode(OPEN, i, i + 1)
            i += 1
        elif byte == _CLOSE_BYTE:
            yield SyntaxNode(CLOSE, i, i + 1)
            i += 1
        else:
            start = i
            while i < n and source[i] not in _DELIMITERS:
                i += 1
            yield SyntaxNode(ATOM, start, i)


def parse_syntax(source: str | bytes | bytearray) -> SyntaxTree:
    """Parse *source* into a concrete tree rooted at a ``sexp`` node.

    The root's children are the top-level expressions in order.  A stray
    ``)`` becomes an ``ERROR`` node holding that token.  Lists left open at
    the end of input are folded into one ``ERROR`` node starting at the
    outermost unclosed ``(``; the inner unclosed ``(`` tokens stay in it as
    bare tokens.

    Raises:
        TypeError:  If *source* is not ``str``, ``bytes`` or ``bytearray``.
        ParseError: If *source* contains no token at all.

    """
    data = _as_bytes(source)
    top: list[SyntaxNode] = []
    # one frame per open list, each starting with its "(" token
    stack: list[list[SyntaxNode]] = []
    seen = 0

    for token in tokenize(data):
        seen += 1
        if token.kind == OPEN:
            stack.append([token])
        elif token.kind == CLOSE:
            if not stack:
                logger.debug("stray ')' at byte %d", token.start_byte)
                top.append(SyntaxNode(ERROR, token.start_byte, token.end_byte, [token]))
                continue
            children = stack.pop()
            children.append(token)
            node = SyntaxNode(LIST, children[0].start_byte, token.end_byte, children)
            (stack[-1] if stack else top).append(node)
        else:
            (stack[-1] if stack else top).append(token)

    if not seen:
        raise ParseError("could not parse anything")

    if stack:
        flat = [child for frame in stack for child in frame]
        logger.debug("%d unclosed list(s), outermost at byte %d", len(stack), flat[0].start_byte)
        top.append(SyntaxNode(ERROR, flat[0].start_byte, flat[-1].end_byte, flat))

    logger.debug("parsed %d bytes into %d top-level node(s)", len(data), len(top))
    return SyntaxTree(data, SyntaxNode(ROOT, 0, len(data), top))
