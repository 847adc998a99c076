"""Width-aware layout of expression trees."""

from __future__ import annotations

import io
import logging
from typing import Protocol

from sexpfmt.tree import Atom, Expression, List, Nil, parse, size

logger = logging.getLogger(__name__)

DEFAULT_MAX_WIDTH = 150
DEFAULT_INDENT_SIZE = 1


class TextSink(Protocol):
    def write(self, s: str, /) -> object: ...


class _Cursor:
    """Running layout state for a single render call."""

    __slots__ = ("width", "depth")

    def __init__(self) -> None:
        self.width = 0
        self.depth = 0


def _check_param(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class PrettyPrinter:
    """Render expressions, breaking lists that would run past ``max_width``.

    Each list either stays on one line or puts each overflowing child on its
    own line, indented ``indent_size`` columns past the list's padding.  The
    decision uses :func:`~sexpfmt.tree.size`, an estimate that ignores spaces
    and parentheses, so lines can end up somewhat longer than ``max_width``.

    Raises:
        TypeError:  If a parameter is not an ``int``.
        ValueError: If a parameter is negative.

    """

    def __init__(
        self,
        max_width: int = DEFAULT_MAX_WIDTH,
        indent_size: int = DEFAULT_INDENT_SIZE,
    ) -> None:
        self.max_width = _check_param("max_width", max_width)
        self.indent_size = _check_param("indent_size", indent_size)

    def __repr__(self) -> str:
        return f"PrettyPrinter(max_width={self.max_width}, indent_size={self.indent_size})"

    def format(self, expression: Expression) -> str:
        """Render *expression* and return the text."""
        out = io.StringIO()
        self.write(expression, out)
        return out.getvalue()

    def write(self, expression: Expression, out: TextSink) -> None:
        """Render *expression* into *out*."""
        self._pp(expression, out, _Cursor())

    def _padding(self, cursor: _Cursor) -> int:
        if cursor.depth <= 0:
            return 0
        return (cursor.depth - 1) * self.indent_size

    def _pp(self, expression: Expression, out: TextSink, cursor: _Cursor) -> None:
        if isinstance(expression, Atom):
            cursor.width += len(expression.text)
            out.write(expression.text)
        elif isinstance(expression, Nil):
            cursor.depth -= 1
        elif isinstance(expression, List) and expression.children:
            self._pp_list(expression, out, cursor)
        else:
            out.write("()")

    def _pp_list(self, expression: List, out: TextSink, cursor: _Cursor) -> None:
        cursor.depth += 1
        projected = cursor.width + self._padding(cursor) + size(expression)
        # a nested list too big for half the line starts its own block
        if projected > self.max_width // 2 and cursor.depth > 1:
            cursor.width = self._padding(cursor)

        first, *rest = expression.children
        out.write("(")
        self._pp(first, out, cursor)

        for child in rest:
            if isinstance(child, Nil):
                self._pp(child, out, cursor)
                continue
            # padding is read again here since Nil children move the depth
            if projected + self._padding(cursor) + size(child) > self.max_width:
                out.write("\n")
                out.write(" " * (self._padding(cursor) + self.indent_size))
            else:
                out.write(" ")
            self._pp(child, out, cursor)

        out.write(")")


def format(
    expression: Expression,
    max_width: int = DEFAULT_MAX_WIDTH,
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> str:
    """Render *expression* with a fresh :class:`PrettyPrinter`."""
    return PrettyPrinter(max_width, indent_size).format(expression)


def parse_and_format(
    source: str | bytes | bytearray,
    max_width: int = DEFAULT_MAX_WIDTH,
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> str:
    """Parse *source* and render the resulting expression.

    Raises:
        BuildError: If *source* cannot be built into an expression.

    """
    printer = PrettyPrinter(max_width, indent_size)
    expression = parse(source)
    logger.debug("formatting %d atom characters with %r", size(expression), printer)
    return printer.format(expression)


def _render(expression: Expression) -> str:
    return format(expression)


# str() of any expression renders it with the default layout
for _cls in (Atom, List, Nil):
    setattr(_cls, "__str__", _render)
