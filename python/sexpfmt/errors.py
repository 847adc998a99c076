"""Exceptions raised while turning source text into an expression tree."""

from __future__ import annotations


class BuildError(ValueError):
    """Base class for every failure to produce an expression tree."""


class ParseError(BuildError):
    """The parser produced no tree at all."""


class TextDecodeError(BuildError):
    """An atom's source slice is not valid UTF-8.

    Attributes:
        start_byte: Offset of the first byte of the offending slice.
        end_byte:   Offset one past the last byte of the offending slice.

    """

    def __init__(self, start_byte: int, end_byte: int) -> None:
        super().__init__(f"atom at bytes {start_byte}..{end_byte} is not valid UTF-8")
        self.start_byte = start_byte
        self.end_byte = end_byte


class UnknownNodeKind(BuildError):
    """The parser emitted a node kind the builder does not handle."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"unknown node kind {kind!r}")
        self.kind = kind
