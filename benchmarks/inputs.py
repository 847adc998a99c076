from __future__ import annotations

from typing import Final

SMALL: Final[bytes] = b"(source_file (expression (term (integer))))"

CALL: Final[bytes] = (
    b"(source_file"
    b" (expression"
    b"  (function_call"
    b"   (qualified_function_name (expression (term (atom (unquoted_atom)))) (atom (unquoted_atom)))"
    b"   (expression (term (integer)))"
    b"   (expression"
    b"    (function_call"
    b"     (qualified_function_name (expression (term (atom (unquoted_atom)))) (atom (unquoted_atom)))"
    b"     (expression (term (integer)))"
    b"     (expression (term (integer)))"
    b"     (expression (term (integer))))))))"
)


def generate(depth: int, width: int) -> bytes:
    fields = b" ".join(f"(field_{i} name: identifier_{i})".encode() for i in range(width))

    def _build(d: int) -> bytes:
        if d == 0:
            return fields
        inner = _build(d - 1)
        label = f"block_{d}".encode()
        return b"(" + label + b" " + inner + b" " + fields + b")"

    return b"(source_file " + _build(depth) + b")"


_DEEP_DEPTH: Final[int] = 40
_DEEP_WIDTH: Final[int] = 2
DEEP: Final[bytes] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

_WIDE_DEPTH: Final[int] = 1
_WIDE_WIDTH: Final[int] = 160
WIDE: Final[bytes] = generate(_WIDE_DEPTH, _WIDE_WIDTH)
