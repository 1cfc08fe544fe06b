"""Signed piece codes.

A piece is a plain ``int``: the sign is the color (+ White, − Black) and
the absolute value is the :class:`PieceType`. ``0`` is an empty square.
"""

from __future__ import annotations

from turnboard.core.enums import Color, PieceType

EMPTY = 0

_UNICODE: dict[int, str] = {
    1: "♙",
    2: "♘",
    3: "♗",
    4: "♖",
    5: "♕",
    6: "♔",
    -1: "♟",
    -2: "♞",
    -3: "♝",
    -4: "♜",
    -5: "♛",
    -6: "♚",
}

_CHARS = ".PNBRQK"

_BACK_ROW = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def make_piece(color: Color, piece_type: PieceType) -> int:
    """Piece code for *color*'s *piece_type*, e.g. (BLACK, ROOK) → -4."""
    return int(color) * int(piece_type)


def color_of(code: int) -> Color | None:
    """Color of a piece code, or None for an empty square."""
    if code > 0:
        return Color.WHITE
    if code < 0:
        return Color.BLACK
    return None


def type_of(code: int) -> PieceType | None:
    """Piece type of a code, or None for empty / unknown values."""
    value = abs(code)
    if 1 <= value <= 6:
        return PieceType(value)
    return None


def is_friendly(a: int, b: int) -> bool:
    """Whether two codes are both pieces of the same color."""
    return a * b > 0


def is_valid_code(code: object) -> bool:
    return isinstance(code, int) and not isinstance(code, bool) and -6 <= code <= 6


def piece_symbol(code: int) -> str:
    """Unicode chess symbol, e.g. -2 → ♞. Empty string for empty squares."""
    return _UNICODE.get(code, "")


def piece_char(code: int) -> str:
    """FEN-style letter (uppercase = White), '.' for empty squares."""
    value = abs(code)
    if value > 6:
        return "?"
    char = _CHARS[value]
    return char.lower() if code < 0 else char


def _start_layout() -> tuple[int, ...]:
    cells = [EMPTY] * 64
    for col, pt in enumerate(_BACK_ROW):
        cells[col] = make_piece(Color.WHITE, pt)
        cells[8 + col] = make_piece(Color.WHITE, PieceType.PAWN)
        cells[48 + col] = make_piece(Color.BLACK, PieceType.PAWN)
        cells[56 + col] = make_piece(Color.BLACK, pt)
    return tuple(cells)


START_LAYOUT: tuple[int, ...] = _start_layout()
