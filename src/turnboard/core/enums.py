"""Core enumerations for the board engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. The value is the sign of that side's piece codes."""

    WHITE = 1
    BLACK = -1

    @property
    def opposite(self) -> Color:
        return Color(-self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece types; the value is the absolute piece code."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
