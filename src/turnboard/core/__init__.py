"""Core domain layer — board state and move legality, no external dependencies.

Quick start::

    from turnboard.core import BoardEngine, E2, E4

    engine = BoardEngine()
    if engine.is_valid_move(E2, E4):
        engine.apply_move(E2, E4)
        engine.flip_turn()
"""

from turnboard.core.engine import BoardEngine
from turnboard.core.enums import Color, PieceType
from turnboard.core.errors import InvalidMoveError, OutOfRangeError, TurnboardError
from turnboard.core.move import Move
from turnboard.core.piece import (
    EMPTY,
    START_LAYOUT,
    color_of,
    make_piece,
    piece_char,
    piece_symbol,
    type_of,
)
from turnboard.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    require_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "InvalidMoveError",
    "OutOfRangeError",
    "TurnboardError",
    # Types / helpers
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "require_square",
    "row_of",
    "square_name",
    # Piece codes
    "EMPTY",
    "START_LAYOUT",
    "color_of",
    "make_piece",
    "piece_char",
    "piece_symbol",
    "type_of",
    # Domain objects
    "BoardEngine",
    "Move",
]
