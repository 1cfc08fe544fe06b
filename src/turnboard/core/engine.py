"""BoardEngine — board state, move legality and the turn flag."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from turnboard.core.enums import Color, PieceType
from turnboard.core.piece import (
    EMPTY,
    START_LAYOUT,
    is_friendly,
    is_valid_code,
    piece_char,
)
from turnboard.core.types import Square, col_of, require_square, row_of

_LOGGER = logging.getLogger(__name__)

_WHITE_PAWN_HOME_ROW = 1
_BLACK_PAWN_HOME_ROW = 6


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


class BoardEngine:
    """Mutable 64-cell board of signed piece codes plus the side to move.

    Validation and application are two separate calls. The caller checks
    :meth:`is_valid_move` (after making sure the piece belongs to the side
    to move), then commits with :meth:`apply_move` and flips the turn with
    :meth:`flip_turn`. ``apply_move`` never validates and never touches the
    turn flag.

    Not thread-safe. A shared instance must be guarded so that
    validate + apply + flip happen as one unit.
    """

    __slots__ = ("_cells", "_side_to_move")

    def __init__(self) -> None:
        self._cells: list[int] = [EMPTY] * 64
        self._side_to_move = Color.WHITE
        self.initialize()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def initialize(self) -> None:
        """Put the standard starting layout on the board.

        Only the cells are touched; use :meth:`reset` to also hand the
        move back to White.
        """
        self._cells[:] = START_LAYOUT

    def reset(self) -> None:
        """Start-of-game board and White to move."""
        self.initialize()
        self._side_to_move = Color.WHITE
        _LOGGER.debug("Board reset to starting layout")

    def clear(self) -> None:
        """Empty all 64 cells (turn flag unchanged)."""
        self._cells[:] = [EMPTY] * 64

    # ── Turn flag ────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @side_to_move.setter
    def side_to_move(self, color: Color) -> None:
        self._side_to_move = Color(color)

    @property
    def white_to_move(self) -> bool:
        return self._side_to_move == Color.WHITE

    def flip_turn(self) -> Color:
        """Hand the move to the other side and return the new side to move."""
        self._side_to_move = self._side_to_move.opposite
        return self._side_to_move

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> int:
        """Piece code on *sq* (0 when empty)."""
        return self._cells[require_square(sq)]

    @property
    def squares(self) -> tuple[int, ...]:
        """Snapshot of all 64 cells, index order."""
        return tuple(self._cells)

    def set_piece(self, sq: Square, code: int) -> None:
        """Place *code* on *sq*; used to build positions outside normal play."""
        require_square(sq)
        if not is_valid_code(code):
            raise ValueError(f"Invalid piece code: {code!r}")
        self._cells[sq] = code

    # ── Legality ─────────────────────────────────────────────────────────

    def is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every cell strictly between the two squares is empty.

        The squares must share a row, a column or a diagonal. Adjacent
        squares (and ``from_sq == to_sq``) are trivially clear.
        """
        require_square(from_sq)
        require_square(to_sq)
        d_row = row_of(to_sq) - row_of(from_sq)
        d_col = col_of(to_sq) - col_of(from_sq)
        if d_row and d_col and abs(d_row) != abs(d_col):
            raise ValueError(
                f"Squares {from_sq} and {to_sq} are not on a common line"
            )

        step = _step(d_row) * 8 + _step(d_col)
        sq = from_sq + step
        while sq != to_sq:
            if self._cells[sq] != EMPTY:
                return False
            sq += step
        return True

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may move to *to_sq*.

        Does not look at whose turn it is, and knows nothing about check,
        castling, en passant or promotion. A piece can never "move" onto
        its own square since that counts as capturing a friendly piece.
        """
        require_square(from_sq)
        require_square(to_sq)
        if self._check_move(from_sq, to_sq):
            return True
        _LOGGER.debug(
            "Rejected %d -> %d (piece %d)", from_sq, to_sq, self._cells[from_sq]
        )
        return False

    def _check_move(self, from_sq: Square, to_sq: Square) -> bool:
        piece = self._cells[from_sq]
        target = self._cells[to_sq]

        if is_friendly(piece, target):
            return False

        from_row, from_col = row_of(from_sq), col_of(from_sq)
        d_row = row_of(to_sq) - from_row
        d_col = col_of(to_sq) - from_col
        abs_row, abs_col = abs(d_row), abs(d_col)

        kind = abs(piece)
        if kind == PieceType.PAWN:
            return self._is_valid_pawn_move(
                piece, from_sq, from_row, d_row, d_col, target
            )
        if kind == PieceType.KNIGHT:
            return (abs_row, abs_col) in ((2, 1), (1, 2))
        if kind == PieceType.BISHOP:
            return abs_row == abs_col and self.is_path_clear(from_sq, to_sq)
        if kind == PieceType.ROOK:
            return (d_row == 0 or d_col == 0) and self.is_path_clear(from_sq, to_sq)
        if kind == PieceType.QUEEN:
            if d_row == 0 or d_col == 0 or abs_row == abs_col:
                return self.is_path_clear(from_sq, to_sq)
            return False
        if kind == PieceType.KING:
            return abs_row <= 1 and abs_col <= 1
        return False

    def _is_valid_pawn_move(
        self,
        piece: int,
        from_sq: Square,
        from_row: int,
        d_row: int,
        d_col: int,
        target: int,
    ) -> bool:
        # White advances toward row 7, Black toward row 0.
        forward = 1 if piece > 0 else -1
        home_row = _WHITE_PAWN_HOME_ROW if piece > 0 else _BLACK_PAWN_HOME_ROW

        if d_col == 0:
            if d_row == forward:
                return target == EMPTY
            if d_row == 2 * forward and from_row == home_row:
                return self._cells[from_sq + 8 * forward] == EMPTY and target == EMPTY
            return False
        if d_row == forward and abs(d_col) == 1:
            return target * piece < 0
        return False

    def legal_targets(self, from_sq: Square) -> list[Square]:
        """All squares the piece on *from_sq* may move to."""
        require_square(from_sq)
        if self._cells[from_sq] == EMPTY:
            return []
        return [to_sq for to_sq in range(64) if self._check_move(from_sq, to_sq)]

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> int:
        """Move whatever is on *from_sq* to *to_sq*, unconditionally.

        The caller must already have checked :meth:`is_valid_move`; this
        method performs no legality check and does not flip the turn.
        Returns the code that was on *to_sq* before the move.
        """
        require_square(from_sq)
        require_square(to_sq)
        captured = self._cells[to_sq]
        self._cells[to_sq] = self._cells[from_sq]
        self._cells[from_sq] = EMPTY
        _LOGGER.debug("Applied %d -> %d (captured %d)", from_sq, to_sq, captured)
        return captured

    def copy(self) -> BoardEngine:
        engine = BoardEngine.__new__(BoardEngine)
        engine._cells = self._cells.copy()
        engine._side_to_move = self._side_to_move
        return engine

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._cells))

    def __len__(self) -> int:
        return 64

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardEngine):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._side_to_move == other._side_to_move
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = " ".join(piece_char(self._cells[row * 8 + col]) for col in range(8))
            rows.append(f"{row + 1} {cells}")
        rows.append("  a b c d e f g h")
        rows.append(f"{self._side_to_move} to move")
        return "\n".join(rows)
