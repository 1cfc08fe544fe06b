"""GameSession — the caller side of the engine's validate/apply contract.

Owns the selected square and does the turn gating that BoardEngine leaves
to its caller: only the side to move may pick a piece, and the turn passes
only after a validated move has been applied.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from turnboard.core.engine import BoardEngine
from turnboard.core.enums import Color
from turnboard.core.errors import InvalidMoveError
from turnboard.core.move import Move
from turnboard.core.piece import color_of
from turnboard.core.types import Square, require_square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, int, int], None]  # move, piece, captured
InvalidMoveCallback = Callable[[Move], None]
SelectionCallback = Callable[[Square | None], None]
ResetCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_invalid_move: list[InvalidMoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


class ClickResult(Enum):
    """What a click on the board did."""

    IGNORED = "ignored"
    SELECTED = "selected"
    MOVED = "moved"
    REJECTED = "rejected"


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Two-phase select-then-move interaction over a single BoardEngine.

    Thread-safety: meant to be driven from a single thread (the UI
    thread). Each public method runs validate, apply and turn flip
    without yielding.
    """

    __slots__ = ("_engine", "_selected", "events", "__weakref__")

    def __init__(self, engine: BoardEngine | None = None) -> None:
        self._engine = engine if engine is not None else BoardEngine()
        self._selected: Square | None = None
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> BoardEngine:
        return self._engine

    @property
    def side_to_move(self) -> Color:
        return self._engine.side_to_move

    @property
    def selected(self) -> Square | None:
        return self._selected

    # ── Interaction ──────────────────────────────────────────────────────

    def click(self, sq: Square) -> ClickResult:
        """Handle one activation (double-click) of square *sq*.

        Without a selection, a piece of the side to move gets selected.
        With a selection, the move selected → *sq* is attempted and the
        selection is dropped whether or not the move was legal.
        """
        require_square(sq)
        if self._selected is None:
            if self.select(sq):
                return ClickResult.SELECTED
            return ClickResult.IGNORED

        from_sq = self._selected
        moved = self._attempt(from_sq, sq)
        self.clear_selection()
        return ClickResult.MOVED if moved else ClickResult.REJECTED

    def select(self, sq: Square) -> bool:
        """Select *sq* if it holds a piece of the side to move."""
        piece = self._engine.piece_at(sq)
        if color_of(piece) != self.side_to_move:
            return False
        self._selected = sq
        self._emit_selection(sq)
        return True

    def clear_selection(self) -> None:
        if self._selected is None:
            return
        self._selected = None
        self._emit_selection(None)

    def try_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Turn-gated validate-then-apply. Returns True if the move was made."""
        require_square(to_sq)
        if color_of(self._engine.piece_at(from_sq)) != self.side_to_move:
            return False
        return self._attempt(from_sq, to_sq)

    def play(self, from_sq: Square, to_sq: Square) -> None:
        """Like :meth:`try_move`, but raise :class:`InvalidMoveError` on refusal."""
        piece = self._engine.piece_at(from_sq)
        require_square(to_sq)
        if color_of(piece) != self.side_to_move:
            raise InvalidMoveError(from_sq, to_sq, f"not {self.side_to_move}'s piece")
        if not self._attempt(from_sq, to_sq):
            raise InvalidMoveError(from_sq, to_sq)

    def reset(self) -> None:
        """Back to the starting layout, White to move, nothing selected."""
        self._engine.reset()
        self.clear_selection()
        for cb in self.events.on_reset:
            cb()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _attempt(self, from_sq: Square, to_sq: Square) -> bool:
        move = Move(from_sq, to_sq)
        if not self._engine.is_valid_move(from_sq, to_sq):
            _LOGGER.info("Invalid move %s", move)
            for invalid_cb in self.events.on_invalid_move:
                invalid_cb(move)
            return False

        piece = self._engine.piece_at(from_sq)
        captured = self._engine.apply_move(from_sq, to_sq)
        self._engine.flip_turn()
        for cb in self.events.on_move:
            cb(move, piece, captured)
        return True

    def _emit_selection(self, sq: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(sq)
