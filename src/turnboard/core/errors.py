"""Exception hierarchy for turnboard."""

from __future__ import annotations


class TurnboardError(Exception):
    """Base class for all turnboard errors."""


class OutOfRangeError(TurnboardError, IndexError):
    """A square index outside 0..63 was passed to the engine."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"Square index out of range: {index!r}")


class InvalidMoveError(TurnboardError):
    """Raised by :meth:`GameSession.play` when a move is rejected."""

    def __init__(self, from_sq: int, to_sq: int, reason: str = "illegal move") -> None:
        self.from_sq = from_sq
        self.to_sq = to_sq
        self.reason = reason
        super().__init__(f"Invalid move {from_sq} -> {to_sq}: {reason}")
