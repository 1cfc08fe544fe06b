"""Game layer — selection, turn gating and commit on top of BoardEngine.

Quick start::

    from turnboard.game import GameSession

    session = GameSession()
    session.click(E2)  # select
    session.click(E4)  # move, turn passes to Black
"""

from turnboard.game.session import ClickResult, GameSession, SessionEvents

__all__ = [
    "ClickResult",
    "GameSession",
    "SessionEvents",
]
