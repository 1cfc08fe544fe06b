"""Tests for GameSession — selection, turn gating and commit."""

import logging
import weakref

import pytest

from turnboard.core.enums import Color
from turnboard.core.errors import InvalidMoveError, OutOfRangeError
from turnboard.core.move import Move
from turnboard.core.piece import START_LAYOUT
from turnboard.core.types import A2, A3, A4, A7, A6, B2, D5, D7, E2, E4
from turnboard.game.session import ClickResult, GameSession


class TestSelection:
    def test_empty_square_ignored(self, session: GameSession) -> None:
        assert session.click(A4) is ClickResult.IGNORED
        assert session.selected is None

    def test_opponent_piece_ignored(self, session: GameSession) -> None:
        assert session.click(A7) is ClickResult.IGNORED
        assert session.selected is None

    def test_own_piece_selected(self, session: GameSession) -> None:
        assert session.click(A2) is ClickResult.SELECTED
        assert session.selected == A2

    def test_selection_events(self, session: GameSession) -> None:
        seen: list[int | None] = []
        session.events.on_selection_changed.append(seen.append)
        session.click(A2)
        session.click(A3)
        assert seen == [A2, None]

    def test_clear_selection_is_quiet_when_nothing_selected(
        self, session: GameSession
    ) -> None:
        seen: list[int | None] = []
        session.events.on_selection_changed.append(seen.append)
        session.clear_selection()
        assert seen == []


class TestClickMove:
    def test_legal_move_commits_and_flips(self, session: GameSession) -> None:
        session.click(A2)
        assert session.click(A3) is ClickResult.MOVED
        assert session.engine.piece_at(A3) == 1
        assert session.engine.piece_at(A2) == 0
        assert session.side_to_move == Color.BLACK
        assert session.selected is None

    def test_illegal_move_deselects_and_keeps_turn(
        self, session: GameSession
    ) -> None:
        rejected: list[Move] = []
        session.events.on_invalid_move.append(rejected.append)
        session.click(A2)
        assert session.click(A2 + 24) is ClickResult.REJECTED
        assert rejected == [Move(A2, A2 + 24)]
        assert session.selected is None
        assert session.side_to_move == Color.WHITE
        assert session.engine.squares == START_LAYOUT

    def test_clicking_own_piece_while_selected_is_rejected(
        self, session: GameSession
    ) -> None:
        session.click(A2)
        assert session.click(B2) is ClickResult.REJECTED
        assert session.selected is None

    def test_invalid_move_is_logged(
        self, session: GameSession, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="turnboard.game.session"):
            session.click(A2)
            session.click(A2 + 24)
        assert "Invalid move a2a5" in caplog.text

    def test_move_event_reports_piece_and_capture(self, session: GameSession) -> None:
        moves: list[tuple[Move, int, int]] = []
        session.events.on_move.append(lambda m, p, c: moves.append((m, p, c)))
        session.play(E2, E4)
        session.play(D7, D5)
        session.play(E4, D5)
        assert moves[0] == (Move(E2, E4), 1, 0)
        assert moves[2] == (Move(E4, D5), 1, -1)

    def test_out_of_range_click(self, session: GameSession) -> None:
        with pytest.raises(OutOfRangeError):
            session.click(64)

    def test_session_supports_weak_references(self, session: GameSession) -> None:
        ref = weakref.ref(session)
        assert ref() is session
        weak_reset = weakref.WeakMethod(session.reset)
        assert weak_reset() == session.reset


class TestTryMoveAndPlay:
    def test_try_move_gates_on_turn(self, session: GameSession) -> None:
        assert not session.try_move(A7, A6)
        assert session.try_move(A2, A4)
        assert session.try_move(A7, A6)
        assert session.side_to_move == Color.WHITE

    def test_try_move_rejects_illegal(self, session: GameSession) -> None:
        assert not session.try_move(A2, A2 + 24)
        assert session.side_to_move == Color.WHITE

    def test_play_raises_for_wrong_side(self, session: GameSession) -> None:
        with pytest.raises(InvalidMoveError, match="not white's piece"):
            session.play(A7, A6)

    def test_play_raises_for_illegal(self, session: GameSession) -> None:
        with pytest.raises(InvalidMoveError) as excinfo:
            session.play(A2, A2 + 24)
        assert excinfo.value.from_sq == A2

    def test_play_empty_square(self, session: GameSession) -> None:
        with pytest.raises(InvalidMoveError):
            session.play(A4, A3)


class TestReset:
    def test_reset_restores_everything(self, session: GameSession) -> None:
        resets: list[bool] = []
        session.events.on_reset.append(lambda: resets.append(True))
        session.play(E2, E4)
        session.click(D7)
        session.reset()
        assert session.engine.squares == START_LAYOUT
        assert session.side_to_move == Color.WHITE
        assert session.selected is None
        assert resets == [True]


def test_two_move_scenario(session: GameSession) -> None:
    assert session.click(A2) is ClickResult.SELECTED
    assert session.click(A3) is ClickResult.MOVED
    assert session.side_to_move == Color.BLACK

    assert session.click(A7) is ClickResult.SELECTED
    assert session.click(A6) is ClickResult.MOVED
    assert session.side_to_move == Color.WHITE

    board = session.engine
    assert (board.piece_at(A2), board.piece_at(A3)) == (0, 1)
    assert (board.piece_at(A7), board.piece_at(A6)) == (0, -1)
