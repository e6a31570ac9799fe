"""
Tests for the immutable game session and its mutation primitives.
"""

import numpy as np
import pytest

from gridsnake.game.grid_math import Direction
from gridsnake.game.snake_state import (
    Cell,
    GameSession,
    SessionState,
    advance_head,
    new_session,
    session_from_segments,
    with_direction,
    with_food,
    with_game_over,
    with_paused,
)


class TestNewSession:
    """Tests for fresh session construction."""

    def test_initial_values(self):
        """Single segment at the start index, no food, paused, heading right."""
        session = new_session(5, 5, 12)

        assert session.snake == (12,)
        assert session.food is None
        assert session.paused is True
        assert session.game_over is False
        assert session.direction == Direction.RIGHT
        assert session.state == SessionState.PAUSED

    def test_board_has_only_start_cell(self):
        session = new_session(4, 6, 7)

        assert session.board.shape == (24,)
        assert session.board.dtype == np.int8
        assert session.body_cells() == frozenset({7})
        assert int((session.board == Cell.EMPTY).sum()) == 23

    def test_board_is_read_only(self):
        session = new_session(5, 5, 0)

        with pytest.raises(ValueError):
            session.board[1] = Cell.FOOD

    def test_fresh_sessions_are_equal(self):
        assert new_session(5, 5, 12) == new_session(5, 5, 12)
        assert new_session(5, 5, 12) != new_session(5, 5, 11)


class TestSessionFromSegments:
    """Tests for building sessions from explicit bodies."""

    def test_paints_body_and_food(self):
        session = session_from_segments(5, 5, [12, 11, 10], food=3)

        assert session.body_cells() == frozenset({10, 11, 12})
        assert session.cell(3) == Cell.FOOD
        assert session.head == 12
        assert session.tail == 10
        assert session.length == 3
        assert session.state == SessionState.RUNNING

    @pytest.mark.parametrize("segments,food", [
        ([], None),
        ([1, 2, 1], None),
        ([25], None),
        ([1, 2], 2),
        ([1, 2], 40),
    ])
    def test_rejects_inconsistent_input(self, segments, food):
        with pytest.raises(ValueError):
            session_from_segments(5, 5, segments, food=food)


class TestAdvanceHead:
    """Tests for the move/grow primitive."""

    def test_single_segment_move(self):
        """Length 1: the only segment moves, the old cell is cleared."""
        session = new_session(5, 5, 12)
        moved = advance_head(session, 13, ate_food=False)

        assert moved.snake == (13,)
        assert moved.cell(12) == Cell.EMPTY
        assert moved.cell(13) == Cell.BODY

    def test_move_keeps_length_and_frees_tail(self):
        session = session_from_segments(5, 5, [12, 11, 10], food=0)
        moved = advance_head(session, 13, ate_food=False)

        assert moved.snake == (13, 12, 11)
        assert moved.length == session.length
        assert moved.cell(10) == Cell.EMPTY
        assert moved.food == 0

    def test_grow_keeps_tail_and_clears_food(self):
        session = session_from_segments(5, 5, [12, 11], food=13)
        grown = advance_head(session, 13, ate_food=True)

        assert grown.snake == (13, 12, 11)
        assert grown.length == session.length + 1
        assert grown.cell(11) == Cell.BODY
        assert grown.cell(13) == Cell.BODY
        assert grown.food is None

    def test_input_session_untouched(self):
        """Primitives return new sessions; the input stays as it was."""
        session = session_from_segments(5, 5, [12, 11])
        board_before = session.board.copy()

        advance_head(session, 13, ate_food=False)

        assert session.snake == (12, 11)
        assert np.array_equal(session.board, board_before)


class TestSessionHelpers:
    """Tests for flag helpers, state and snapshots."""

    def test_with_food_marks_cell(self):
        session = with_food(new_session(5, 5, 12), 4)

        assert session.food == 4
        assert session.cell(4) == Cell.FOOD

    def test_state_derivation(self):
        session = new_session(5, 5, 12)

        assert with_paused(session, False).state == SessionState.RUNNING
        assert with_game_over(session).state == SessionState.GAME_OVER
        assert with_game_over(with_paused(session, False)).state == SessionState.GAME_OVER

    def test_with_direction(self):
        session = with_direction(new_session(5, 5, 12), Direction.UP)

        assert session.direction == Direction.UP

    def test_to_dict(self):
        session = session_from_segments(3, 3, [4, 3], direction=Direction.DOWN, food=8)
        data = session.to_dict()

        assert data["rows"] == 3
        assert data["cols"] == 3
        assert data["snake"] == [4, 3]
        assert data["food"] == 8
        assert data["length"] == 2
        assert data["direction"] == int(Direction.DOWN)
        assert data["board"] == [0, 0, 0, 1, 1, 0, 0, 0, 2]
        assert data["state"] == "running"

    def test_sessions_are_not_hashable(self):
        with pytest.raises(TypeError):
            hash(new_session(2, 2, 0))

    def test_compare_with_other_type(self):
        assert (new_session(2, 2, 0) == "session") is False
        assert isinstance(new_session(2, 2, 0), GameSession)
