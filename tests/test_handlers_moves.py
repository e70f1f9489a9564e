# Area: Bridge Tests
"""Tests for move, legal and player handlers."""

from unittest.mock import MagicMock

import pytest

from game_bridge._bridge.handlers import handle_legal, handle_move, handle_player
from game_bridge.demo_session import DemoMove, DemoSession


def _mock_session(descriptions):
    session = MagicMock()
    moves = []
    for text in descriptions:
        move = MagicMock()
        move.describe_with_consequences.return_value = text
        moves.append(move)
    session.current_legal_moves.return_value = moves
    return session, moves


class TestHandleMove:
    """Tests for 'move <index>'."""

    def test_valid_index_applies_that_move(self):
        session, moves = _mock_session(["a", "b", "c"])
        assert handle_move(session, "1") == "move success"
        session.apply_move.assert_called_once_with(moves[1])

    def test_first_and_last_index(self):
        session, moves = _mock_session(["a", "b"])
        assert handle_move(session, "0") == "move success"
        assert handle_move(session, "1") == "move success"
        assert session.apply_move.call_count == 2

    @pytest.mark.parametrize("argument", ["3", "99", "-1", "", "one", "1.0", "1 2", "+1"])
    def test_invalid_index_fails_without_mutation(self, argument):
        session, _ = _mock_session(["a", "b", "c"])
        assert handle_move(session, argument) == "move failure"
        session.apply_move.assert_not_called()

    def test_no_legal_moves(self):
        session, _ = _mock_session([])
        assert handle_move(session, "0") == "move failure"
        session.apply_move.assert_not_called()

    def test_legal_list_fetched_once_per_request(self):
        """The move applied comes from the same list the index was checked against."""
        session, _ = _mock_session(["a", "b"])
        handle_move(session, "0")
        session.current_legal_moves.assert_called_once()

    def test_description_taken_before_apply(self):
        """A move that can no longer describe itself after it is played still succeeds."""
        session, moves = _mock_session(["a"])
        applied = []

        def describe():
            if applied:
                raise RuntimeError("move no longer legal in this position")
            return "a"

        moves[0].describe_with_consequences.side_effect = describe
        session.apply_move.side_effect = applied.append
        assert handle_move(session, "0") == "move success"
        assert applied == [moves[0]]

    def test_description_failure_before_apply_leaves_session(self):
        session, moves = _mock_session(["a"])
        moves[0].describe_with_consequences.side_effect = RuntimeError("bad move")
        with pytest.raises(RuntimeError):
            handle_move(session, "0")
        session.apply_move.assert_not_called()

    def test_demo_session_state_advances(self):
        session = DemoSession()
        before = session.current_legal_moves()
        assert handle_move(session, "4") == "move success"
        after = session.current_legal_moves()
        assert after != before
        assert len(after) == len(before) - 1
        assert session.current_mover_seat() == 2


class TestHandleLegal:
    """Tests for 'legal'."""

    def test_header_then_indexed_lines(self):
        session, _ = _mock_session(["place X", "place O"])
        reply = handle_legal(session, "")
        assert reply == "legal\n0 - place X\n1 - place O\n"

    def test_line_count_matches_move_count(self):
        session = DemoSession()
        lines = handle_legal(session, "").splitlines()
        assert lines[0] == "legal"
        body = lines[1:]
        assert len(body) == len(session.current_legal_moves())
        for i, line in enumerate(body):
            assert line.startswith(f"{i} - ")

    def test_no_moves_is_header_only(self):
        session, _ = _mock_session([])
        assert handle_legal(session, "") == "legal\n"

    def test_does_not_mutate(self):
        session, _ = _mock_session(["a"])
        handle_legal(session, "")
        session.apply_move.assert_not_called()


class TestHandlePlayer:
    """Tests for 'player'."""

    def test_reply_is_decimal_seat(self):
        session = MagicMock()
        session.current_mover_seat.return_value = 2
        assert handle_player(session, "") == "2"

    def test_no_mutation(self):
        session = DemoSession()
        handle_player(session, "")
        assert not session.has_session_started()
        assert session.current_legal_moves() == [DemoMove(1, s) for s in range(9)]
