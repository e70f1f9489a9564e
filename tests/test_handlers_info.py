# Area: Bridge Tests
"""Tests for the info key table."""

from unittest.mock import MagicMock

import pytest

from game_bridge._bridge.handlers.info import (
    INFO_QUERIES,
    handle_info,
    split_info_argument,
)
from game_bridge.demo_session import DemoSession


QUERY_METHODS = {
    "game_name": "game_name",
    "game_players": "player_count_description",
    "game_rules": "rules_description",
    "game_description_raw": "game_description_raw",
    "game_description_expanded": "game_description_expanded",
    "game": "game_summary",
    "board": "board_representation",
    "state": "state_dump",
    "equipment": "equipment_description",
    "container": "per_container_description",
}


class TestInfoQueries:
    """Pure text queries."""

    @pytest.mark.parametrize("key,method", sorted(QUERY_METHODS.items()))
    def test_key_maps_to_session_method(self, key, method):
        session = MagicMock()
        getattr(session, method).return_value = f"text for {key}"
        assert handle_info(session, key) == f"text for {key}"
        getattr(session, method).assert_called_once_with()

    def test_game_name_is_exact(self):
        assert handle_info(DemoSession(), "game_name") == "Tic-Tac-Toe"

    def test_pure_queries_are_not_mutating(self):
        for key in QUERY_METHODS:
            assert INFO_QUERIES[key].mutating is False

    def test_have_started(self):
        session = DemoSession()
        assert handle_info(session, "have_started") == "not started"
        session.apply_move(session.current_legal_moves()[0])
        assert handle_info(session, "have_started") == "started"


class TestInfoSideEffects:
    """Keys that drive the player interface."""

    def test_side_effect_keys_flagged(self):
        mutating = {key for key, query in INFO_QUERIES.items() if query.mutating}
        assert mutating == {"game_restart", "addTextToStatusPanel", "setTemporaryMessage"}

    def test_game_restart(self):
        session = DemoSession()
        session.apply_move(session.current_legal_moves()[0])
        assert handle_info(session, "game_restart") == "hopefully restarted"
        assert session.restart_count == 1
        assert not session.has_session_started()

    def test_add_status_text_default(self):
        session = DemoSession()
        assert handle_info(session, "addTextToStatusPanel") == "added"
        assert session.status_messages == ["new text"]

    def test_add_status_text_custom(self):
        session = DemoSession()
        handle_info(session, "addTextToStatusPanel  agent is thinking ")
        assert session.status_messages == ["agent is thinking"]

    def test_set_temporary_message(self):
        session = DemoSession()
        assert handle_info(session, "setTemporaryMessage hi") == "message set"
        assert session.temporary_message == "hi"

    def test_set_temporary_message_default(self):
        session = DemoSession()
        handle_info(session, "setTemporaryMessage")
        assert session.temporary_message == "temporary test message"


class TestUnsupportedKeys:
    """Unknown keys are answered, never raised."""

    @pytest.mark.parametrize("argument", ["", "unknown", "GAME_NAME", "gamename"])
    def test_unsupported(self, argument):
        session = MagicMock()
        assert handle_info(session, argument) == "unsupported command"
        session.restart_session.assert_not_called()


class TestSplitInfoArgument:

    def test_key_only(self):
        assert split_info_argument("board") == ("board", "")

    def test_key_and_text(self):
        assert split_info_argument("addTextToStatusPanel a b") == ("addTextToStatusPanel", "a b")

    def test_empty(self):
        assert split_info_argument("") == ("", "")

    def test_query_key_with_trailing_text(self):
        assert split_info_argument("game_name junk") == ("game_name junk", "")

    def test_surrounding_whitespace_stripped(self):
        assert split_info_argument("  board ") == ("board", "")


class TestTrailingText:
    """Only the text-taking keys accept anything after the key."""

    @pytest.mark.parametrize("argument", [
        "game_name junk",
        "board 1",
        "have_started now",
        "game_restart please",
    ])
    def test_query_key_with_extra_words_unsupported(self, argument):
        session = MagicMock()
        assert handle_info(session, argument) == "unsupported command"
        session.restart_session.assert_not_called()
        session.game_name.assert_not_called()

    def test_text_keys_flagged(self):
        taking_text = {key for key, query in INFO_QUERIES.items() if query.takes_text}
        assert taking_text == {"addTextToStatusPanel", "setTemporaryMessage"}

    def test_query_key_with_padding_still_matches(self):
        assert handle_info(DemoSession(), " game_name ") == "Tic-Tac-Toe"
