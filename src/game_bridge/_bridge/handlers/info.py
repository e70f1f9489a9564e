# Area: Bridge
"""
Info Handlers
=============

``info <key>`` looks ``key`` up in ``INFO_QUERIES`` and replies
with the session's text for it. Most keys are pure queries; the entries
marked ``mutating`` also drive the player interface, and the two marked
``takes_text`` accept free text after the key.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ...session import GameSession
from ..replies import (
    RESTARTED,
    SESSION_NOT_STARTED,
    SESSION_STARTED,
    STATUS_TEXT_ADDED,
    TEMPORARY_MESSAGE_SET,
    UNSUPPORTED_COMMAND,
)

logger = logging.getLogger("game_bridge.router")

DEFAULT_STATUS_TEXT = "new text"
DEFAULT_TEMPORARY_MESSAGE = "temporary test message"


@dataclass(frozen=True)
class InfoQuery:
    """One row of the info table."""

    render: Callable[[GameSession, str], str]
    mutating: bool = False
    takes_text: bool = False


def _have_started(session: GameSession, text: str) -> str:
    return SESSION_STARTED if session.has_session_started() else SESSION_NOT_STARTED


def _restart(session: GameSession, text: str) -> str:
    session.restart_session()
    return RESTARTED


def _add_status_text(session: GameSession, text: str) -> str:
    session.post_status_text(text or DEFAULT_STATUS_TEXT)
    return STATUS_TEXT_ADDED


def _set_temporary_message(session: GameSession, text: str) -> str:
    session.set_temporary_message(text or DEFAULT_TEMPORARY_MESSAGE)
    return TEMPORARY_MESSAGE_SET


def _query(method_name: str) -> InfoQuery:
    return InfoQuery(render=lambda session, text: getattr(session, method_name)())


INFO_QUERIES: Dict[str, InfoQuery] = {
    "game_name": _query("game_name"),
    "game_players": _query("player_count_description"),
    "game_rules": _query("rules_description"),
    "game_description_raw": _query("game_description_raw"),
    "game_description_expanded": _query("game_description_expanded"),
    "game": _query("game_summary"),
    "have_started": InfoQuery(render=_have_started),
    "board": _query("board_representation"),
    "state": _query("state_dump"),
    "equipment": _query("equipment_description"),
    "container": _query("per_container_description"),
    "game_restart": InfoQuery(render=_restart, mutating=True),
    "addTextToStatusPanel": InfoQuery(render=_add_status_text, mutating=True, takes_text=True),
    "setTemporaryMessage": InfoQuery(
        render=_set_temporary_message, mutating=True, takes_text=True
    ),
}


def split_info_argument(argument: str) -> Tuple[str, str]:
    """
    Split an info argument into ``(key, text)``.

    The whole stripped argument is the key, except for keys marked
    ``takes_text``: for those the first token is the key and the rest is
    the free text. ``"game_name junk"`` therefore stays one unknown key.
    """
    key = argument.strip()
    parts = key.split(None, 1)
    if len(parts) == 2:
        query = INFO_QUERIES.get(parts[0])
        if query is not None and query.takes_text:
            return parts[0], parts[1].strip()
    return key, ""


def handle_info(session: GameSession, argument: str) -> str:
    """Handle ``info <key>``. Unknown keys reply ``unsupported command``."""
    key, text = split_info_argument(argument)
    query = INFO_QUERIES.get(key)
    if query is None:
        logger.info(f"Unsupported info key {key!r}")
        return UNSUPPORTED_COMMAND
    if query.mutating:
        logger.info(f"Info key {key!r} updates the player interface")
    return query.render(session, text)
