# Area: Bridge
"""
Move Handlers
=============

Handlers for ``move`` and ``legal`` requests. Both fetch the legal-move
list fresh from the session; an index from an earlier ``legal`` reply is
only meaningful until the next move is applied.
"""

import logging
import re

from ...session import GameSession
from ..replies import LEGAL_HEADER, MOVE_FAILURE, MOVE_SUCCESS

logger = logging.getLogger("game_bridge.router")

_INDEX_PATTERN = re.compile(r"^\d+$")


def handle_move(session: GameSession, argument: str) -> str:
    """
    Handle ``move <index>``.

    Applies the move at ``index`` of the current legal-move list. Anything
    that is not a non-negative integer inside that list is a failure and
    leaves the session untouched.
    """
    if not _INDEX_PATTERN.match(argument):
        logger.info(f"Move index {argument!r} is not a number")
        return MOVE_FAILURE

    index = int(argument)
    legal = session.current_legal_moves()
    if index >= len(legal):
        logger.info(f"Move index {index} out of range ({len(legal)} legal moves)")
        return MOVE_FAILURE

    move = legal[index]
    # Descriptions depend on the position, so take it before the state moves on
    description = move.describe_with_consequences()
    session.apply_move(move)
    logger.info(f"Applied move {index}: {description}")
    return MOVE_SUCCESS


def handle_legal(session: GameSession, argument: str) -> str:
    """
    Handle ``legal``.

    Reply is a ``legal`` header line followed by one ``"<i> - <move>"``
    line per legal move, each line newline-terminated.
    """
    legal = session.current_legal_moves()
    lines = [LEGAL_HEADER]
    for i, move in enumerate(legal):
        lines.append(f"{i} - {move.describe_with_consequences()}")
    return "\n".join(lines) + "\n"
