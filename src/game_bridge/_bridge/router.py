# Area: Bridge
"""
game_bridge._bridge.router — Command Router
============================================

Maps each request action to its handler. The table records which
commands can change the session so the side-effecting subset is visible
in one place. Handlers run on the session-owner thread.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict

from .._shared.envelope import Action, RequestEnvelope
from .._shared.logging_config import request_context
from ..session import GameSession
from .handlers import handle_info, handle_legal, handle_move, handle_player
from .replies import COMMAND_FAILURE
from .session_owner import SessionOwner

logger = logging.getLogger("game_bridge.router")


@dataclass(frozen=True)
class Command:
    """One row of the command table."""

    handler: Callable[[GameSession, str], str]
    mutating: bool


COMMANDS: Dict[Action, Command] = {
    Action.MOVE: Command(handler=handle_move, mutating=True),
    Action.LEGAL: Command(handler=handle_legal, mutating=False),
    Action.PLAYER: Command(handler=handle_player, mutating=False),
    # Only some info keys mutate, see INFO_QUERIES
    Action.INFO: Command(handler=handle_info, mutating=True),
}


class CommandRouter:
    """
    Routes parsed envelopes to their handlers.

    Returns the reply text for every envelope. A handler that raises is
    logged and answered with ``command failure``; the exception does not
    reach the server loop.
    """

    def __init__(self, owner: SessionOwner):
        self.owner = owner

    def route(self, envelope: RequestEnvelope) -> str:
        command = COMMANDS[envelope.action]
        context = request_context(
            callback_port=envelope.callback_port,
            action=envelope.action.value,
        )
        logger.debug(
            f"Routing {envelope.action.value} "
            f"(mutating={command.mutating}, argument={envelope.argument!r})",
            extra=context,
        )
        try:
            return self.owner.call(command.handler, envelope.argument)
        except Exception as e:
            logger.error(
                f"Handler for {envelope.action.value!r} failed: {e}",
                exc_info=True,
                extra=context,
            )
            return COMMAND_FAILURE
