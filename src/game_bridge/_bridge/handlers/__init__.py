# Area: Bridge
"""
Bridge Command Handlers
=======================

Handler functions for each request action. Every handler takes the
session and the request argument and returns the reply text. They run
on the session-owner thread.
"""

from .moves import handle_move, handle_legal
from .player import handle_player
from .info import handle_info, INFO_QUERIES, InfoQuery

__all__ = [
    "handle_move",
    "handle_legal",
    "handle_player",
    "handle_info",
    "INFO_QUERIES",
    "InfoQuery",
]
