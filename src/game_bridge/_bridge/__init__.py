# Area: Bridge
"""
Bridge internals: the session owner, the command table and its handlers.
"""

from .router import COMMANDS, Command, CommandRouter
from .session_owner import SessionOwner

__all__ = [
    "COMMANDS",
    "Command",
    "CommandRouter",
    "SessionOwner",
]
