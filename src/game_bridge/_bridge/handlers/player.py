# Area: Bridge
"""Handler for ``player`` requests."""

from ...session import GameSession


def handle_player(session: GameSession, argument: str) -> str:
    """Reply with the current mover's seat index as decimal text."""
    return str(session.current_mover_seat())
