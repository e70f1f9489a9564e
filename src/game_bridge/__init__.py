"""
game_bridge — Local TCP bridge to a running game session
=========================================================

Lets an external process drive and inspect a live game over a local
socket. Requests are single framed lines of the form
``"PPPP ACTION EXTRA"``; the reply is pushed to port ``PPPP`` on a new
connection.

Quick Start (no implementation needed):
    from game_bridge import BridgeRunner, DemoSession
    runner = BridgeRunner(config={"port": 5555}, session=DemoSession())
    runner.run()

Custom Implementation:
    from game_bridge import BridgeRunner, GameSession
    class MySession(GameSession): ...  # Wrap your rules engine
    runner = BridgeRunner(config={"port": 5555}, session=MySession())
    runner.run()

Talking to a bridge:
    from game_bridge import ReplyListener, send_request
    with ReplyListener() as listener:
        send_request(5555, f"{listener.port} player")
        print(listener.wait_for_reply(timeout=5))
"""

from .session import GameSession, Move
from .demo_session import DemoSession, DemoMove
from .runner import BridgeRunner
from .command_server import CommandServer
from .reply_dispatcher import ReplyDispatcher
from .client import ReplyListener, send_request, format_request
from ._bridge.session_owner import SessionOwner
from ._shared.envelope import Action, RequestEnvelope, parse_envelope
from .errors import (
    GameBridgeError,
    FramingError,
    IncompleteFrameError,
    FrameTooLargeError,
    EnvelopeError,
    ReplyDeliveryError,
)

__all__ = [
    # Main classes
    "BridgeRunner",
    "CommandServer",
    "ReplyDispatcher",
    "SessionOwner",
    # Session
    "GameSession",
    "Move",
    "DemoSession",
    "DemoMove",
    # Protocol
    "Action",
    "RequestEnvelope",
    "parse_envelope",
    # Client helpers
    "ReplyListener",
    "send_request",
    "format_request",
    # Errors
    "GameBridgeError",
    "FramingError",
    "IncompleteFrameError",
    "FrameTooLargeError",
    "EnvelopeError",
    "ReplyDeliveryError",
]
__version__ = "1.0.0"
