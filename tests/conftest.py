"""
Shared fixtures: a DemoSession behind a running CommandServer, and a
ReplyListener standing in for the external agent's callback port.
"""

import io
from typing import Generator

import pytest

from game_bridge import CommandServer, DemoSession, ReplyListener, SessionOwner
from game_bridge._shared.protocol_logger import ProtocolLogger
from game_bridge.reply_dispatcher import ReplyDispatcher

REPLY_TIMEOUT = 5.0


@pytest.fixture
def demo_session() -> DemoSession:
    return DemoSession()


@pytest.fixture
def owner(demo_session) -> Generator[SessionOwner, None, None]:
    owner = SessionOwner(demo_session)
    try:
        yield owner
    finally:
        owner.shutdown()


@pytest.fixture
def quiet_protocol_logger() -> ProtocolLogger:
    """ProtocolLogger writing into a buffer instead of the terminal."""
    return ProtocolLogger(stream=io.StringIO())


@pytest.fixture
def server(owner, quiet_protocol_logger) -> Generator[CommandServer, None, None]:
    """A CommandServer on a free port, running on its own thread."""
    server = CommandServer(
        owner=owner,
        port=0,
        host="127.0.0.1",
        dispatcher=ReplyDispatcher(host="127.0.0.1", connect_timeout=REPLY_TIMEOUT),
        read_timeout=REPLY_TIMEOUT,
        protocol_logger=quiet_protocol_logger,
    )
    server.start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def listener() -> Generator[ReplyListener, None, None]:
    with ReplyListener() as listener:
        yield listener
