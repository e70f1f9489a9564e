"""
game_bridge.reply_dispatcher — Push replies to the caller's port
=================================================================

Each reply goes out on a brand-new connection to the callback port the
caller named in its request: connect, write one frame, close. Sending
happens on its own thread so the server can accept the next request
straight away. Delivery is at-most-once: failures are logged and never
retried or reported back to the server.
"""

from __future__ import annotations
import logging
import socket
import threading
from typing import Optional

from ._shared.framing import write_frame
from ._shared.logging_config import log_protocol_error, request_context
from .errors import FramingError, ReplyDeliveryError

logger = logging.getLogger("game_bridge.reply")


class ReplyDispatcher:
    """Fire-and-forget sender of framed replies."""

    def __init__(
        self,
        host: str = "localhost",
        connect_timeout: Optional[float] = None,
    ):
        self.host = host
        self.connect_timeout = connect_timeout

    def send(self, port: int, text: str) -> threading.Thread:
        """
        Deliver ``text`` to ``host:port`` on a background thread.

        Returns the started thread; callers normally ignore it.
        """
        thread = threading.Thread(
            target=self.deliver,
            args=(port, text),
            name=f"reply-{port}",
            daemon=True,
        )
        thread.start()
        return thread

    def deliver(self, port: int, text: str) -> bool:
        """
        Connect, write one frame and close. Blocks the calling thread.

        Returns True on success. Every failure is logged and reported as
        False; nothing is raised.
        """
        try:
            with socket.create_connection(
                (self.host, port), timeout=self.connect_timeout
            ) as conn:
                write_frame(conn, text)
        except (OSError, FramingError) as e:
            log_protocol_error(ReplyDeliveryError(port=port, reason=str(e)))
            return False

        logger.debug(
            f"Reply delivered to port {port} ({len(text)} chars)",
            extra=request_context(callback_port=port),
        )
        return True
