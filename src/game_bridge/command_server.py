"""
game_bridge.command_server — Listening socket and request loop
===============================================================

The CommandServer owns the listening socket. For every inbound
connection it reads one frame, parses the envelope, routes the command
against the game session and hands the reply to the ReplyDispatcher.
Connections are handled strictly one at a time on the server thread.

A bad request never stops the loop: it is logged, answered with
``unsupported command`` when the caller's port is known, and the server
goes back to ``accept``.
"""

from __future__ import annotations
import logging
import socket
import threading
from typing import Optional, Tuple

from ._bridge.replies import UNSUPPORTED_COMMAND
from ._bridge.router import CommandRouter
from ._bridge.session_owner import SessionOwner
from ._shared.envelope import parse_envelope
from ._shared.framing import read_frame
from ._shared.logging_config import log_protocol_error
from ._shared.protocol_logger import ProtocolLogger, get_protocol_logger
from .errors import EnvelopeError, FramingError
from .reply_dispatcher import ReplyDispatcher

logger = logging.getLogger("game_bridge.server")

# How often the accept loop wakes up to check for stop()
ACCEPT_POLL_SECONDS = 0.5
LISTEN_BACKLOG = 50


class CommandServer:
    """
    Single-threaded accept → read → process → reply loop.

    Usage
    -----
        owner = SessionOwner(DemoSession())
        server = CommandServer(owner, port=5555)
        server.start()       # runs on its own thread
        ...
        server.stop()
    """

    def __init__(
        self,
        owner: SessionOwner,
        port: int,
        host: str = "127.0.0.1",
        dispatcher: Optional[ReplyDispatcher] = None,
        read_timeout: Optional[float] = None,
        protocol_logger: Optional[ProtocolLogger] = None,
    ):
        self.router = CommandRouter(owner)
        self.dispatcher = dispatcher or ReplyDispatcher()
        self.host = host
        self.read_timeout = read_timeout
        self._requested_port = port
        self._protocol_logger = protocol_logger or get_protocol_logger()
        self._sock: Optional[socket.socket] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False

    @property
    def port(self) -> int:
        """The bound port, or the requested one before binding."""
        if self._sock is not None:
            return self._sock.getsockname()[1]
        return self._requested_port

    @property
    def is_running(self) -> bool:
        return self._running

    # ── Lifecycle ─────────────────────────────────────────────

    def bind(self) -> None:
        """Create, bind and listen on the server socket."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self._requested_port))
            sock.listen(LISTEN_BACKLOG)
        except OSError:
            sock.close()
            raise
        sock.settimeout(ACCEPT_POLL_SECONDS)
        self._sock = sock
        logger.info(f"Listening on {self.host}:{self.port}")

    def start(self) -> threading.Thread:
        """Bind (if needed) and run the accept loop on a daemon thread."""
        if self._sock is None:
            self.bind()
        self._running = True
        self._thread = threading.Thread(
            target=self.serve_forever, name="command-server", daemon=True
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the accept loop and close the listening socket."""
        self._running = False
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout if timeout is not None else ACCEPT_POLL_SECONDS * 4)
            self._thread = None
        self._close_listener()

    def serve_forever(self) -> None:
        """Accept and process connections until :meth:`stop` is called."""
        if self._sock is None:
            self.bind()
        self._running = True

        try:
            while self._running:
                try:
                    conn, addr = self._sock.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if not self._running:
                        break
                    raise

                with conn:
                    try:
                        self._handle_connection(conn, addr)
                    except Exception as e:
                        logger.error(f"Request error from {addr}: {e}", exc_info=True)
                        self._protocol_logger.log_error(str(e))
        finally:
            self._running = False
            self._close_listener()
            logger.info("Command server stopped.")

    def _close_listener(self) -> None:
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    # ── Per-request processing ───────────────────────────────

    def _handle_connection(self, conn: socket.socket, addr: Tuple[str, int]) -> None:
        """Read one frame from ``conn`` and dispatch its reply."""
        conn.settimeout(self.read_timeout)
        try:
            message = read_frame(conn)
        except (FramingError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Could not read request from {addr}: {e}")
            self._protocol_logger.log_error(f"unreadable frame from {addr[0]}: {e}")
            return

        logger.debug(f"── Received {message!r} from {addr}")
        result = self.handle_message(message)
        if result is None:
            return

        callback_port, reply = result
        self.dispatcher.send(callback_port, reply)

    def handle_message(self, message: str) -> Optional[Tuple[int, str]]:
        """
        Parse and execute one raw request.

        Returns ``(callback_port, reply)``, or None when the message does
        not name a usable callback port and so cannot be answered.
        """
        try:
            envelope = parse_envelope(message)
        except EnvelopeError as e:
            log_protocol_error(e)
            self._protocol_logger.log_error(str(e))
            if e.callback_port is None:
                return None
            self._protocol_logger.log_sent(e.callback_port, UNSUPPORTED_COMMAND)
            return e.callback_port, UNSUPPORTED_COMMAND

        self._protocol_logger.log_received(
            action=envelope.action.value,
            callback_port=envelope.callback_port,
            argument=envelope.argument,
        )
        reply = self.router.route(envelope)
        self._protocol_logger.log_sent(envelope.callback_port, reply)
        return envelope.callback_port, reply
