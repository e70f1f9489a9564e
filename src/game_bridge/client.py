"""
game_bridge.client — Helpers for programs that talk to the bridge
==================================================================

An external agent sends a request with :func:`send_request` and collects
the answer with a :class:`ReplyListener` bound to the callback port it
put in the request:

    with ReplyListener() as listener:
        send_request(5555, f"{listener.port} legal")
        print(listener.wait_for_reply(timeout=5))

The listener must be bound *before* the request is sent, since the
bridge connects back as soon as the command has run.
"""

from __future__ import annotations
import socket
from typing import Optional

from ._shared.framing import read_frame, write_frame


def send_request(port: int, text: str, host: str = "localhost",
                 timeout: Optional[float] = None) -> None:
    """Open a connection to the bridge and write ``text`` as one frame."""
    with socket.create_connection((host, port), timeout=timeout) as conn:
        write_frame(conn, text)


def format_request(callback_port: int, action: str, argument: str = "") -> str:
    """Build ``"PPPP ACTION EXTRA"``, zero-padding the port to 4 digits."""
    text = f"{callback_port:04d} {action}"
    if argument:
        text += f" {argument}"
    return text


class ReplyListener:
    """Listens on a callback port and reads framed replies, one per connection."""

    def __init__(self, port: int = 0, host: str = "127.0.0.1"):
        self.host = host
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            self._sock.bind((host, port))
            self._sock.listen(5)
        except OSError:
            self._sock.close()
            raise

    @property
    def port(self) -> int:
        return self._sock.getsockname()[1]

    def wait_for_reply(self, timeout: Optional[float] = None) -> str:
        """
        Accept the next inbound connection and return its frame text.

        Raises ``socket.timeout`` if nothing arrives within ``timeout``.
        """
        self._sock.settimeout(timeout)
        conn, _ = self._sock.accept()
        with conn:
            conn.settimeout(timeout)
            return read_frame(conn)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "ReplyListener":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
