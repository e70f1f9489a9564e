# Area: Shared
"""
game_bridge._shared.framing — Length-prefixed text frames
==========================================================

Every message on the wire is one frame: a 2-byte big-endian unsigned
length followed by that many bytes of text. The text encoding is the
"modified UTF-8" written by Java's ``DataOutputStream.writeUTF``:

- U+0000 is encoded as the two bytes ``C0 80``.
- Characters outside the BMP are written as a UTF-16 surrogate pair,
  each surrogate encoded as a 3-byte sequence.

Plain ASCII and BMP text is byte-identical to standard UTF-8, so peers
that speak ordinary UTF-8 interoperate for everything but those two cases.
"""

from __future__ import annotations

import socket
import struct

from ..errors import FrameTooLargeError, IncompleteFrameError

MAX_FRAME_BYTES = 0xFFFF

_LENGTH = struct.Struct(">H")


def encode_text(text: str) -> bytes:
    """Encode ``text`` as modified UTF-8."""
    units = []
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            units.append(chr(0xD800 + (code >> 10)))
            units.append(chr(0xDC00 + (code & 0x3FF)))
        else:
            units.append(char)
    data = "".join(units).encode("utf-8", "surrogatepass")
    return data.replace(b"\x00", b"\xc0\x80")


def decode_text(data: bytes) -> str:
    """Decode modified UTF-8 (or plain UTF-8) into a ``str``."""
    text = data.replace(b"\xc0\x80", b"\x00").decode("utf-8", "surrogatepass")
    # Recombine surrogate pairs into real code points
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def pack_frame(text: str) -> bytes:
    """Build one wire frame for ``text``.

    Raises
    ------
    FrameTooLargeError
        If the encoded text exceeds ``MAX_FRAME_BYTES``.
    """
    payload = encode_text(text)
    if len(payload) > MAX_FRAME_BYTES:
        raise FrameTooLargeError(size=len(payload), limit=MAX_FRAME_BYTES)
    return _LENGTH.pack(len(payload)) + payload


def recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly ``size`` bytes, blocking until they all arrive."""
    chunks = []
    received = 0
    while received < size:
        chunk = sock.recv(size - received)
        if not chunk:
            raise IncompleteFrameError(expected=size, received=received)
        chunks.append(chunk)
        received += len(chunk)
    return b"".join(chunks)


def read_frame(sock: socket.socket) -> str:
    """Read one complete frame from ``sock`` and return its text."""
    header = recv_exact(sock, _LENGTH.size)
    (length,) = _LENGTH.unpack(header)
    if length == 0:
        return ""
    return decode_text(recv_exact(sock, length))


def write_frame(sock: socket.socket, text: str) -> None:
    """Write ``text`` to ``sock`` as one frame."""
    sock.sendall(pack_frame(text))
