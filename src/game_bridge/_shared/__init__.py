# Area: Shared
"""
Shared utilities used by the server, the reply dispatcher and the client.

This package contains:
- Length-prefixed frame encoding and socket helpers
- Request envelope model and parser
- Logging configuration
- Protocol line logger
"""

from .envelope import Action, RequestEnvelope, parse_envelope
from .framing import (
    MAX_FRAME_BYTES,
    decode_text,
    encode_text,
    pack_frame,
    read_frame,
    recv_exact,
    write_frame,
)
from .logging_config import (
    setup_logging,
    log_protocol_error,
    request_context,
    enable_protocol_mode,
    disable_protocol_mode,
    is_protocol_mode_enabled,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "Action",
    "RequestEnvelope",
    "parse_envelope",
    "MAX_FRAME_BYTES",
    "decode_text",
    "encode_text",
    "pack_frame",
    "read_frame",
    "recv_exact",
    "write_frame",
    "setup_logging",
    "log_protocol_error",
    "request_context",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "is_protocol_mode_enabled",
    "get_protocol_logger",
    "ProtocolLogger",
]
