"""
game_bridge.errors — Custom exception classes
==============================================

Defines the exception hierarchy for framing, envelope and delivery errors.
Each exception stores enough context for structured logging.
"""

from __future__ import annotations
from typing import Optional

from .error_formatter import (
    OUTCOME_ANSWERED_UNSUPPORTED,
    OUTCOME_DROPPED,
    OUTCOME_REPLY_LOST,
    format_error_block,
)


class GameBridgeError(Exception):
    """Base exception for all game_bridge package errors."""
    pass


class FramingError(GameBridgeError):
    """Raised when a length-prefixed frame cannot be read or written."""
    pass


class IncompleteFrameError(FramingError):
    """Raised when the peer closes the connection before a frame is complete."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Connection closed after {received} of {expected} bytes"
        )


class FrameTooLargeError(FramingError):
    """Raised when an encoded payload does not fit a 2-byte length prefix."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Encoded payload is {size} bytes, limit is {limit}")


class EnvelopeError(GameBridgeError):
    """Raised when an inbound message cannot be parsed into an envelope.

    ``callback_port`` is set when the port field was readable even though
    the rest of the message was not, so the caller can still be told.
    """

    def __init__(
        self,
        raw_message: str,
        reason: str,
        callback_port: Optional[int] = None,
    ):
        self.raw_message = raw_message
        self.reason = reason
        self.callback_port = callback_port
        super().__init__(f"Malformed envelope {raw_message!r}: {reason}")

    def format_error_log(self) -> str:
        if self.callback_port is None:
            outcome = OUTCOME_DROPPED
        else:
            outcome = OUTCOME_ANSWERED_UNSUPPORTED
        return format_error_block(
            error_type="MALFORMED_ENVELOPE",
            outcome=outcome,
            raw_message=self.raw_message,
            callback_port=self.callback_port,
            details=[self.reason],
        )


class ReplyDeliveryError(GameBridgeError):
    """Raised when a reply cannot be pushed to the caller's callback port."""

    def __init__(self, port: int, reason: str):
        self.port = port
        self.callback_port = port
        self.reason = reason
        super().__init__(f"Reply to port {port} failed: {reason}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="REPLY_DELIVERY_FAILURE",
            outcome=OUTCOME_REPLY_LOST,
            raw_message=None,
            callback_port=self.port,
            details=[self.reason],
        )
