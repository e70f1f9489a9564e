# Area: Shared
"""
game_bridge._shared.envelope — Request envelope parsing
========================================================

A request is a single line of the form::

    PPPP ACTION EXTRA

``PPPP`` is the port the caller listens on for the reply, ``ACTION`` is
one of the keywords in :class:`Action` and ``EXTRA`` is the optional
argument. Fields are split on the first two whitespace runs, so the
classic 4-digit port layout keeps working and shorter or longer ports
are accepted too.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import EnvelopeError

MIN_PORT = 1
MAX_PORT = 65535

_PORT_PATTERN = re.compile(r"^\d+$")


class Action(str, Enum):
    """Command keywords understood by the bridge."""

    MOVE = "move"
    LEGAL = "legal"
    PLAYER = "player"
    INFO = "info"


class RequestEnvelope(BaseModel):
    """One parsed inbound request."""

    model_config = ConfigDict(frozen=True)

    callback_port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    action: Action
    argument: str = ""


def _parse_port(token: str) -> Optional[int]:
    if not _PORT_PATTERN.match(token):
        return None
    port = int(token)
    if MIN_PORT <= port <= MAX_PORT:
        return port
    return None


def parse_envelope(message: str) -> RequestEnvelope:
    """
    Parse one raw request into a :class:`RequestEnvelope`.

    Args:
        message: Decoded text of one inbound frame

    Returns:
        The parsed envelope

    Raises:
        EnvelopeError: If the port or action is missing or invalid. When the
            port itself was valid it is carried on the error so a reply can
            still be addressed.
    """
    tokens = message.strip().split(None, 2)
    if not tokens:
        raise EnvelopeError(message, "empty message")

    port = _parse_port(tokens[0])
    if port is None:
        raise EnvelopeError(message, f"invalid callback port {tokens[0]!r}")

    if len(tokens) < 2:
        raise EnvelopeError(message, "missing action", callback_port=port)

    argument = tokens[2].strip() if len(tokens) > 2 else ""
    try:
        return RequestEnvelope(
            callback_port=port,
            action=tokens[1],
            argument=argument,
        )
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise EnvelopeError(
            message, f"unsupported action {tokens[1]!r} ({errors})",
            callback_port=port,
        ) from e

