# Area: Shared
"""Error formatting for structured protocol error logs."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional

# What happened to the request, shown in the banner
OUTCOME_DROPPED = "REQUEST DROPPED"
OUTCOME_ANSWERED_UNSUPPORTED = "ANSWERED WITH UNSUPPORTED COMMAND"
OUTCOME_REPLY_LOST = "REPLY NOT DELIVERED"


def format_error_block(
    error_type: str,
    outcome: str,
    raw_message: Optional[str],
    callback_port: Optional[int],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for the terminal and the log file."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" PROTOCOL ERROR — {outcome}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]

    if callback_port is not None:
        lines.append(f" Reply Port:   {callback_port}")

    if raw_message is not None:
        lines.append("")
        lines.append(" ── RAW MESSAGE " + "─" * 48)
        lines.append(indent_text(raw_message))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_text(text: str, indent: int = 2) -> str:
    """Indent every line of a (possibly multi-line) message."""
    pad = " " * indent
    return "\n".join(pad + line for line in (text.splitlines() or [""]))
