# Area: Shared
"""
game_bridge._shared.protocol_logger — Protocol message logging
===============================================================

One coloured terminal line per request received, reply sent and
protocol error, with the callback port and the action involved.
"""

from __future__ import annotations
import sys
import threading
from datetime import datetime
from typing import Optional

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Requests
ORANGE = "\033[38;5;208m"  # Replies
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# ACTION → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

ACTION_DISPLAY_NAMES = {
    "move": "APPLY-MOVE",
    "legal": "LIST-LEGAL-MOVES",
    "player": "CURRENT-MOVER",
    "info": "INFO-QUERY",
}

PREVIEW_LENGTH = 40


def _preview(text: str) -> str:
    first_line = text.splitlines()[0] if text else ""
    if len(first_line) > PREVIEW_LENGTH or "\n" in text:
        return first_line[:PREVIEW_LENGTH] + "…"
    return first_line


class ProtocolLogger:
    """Logger for protocol requests, replies and errors."""

    def __init__(self, stream=None):
        self._stream = stream
        self._lock = threading.Lock()

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def _emit(self, line: str, error: bool = False) -> None:
        stream = self._stream or (sys.stderr if error else sys.stdout)
        # Reply threads log concurrently with the server loop
        with self._lock:
            print(line, file=stream)

    def log_received(
        self,
        action: str,
        callback_port: Optional[int],
        argument: str = "",
    ) -> None:
        """Log an inbound request."""
        display = ACTION_DISPLAY_NAMES.get(action, action.upper())
        port = str(callback_port) if callback_port is not None else "-"
        self._emit(
            f"{GREEN}{self._now()} | RECEIVED | reply-port {port:>5} | "
            f"{display:18} | ARG: {argument or '-'}{RESET}"
        )

    def log_sent(self, callback_port: int, reply: str) -> None:
        """Log a reply handed to the reply dispatcher."""
        self._emit(
            f"{ORANGE}{self._now_ms()} | SENT     | reply-port {callback_port:>5} | "
            f"{_preview(reply)}{RESET}"
        )

    def log_error(self, description: str) -> None:
        """Log an error."""
        self._emit(f"{RED}[ERROR] {self._now()} | {description}{RESET}", error=True)


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
