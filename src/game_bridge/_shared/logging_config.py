# Area: Shared
"""
game_bridge._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Records that carry request context pass it as ``extra`` (see
``request_context``); both formatters pick those fields up, so a log
line can be matched to the request and callback port it belongs to.
Also holds the protocol-mode switch and structured error logging.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:
    from ..errors import EnvelopeError, ReplyDeliveryError

# Package logger
logger = logging.getLogger("game_bridge")

# Request context attributes copied from ``extra`` into log output
BRIDGE_FIELDS = ("callback_port", "action", "error_type")

# Flag to control protocol-only terminal output
_protocol_mode_enabled = False


def request_context(
    callback_port: Optional[int] = None,
    action: Optional[str] = None,
    error_type: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the ``extra`` dict for a log call about one request."""
    context = {
        "callback_port": callback_port,
        "action": action,
        "error_type": error_type,
    }
    return {k: v for k, v in context.items() if v is not None}


def _bridge_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        name: getattr(record, name)
        for name in BRIDGE_FIELDS
        if getattr(record, name, None) is not None
    }


# ══════════════════════════════════════════════════════════════
# FORMATTERS AND FILTERS
# ══════════════════════════════════════════════════════════════

class ProtocolFilter(logging.Filter):
    """Drops terminal records while protocol mode is on.

    The ProtocolLogger then prints the request and reply lines directly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _protocol_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output.

    Request context is appended as ``[port=5001 action=move]``.
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        try:
            line = super().format(record)
        finally:
            record.levelname = original

        fields = _bridge_fields(record)
        if fields:
            labels = {"callback_port": "port"}
            tag = " ".join(f"{labels.get(k, k)}={v}" for k, v in fields.items())
            line += f" [{tag}]"
        return line


class JSONFormatter(logging.Formatter):
    """JSON-lines formatter for file output, one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        log_data.update(_bridge_fields(record))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_protocol_mode() -> None:
    """Show only RECEIVED / SENT / ERROR protocol lines on the terminal.

    File logging is unchanged.
    """
    global _protocol_mode_enabled
    _protocol_mode_enabled = True


def disable_protocol_mode() -> None:
    """Restore standard terminal logging."""
    global _protocol_mode_enabled
    _protocol_mode_enabled = False


def is_protocol_mode_enabled() -> bool:
    return _protocol_mode_enabled


# ══════════════════════════════════════════════════════════════
# SETUP
# ══════════════════════════════════════════════════════════════

def setup_logging(
    log_file_path: str = "game_bridge.log",
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'game_bridge.log' in current dir.
        An empty string disables the file handler.
    level : int or str
        Logging level. Defaults to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    pkg_logger = logging.getLogger("game_bridge")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ProtocolFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_protocol_error(error: "Union[EnvelopeError, ReplyDeliveryError]") -> None:
    """
    Log a protocol error in the structured format.

    The block goes to stderr verbatim; a one-line record goes through the
    package logger so it also lands in the JSON log file.
    """
    print(error.format_error_log(), file=sys.stderr)
    logger.error(
        f"Protocol error: {error.__class__.__name__}: {error}",
        extra=request_context(
            callback_port=error.callback_port,
            error_type=error.__class__.__name__,
        ),
    )
